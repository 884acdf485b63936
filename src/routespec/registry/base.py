"""Route registry data models.

A route source hands these records to the builder. They describe what
was registered with the routing layer; the builder only reads them.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator


class ParameterKind(str, Enum):
    """Where a parameter travels in the request."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    FORM = "form"
    BODY = "body"


class ParameterSpec(BaseModel):
    """A single route or service parameter as registered."""

    kind: ParameterKind
    name: str
    description: str = ""
    required: bool = False
    data_type: str = "string"  # payload type name for body parameters without a model
    data_format: str = ""
    default_value: Any = None
    model: Any = None  # body payload type, named by the document builder

    @model_validator(mode="before")
    @classmethod
    def _path_parameters_are_required(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("kind") in (ParameterKind.PATH, "path"):
            data = {"required": True, **data}
        return data


class ResponseSpec(BaseModel):
    """A documented response: message plus an optional payload type."""

    message: str = ""
    model: Any = None


class RouteRecord(BaseModel):
    """One registered (path template, HTTP method) pair with its documentation."""

    method: str  # GET / POST / PUT / DELETE / PATCH / OPTIONS / HEAD
    path: str  # /tests/{v}/a/{c:[a-z]+}
    operation: str = ""
    doc: str = ""
    consumes: list[str] = []
    produces: list[str] = []
    parameters: list[ParameterSpec] = []
    responses: dict[int, ResponseSpec] = {}
    metadata: dict[str, Any] = {}

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()
