"""Document-level configuration for building a Swagger document."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from routespec.builder.definitions import name_for_type
from routespec.registry.service import WebService

DEFAULT_TITLE = "API"
DEFAULT_VERSION = "1.0.0"


class Config(BaseModel):
    """Metadata and web services making up one Swagger document."""

    title: str = DEFAULT_TITLE
    description: str = ""
    version: str = DEFAULT_VERSION
    host: str | None = None
    base_path: str | None = None
    schemes: list[str] = []
    web_services: list[WebService] = []
    name_for_type: Callable[[Any], str] = name_for_type
