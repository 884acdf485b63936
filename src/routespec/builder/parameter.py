"""Mapping of registered parameters and responses onto Swagger objects."""

from collections.abc import Callable
from typing import Any

from routespec.builder.definitions import name_for_type as default_name_for_type
from routespec.registry.base import ParameterKind, ParameterSpec, ResponseSpec
from routespec.spec.models import Parameter, Response, Schema


def as_param_type(kind: ParameterKind) -> str | None:
    """Swagger location for a parameter kind; body parameters have none."""
    match kind:
        case ParameterKind.PATH:
            return "path"
        case ParameterKind.QUERY:
            return "query"
        case ParameterKind.HEADER:
            return "header"
        case ParameterKind.FORM:
            return "formData"
        case ParameterKind.BODY:
            return None


def build_parameter(
    spec: ParameterSpec,
    name_for_type: Callable[[Any], str] = default_name_for_type,
) -> Parameter:
    """Build a Swagger parameter from a registered parameter."""
    param = Parameter(
        name=spec.name,
        in_=as_param_type(spec.kind),
        description=spec.description,
        required=spec.required,
    )

    # TODO emit regex constraints of path variables as `pattern`

    if spec.kind is ParameterKind.BODY:
        model_name = name_for_type(spec.model) if spec.model is not None else ""
        param.schema_ = Schema.definition(model_name or spec.data_type)
    else:
        param.type = spec.data_type
        param.format = spec.data_format or None
        param.default = spec.default_value
    return param


def build_response(
    spec: ResponseSpec,
    name_for_type: Callable[[Any], str] = default_name_for_type,
) -> Response:
    """Build a Swagger response, referencing the payload's definition if any."""
    response = Response(description=spec.message)
    if spec.model is not None:
        model_name = name_for_type(spec.model)
        if model_name:
            response.schema_ = Schema.definition(model_name)
    return response
