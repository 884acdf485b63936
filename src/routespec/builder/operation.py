"""Translation of a web service's routes into Swagger path items."""

import logging
from collections.abc import Callable
from typing import Any

from routespec.builder.definitions import name_for_type as default_name_for_type
from routespec.builder.parameter import build_parameter, build_response
from routespec.builder.path import sanitize_path
from routespec.registry.base import RouteRecord
from routespec.registry.service import WebService
from routespec.spec.models import Operation, PathItem, Responses

logger = logging.getLogger(__name__)

# Route metadata key whose list of strings becomes the operation's tags.
KEY_OPENAPI_TAGS = "openapi.tags"


def build_paths(
    ws: WebService,
    name_for_type: Callable[[Any], str] = default_name_for_type,
    paths: dict[str, PathItem] | None = None,
) -> dict[str, PathItem]:
    """Build the path items for every route of a web service.

    Routes on the same normalized path share one path item. A later route
    with the same method replaces the earlier operation. Pass ``paths`` to
    merge into path items built from another service.
    """
    if paths is None:
        paths = {}
    for route in ws.routes():
        path = sanitize_path(route.path)
        existing = paths.get(path)
        if existing is None:
            existing = PathItem()
        paths[path] = build_path_item(ws, route, existing, name_for_type)
    return paths


def build_path_item(
    ws: WebService,
    route: RouteRecord,
    existing: PathItem,
    name_for_type: Callable[[Any], str] = default_name_for_type,
) -> PathItem:
    op = build_operation(ws, route, name_for_type)
    match route.method:
        case "GET" | "POST" | "PUT" | "DELETE" | "PATCH" | "OPTIONS" | "HEAD":
            slot = route.method.lower()
            if getattr(existing, slot) is not None:
                logger.debug("%s %s replaces an earlier registration", route.method, route.path)
            setattr(existing, slot, op)
            logger.debug("translated %s %s", route.method, route.path)
        case _:
            logger.debug("skipping %s %s: no slot for method", route.method, route.path)
    return existing


def build_operation(
    ws: WebService,
    route: RouteRecord,
    name_for_type: Callable[[Any], str] = default_name_for_type,
) -> Operation:
    """Build the Swagger operation for a single route."""
    # the first line of the documentation is the summary
    summary = route.doc.split("\n")[0]

    parameters = [build_parameter(p, name_for_type) for p in ws.path_parameters()]
    parameters += [build_parameter(p, name_for_type) for p in route.parameters]

    responses = Responses()
    for code, spec in route.responses.items():
        response = build_response(spec, name_for_type)
        responses.status_code_responses[code] = response
        if code == 200:  # only exactly 200, not any 2xx
            responses.default = response

    return Operation(
        id=route.operation,
        summary=summary,
        description=route.doc,
        consumes=list(route.consumes),
        produces=list(route.produces),
        tags=_route_tags(route.metadata),
        parameters=parameters,
        responses=responses,
    )


def _route_tags(metadata: dict[str, Any]) -> list[str]:
    if KEY_OPENAPI_TAGS not in metadata:
        return []
    tags = metadata[KEY_OPENAPI_TAGS]
    if isinstance(tags, list) and all(isinstance(tag, str) for tag in tags):
        return list(tags)
    logger.debug("ignoring %s metadata of type %s", KEY_OPENAPI_TAGS, type(tags).__name__)
    return []
