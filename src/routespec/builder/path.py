"""Conversion of routing path templates into Swagger path templates."""


def sanitize_path(route_path: str) -> str:
    """Rewrite a routing path template into Swagger path-template syntax.

    Empty segments are dropped and regex-constrained variables such as
    ``{id:[0-9]+}`` are reduced to ``{id}``.
    """
    result = ""
    for fragment in route_path.split("/"):
        if not fragment:
            continue
        if fragment.startswith("{") and ":" in fragment:
            fragment = fragment.split(":", 1)[0] + "}"
        result += "/" + fragment
    return result
