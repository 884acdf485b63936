"""In-memory route source: a web service with its registered routes."""

from typing import Any

from pydantic import BaseModel

from routespec.builder.definitions import name_for_type
from routespec.registry.base import ParameterKind, ParameterSpec, RouteRecord


class WebService(BaseModel):
    """Routes sharing a root path, service-wide path parameters and media types."""

    root_path: str = ""
    consumes: list[str] = []
    produces: list[str] = []
    service_parameters: list[ParameterSpec] = []
    registered_routes: list[RouteRecord] = []

    def routes(self) -> list[RouteRecord]:
        """Registered routes in registration order."""
        return list(self.registered_routes)

    def path_parameters(self) -> list[ParameterSpec]:
        """Parameters declared once for every route of the service."""
        return list(self.service_parameters)

    def param(self, spec: ParameterSpec) -> "WebService":
        self.service_parameters.append(spec)
        return self

    def route(self, record: RouteRecord) -> "WebService":
        """Register a route below the root path.

        Routes without their own media types take the service's.
        """
        update: dict[str, Any] = {"path": _join_path(self.root_path, record.path)}
        if not record.consumes:
            update["consumes"] = list(self.consumes)
        if not record.produces:
            update["produces"] = list(self.produces)
        self.registered_routes.append(record.model_copy(update=update))
        return self

    def get(self, path: str, **fields: Any) -> "WebService":
        return self.route(RouteRecord(method="GET", path=path, **fields))

    def post(self, path: str, **fields: Any) -> "WebService":
        return self.route(RouteRecord(method="POST", path=path, **fields))

    def put(self, path: str, **fields: Any) -> "WebService":
        return self.route(RouteRecord(method="PUT", path=path, **fields))

    def delete(self, path: str, **fields: Any) -> "WebService":
        return self.route(RouteRecord(method="DELETE", path=path, **fields))

    def patch(self, path: str, **fields: Any) -> "WebService":
        return self.route(RouteRecord(method="PATCH", path=path, **fields))

    def options(self, path: str, **fields: Any) -> "WebService":
        return self.route(RouteRecord(method="OPTIONS", path=path, **fields))

    def head(self, path: str, **fields: Any) -> "WebService":
        return self.route(RouteRecord(method="HEAD", path=path, **fields))

    @staticmethod
    def path_parameter(name: str, description: str = "", **fields: Any) -> ParameterSpec:
        return ParameterSpec(kind=ParameterKind.PATH, name=name, description=description, **fields)

    @staticmethod
    def query_parameter(name: str, description: str = "", **fields: Any) -> ParameterSpec:
        return ParameterSpec(kind=ParameterKind.QUERY, name=name, description=description, **fields)

    @staticmethod
    def header_parameter(name: str, description: str = "", **fields: Any) -> ParameterSpec:
        return ParameterSpec(kind=ParameterKind.HEADER, name=name, description=description, **fields)

    @staticmethod
    def form_parameter(name: str, description: str = "", **fields: Any) -> ParameterSpec:
        return ParameterSpec(kind=ParameterKind.FORM, name=name, description=description, **fields)

    @staticmethod
    def body_parameter(name: str, model: Any, description: str = "", **fields: Any) -> ParameterSpec:
        """Body parameter carrying ``model``, named when the document is built."""
        data_type = name_for_type(model)
        if not data_type:
            raise ValueError(f"body parameter {name!r} has no resolvable model: {model!r}")
        return ParameterSpec(
            kind=ParameterKind.BODY,
            name=name,
            description=description,
            data_type=data_type,
            model=model,
            **fields,
        )


def _join_path(root: str, sub: str) -> str:
    if not sub:
        return root
    return root.rstrip("/") + "/" + sub.lstrip("/")
