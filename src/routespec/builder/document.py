"""Assembly of a Swagger 2.0 document from configured web services."""

import logging

from routespec.builder.operation import build_paths
from routespec.config import Config
from routespec.spec.models import Info, PathItem, Swagger

logger = logging.getLogger(__name__)


def build_swagger(config: Config) -> Swagger:
    """Build a Swagger document whose paths cover every configured service."""
    paths: dict[str, PathItem] = {}
    for ws in config.web_services:
        build_paths(ws, name_for_type=config.name_for_type, paths=paths)
    logger.debug("built %d paths from %d web services", len(paths), len(config.web_services))

    return Swagger(
        info=Info(title=config.title, description=config.description, version=config.version),
        host=config.host,
        base_path=config.base_path,
        schemes=list(config.schemes),
        paths=paths,
        definitions={},
    )
