"""Route file loader.

Reads web service definitions from a YAML or JSON route file into a
Config ready for document building.
"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from routespec.config import Config
from routespec.errors import RouteFileError
from routespec.registry.base import ParameterSpec, RouteRecord
from routespec.registry.service import WebService

INFO_FIELDS = ("title", "description", "version")
DOCUMENT_FIELDS = ("host", "base_path", "schemes")


def load_routes(file_path: Path) -> Config:
    """Load a route file into a Config with one WebService per entry."""
    doc = _read_document(file_path)

    services = doc.get("services")
    if not isinstance(services, list):
        raise RouteFileError("expected a 'services' list", str(file_path))
    if not all(isinstance(entry, dict) for entry in services):
        raise RouteFileError("each service must be a mapping", str(file_path))

    info = doc.get("info") or {}
    if not isinstance(info, dict):
        raise RouteFileError("'info' must be a mapping", str(file_path))
    fields = {key: info[key] for key in INFO_FIELDS if key in info}
    fields.update({key: doc[key] for key in DOCUMENT_FIELDS if key in doc})

    try:
        web_services = [_parse_service(entry, file_path) for entry in services]
        return Config(web_services=web_services, **fields)
    except ValidationError as e:
        raise RouteFileError(f"invalid route definition: {e}", str(file_path)) from e


def _read_document(file_path: Path) -> dict:
    text = file_path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        # Some JSON (e.g. tabs for indentation) is not valid YAML
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError) as e:
            raise RouteFileError(f"not a YAML or JSON document: {e}", str(file_path)) from e

    if not isinstance(data, dict):
        raise RouteFileError("expected a mapping at the top level", str(file_path))
    return data


def _parse_service(entry: dict, file_path: Path) -> WebService:
    ws = WebService(
        root_path=entry.get("root_path") or "",
        consumes=entry.get("consumes") or [],
        produces=entry.get("produces") or [],
    )
    for param in _mappings(entry, "parameters", file_path):
        ws.param(ParameterSpec.model_validate(param))
    for route in _mappings(entry, "routes", file_path):
        ws.route(RouteRecord.model_validate(route))
    return ws


def _mappings(entry: dict, key: str, file_path: Path) -> list[dict]:
    """List of mappings under ``key``; a missing or empty key means none."""
    items = entry.get(key) or []
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise RouteFileError(f"'{key}' must be a list of mappings", str(file_path))
    return items
