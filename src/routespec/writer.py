"""Serialization of Swagger documents to YAML or JSON."""

import json
from pathlib import Path

import yaml

from routespec.spec.models import Swagger


def document_to_dict(swagger: Swagger) -> dict:
    """Plain, JSON-compatible dict using Swagger field names."""
    return swagger.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_document(swagger: Swagger, fmt: str = "yaml") -> str:
    """Render a document as 'yaml' or 'json' text."""
    data = document_to_dict(swagger)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def detect_output_format(output: Path) -> str:
    return "json" if output.suffix.lower() == ".json" else "yaml"


def write_document(swagger: Swagger, output: Path, fmt: str = "auto") -> Path:
    """Write a document to ``output``, picking the format from its suffix on 'auto'."""
    if fmt == "auto":
        fmt = detect_output_format(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(swagger, fmt), encoding="utf-8")
    return output
