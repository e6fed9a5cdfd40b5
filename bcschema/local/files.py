"""Validate JSON files and export JSON Schema documents from local files.

Backs the scripts in ``scripts/`` so records can be checked without a
Business Central tenant at hand.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bcschema.core.config import get_settings
from bcschema.core.logging import get_logger
from bcschema.entities.sales import declared_registry
from bcschema.metadata.builder import build_schemas
from bcschema.metadata.parser import parse_metadata
from bcschema.schemas.compile import build_document
from bcschema.schemas.registry import SchemaRegistry
from bcschema.validate.errors import BcSchemaError
from bcschema.validate.validator import check, resolve_extra

logger = get_logger(__name__)


def load_registry(metadata_path: Path | str | None = None) -> SchemaRegistry:
    """Schemas from a metadata file when one is configured, else the declared sales tables."""
    path = metadata_path or get_settings().METADATA_PATH
    if path:
        return build_schemas(parse_metadata(path))
    return declared_registry()


def _records(data: Any) -> list[Any]:
    # OData collection responses wrap records in {"value": [...]}
    if isinstance(data, dict) and isinstance(data.get("value"), list):
        return data["value"]
    if isinstance(data, list):
        return data
    return [data]


def read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise BcSchemaError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise BcSchemaError(f"Invalid JSON in {path}: {exc}") from exc


def validate_json_file(
    path: Path | str,
    entity: str = "SalesOrder",
    metadata_path: Path | str | None = None,
    extra: str | None = None,
) -> dict[str, Any]:
    path = Path(path)
    schema = load_registry(metadata_path).get(entity)
    records = _records(read_json(path))

    issues: list[dict[str, Any]] = []
    valid = 0
    for index, record in enumerate(records):
        found = check(schema, record, extra=extra)
        if not found:
            valid += 1
            continue
        issues.extend(
            {"index": index, "code": i.code.value, "field": i.field, "message": i.message}
            for i in found
        )

    logger.info("File validated", path=str(path), entity=schema.name, records=len(records), valid=valid)
    return {
        "path": str(path),
        "entity": schema.name,
        "records": len(records),
        "valid": valid,
        "issues": issues,
    }


def export_json_schemas(
    metadata_path: Path | str,
    out_path: Path | str | None = None,
    extra: str | None = None,
) -> dict[str, Any]:
    registry = build_schemas(parse_metadata(metadata_path))
    document = build_document(registry, resolve_extra(extra))
    text = json.dumps(document, indent=2)
    if out_path is not None:
        out = Path(out_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
    logger.info("Schemas exported", schemas=len(registry), out=str(out_path) if out_path else None)
    return {
        "metadata": str(metadata_path),
        "out": str(out_path) if out_path else None,
        "schemas": registry.names(),
        "document": document,
    }
