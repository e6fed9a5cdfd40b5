"""Compile RecordSchemas into JSON Schema (draft 2020-12) documents."""

from __future__ import annotations

from typing import Any, Iterable

from bcschema.schemas.record import FieldDescriptor, FieldKind, RecordSchema

DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"

GUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
DATE_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$"
DATE_TIME_PATTERN = (
    r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])"
    r"T([01]\d|2[0-3]):[0-5]\d:[0-5]\d(\.\d+)?(Z|[+-]([01]\d|2[0-3]):[0-5]\d)$"
)

_SCALARS: dict[FieldKind, dict[str, Any]] = {
    FieldKind.STRING: {"type": "string"},
    FieldKind.INTEGER: {"type": "integer"},
    FieldKind.NUMBER: {"type": "number"},
    FieldKind.BOOLEAN: {"type": "boolean"},
    FieldKind.DATE: {"type": "string", "pattern": DATE_PATTERN},
    FieldKind.DATE_TIME: {"type": "string", "pattern": DATE_TIME_PATTERN},
    FieldKind.GUID: {"type": "string", "pattern": GUID_PATTERN},
    FieldKind.ANY: {},
}


def _stub(extra: str) -> dict[str, Any]:
    out: dict[str, Any] = {
        "type": "object",
        "required": ["id"],
        "properties": {"id": dict(_SCALARS[FieldKind.GUID])},
    }
    if extra == "forbid":
        out["additionalProperties"] = False
    return out


def _nullable(node: dict[str, Any]) -> dict[str, Any]:
    if "type" not in node:
        return node
    return {**node, "type": [node["type"], "null"]}


def field_to_json_schema(f: FieldDescriptor, extra: str = "ignore") -> dict[str, Any]:
    if f.kind in _SCALARS:
        node = dict(_SCALARS[f.kind])
    elif f.kind == FieldKind.COLLECTION:
        node = {"type": "array", "items": dict(_SCALARS[f.item_kind])}
    elif f.kind == FieldKind.REF_ONE:
        node = _stub(extra) if f.target is None else record_to_json_schema(f.target, extra)
    else:
        item = _stub(extra) if f.target is None else record_to_json_schema(f.target, extra)
        node = {"type": "array", "items": item}
    if f.nullable:
        node = _nullable(node)
    return node


def record_to_json_schema(schema: RecordSchema, extra: str = "ignore") -> dict[str, Any]:
    """Object schema for one record. Unknown keys are rejected only with ``extra="forbid"``."""
    out: dict[str, Any] = {
        "title": schema.name,
        "type": "object",
        "properties": {f.name: field_to_json_schema(f, extra) for f in schema.fields},
    }
    required = list(schema.required_names)
    if required:
        out["required"] = required
    if extra == "forbid":
        out["additionalProperties"] = False
    return out


def build_document(schemas: Iterable[RecordSchema], extra: str = "ignore") -> dict[str, Any]:
    """One JSON Schema document holding every record under ``$defs``."""
    return {
        "$schema": DRAFT_2020_12,
        "$defs": {s.name: record_to_json_schema(s, extra) for s in schemas},
    }
