"""Structural validation of candidate records against RecordSchemas.

The schema is compiled to JSON Schema and evaluated with jsonschema so every
violation is collected in one pass. A record that passes is then projected
onto the declared fields: unknown keys are dropped, stub relations are cut
down to their ``id`` and the schema's field order is kept.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from jsonschema import Draft202012Validator, validators
from jsonschema.exceptions import ValidationError as JsonSchemaError

from bcschema.core.config import get_settings
from bcschema.core.logging import get_logger
from bcschema.schemas.compile import record_to_json_schema
from bcschema.schemas.record import FieldKind, RecordSchema
from bcschema.validate.errors import ConfigError, IssueCode, RecordValidationError, ValidationIssue

logger = get_logger(__name__)

EXTRA_POLICIES = ("ignore", "forbid")

# any Mapping counts as a JSON object, not only dict
RecordValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine(
        "object", lambda _checker, instance: isinstance(instance, Mapping)
    ),
)


@lru_cache(maxsize=128)
def compiled_validator(schema: RecordSchema, extra: str) -> Draft202012Validator:
    return RecordValidator(record_to_json_schema(schema, extra))


def resolve_extra(extra: str | None) -> str:
    policy = extra or get_settings().EXTRA_FIELDS
    if policy not in EXTRA_POLICIES:
        raise ConfigError(f"extra must be 'ignore' or 'forbid', got {policy!r}")
    return policy


def _issues_from_error(err: JsonSchemaError) -> list[ValidationIssue]:
    loc = tuple(err.absolute_path)
    if err.validator == "required":
        missing = [name for name in err.validator_value if name not in err.instance]
        return [
            ValidationIssue(code=IssueCode.MISSING_FIELD, loc=loc + (name,), message="field required")
            for name in missing
        ]
    if err.validator == "additionalProperties":
        declared = set(err.schema.get("properties", {}))
        return [
            ValidationIssue(code=IssueCode.UNKNOWN_FIELD, loc=loc + (key,), message="field not declared")
            for key in err.instance
            if key not in declared
        ]
    if err.validator == "pattern":
        return [ValidationIssue(code=IssueCode.INVALID_FORMAT, loc=loc, message=f"{err.instance!r} has wrong format")]
    expected = err.validator_value
    if isinstance(expected, list):
        expected = " or ".join(expected)
    return [ValidationIssue(code=IssueCode.INVALID_TYPE, loc=loc, message=f"expected {expected}")]


def check(schema: RecordSchema, candidate: Any, *, extra: str | None = None) -> list[ValidationIssue]:
    """Return every violation of ``candidate`` against ``schema`` (empty when valid)."""
    if not isinstance(candidate, Mapping):
        return [ValidationIssue(code=IssueCode.INVALID_TYPE, loc=(), message="expected object")]

    validator = compiled_validator(schema, resolve_extra(extra))
    issues: dict[tuple[IssueCode, tuple[str | int, ...]], ValidationIssue] = {}
    for err in validator.iter_errors(candidate):
        for issue in _issues_from_error(err):
            issues.setdefault((issue.code, issue.loc), issue)
    return sorted(issues.values(), key=lambda i: [(isinstance(p, str), p) for p in i.loc])


def _project(schema: RecordSchema, record: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in schema.fields:
        if f.name not in record:
            continue
        value = record[f.name]
        if value is None:
            out[f.name] = None
        elif f.kind == FieldKind.REF_ONE:
            out[f.name] = {"id": value["id"]} if f.target is None else _project(f.target, value)
        elif f.kind == FieldKind.REF_MANY:
            if f.target is None:
                out[f.name] = [{"id": item["id"]} for item in value]
            else:
                out[f.name] = [_project(f.target, item) for item in value]
        elif f.kind == FieldKind.COLLECTION:
            out[f.name] = list(value)
        else:
            out[f.name] = value
    return out


def validate(schema: RecordSchema, candidate: Any, *, extra: str | None = None) -> dict[str, Any]:
    """Validate ``candidate`` and return the normalized record.

    Raises RecordValidationError listing every issue when the candidate
    does not conform.
    """
    issues = check(schema, candidate, extra=extra)
    if issues:
        logger.debug(
            "Record validation failed",
            schema=schema.name,
            issues=[str(i) for i in issues],
        )
        raise RecordValidationError(schema.name, issues)
    return _project(schema, candidate)
