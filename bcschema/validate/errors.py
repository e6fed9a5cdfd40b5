"""
Exception hierarchy and issue records for schema validation.

Every exception inherits from BcSchemaError so callers can catch broadly
or narrowly.  Validation failures carry the full list of issues found in
one pass, never just the first.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class IssueCode(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_TYPE = "InvalidType"
    INVALID_FORMAT = "InvalidFormat"
    UNKNOWN_FIELD = "UnknownField"


class ValidationIssue(BaseModel):
    code: IssueCode
    loc: tuple[str | int, ...]
    message: str

    @property
    def field(self) -> str:
        return ".".join(str(part) for part in self.loc)

    def __str__(self) -> str:
        where = self.field or "<root>"
        return f"{self.code.value} at {where}: {self.message}"


class BcSchemaError(Exception):
    """Base exception for all bcschema errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class RecordValidationError(BcSchemaError):
    """A candidate record does not match its schema."""

    def __init__(self, schema_name: str, issues: list[ValidationIssue]) -> None:
        self.schema_name = schema_name
        self.issues = issues
        lines = "; ".join(str(i) for i in issues)
        super().__init__(f"{schema_name}: {len(issues)} validation issue(s): {lines}")

    def codes_for(self, field: str) -> list[IssueCode]:
        return [i.code for i in self.issues if i.field == field]


class MetadataError(BcSchemaError):
    """The EDMX metadata document could not be read or parsed."""


class ConfigError(BcSchemaError, ValueError):
    """A setting or option has a value outside its allowed set."""


class UnknownEntityError(BcSchemaError, KeyError):
    """No schema is registered under the requested name."""

    def __init__(self, name: str, *, known: list[str] | None = None) -> None:
        self.name = name
        super().__init__(f"Unknown entity schema: {name}", details={"known": known or []})

    def __str__(self) -> str:
        return self.args[0]
