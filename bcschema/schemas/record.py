"""Field descriptors and record schemas.

A RecordSchema is an ordered, immutable table of FieldDescriptors. Relation
fields carry an optional ``target`` schema: without one the field is a stub
relation (``{"id": ...}``), with one it is a detailed nested record.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_TIME = "date-time"
    GUID = "guid"
    REF_ONE = "ref-one"
    REF_MANY = "ref-many"
    COLLECTION = "collection"
    ANY = "any"


SCALAR_KINDS = frozenset(
    {
        FieldKind.STRING,
        FieldKind.INTEGER,
        FieldKind.NUMBER,
        FieldKind.BOOLEAN,
        FieldKind.DATE,
        FieldKind.DATE_TIME,
        FieldKind.GUID,
        FieldKind.ANY,
    }
)
RELATION_KINDS = frozenset({FieldKind.REF_ONE, FieldKind.REF_MANY})


class FieldDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    kind: FieldKind
    optional: bool = False
    nullable: bool = False
    target: RecordSchema | None = None
    item_kind: FieldKind | None = None

    @model_validator(mode="after")
    def _check_kind_options(self) -> FieldDescriptor:
        if self.target is not None and self.kind not in RELATION_KINDS:
            raise ValueError(f"field {self.name!r}: only relation fields take a target schema")
        if self.kind == FieldKind.COLLECTION:
            if self.item_kind is None or self.item_kind not in SCALAR_KINDS:
                raise ValueError(f"field {self.name!r}: collection needs a scalar item_kind")
        elif self.item_kind is not None:
            raise ValueError(f"field {self.name!r}: item_kind is only valid on collections")
        return self

    @property
    def is_stub(self) -> bool:
        return self.kind in RELATION_KINDS and self.target is None

    def as_optional(self) -> FieldDescriptor:
        if self.optional:
            return self
        return self.model_copy(update={"optional": True})


class RecordSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    fields: tuple[FieldDescriptor, ...] = ()

    @model_validator(mode="after")
    def _check_unique_names(self) -> RecordSchema:
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(f"schema {self.name!r}: duplicate field {f.name!r}")
            seen.add(f.name)
        return self

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def required_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if not f.optional)

    def get(self, name: str) -> FieldDescriptor | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def extend(self, name: str, *extra: FieldDescriptor) -> RecordSchema:
        """Return a new schema with ``extra`` appended.

        A field whose name already exists replaces the old one in place, so
        the declared order of the base schema is kept.
        """
        replacements = {f.name: f for f in extra}
        fields = [replacements.pop(f.name, f) for f in self.fields]
        fields.extend(f for f in extra if f.name in replacements)
        return RecordSchema(name=name, fields=tuple(fields))

    def pick(self, name: str, names: Iterable[str]) -> RecordSchema:
        wanted = set(names)
        return RecordSchema(name=name, fields=tuple(f for f in self.fields if f.name in wanted))

    def omit(self, name: str, names: Iterable[str]) -> RecordSchema:
        dropped = set(names)
        return RecordSchema(name=name, fields=tuple(f for f in self.fields if f.name not in dropped))

    def partial(self, name: str) -> RecordSchema:
        return RecordSchema(name=name, fields=tuple(f.as_optional() for f in self.fields))


FieldDescriptor.model_rebuild()
RecordSchema.model_rebuild()
