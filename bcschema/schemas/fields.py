"""Shorthand constructors for FieldDescriptor tables."""

from __future__ import annotations

from bcschema.schemas.record import FieldDescriptor, FieldKind, RecordSchema


def _scalar(kind: FieldKind, name: str, optional: bool, nullable: bool) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=kind, optional=optional, nullable=nullable)


def string(name: str, *, optional: bool = False, nullable: bool = False) -> FieldDescriptor:
    return _scalar(FieldKind.STRING, name, optional, nullable)


def integer(name: str, *, optional: bool = False, nullable: bool = False) -> FieldDescriptor:
    return _scalar(FieldKind.INTEGER, name, optional, nullable)


def number(name: str, *, optional: bool = False, nullable: bool = False) -> FieldDescriptor:
    return _scalar(FieldKind.NUMBER, name, optional, nullable)


def boolean(name: str, *, optional: bool = False, nullable: bool = False) -> FieldDescriptor:
    return _scalar(FieldKind.BOOLEAN, name, optional, nullable)


def date(name: str, *, optional: bool = False, nullable: bool = False) -> FieldDescriptor:
    return _scalar(FieldKind.DATE, name, optional, nullable)


def date_time(name: str, *, optional: bool = False, nullable: bool = False) -> FieldDescriptor:
    return _scalar(FieldKind.DATE_TIME, name, optional, nullable)


def guid(name: str, *, optional: bool = False, nullable: bool = False) -> FieldDescriptor:
    return _scalar(FieldKind.GUID, name, optional, nullable)


def any_value(name: str, *, optional: bool = True) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.ANY, optional=optional, nullable=True)


def collection(name: str, item_kind: FieldKind, *, optional: bool = True, nullable: bool = False) -> FieldDescriptor:
    return FieldDescriptor(
        name=name, kind=FieldKind.COLLECTION, item_kind=item_kind, optional=optional, nullable=nullable
    )


def ref_one(name: str, target: RecordSchema | None = None, *, optional: bool = True) -> FieldDescriptor:
    """Single relation: a stub ``{"id": ...}`` unless a detailed target schema is given."""
    return FieldDescriptor(name=name, kind=FieldKind.REF_ONE, target=target, optional=optional)


def ref_many(name: str, target: RecordSchema | None = None, *, optional: bool = True) -> FieldDescriptor:
    """Collection relation: stubs unless a detailed target schema is given."""
    return FieldDescriptor(name=name, kind=FieldKind.REF_MANY, target=target, optional=optional)
