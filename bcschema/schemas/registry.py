from __future__ import annotations

from typing import Iterable, Iterator

from bcschema.schemas.record import RecordSchema
from bcschema.validate.errors import UnknownEntityError


class SchemaRegistry:
    """Name -> RecordSchema lookup that keeps registration order."""

    def __init__(self, schemas: Iterable[RecordSchema] = ()) -> None:
        self._schemas: dict[str, RecordSchema] = {}
        for s in schemas:
            self.add(s)

    def add(self, schema: RecordSchema) -> None:
        if schema.name in self._schemas:
            raise ValueError(f"schema already registered: {schema.name}")
        self._schemas[schema.name] = schema

    def get(self, name: str) -> RecordSchema:
        try:
            return self._schemas[name]
        except KeyError:
            # entity names from metadata are camelCase, schema names PascalCase
            pascal = name[:1].upper() + name[1:]
            if pascal in self._schemas:
                return self._schemas[pascal]
            raise UnknownEntityError(name, known=self.names()) from None

    def names(self) -> list[str]:
        return list(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[RecordSchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)
