"""Build RecordSchemas from parsed metadata.

Only entities exposed through an entity set are built, together with every
entity type they reach through navigation properties. Each entity also gets
``<Name>Create`` and ``<Name>Update`` variants with every field optional.
"""

from __future__ import annotations

from pydantic import ValidationError

from bcschema.core.logging import get_logger
from bcschema.metadata.models import EntityType, MetadataModel, NavigationProperty, Property
from bcschema.schemas.fields import ref_many, ref_one
from bcschema.schemas.record import FieldDescriptor, FieldKind, RecordSchema
from bcschema.schemas.registry import SchemaRegistry
from bcschema.validate.errors import MetadataError

logger = get_logger(__name__)

EXCLUDED_ENTITIES = frozenset({"company", "entityMetadata", "apicategoryroutes"})

# Server-maintained properties that a create payload never carries.
READ_ONLY_PROPERTIES = frozenset(
    {
        "systemVersion",
        "timestamp",
        "systemCreatedAt",
        "systemCreatedBy",
        "systemModifiedAt",
        "systemModifiedBy",
        "lastModifiedDateTime",
        "entryNumber",
        "number",
    }
)


def pascal_case(s: str) -> str:
    return s[:1].upper() + s[1:]


def camel_case(s: str) -> str:
    return s[:1].lower() + s[1:]


def short_type_name(full_name: str) -> str:
    return full_name.rsplit(".", 1)[-1]


def _unwrap_collection(type_name: str) -> str | None:
    if type_name.startswith("Collection(") and type_name.endswith(")"):
        return type_name[len("Collection("):-1]
    return None


def navigation_target(nav_type: str) -> str:
    return short_type_name(_unwrap_collection(nav_type) or nav_type)


def map_odata_type(odata_type: str) -> FieldKind:
    if _unwrap_collection(odata_type) is not None:
        return FieldKind.COLLECTION
    if "Guid" in odata_type:
        return FieldKind.GUID
    if "DateTime" in odata_type:
        return FieldKind.DATE_TIME
    if "Date" in odata_type:
        return FieldKind.DATE
    if odata_type == "Edm.String":
        return FieldKind.STRING
    if odata_type in ("Edm.Int32", "Edm.Int64"):
        return FieldKind.INTEGER
    if odata_type in ("Edm.Decimal", "Edm.Double"):
        return FieldKind.NUMBER
    if odata_type == "Edm.Boolean":
        return FieldKind.BOOLEAN
    return FieldKind.ANY


class SchemaBuilder:
    def __init__(self, model: MetadataModel) -> None:
        self.model = model
        self._complex_prefixes = {"Microsoft.NAV."}
        if model.namespace:
            self._complex_prefixes.add(model.namespace + ".")

    def is_complex(self, prop: Property) -> bool:
        inner = _unwrap_collection(prop.type) or prop.type
        return any(inner.startswith(p) for p in self._complex_prefixes)

    def api_entities(self) -> set[str]:
        names = {short_type_name(s.entity_type) for s in self.model.entity_sets}
        return names - EXCLUDED_ENTITIES

    def referenced_entities(self, roots: set[str]) -> set[str]:
        seen: set[str] = set()
        stack = sorted(roots)
        while stack:
            name = stack.pop()
            if name in seen:
                continue
            seen.add(name)
            entity = self.model.entity_type(name)
            if entity is None:
                continue
            for nav in entity.navigation_properties:
                target = navigation_target(nav.type)
                if target != name and target not in EXCLUDED_ENTITIES and target not in seen:
                    stack.append(target)
        return seen

    def selected_entities(self) -> list[EntityType]:
        wanted = self.referenced_entities(self.api_entities())
        return [
            e for e in self.model.entity_types
            if e.name in wanted and e.name not in EXCLUDED_ENTITIES
        ]

    def property_field(self, prop: Property) -> FieldDescriptor:
        kind = map_odata_type(prop.type)
        item_kind = None
        if kind == FieldKind.COLLECTION:
            item_kind = map_odata_type(_unwrap_collection(prop.type) or "")
            if item_kind == FieldKind.COLLECTION:
                item_kind = FieldKind.ANY
        return FieldDescriptor(
            name=camel_case(prop.name),
            kind=kind,
            item_kind=item_kind,
            optional=prop.nullable,
            nullable=prop.nullable,
        )

    def navigation_field(self, nav: NavigationProperty) -> FieldDescriptor:
        name = camel_case(nav.name)
        return ref_many(name) if nav.is_collection else ref_one(name)

    def entity_schema(self, entity: EntityType) -> RecordSchema:
        try:
            fields = [self.property_field(p) for p in entity.properties if not self.is_complex(p)]
            fields.extend(self.navigation_field(n) for n in entity.navigation_properties)
            return RecordSchema(name=pascal_case(entity.name), fields=tuple(fields))
        except ValidationError as exc:
            raise MetadataError(f"Entity {entity.name!r} cannot be turned into a schema: {exc}") from exc

    def create_schema(self, entity: EntityType, base: RecordSchema) -> RecordSchema:
        dropped = {camel_case(n.name) for n in entity.navigation_properties} | READ_ONLY_PROPERTIES
        return base.omit(base.name + "Create", dropped).partial(base.name + "Create")

    def update_schema(self, entity: EntityType, base: RecordSchema) -> RecordSchema:
        dropped = (
            {camel_case(n.name) for n in entity.navigation_properties}
            | READ_ONLY_PROPERTIES
            | {"id"}
            | {camel_case(k) for k in entity.key}
        )
        return base.omit(base.name + "Update", dropped).partial(base.name + "Update")

    def build(self, *, variants: bool = True) -> SchemaRegistry:
        entities = self.selected_entities()
        bases = [(e, self.entity_schema(e)) for e in entities]
        try:
            registry = SchemaRegistry(schema for _, schema in bases)
            if variants:
                for entity, base in bases:
                    registry.add(self.create_schema(entity, base))
                    registry.add(self.update_schema(entity, base))
        except ValueError as exc:
            raise MetadataError(f"Conflicting schema names in metadata: {exc}") from exc
        logger.info("Schemas built", entities=len(entities), schemas=len(registry))
        return registry


def build_schemas(model: MetadataModel, *, variants: bool = True) -> SchemaRegistry:
    return SchemaBuilder(model).build(variants=variants)
