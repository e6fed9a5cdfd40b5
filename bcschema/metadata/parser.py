"""Parse an OData EDMX ``$metadata`` document into MetadataModel.

Element matching ignores XML namespaces, so both the OASIS (v4) and the
older Microsoft EDMX namespaces are accepted.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from bcschema.core.logging import get_logger
from bcschema.metadata.models import (
    ComplexType,
    EntitySet,
    EntityType,
    EnumMember,
    EnumType,
    MetadataModel,
    NavigationProperty,
    Property,
)
from bcschema.validate.errors import MetadataError

logger = get_logger(__name__)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(el: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in el:
        if _local(child.tag) == name:
            yield child


def _child(el: ET.Element, name: str) -> ET.Element | None:
    return next(_children(el, name), None)


def _bool_attr(el: ET.Element, name: str, default: bool) -> bool:
    value = el.get(name)
    if value is None:
        return default
    return value.strip().lower() == "true"


def _property(el: ET.Element) -> Property:
    # only an explicit Nullable="true" makes a property optional
    return Property(name=el.get("Name", ""), type=el.get("Type", ""), nullable=_bool_attr(el, "Nullable", False))


def _entity_type(el: ET.Element) -> EntityType:
    key_el = _child(el, "Key")
    key = [ref.get("Name", "") for ref in _children(key_el, "PropertyRef")] if key_el is not None else []
    return EntityType(
        name=el.get("Name", ""),
        key=key,
        properties=[_property(p) for p in _children(el, "Property")],
        navigation_properties=[
            NavigationProperty(
                name=n.get("Name", ""),
                type=n.get("Type", ""),
                contains_target=_bool_attr(n, "ContainsTarget", False),
                partner=n.get("Partner"),
            )
            for n in _children(el, "NavigationProperty")
        ],
    )


def _metadata_model(schema: ET.Element, container: ET.Element | None) -> MetadataModel:
    return MetadataModel(
        namespace=schema.get("Namespace", ""),
        container=container.get("Name") if container is not None else None,
        entity_types=[_entity_type(e) for e in _children(schema, "EntityType")],
        complex_types=[
            ComplexType(name=c.get("Name", ""), properties=[_property(p) for p in _children(c, "Property")])
            for c in _children(schema, "ComplexType")
        ],
        enum_types=[
            EnumType(
                name=e.get("Name", ""),
                members=[EnumMember(name=m.get("Name", ""), value=m.get("Value")) for m in _children(e, "Member")],
            )
            for e in _children(schema, "EnumType")
        ],
        entity_sets=[
            EntitySet(name=s.get("Name", ""), entity_type=s.get("EntityType", ""))
            for s in (_children(container, "EntitySet") if container is not None else ())
        ],
    )


def parse_metadata_xml(text: str | bytes) -> MetadataModel:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MetadataError(f"Invalid metadata XML: {exc}") from exc

    if _local(root.tag) != "Edmx":
        raise MetadataError(f"Expected Edmx root element, got {_local(root.tag)}")
    services = _child(root, "DataServices")
    schema = _child(services, "Schema") if services is not None else None
    if schema is None:
        raise MetadataError("Metadata has no DataServices/Schema element")

    container = _child(schema, "EntityContainer")
    try:
        model = _metadata_model(schema, container)
    except ValidationError as exc:
        raise MetadataError(f"Malformed metadata: {exc}") from exc
    logger.info(
        "Metadata parsed",
        namespace=model.namespace,
        entity_types=len(model.entity_types),
        entity_sets=len(model.entity_sets),
    )
    return model


def parse_metadata(path: Path | str) -> MetadataModel:
    """Read and parse a metadata .xml file."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise MetadataError(f"Cannot read metadata file {path}: {exc}") from exc
    return parse_metadata_xml(data)
