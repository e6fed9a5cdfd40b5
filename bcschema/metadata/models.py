from __future__ import annotations

from pydantic import BaseModel, Field


class Property(BaseModel):
    name: str = Field(..., min_length=1)
    type: str
    nullable: bool = False


class NavigationProperty(BaseModel):
    name: str = Field(..., min_length=1)
    type: str
    contains_target: bool = False
    partner: str | None = None

    @property
    def is_collection(self) -> bool:
        return self.type.startswith("Collection(")


class EntityType(BaseModel):
    name: str = Field(..., min_length=1)
    key: list[str] = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
    navigation_properties: list[NavigationProperty] = Field(default_factory=list)


class ComplexType(BaseModel):
    name: str
    properties: list[Property] = Field(default_factory=list)


class EnumMember(BaseModel):
    name: str
    value: str | None = None


class EnumType(BaseModel):
    name: str
    members: list[EnumMember] = Field(default_factory=list)


class EntitySet(BaseModel):
    name: str
    entity_type: str


class MetadataModel(BaseModel):
    namespace: str = ""
    container: str | None = None
    entity_types: list[EntityType] = Field(default_factory=list)
    complex_types: list[ComplexType] = Field(default_factory=list)
    enum_types: list[EnumType] = Field(default_factory=list)
    entity_sets: list[EntitySet] = Field(default_factory=list)

    def entity_type(self, name: str) -> EntityType | None:
        return next((e for e in self.entity_types if e.name == name), None)
