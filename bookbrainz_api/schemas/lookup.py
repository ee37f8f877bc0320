"""Lookup Schemas — Pydantic models for the public lookup responses.

Invariants:
    - Field names and nesting are the public contract; camelCase on the wire
    - Optional scalars default to None; collections default to empty lists
    - Every list keeps the order it was built in

Design Decisions:
    - alias_generator=to_camel keeps Python attributes snake_case while the
      JSON matches the field names clients already consume
    - populate_by_name: formatters construct models with snake_case names
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LookupModel(BaseModel):
    """Base for all lookup response models."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )


class DefaultAlias(LookupModel):
    """The alias an entity is displayed under."""
    name: str | None = None
    sort_name: str | None = None
    alias_language: str | None = None
    primary: bool | None = None


class EditionBasicInfo(LookupModel):
    """Basic details of an Edition."""
    bbid: str
    default_alias: DefaultAlias | None = None
    depth: int | None = None
    disambiguation: str | None = None
    edition_format: str | None = None
    height: int | None = None
    languages: list[str] = []
    pages: int | None = None
    release_event_dates: list[str] = []
    status: str | None = None
    weight: int | None = None
    width: int | None = None


class Alias(LookupModel):
    name: str
    sort_name: str | None = None
    language: str | None = None
    primary: bool = False


class AliasList(LookupModel):
    bbid: str
    aliases: list[Alias] = []


class Identifier(LookupModel):
    type: str | None = None
    value: str


class IdentifierList(LookupModel):
    bbid: str
    identifiers: list[Identifier] = []


class EntityDescriptor(LookupModel):
    """Minimal description of a relationship endpoint."""
    bbid: str
    entity_type: str
    name: str | None = None


class Relationship(LookupModel):
    id: int
    type: str | None = None
    link_phrase: str | None = None
    direction: Literal["forward", "backward"]
    source_entity: EntityDescriptor
    target_entity: EntityDescriptor
    attributes: dict[str, str | None] = {}


class RelationshipList(LookupModel):
    bbid: str
    relationships: list[Relationship] = []


class NotFoundMessage(BaseModel):
    """Body of a 404 lookup response."""
    message: str
