"""Projection Formatters — pure mappings from a ResolvedEntity to a response model.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no mutation of the record
    - Relations are read only through ResolvedEntity.require(); a relation the
      entity was not resolved with raises InvalidRelationRequestError
    - A null optional relation yields a None placeholder, an absent or empty
      set yields an empty list; neither is an error
    - Store order is preserved in every list

Design Decisions:
    - Return Pydantic models (not dicts): the route's response_model and the
      formatter share one contract
"""

from bookbrainz_api.core.domain_types import RelationshipDirection
from bookbrainz_api.core.resolved_entity import ResolvedEntity
from bookbrainz_api.schemas.lookup import (
    Alias,
    AliasList,
    DefaultAlias,
    EditionBasicInfo,
    EntityDescriptor,
    Identifier,
    IdentifierList,
    Relationship,
    RelationshipList,
)


def _label(value, attr: str = "label"):
    return getattr(value, attr) if value is not None else None


def format_default_alias(entity: ResolvedEntity) -> DefaultAlias | None:
    """Default alias summary, or None when the entity has no default alias."""
    alias = entity.require("default_alias")
    if alias is None:
        return None
    language = entity.require("default_alias.language")
    return DefaultAlias(
        name=alias.name,
        sort_name=alias.sort_name,
        alias_language=_label(language, "name"),
        primary=alias.primary,
    )


def format_edition_basic_info(entity: ResolvedEntity) -> EditionBasicInfo:
    record = entity.record
    languages = entity.require("language_set.languages") or []
    release_events = entity.require("release_event_set.release_events") or []
    return EditionBasicInfo(
        bbid=entity.bbid,
        default_alias=format_default_alias(entity),
        depth=record.depth,
        disambiguation=_label(entity.require("disambiguation"), "comment"),
        edition_format=_label(entity.require("edition_format")),
        height=record.height,
        languages=[language.name for language in languages],
        pages=record.pages,
        release_event_dates=[
            event.date for event in release_events if event.date is not None
        ],
        status=_label(entity.require("edition_status")),
        weight=record.weight,
        width=record.width,
    )


def format_aliases(entity: ResolvedEntity) -> AliasList:
    aliases = entity.require("alias_set.aliases") or []
    return AliasList(
        bbid=entity.bbid,
        aliases=[
            Alias(
                name=alias.name,
                sort_name=alias.sort_name,
                language=_label(alias.language, "iso_code_3"),
                primary=bool(alias.primary),
            )
            for alias in aliases
        ],
    )


def format_identifiers(entity: ResolvedEntity) -> IdentifierList:
    identifiers = entity.require("identifier_set.identifiers") or []
    return IdentifierList(
        bbid=entity.bbid,
        identifiers=[
            Identifier(type=_label(identifier.type), value=identifier.value)
            for identifier in identifiers
        ],
    )


def describe_entity(record) -> EntityDescriptor:
    """Minimal descriptor (bbid, type, display name) of a related entity."""
    return EntityDescriptor(
        bbid=str(record.bbid),
        entity_type=record.type,
        name=_label(record.default_alias, "name"),
    )


def format_relationships(entity: ResolvedEntity) -> RelationshipList:
    relationships = entity.require("relationship_set.relationships") or []
    result = []
    for rel in relationships:
        forward = str(rel.source_bbid) == entity.bbid
        rel_type = rel.type
        if rel_type is None:
            link_phrase = None
        elif forward:
            link_phrase = rel_type.link_phrase
        else:
            link_phrase = rel_type.reverse_link_phrase
        result.append(Relationship(
            id=rel.id,
            type=_label(rel_type),
            link_phrase=link_phrase,
            direction=(
                RelationshipDirection.FORWARD.value if forward
                else RelationshipDirection.BACKWARD.value
            ),
            source_entity=describe_entity(rel.source),
            target_entity=describe_entity(rel.target),
            attributes={attr.name: attr.value for attr in rel.attributes},
        ))
    return RelationshipList(bbid=entity.bbid, relationships=result)
