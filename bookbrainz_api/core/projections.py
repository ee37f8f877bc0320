"""Projections — explicit pairing of a relation path set with its formatter.

Invariants:
    - A formatter is only ever reached through its Projection
    - project() refuses entities whose relations do not cover the projection's
      relations (InvalidRelationRequestError), before the formatter runs

Design Decisions:
    - Projection carries the response model too, so route bindings get the
      OpenAPI schema from the same object that fixes the relation set
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

from bookbrainz_api.core.errors import ErrorContext, InvalidRelationRequestError
from bookbrainz_api.core.format_entity_data import (
    format_aliases,
    format_edition_basic_info,
    format_identifiers,
    format_relationships,
)
from bookbrainz_api.core.relation_paths import (
    ALIASES_RELATIONS,
    EDITION_BASIC_RELATIONS,
    IDENTIFIERS_RELATIONS,
    RELATIONSHIPS_RELATIONS,
    RelationPathSet,
)
from bookbrainz_api.core.resolved_entity import ResolvedEntity
from bookbrainz_api.schemas.lookup import (
    AliasList,
    EditionBasicInfo,
    IdentifierList,
    RelationshipList,
)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Projection(Generic[T]):
    """A response shape together with the relations needed to build it."""
    relations: RelationPathSet
    formatter: Callable[[ResolvedEntity], T]
    response_model: type[T]

    def project(self, entity: ResolvedEntity) -> T:
        if not entity.relations.covers_all(self.relations):
            missing = next(
                p for p in self.relations if not entity.relations.covers(p)
            )
            raise InvalidRelationRequestError(
                missing,
                f"projection needs relation set '{self.relations.name}', "
                f"entity was resolved with '{entity.relations.name}'",
                ErrorContext(entity_kind=entity.kind, bbid=entity.bbid),
            )
        return self.formatter(entity)


EDITION_BASIC_PROJECTION = Projection(
    EDITION_BASIC_RELATIONS, format_edition_basic_info, EditionBasicInfo,
)
ALIASES_PROJECTION = Projection(ALIASES_RELATIONS, format_aliases, AliasList)
IDENTIFIERS_PROJECTION = Projection(
    IDENTIFIERS_RELATIONS, format_identifiers, IdentifierList,
)
RELATIONSHIPS_PROJECTION = Projection(
    RELATIONSHIPS_RELATIONS, format_relationships, RelationshipList,
)
