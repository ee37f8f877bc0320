"""Resolved Entity — the outcome types of an entity lookup.

Invariants:
    - A lookup has exactly two outcomes: Found(entity) or NotFound(kind, bbid)
    - ResolvedEntity.require() only returns relations named in `relations`;
      anything else raises InvalidRelationRequestError, never an empty value
    - ResolvedEntity is frozen: nothing is attached to it after resolution

Design Decisions:
    - Tagged result over Optional/exception: "no such id" is an ordinary
      outcome and is pattern-matched by the lookup gate
"""

from dataclasses import dataclass
from typing import Any

from bookbrainz_api.core.domain_types import EntityId
from bookbrainz_api.core.errors import ErrorContext, InvalidRelationRequestError
from bookbrainz_api.core.relation_paths import RelationPathSet


@dataclass(frozen=True)
class ResolvedEntity:
    """An entity record with exactly `relations` populated."""
    kind: str
    record: Any
    relations: RelationPathSet

    @property
    def bbid(self) -> str:
        return str(self.record.bbid)

    def require(self, path: str) -> Any:
        """Walk `path` from the record, refusing paths that were not requested.

        A None link part-way along the path yields None; collections are
        returned as-is for the caller to iterate.
        """
        if not self.relations.covers(path):
            raise InvalidRelationRequestError(
                path, f"not loaded by relation set '{self.relations.name}'",
                ErrorContext(entity_kind=self.kind, bbid=self.bbid),
            )
        value = self.record
        for segment in path.split("."):
            if value is None:
                return None
            value = getattr(value, segment)
        return value


@dataclass(frozen=True)
class Found:
    entity: ResolvedEntity


@dataclass(frozen=True)
class NotFound:
    kind: str
    bbid: EntityId


LookupResult = Found | NotFound
