"""Entity Resolver — loads one entity by BBID with exactly the requested relations.

Invariants:
    - resolve() returns Found or NotFound; NotFound only means "no such BBID
      for this kind", never "the store failed"
    - Exactly one execute() per call; relation population is batched by the
      loader options of that statement
    - Relations outside the requested set stay unloaded (raiseload("*") plus
      lazy="raise" on every model relationship)
    - Store failures propagate untouched and immediately; the session
      manager maps them to DatabaseError
    - Top-level relations outside the requested set are unloaded on return,
      including any filled in through the identity map

Design Decisions:
    - Relation paths are translated into loader chains walking the mapper:
      joinedload for scalar relations, selectinload for collections
    - A BBID that is not a UUID cannot name an entity, so it resolves to
      NotFound without a round trip
"""

import logging
import uuid
from dataclasses import dataclass

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import RelationshipProperty, joinedload, raiseload, selectinload

from bookbrainz_api.core.domain_types import EntityId
from bookbrainz_api.core.errors import InvalidRelationRequestError
from bookbrainz_api.core.relation_paths import RelationPathSet
from bookbrainz_api.core.resolved_entity import (
    Found, LookupResult, NotFound, ResolvedEntity,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityKind:
    """A registered entity kind: display name plus the ORM model backing it."""
    name: str
    model: type


def _relationship_property(model: type, name: str, path: str) -> RelationshipProperty:
    mapper = inspect(model)
    if name not in mapper.relationships:
        raise InvalidRelationRequestError(
            path, f"{mapper.class_.__name__} has no relationship '{name}'",
        )
    return mapper.relationships[name]


def build_loader_option(model: type, path: str):
    """Translate one dotted relation path into a chained loader option."""
    option = None
    current = model
    for name in path.split("."):
        prop = _relationship_property(current, name, path)
        attr = getattr(current, name)
        loader = selectinload if prop.uselist else joinedload
        option = loader(attr) if option is None else getattr(option, loader.__name__)(attr)
        current = prop.mapper.class_
    return option


def build_loader_options(model: type, relations: RelationPathSet) -> list:
    """Loader options populating exactly `relations` on `model`."""
    options = [build_loader_option(model, path) for path in relations]
    options.append(raiseload("*"))
    return options


class EntityResolver:
    """Fetches entities of a given kind with a declared set of relations."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def resolve(
        self, kind: EntityKind, bbid: str, relations: RelationPathSet,
    ) -> LookupResult:
        options = build_loader_options(kind.model, relations)
        try:
            key = uuid.UUID(bbid)
        except (TypeError, ValueError):
            logger.debug(
                f"Malformed BBID for {kind.name}",
                extra={"entity_kind": kind.name, "bbid": bbid},
            )
            return NotFound(kind.name, EntityId(bbid))

        query = (
            select(kind.model)
            .where(kind.model.bbid == key)
            .options(*options)
        )
        result = await self._db.execute(query)
        record = result.unique().scalar_one_or_none()
        logger.debug(
            f"Resolved {kind.name} with '{relations.name}'",
            extra={
                "entity_kind": kind.name, "bbid": bbid,
                "found": record is not None,
            },
        )
        if record is None:
            return NotFound(kind.name, EntityId(bbid))
        self._unload_extras(record, relations)
        return Found(ResolvedEntity(kind.name, record, relations))

    def _unload_extras(self, record, relations: RelationPathSet) -> None:
        """Expire top-level relations filled in through the identity map.

        A relationship endpoint can be the looked-up record itself, so an
        endpoint loader may populate relations on it that were not asked for.
        """
        state = inspect(record)
        extras = [
            key for key in state.mapper.relationships.keys()
            if key not in state.unloaded and not relations.covers(key)
        ]
        if extras:
            self._db.expire(record, extras)
