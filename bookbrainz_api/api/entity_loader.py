"""Lookup Gate — FastAPI dependency that resolves the path BBID or stops with 404.

Invariants:
    - One EntityResolver.resolve() call per request, nothing else
    - Found: entity stored on request.state.entity and returned to the route
    - NotFound: EntityNotFoundError carrying the binding's message (404)
    - Store failures pass through untouched to the global error handlers

Design Decisions:
    - Dependency factory (not middleware): each route binding builds its own
      gate with its own relation set and message
"""

from typing import Awaitable, Callable

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bookbrainz_api.core.errors import EntityNotFoundError, ErrorContext
from bookbrainz_api.core.relation_paths import RelationPathSet
from bookbrainz_api.core.resolved_entity import NotFound, ResolvedEntity
from bookbrainz_api.infrastructure.database import get_db
from bookbrainz_api.services.entity_resolver import EntityKind, EntityResolver

EntityLoader = Callable[..., Awaitable[ResolvedEntity]]


def make_entity_loader(
    kind: EntityKind, relations: RelationPathSet, not_found_message: str,
) -> EntityLoader:
    """Build the gate dependency for one (kind, relation set) pair."""

    async def load_entity(
        request: Request,
        bbid: str = Path(min_length=1, description=f"BBID of the {kind.name}"),
        db: AsyncSession = Depends(get_db),
    ) -> ResolvedEntity:
        result = await EntityResolver(db).resolve(kind, bbid, relations)
        if isinstance(result, NotFound):
            raise EntityNotFoundError(
                not_found_message,
                ErrorContext(entity_kind=result.kind, bbid=result.bbid),
            )
        request.state.entity = result.entity
        return result.entity

    load_entity.__name__ = f"load_{kind.name.lower()}_{relations.name}"
    return load_entity
