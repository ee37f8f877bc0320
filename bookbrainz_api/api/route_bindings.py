"""Route Bindings — declarative (entity kind, granularity) -> projection table.

Invariants:
    - Every lookup route is generated from a RouteBinding; no hand-written
      lookup handlers
    - The relation set a route resolves with is always its projection's set
    - Kind-specific knowledge (model, URL prefix, messages) lives only here
      and in the relation path registry

Design Decisions:
    - Adding a kind or a granularity appends bindings; existing bindings and
      the generated routes for them are untouched
"""

import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import APIRouter, Depends

from bookbrainz_api.api.entity_loader import make_entity_loader
from bookbrainz_api.core.domain_types import EntityType
from bookbrainz_api.core.projections import (
    ALIASES_PROJECTION,
    EDITION_BASIC_PROJECTION,
    IDENTIFIERS_PROJECTION,
    RELATIONSHIPS_PROJECTION,
    Projection,
)
from bookbrainz_api.core.resolved_entity import ResolvedEntity
from bookbrainz_api.models.entity import Edition
from bookbrainz_api.schemas.lookup import NotFoundMessage
from bookbrainz_api.services.entity_resolver import EntityKind

logger = logging.getLogger(__name__)


class Granularity(str, Enum):
    """Lookup granularities; the value is the URL suffix after /{bbid}."""
    BASIC = ""
    ALIASES = "/aliases"
    IDENTIFIERS = "/identifiers"
    RELATIONSHIPS = "/relationships"


@dataclass(frozen=True)
class RouteBinding:
    kind: EntityKind
    granularity: Granularity
    projection: Projection
    not_found_message: str
    summary: str
    description: str

    @property
    def operation_id(self) -> str:
        if self.granularity is Granularity.BASIC:
            return f"get{self.kind.name}ByBbid"
        return f"get{self.granularity.name.title()}Of{self.kind.name}ByBbid"


def lookup_bindings(
    kind: EntityKind, basic_projection: Projection, not_found_message: str,
) -> tuple[RouteBinding, ...]:
    """The four standard lookup bindings for one entity kind."""
    label = kind.name.lower()
    return (
        RouteBinding(
            kind, Granularity.BASIC, basic_projection, not_found_message,
            f"Lookup {kind.name} by bbid",
            f"Returns the basic details of an {kind.name}",
        ),
        RouteBinding(
            kind, Granularity.ALIASES, ALIASES_PROJECTION, not_found_message,
            f"Get list of aliases of the {label} by BBID",
            f"Returns the list of aliases of the {label}",
        ),
        RouteBinding(
            kind, Granularity.IDENTIFIERS, IDENTIFIERS_PROJECTION,
            not_found_message,
            f"Get list of identifiers of an {label} by BBID",
            f"Returns the list of identifiers of an {label}",
        ),
        RouteBinding(
            kind, Granularity.RELATIONSHIPS, RELATIONSHIPS_PROJECTION,
            not_found_message,
            f"Get list of relationships of an {label} by BBID",
            f"Returns the list of relationships of an {label}",
        ),
    )


EDITION = EntityKind(EntityType.EDITION.value, Edition)

EDITION_BINDINGS = lookup_bindings(
    EDITION, EDITION_BASIC_PROJECTION, "Edition not found",
)


def _add_lookup_route(router: APIRouter, binding: RouteBinding) -> None:
    projection = binding.projection
    loader = make_entity_loader(
        binding.kind, projection.relations, binding.not_found_message,
    )

    async def lookup(entity: ResolvedEntity = Depends(loader)):
        return projection.project(entity)

    router.add_api_route(
        f"/{{bbid}}{binding.granularity.value}",
        lookup,
        methods=["GET"],
        response_model=projection.response_model,
        summary=binding.summary,
        description=binding.description,
        operation_id=binding.operation_id,
        responses={404: {
            "model": NotFoundMessage,
            "description": binding.not_found_message,
        }},
    )


def build_lookup_router(
    prefix: str, tag: str, bindings: tuple[RouteBinding, ...],
) -> APIRouter:
    """One GET route per binding, mounted under `prefix`."""
    router = APIRouter(prefix=prefix, tags=[tag])
    for binding in bindings:
        _add_lookup_route(router, binding)
    logger.debug(f"Built {len(bindings)} lookup routes under {prefix}")
    return router
