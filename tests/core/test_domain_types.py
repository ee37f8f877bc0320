"""Domain Types — identity wrappers, enums and lookup outcome types."""

import pytest

from bookbrainz_api.api.route_bindings import EDITION
from bookbrainz_api.core.domain_types import (
    EntityId, EntityType, RelationPath, RelationshipDirection,
)
from bookbrainz_api.core.relation_paths import RelationPathSet
from bookbrainz_api.core.resolved_entity import Found, NotFound, ResolvedEntity
from bookbrainz_api.models import Edition, Work


def test_identity_types_wrap_str():
    assert EntityId("96a23368-85a1-4559-b3df-16833893d861") == "96a23368-85a1-4559-b3df-16833893d861"
    assert RelationPath("default_alias") == "default_alias"


def test_entity_type_values_match_discriminator():
    assert EntityType.EDITION.value == "Edition"
    assert EntityType.WORK.value == "Work"


def test_entity_type_drives_polymorphic_identities_and_kinds():
    assert Edition.__mapper__.polymorphic_identity == EntityType.EDITION.value
    assert Work.__mapper__.polymorphic_identity == EntityType.WORK.value
    assert EDITION.name == EntityType.EDITION.value


def test_relationship_direction_values():
    assert {d.value for d in RelationshipDirection} == {"forward", "backward"}


def test_found_and_not_found_are_distinct_outcomes():
    entity = ResolvedEntity("Edition", object(), RelationPathSet("empty"))
    found = Found(entity)
    missing = NotFound("Edition", EntityId("x"))
    assert not isinstance(found, NotFound)
    assert not isinstance(missing, Found)
    assert found.entity is entity


def test_outcomes_are_frozen():
    with pytest.raises(AttributeError):
        NotFound("Edition", EntityId("x")).kind = "Work"
