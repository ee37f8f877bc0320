"""ORM Models — SQLAlchemy declarative models for the lookup schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entity is the BBID-addressed root; sets and lookup tables hang off it

Design Decisions:
    - One file per concern for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from bookbrainz_api.models.entity import Entity, Edition, Work, Disambiguation  # noqa: F401
from bookbrainz_api.models.alias import Alias, AliasSet  # noqa: F401
from bookbrainz_api.models.language import Language, LanguageSet  # noqa: F401
from bookbrainz_api.models.edition_data import (  # noqa: F401
    EditionFormat, EditionStatus, ReleaseEvent, ReleaseEventSet,
)
from bookbrainz_api.models.identifier import (  # noqa: F401
    Identifier, IdentifierSet, IdentifierType,
)
from bookbrainz_api.models.relationship import (  # noqa: F401
    Relationship, RelationshipAttribute, RelationshipSet, RelationshipType,
)
