"""Entity ORM — BBID-addressed entities with joined-table inheritance.

Invariants:
    - bbid is the UUID primary key of every entity, never reused
    - `type` discriminates the subclass (Edition, Work)
    - Every relationship() is lazy="raise": relations load only when a query
      asks for them through a loader option

Design Decisions:
    - Joined-table inheritance: relationship endpoints reference `entities`
      whatever their kind, while kind-specific columns live in subclass tables
    - Set tables (alias/identifier/relationship sets) mirror the BookBrainz
      schema so entity revisions can share them
"""

import uuid

from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bookbrainz_api.core.domain_types import EntityType
from bookbrainz_api.db.base import Base


class Disambiguation(Base):
    __tablename__ = "disambiguations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    comment: Mapped[str] = mapped_column(Text, nullable=False)


class Entity(Base):
    """Base of every BBID-addressed entity."""
    __tablename__ = "entities"

    bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    default_alias_id: Mapped[int | None] = mapped_column(
        ForeignKey("aliases.id"), nullable=True,
    )
    alias_set_id: Mapped[int | None] = mapped_column(
        ForeignKey("alias_sets.id"), nullable=True,
    )
    identifier_set_id: Mapped[int | None] = mapped_column(
        ForeignKey("identifier_sets.id"), nullable=True,
    )
    relationship_set_id: Mapped[int | None] = mapped_column(
        ForeignKey("relationship_sets.id"), nullable=True,
    )
    disambiguation_id: Mapped[int | None] = mapped_column(
        ForeignKey("disambiguations.id"), nullable=True,
    )

    # Relationships
    default_alias: Mapped["Alias"] = relationship(
        "Alias", foreign_keys=[default_alias_id], lazy="raise",
    )
    alias_set: Mapped["AliasSet"] = relationship(
        "AliasSet", lazy="raise",
    )
    identifier_set: Mapped["IdentifierSet"] = relationship(
        "IdentifierSet", lazy="raise",
    )
    relationship_set: Mapped["RelationshipSet"] = relationship(
        "RelationshipSet", lazy="raise",
    )
    disambiguation: Mapped[Disambiguation | None] = relationship(
        Disambiguation, lazy="raise",
    )

    __mapper_args__ = {"polymorphic_on": "type"}


class Edition(Entity):
    """A published edition of a work (physical or digital)."""
    __tablename__ = "editions"

    bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid", ondelete="CASCADE"),
        primary_key=True,
    )
    edition_format_id: Mapped[int | None] = mapped_column(
        ForeignKey("edition_formats.id"), nullable=True,
    )
    edition_status_id: Mapped[int | None] = mapped_column(
        ForeignKey("edition_statuses.id"), nullable=True,
    )
    language_set_id: Mapped[int | None] = mapped_column(
        ForeignKey("language_sets.id"), nullable=True,
    )
    release_event_set_id: Mapped[int | None] = mapped_column(
        ForeignKey("release_event_sets.id"), nullable=True,
    )

    # Physical dimensions: mm and grams
    width: Mapped[int | None] = mapped_column(Integer, nullable=True)
    height: Mapped[int | None] = mapped_column(Integer, nullable=True)
    depth: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pages: Mapped[int | None] = mapped_column(Integer, nullable=True)

    edition_format: Mapped["EditionFormat"] = relationship(
        "EditionFormat", lazy="raise",
    )
    edition_status: Mapped["EditionStatus"] = relationship(
        "EditionStatus", lazy="raise",
    )
    language_set: Mapped["LanguageSet"] = relationship(
        "LanguageSet", lazy="raise",
    )
    release_event_set: Mapped["ReleaseEventSet"] = relationship(
        "ReleaseEventSet", lazy="raise",
    )

    __mapper_args__ = {"polymorphic_identity": EntityType.EDITION.value}


class Work(Entity):
    """A distinct intellectual or artistic creation."""
    __tablename__ = "works"

    bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid", ondelete="CASCADE"),
        primary_key=True,
    )
    work_type: Mapped[str | None] = mapped_column(String(50), nullable=True)

    __mapper_args__ = {"polymorphic_identity": EntityType.WORK.value}
