"""Relationship ORM — typed, directed links between two entities.

Invariants:
    - A relationship connects source_bbid -> target_bbid (any entity kinds)
    - One relationship is shared by the relationship sets of both endpoints
      (relationship_set__relationship)
    - RelationshipSet.relationships and Relationship.attributes are ordered by id

Design Decisions:
    - Attributes as name/value rows: relationship types carry different
      attributes (position, number, ...) without schema changes
"""

import uuid

from sqlalchemy import Column, String, Text, Integer, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bookbrainz_api.db.base import Base

relationship_set_relationship = Table(
    "relationship_set__relationship",
    Base.metadata,
    Column(
        "set_id", ForeignKey("relationship_sets.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "relationship_id", ForeignKey("relationships.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class RelationshipType(Base):
    __tablename__ = "relationship_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    link_phrase: Mapped[str] = mapped_column(Text, nullable=False)
    reverse_link_phrase: Mapped[str] = mapped_column(Text, nullable=False)


class Relationship(Base):
    __tablename__ = "relationships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type_id: Mapped[int] = mapped_column(
        ForeignKey("relationship_types.id"), nullable=False,
    )
    source_bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid"), nullable=False,
    )
    target_bbid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("entities.bbid"), nullable=False,
    )

    type: Mapped[RelationshipType] = relationship(
        RelationshipType, lazy="raise",
    )
    source: Mapped["Entity"] = relationship(
        "Entity", foreign_keys=[source_bbid], lazy="raise",
    )
    target: Mapped["Entity"] = relationship(
        "Entity", foreign_keys=[target_bbid], lazy="raise",
    )
    attributes: Mapped[list["RelationshipAttribute"]] = relationship(
        "RelationshipAttribute", order_by="RelationshipAttribute.id",
        lazy="raise",
    )


class RelationshipAttribute(Base):
    __tablename__ = "relationship_attributes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    relationship_id: Mapped[int] = mapped_column(
        ForeignKey("relationships.id", ondelete="CASCADE"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)


class RelationshipSet(Base):
    __tablename__ = "relationship_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    relationships: Mapped[list[Relationship]] = relationship(
        Relationship, secondary=relationship_set_relationship,
        order_by=Relationship.id, lazy="raise",
    )
