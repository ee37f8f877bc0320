"""Identifier ORM — external identifiers (ISBN, Wikidata ID, ...) of an entity."""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookbrainz_api.db.base import Base


class IdentifierType(Base):
    __tablename__ = "identifier_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)


class IdentifierSet(Base):
    __tablename__ = "identifier_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    identifiers: Mapped[list["Identifier"]] = relationship(
        "Identifier", order_by="Identifier.id", lazy="raise",
    )


class Identifier(Base):
    __tablename__ = "identifiers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    identifier_set_id: Mapped[int] = mapped_column(
        ForeignKey("identifier_sets.id", ondelete="CASCADE"), nullable=False,
    )
    type_id: Mapped[int] = mapped_column(
        ForeignKey("identifier_types.id"), nullable=False,
    )
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    type: Mapped[IdentifierType] = relationship(IdentifierType, lazy="raise")
