"""Alias ORM — names an entity is known by, grouped in alias sets.

Invariants:
    - An alias belongs to at most one AliasSet
    - AliasSet.aliases is ordered by alias id (store insertion order)
"""

from sqlalchemy import String, Boolean, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookbrainz_api.db.base import Base


class AliasSet(Base):
    __tablename__ = "alias_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    aliases: Mapped[list["Alias"]] = relationship(
        "Alias", back_populates="alias_set",
        order_by="Alias.id", lazy="raise",
    )


class Alias(Base):
    __tablename__ = "aliases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    alias_set_id: Mapped[int | None] = mapped_column(
        ForeignKey("alias_sets.id", ondelete="CASCADE"), nullable=True,
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    sort_name: Mapped[str] = mapped_column(String(500), nullable=False)
    language_id: Mapped[int | None] = mapped_column(
        ForeignKey("languages.id"), nullable=True,
    )
    primary: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    alias_set: Mapped[AliasSet | None] = relationship(
        AliasSet, back_populates="aliases", lazy="raise",
    )
    language: Mapped["Language"] = relationship(
        "Language", lazy="raise",
    )
