"""Language ORM — languages and the language sets editions are written in.

Invariants:
    - LanguageSet <-> Language is many-to-many (language_set__language)
    - LanguageSet.languages is ordered by language id
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookbrainz_api.db.base import Base

language_set_language = Table(
    "language_set__language",
    Base.metadata,
    Column(
        "set_id", ForeignKey("language_sets.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("language_id", ForeignKey("languages.id"), primary_key=True),
)


class Language(Base):
    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    iso_code_1: Mapped[str | None] = mapped_column(String(2), nullable=True)
    iso_code_3: Mapped[str | None] = mapped_column(String(3), nullable=True)


class LanguageSet(Base):
    __tablename__ = "language_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    languages: Mapped[list[Language]] = relationship(
        Language, secondary=language_set_language,
        order_by=Language.id, lazy="raise",
    )
