"""Edition Data ORM — lookup tables and release events specific to editions."""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookbrainz_api.db.base import Base


class EditionFormat(Base):
    __tablename__ = "edition_formats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)


class EditionStatus(Base):
    __tablename__ = "edition_statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)


class ReleaseEventSet(Base):
    __tablename__ = "release_event_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    release_events: Mapped[list["ReleaseEvent"]] = relationship(
        "ReleaseEvent", order_by="ReleaseEvent.id", lazy="raise",
    )


class ReleaseEvent(Base):
    """A dated release of an edition; `date` is an ISO 8601 (partial) date."""
    __tablename__ = "release_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    release_event_set_id: Mapped[int] = mapped_column(
        ForeignKey("release_event_sets.id", ondelete="CASCADE"), nullable=False,
    )
    date: Mapped[str | None] = mapped_column(String(10), nullable=True)
