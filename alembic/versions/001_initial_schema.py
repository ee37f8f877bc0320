"""Initial schema — entities, editions, works and their alias/identifier/relationship sets.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer, primary_key=True)


def upgrade() -> None:
    # Lookup tables
    op.create_table(
        "languages",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("iso_code_1", sa.String(2), nullable=True),
        sa.Column("iso_code_3", sa.String(3), nullable=True),
    )
    op.create_table(
        "disambiguations", _id(),
        sa.Column("comment", sa.Text, nullable=False),
    )
    op.create_table(
        "edition_formats", _id(),
        sa.Column("label", sa.String(255), nullable=False),
    )
    op.create_table(
        "edition_statuses", _id(),
        sa.Column("label", sa.String(255), nullable=False),
    )
    op.create_table(
        "identifier_types", _id(),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("entity_type", sa.String(20), nullable=False),
    )
    op.create_table(
        "relationship_types", _id(),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("link_phrase", sa.Text, nullable=False),
        sa.Column("reverse_link_phrase", sa.Text, nullable=False),
    )

    # Sets
    for table in (
        "alias_sets", "identifier_sets", "language_sets",
        "release_event_sets", "relationship_sets",
    ):
        op.create_table(table, _id())

    op.create_table(
        "aliases",
        _id(),
        sa.Column("alias_set_id", sa.Integer, sa.ForeignKey("alias_sets.id", ondelete="CASCADE"), nullable=True),
        sa.Column("name", sa.String(500), nullable=False),
        sa.Column("sort_name", sa.String(500), nullable=False),
        sa.Column("language_id", sa.Integer, sa.ForeignKey("languages.id"), nullable=True),
        sa.Column("primary", sa.Boolean, nullable=False, server_default="false"),
    )
    op.create_table(
        "identifiers",
        _id(),
        sa.Column("identifier_set_id", sa.Integer, sa.ForeignKey("identifier_sets.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type_id", sa.Integer, sa.ForeignKey("identifier_types.id"), nullable=False),
        sa.Column("value", sa.String(255), nullable=False),
    )
    op.create_table(
        "language_set__language",
        sa.Column("set_id", sa.Integer, sa.ForeignKey("language_sets.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("language_id", sa.Integer, sa.ForeignKey("languages.id"), primary_key=True),
    )
    op.create_table(
        "release_events",
        _id(),
        sa.Column("release_event_set_id", sa.Integer, sa.ForeignKey("release_event_sets.id", ondelete="CASCADE"), nullable=False),
        sa.Column("date", sa.String(10), nullable=True),
    )

    # Entities
    op.create_table(
        "entities",
        sa.Column("bbid", UUID(as_uuid=True), primary_key=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("default_alias_id", sa.Integer, sa.ForeignKey("aliases.id"), nullable=True),
        sa.Column("alias_set_id", sa.Integer, sa.ForeignKey("alias_sets.id"), nullable=True),
        sa.Column("identifier_set_id", sa.Integer, sa.ForeignKey("identifier_sets.id"), nullable=True),
        sa.Column("relationship_set_id", sa.Integer, sa.ForeignKey("relationship_sets.id"), nullable=True),
        sa.Column("disambiguation_id", sa.Integer, sa.ForeignKey("disambiguations.id"), nullable=True),
    )
    op.create_index("ix_entities_type", "entities", ["type"])
    op.create_table(
        "editions",
        sa.Column("bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid", ondelete="CASCADE"), primary_key=True),
        sa.Column("edition_format_id", sa.Integer, sa.ForeignKey("edition_formats.id"), nullable=True),
        sa.Column("edition_status_id", sa.Integer, sa.ForeignKey("edition_statuses.id"), nullable=True),
        sa.Column("language_set_id", sa.Integer, sa.ForeignKey("language_sets.id"), nullable=True),
        sa.Column("release_event_set_id", sa.Integer, sa.ForeignKey("release_event_sets.id"), nullable=True),
        sa.Column("width", sa.Integer, nullable=True),
        sa.Column("height", sa.Integer, nullable=True),
        sa.Column("depth", sa.Integer, nullable=True),
        sa.Column("weight", sa.Integer, nullable=True),
        sa.Column("pages", sa.Integer, nullable=True),
    )
    op.create_table(
        "works",
        sa.Column("bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid", ondelete="CASCADE"), primary_key=True),
        sa.Column("work_type", sa.String(50), nullable=True),
    )

    # Relationships
    op.create_table(
        "relationships",
        _id(),
        sa.Column("type_id", sa.Integer, sa.ForeignKey("relationship_types.id"), nullable=False),
        sa.Column("source_bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid"), nullable=False),
        sa.Column("target_bbid", UUID(as_uuid=True), sa.ForeignKey("entities.bbid"), nullable=False),
    )
    op.create_table(
        "relationship_attributes",
        _id(),
        sa.Column("relationship_id", sa.Integer, sa.ForeignKey("relationships.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("value", sa.Text, nullable=True),
    )
    op.create_table(
        "relationship_set__relationship",
        sa.Column("set_id", sa.Integer, sa.ForeignKey("relationship_sets.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("relationship_id", sa.Integer, sa.ForeignKey("relationships.id", ondelete="CASCADE"), primary_key=True),
    )


def downgrade() -> None:
    for table in (
        "relationship_set__relationship", "relationship_attributes",
        "relationships", "works", "editions", "entities",
        "release_events", "language_set__language", "identifiers",
        "aliases", "relationship_sets", "release_event_sets",
        "language_sets", "identifier_sets", "alias_sets",
        "relationship_types", "identifier_types", "edition_statuses",
        "edition_formats", "disambiguations", "languages",
    ):
        op.drop_table(table)
