"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps the raw BBID string; it is never parsed in core
    - RelationPath is a dot-delimited chain of relationship attribute names
    - Entity kinds and relationship directions are Enums, not raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", str)


# ─── Value Types ─────────────────────────────────────────────────

RelationPath = NewType("RelationPath", str)   # e.g. "default_alias.language"


# ─── Enums ───────────────────────────────────────────────────────

class EntityType(str, Enum):
    """Entity kinds stored in the `entities.type` discriminator column."""
    EDITION = "Edition"
    WORK = "Work"


class RelationshipDirection(str, Enum):
    """Direction of a relationship relative to the looked-up entity."""
    FORWARD = "forward"
    BACKWARD = "backward"
