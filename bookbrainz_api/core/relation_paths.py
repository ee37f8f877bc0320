"""Relation Path Registry — named, reusable sets of relation paths.

Invariants:
    - A RelationPathSet is immutable and keeps its paths in declaration order
    - Duplicate paths inside one set collapse to their first position
    - Sets may overlap: the same path can appear in any number of named sets
    - A path "a.b.c" covers "a", "a.b" and "a.b.c" (prefix coverage)

Design Decisions:
    - Paths are data, not code: only the resolver knows how to satisfy them
    - Composition (with_paths, +) builds new sets instead of re-listing paths
"""

import re
from dataclasses import dataclass

from bookbrainz_api.core.domain_types import RelationPath

_SEGMENT = re.compile(r"^[a-z_][a-z0-9_]*$")


def parse_relation_path(path: str) -> RelationPath:
    """Validate a dot-delimited relation path and return it typed."""
    if not isinstance(path, str) or not path:
        raise ValueError("relation path must be a non-empty string")
    for segment in path.split("."):
        if not _SEGMENT.match(segment):
            raise ValueError(f"invalid segment {segment!r} in relation path {path!r}")
    return RelationPath(path)


@dataclass(frozen=True)
class RelationPathSet:
    """Ordered, named collection of relation paths."""
    name: str
    paths: tuple[RelationPath, ...] = ()

    def __post_init__(self):
        unique: dict[RelationPath, None] = {}
        for path in self.paths:
            unique.setdefault(parse_relation_path(path), None)
        object.__setattr__(self, "paths", tuple(unique))

    def __iter__(self):
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __add__(self, other: "RelationPathSet") -> "RelationPathSet":
        return RelationPathSet(f"{self.name}+{other.name}", self.paths + other.paths)

    def with_paths(self, name: str, *paths: str) -> "RelationPathSet":
        """Return a new set named `name` extending this one with `paths`."""
        return RelationPathSet(name, self.paths + tuple(paths))

    def covers(self, path: str) -> bool:
        """True if `path` is one of the paths or a prefix of one."""
        return any(p == path or p.startswith(path + ".") for p in self.paths)

    def covers_all(self, other: "RelationPathSet") -> bool:
        return all(self.covers(p) for p in other.paths)


EDITION_BASIC_RELATIONS = RelationPathSet("edition_basic", (
    "default_alias.language",
    "language_set.languages",
    "disambiguation",
    "edition_format",
    "edition_status",
    "release_event_set.release_events",
))

ALIASES_RELATIONS = RelationPathSet("aliases", (
    "default_alias.language",
    "alias_set.aliases.language",
))

IDENTIFIERS_RELATIONS = RelationPathSet("identifiers", (
    "identifier_set.identifiers.type",
))

RELATIONSHIPS_RELATIONS = RelationPathSet("relationships", (
    # the looked-up entity is itself an endpoint of its relationships
    "default_alias",
    "relationship_set.relationships.type",
    "relationship_set.relationships.attributes",
    "relationship_set.relationships.source.default_alias",
    "relationship_set.relationships.target.default_alias",
))

RELATION_PATH_SETS: dict[str, RelationPathSet] = {
    s.name: s for s in (
        EDITION_BASIC_RELATIONS,
        ALIASES_RELATIONS,
        IDENTIFIERS_RELATIONS,
        RELATIONSHIPS_RELATIONS,
    )
}


def get_relation_path_set(name: str) -> RelationPathSet:
    """Look up a registered set by name. Raises KeyError if unknown."""
    return RELATION_PATH_SETS[name]
