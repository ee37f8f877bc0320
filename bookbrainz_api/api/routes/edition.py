"""Edition Routes — basic, alias, identifier and relationship lookups by BBID.

Invariants:
    - GET /edition/{bbid}[/aliases|/identifiers|/relationships]
    - Unknown BBID -> 404 {"message": "Edition not found"} for every granularity
"""

from bookbrainz_api.api.route_bindings import EDITION_BINDINGS, build_lookup_router

router = build_lookup_router("/edition", "Lookup Requests", EDITION_BINDINGS)
