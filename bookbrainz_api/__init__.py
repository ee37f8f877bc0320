"""BookBrainz Lookup API — read-only entity lookups by BBID.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
