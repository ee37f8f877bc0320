"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes an APIRouter with prefix and tags
    - Lookup routers are generated from route bindings (api/route_bindings.py)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
