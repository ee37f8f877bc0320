"""Core Layer — pure lookup logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or models/
    - Formatters read ORM records structurally; they never query

Design Decisions:
    - Functional core (registry, result types, formatters, projections)
      separated from the imperative shell (resolver, gate, routes)
"""
