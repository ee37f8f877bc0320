"""Database Layer — declarative Base and session factories.

Invariants:
    - Single async engine per process in the application (see infrastructure/database.py)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
