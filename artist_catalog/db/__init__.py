"""Database Layer — declarative Base and a standalone session factory.

Invariants:
    - Single async engine per process in the app (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
