"""Database Infrastructure — async session factory and SQLAlchemy Base.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession) and read-only in practice

Design Decisions:
    - asyncpg driver by default; any SQLAlchemy async driver works (aiosqlite in tests)
"""
