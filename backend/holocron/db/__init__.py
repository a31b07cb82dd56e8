"""Database Package — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - Nothing here opens connections; the engine lives in infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
