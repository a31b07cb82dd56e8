"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports services/ or api/
    - All external calls wrapped with error mapping into core/errors.py types

Design Decisions:
    - Thin wrappers over raw clients (httpx, SQLAlchemy): one place per failure mapping
"""
