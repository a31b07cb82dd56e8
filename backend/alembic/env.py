"""Alembic environment — async migration runner for the films catalog.

Design Decisions:
    - DATABASE_URL, when set, goes through holocron.config.Settings so the
      postgresql:// -> postgresql+asyncpg:// rewrite lives in one place
    - Otherwise the alembic.ini URL (local docker-compose database)
    - NullPool: a migration run opens one connection and exits
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from holocron.config import get_settings
from holocron.db.base import Base
import holocron.models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    if os.environ.get("DATABASE_URL"):
        return get_settings().database_url
    return config.get_main_option("sqlalchemy.url")


def _migrate(**configure_kwargs) -> None:
    context.configure(target_metadata=target_metadata, **configure_kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    _migrate(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


def _migrate_on(connection: Connection) -> None:
    _migrate(connection=connection)


async def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    engine = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_migrate_on)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
