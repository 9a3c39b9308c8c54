"""Alembic environment for the banderas schema.

The database URL comes from the same variables the application reads
(``TEST_DATABASE_URL``, ``DATABASE_URL`` or the ``POSTGRES_*`` parts), with
``sqlalchemy.url`` in alembic.ini as the last resort.
"""
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from banderas.db.models import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

_POSTGRES_PARTS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


def _database_url() -> str:
    url = os.getenv("TEST_DATABASE_URL") or os.getenv("DATABASE_URL")
    if url:
        return url
    parts = [os.getenv(name) for name in _POSTGRES_PARTS]
    if all(parts):
        user, password, host, port, db = parts
        return f"postgresql://{user}:{password}@{host}:{port}/{db}"
    return config.get_main_option("sqlalchemy.url")


def _migrate_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate_online() -> None:
    engine = create_engine(_database_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    _migrate_offline()
else:
    _migrate_online()
