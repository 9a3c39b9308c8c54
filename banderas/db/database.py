"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration, with an
in-memory SQLite fallback while running under pytest, and exposes the
session factory handed to repositories at startup.
"""
import logging
import os
import sys
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so module import
    during collection is detected through ``sys.modules`` instead.
    ``PYTEST_RUNNING=1`` forces the answer.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    return "PYTEST_CURRENT_TEST" in os.environ or "pytest" in sys.modules


def _get_database_url() -> str:
    if os.getenv("DATABASE_URL"):
        return os.environ["DATABASE_URL"]

    parts = {
        name: os.getenv(name)
        for name in ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")
    }
    missing = [name for name, value in parts.items() if not value]
    if missing:
        if _is_pytest_runtime():
            return SQLITE_MEMORY_URL
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{parts['POSTGRES_USER']}:{parts['POSTGRES_PASSWORD']}"
        f"@{parts['POSTGRES_HOST']}:{parts['POSTGRES_PORT']}/{parts['POSTGRES_DB']}"
    )


def build_engine(url: Optional[str] = None) -> Engine:
    """Create an engine for ``url`` (defaults to the configured database).

    SQLite in-memory engines share one connection through ``StaticPool`` so
    the schema survives across sessions.
    """
    url = url or _get_database_url()
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True, pool_recycle=1800)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create all tables directly (SQLite/test contexts; Postgres uses Alembic)."""
    from banderas.db.models import Base

    Base.metadata.create_all(bind=engine)


DATABASE_URL = os.getenv("TEST_DATABASE_URL") or _get_database_url()
if _is_pytest_runtime() and not os.getenv("TEST_DATABASE_URL"):
    DATABASE_URL = SQLITE_MEMORY_URL

engine = build_engine(DATABASE_URL)
SessionLocal = build_session_factory(engine)

if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    create_schema(engine)
    logger.debug("Created in-memory SQLite schema")

