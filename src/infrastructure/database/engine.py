"""
SQLAlchemy engine setup and session factories.

Every logical service operation runs inside one session transaction.  On
SQLite the transaction is opened with ``BEGIN IMMEDIATE`` so that concurrent
read-check-write units are serialized by the database itself rather than
failing with a lock upgrade error halfway through.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from infrastructure.settings import AppSettings

# ---------------------------------------------------------------------------
# Engine factories
# ---------------------------------------------------------------------------


def is_memory_url(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def build_engine(
    database_url: str,
    *,
    echo: bool = False,
    busy_timeout: float = 15.0,
) -> Engine:
    """Create a SQLAlchemy :class:`Engine` for *database_url*.

    Parameters
    ----------
    database_url:
        Any SQLAlchemy URL.  ``sqlite://`` (in-memory) uses a single shared
        connection so every session sees the same database.
    echo:
        Log emitted SQL.
    busy_timeout:
        Seconds a SQLite connection waits for a competing writer.
    """
    kwargs: dict[str, Any] = {"echo": echo}
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": busy_timeout}
        if is_memory_url(database_url):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = sa_create_engine(database_url, **kwargs)

    if url.get_backend_name() == "sqlite":
        _configure_sqlite(engine)
    return engine


def build_engine_from_settings(settings: AppSettings) -> Engine:
    return build_engine(
        settings.database_url,
        echo=settings.database_echo,
        busy_timeout=settings.database_busy_timeout,
    )


def _configure_sqlite(engine: Engine) -> None:
    """Enable foreign keys and take the write lock at transaction start."""

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        # Let SQLAlchemy, not the driver, decide when transactions begin.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


# ---------------------------------------------------------------------------
# Sessions and schema
# ---------------------------------------------------------------------------


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_database(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(engine)


def drop_database(engine: Engine) -> None:
    Base.metadata.drop_all(engine)
