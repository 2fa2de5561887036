# timelogger/database.py

import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from timelogger.core.settings import settings

def engine_kwargs(url: str) -> dict:
    """
    Engine options for ``url``. An in-memory SQLite database lives only as long
    as its connection, so every session has to share the same one.
    """
    kwargs = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    return kwargs

# Cascading deletes on the database side need foreign keys switched on per connection
@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

engine = create_engine(settings.DATABASE_URL, **engine_kwargs(settings.DATABASE_URL))

# One session per request; sessions are never shared between requests
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)

def init_db(bind=None) -> None:
    """Create the tables of every model."""
    import timelogger.models  # noqa: F401  registers the models on Base.metadata
    from timelogger.models.base import Base

    Base.metadata.create_all(bind=bind or engine)