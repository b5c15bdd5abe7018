# barberbook/db.py

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from barberbook.config import DATABASE_URL


def make_engine(url: str = DATABASE_URL):
    """Build an engine and create the tables.

    A plain ``sqlite://`` URL is an in-memory database; it only survives as
    long as its single connection, so that connection is pinned with a
    StaticPool and shared across FastAPI's worker threads.
    """
    kwargs = {"echo": False}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}  # required for SQLite + FastAPI
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)
    SQLModel.metadata.create_all(engine)
    return engine
