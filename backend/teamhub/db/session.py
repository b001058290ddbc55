"""Database engine and session management."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from teamhub.db.base import Base


def is_memory_database(database_url: str) -> bool:
    """True for SQLite URLs whose database lives only as long as the process."""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        kwargs = {}
        if is_memory_database(database_url):
            # An in-memory database only exists on its one connection
            kwargs["poolclass"] = StaticPool
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=False,
            future=True,
            **kwargs,
        )
    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        poolclass=QueuePool,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,  # Recycle connections after 1 hour
        echo=False,
        future=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
        future=True,
    )


def init_db(engine: Engine) -> None:
    """Create tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
