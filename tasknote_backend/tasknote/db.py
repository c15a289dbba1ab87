from typing import Any, Dict, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from tasknote.config import settings


def _connect_args(database_url: str) -> Dict[str, Any]:
    """Driver-level connection options for the given URL."""
    backend = make_url(database_url).get_backend_name()
    if backend == "postgresql":
        return {"connect_timeout": settings.db_connect_timeout}
    if backend == "sqlite":
        return {"check_same_thread": False}
    return {}


# PUBLIC_INTERFACE
def create_db_engine(database_url: str, **kwargs: Any) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    pool_pre_ping makes the pool test connections on checkout and transparently
    replace ones the server has dropped, so callers never see stale connections.
    """
    kwargs.setdefault("connect_args", _connect_args(database_url))
    return create_engine(database_url, pool_pre_ping=True, **kwargs)


# Engine + session configuration
engine = create_db_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# PUBLIC_INTERFACE
def get_db() -> Iterator[Session]:
    """FastAPI dependency that yields a database session and ensures it is closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
