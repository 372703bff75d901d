"""SQLAlchemy engine and session setup."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from peal_mentors.config import DEFAULT_DATABASE_URL


def normalize_database_url(url: str) -> str:
    # Heroku-style postgres:// is rejected by SQLAlchemy 2.x
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def make_session_factory(url: str) -> sessionmaker:
    """Session factory bound to a new engine, for callers with their own database_url."""
    bind = create_engine(normalize_database_url(url or DEFAULT_DATABASE_URL), pool_pre_ping=True, echo=False)
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


def init_db(bind) -> None:
    """Create tables, making the SQLite file's directory first if needed."""
    if bind.url.get_backend_name() == "sqlite" and bind.url.database not in (None, "", ":memory:"):
        Path(bind.url.database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)
