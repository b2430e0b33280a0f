"""Database configuration and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from .config import DATABASE_URL

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_DATA_DIR = _PROJECT_ROOT / "data"


def _build_engine(url: str):
    if not url:
        _DATA_DIR.mkdir(parents=True, exist_ok=True)
        url = f"sqlite:///{_DATA_DIR / 'app.db'}"

    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    # In-memory SQLite must share one connection across threads.
    if url in {"sqlite://", "sqlite:///:memory:"}:
        return create_engine(
            url, connect_args={"check_same_thread": False}, poolclass=StaticPool
        )
    return create_engine(url, connect_args={"check_same_thread": False})


engine = _build_engine(DATABASE_URL)


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["engine", "get_session"]
