"""Shared fixtures: an isolated in-memory database per test."""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_USER"] = "admin"
os.environ["ADMIN_PASS"] = "secret"

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from eldorado.app import app  # noqa: E402
from eldorado.core import get_session  # noqa: E402
from eldorado.models import Score, User  # noqa: E402


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(session):
    def _get_session_override():
        yield session

    app.dependency_overrides[get_session] = _get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_user(session):
    def _add(username: str) -> User:
        user = User(username=username)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _add


@pytest.fixture
def add_score(session):
    """Insert a score row directly, bypassing the submission route."""

    def _add(username: str, value: int, game_type: str = "block_blast", day: date | None = None) -> Score:
        score = Score(username=username, game_type=game_type, score=value, raw_score=value)
        if day is not None:
            score.day = day
        session.add(score)
        session.commit()
        session.refresh(score)
        return score

    return _add
