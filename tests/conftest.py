"""Pytest configuration and shared fixtures.

Each test gets its own SQLite file, a session bound to it, and an API client
whose session factory points at the same database.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.orm import Session, sessionmaker

from api_main import create_app
from hardinfinity.config import settings
from hardinfinity.crud import create_challenge, create_section, create_task, upsert_user
from hardinfinity.db import make_engine, make_session_factory
from hardinfinity.models import Base, Challenge, Section, Task, User
from hardinfinity.schemas import ChallengeCreateIn, SectionCreateIn, TaskCreateIn

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def make_token(subject: str, **claims) -> str:
    return jwt.encode({"sub": subject, **claims}, TEST_SECRET, algorithm="HS256")


def auth_header(subject: str) -> dict:
    return {"Authorization": f"Bearer {make_token(subject)}"}


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
def engine(tmp_path: Path):
    """Create a throwaway SQLite database with the full schema."""
    engine = make_engine(f"sqlite:///{tmp_path / 'hardinfinity-test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return make_session_factory(engine)


@pytest.fixture
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def user(db: Session) -> User:
    return upsert_user(db, "user_owner", "owner@example.com", "Owner")


@pytest.fixture
def other_user(db: Session) -> User:
    return upsert_user(db, "user_intruder", "intruder@example.com", "Intruder")


@pytest.fixture
def challenge(db: Session, user: User) -> Challenge:
    return create_challenge(db, user, ChallengeCreateIn(name="75 Hard", description="Daily discipline"))


@pytest.fixture
def section(db: Session, challenge: Challenge) -> Section:
    return create_section(db, challenge, SectionCreateIn(name="Fitness"))


@pytest.fixture
def tasks(db: Session, section: Section) -> dict[str, Task]:
    """One task of each value type, keyed by type."""
    return {
        "boolean": create_task(db, section, TaskCreateIn(name="Workout", task_type="boolean")),
        "number": create_task(db, section, TaskCreateIn(name="Water (L)", task_type="number")),
        "text": create_task(db, section, TaskCreateIn(name="Book", task_type="text")),
    }


# ============================================================================
# API Fixtures
# ============================================================================


@pytest.fixture
def client(session_factory: sessionmaker, monkeypatch) -> TestClient:
    monkeypatch.setattr(settings, "AUTH_SECRET_KEY", TEST_SECRET)
    monkeypatch.setattr(settings, "AUTH_ALGORITHM", "HS256")
    monkeypatch.setattr(settings, "AUTH_AUDIENCE", "")
    return TestClient(create_app(session_factory))


@pytest.fixture
def owner_headers() -> dict:
    return auth_header("user_owner")


@pytest.fixture
def intruder_headers() -> dict:
    return auth_header("user_intruder")
