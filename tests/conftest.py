# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from teamboard.core.security import create_access_token
from teamboard.core.settings import AddPermissionMode
from teamboard.db.session import Base
from teamboard.db.session import get_db as app_get_session
from teamboard.main import app as fastapi_app
from teamboard.models import Discussion, DiscussionMember, Team, TeamMember
from teamboard.repositories import DiscussionRepository, PostRepository, TeamRepository
from teamboard.services.post_service import PostService

TEST_DB_URL = "sqlite://"

ALICE = "user-alice"
BOB = "user-bob"
CAROL = "user-carol"

_SLUG_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_team(db_session: Session) -> Callable[..., Team]:
    """Return a factory persisting a team with the given members."""

    def _make(*member_ids: str) -> Team:
        n = next(_SLUG_COUNTER)
        team = Team(name=f"Team {n}", slug=f"team-{n}")
        team.members = [TeamMember(user_id=user_id) for user_id in member_ids]
        db_session.add(team)
        db_session.flush()
        return team

    return _make


@pytest.fixture()
def make_discussion(db_session: Session) -> Callable[..., Discussion]:
    """Return a factory persisting a discussion of ``team`` with the given members."""

    def _make(team: Team, *member_ids: str) -> Discussion:
        n = next(_SLUG_COUNTER)
        discussion = Discussion(team_id=team.id, name=f"Discussion {n}", slug=f"discussion-{n}")
        discussion.members = [DiscussionMember(user_id=user_id) for user_id in member_ids]
        db_session.add(discussion)
        db_session.flush()
        return discussion

    return _make


@pytest.fixture()
def team(make_team: Callable[..., Team]) -> Team:
    """Team with Alice and Bob as members."""
    return make_team(ALICE, BOB)


@pytest.fixture()
def discussion(make_discussion: Callable[..., Discussion], team: Team) -> Discussion:
    """Discussion of ``team`` with Alice and Bob as members."""
    return make_discussion(team, ALICE, BOB)


class TickingClock:
    """Clock that moves one minute forward on every call."""

    def __init__(self) -> None:
        self.current = datetime(2024, 3, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture()
def make_service(db_session: Session, clock: TickingClock) -> Callable[..., PostService]:
    """Return a factory for post services bound to the test session."""

    def _make(add_permission: AddPermissionMode = AddPermissionMode.LEGACY) -> PostService:
        return PostService(
            PostRepository(db_session),
            DiscussionRepository(db_session),
            TeamRepository(db_session),
            add_permission=add_permission,
            clock=clock,
        )

    return _make


@pytest.fixture()
def service(make_service: Callable[..., PostService]) -> PostService:
    return make_service()


def auth_headers(user_id: str) -> dict[str, str]:
    """Return authorization headers carrying ``user_id`` as the token subject."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}
