"""
Shared fixtures: a fresh application on an in-memory database per test,
plus factories that write rows directly through the ORM.
"""

import os
import itertools

# Settings are read at import time, so the environment must be in place first
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from app.core.security import create_access_token, hash_password
from app.db.session import Database
from app.main import create_app
from app.models import Comment, Discussion, Team, User, UserRole

DEFAULT_PASSWORD = "password123"

_sequence = itertools.count(1)


def persist(database: Database, obj):
    """Insert a row and hand it back detached, with its columns loaded."""
    db = database.session()
    try:
        db.add(obj)
        db.commit()
        db.refresh(obj)
        db.expunge(obj)
    finally:
        db.close()
    return obj


# =============================================================================
# Application
# =============================================================================


@pytest.fixture
def app():
    return create_app(database=Database("sqlite://"))


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which initializes the database
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(app, client) -> Database:
    return app.state.db


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


# =============================================================================
# Factories
# =============================================================================


@pytest.fixture
def make_team(database):
    def _make_team(name=None, description="Test team"):
        n = next(_sequence)
        return persist(database, Team(name=name or f"Team {n}", description=description))
    return _make_team


@pytest.fixture
def make_user(database, make_team):
    def _make_user(team=None, role=UserRole.USER, email=None, first_name="Test",
                   last_name="User", password=DEFAULT_PASSWORD, bio=None):
        if team is None:
            team = make_team()
        n = next(_sequence)
        return persist(database, User(
            email=email or f"test-{n}@example.com",
            first_name=first_name,
            last_name=last_name,
            password_hash=hash_password(password),
            role=role,
            team_id=team.id,
            bio=bio,
        ))
    return _make_user


@pytest.fixture
def make_admin(make_user):
    def _make_admin(team=None, **kwargs):
        return make_user(team=team, role=UserRole.ADMIN, **kwargs)
    return _make_admin


@pytest.fixture
def make_discussion(database):
    def _make_discussion(author, title="Test Discussion", body="Test Body", team_id=None):
        return persist(database, Discussion(
            title=title,
            body=body,
            author_id=author.id,
            team_id=team_id or author.team_id,
        ))
    return _make_discussion


@pytest.fixture
def make_comment(database):
    def _make_comment(author, discussion, body="Test comment"):
        return persist(database, Comment(body=body, author_id=author.id, discussion_id=discussion.id))
    return _make_comment


@pytest.fixture
def auth_headers():
    def _auth_headers(user) -> dict:
        token = create_access_token(user.id, user.email, user.role.value)
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers


@pytest.fixture
def team(make_team):
    return make_team()


@pytest.fixture
def admin(make_admin, team):
    return make_admin(team=team, first_name="Ada", last_name="Admin")


@pytest.fixture
def member(make_user, team):
    return make_user(team=team, first_name="Mia", last_name="Member")


@pytest.fixture
def outsider(make_admin):
    """Admin of a different team."""
    return make_admin(first_name="Otto", last_name="Outsider")
