"""
Shared fixtures: an isolated in-memory database per test, a session bound to
it, a TestClient whose ``get_db`` dependency uses that session, and small row
factories for the common prerequisites.
"""

import os

# keep the module-level engine off the default PostgreSQL URL
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from activity_tracker.db import Base, get_db, init_db, make_engine, make_sessionmaker
from activity_tracker.main import app
from activity_tracker.schemas import ActivityCreate, ProjectCreate, UserCreate
from activity_tracker.services import activities, projects, users


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = make_sessionmaker(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_project(db):
    def _make(name="Test Project", description="A test project"):
        return projects.create_project(db, ProjectCreate(name=name, description=description))
    return _make


@pytest.fixture
def make_activity(db):
    def _make(project_id, name="Activity", **overrides):
        fields = {
            "project_id": project_id,
            "name": name,
            "description": f"{name} description",
            "start_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "end_date": datetime(2024, 1, 15, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return activities.create_activity(db, ActivityCreate(**fields))
    return _make


@pytest.fixture
def make_user(db):
    def _make(name="Test User", email="test@example.com"):
        return users.create_user(db, UserCreate(name=name, email=email))
    return _make


@pytest.fixture
def project(make_project):
    return make_project()


@pytest.fixture
def activity(project, make_activity):
    return make_activity(project.id, "Activity 1")
