"""
Shared fixtures: an app bound to an in-memory database and a few users.
"""
import pytest
from fastapi.testclient import TestClient
from app.tests.utils import bearer, create_user, make_app, make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return make_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def alice(db):
    return create_user(db, "alice")


@pytest.fixture
def bob(db):
    return create_user(db, "bob")


@pytest.fixture
def carol(db):
    return create_user(db, "carol")


@pytest.fixture
def alice_headers(alice, settings):
    return bearer(alice, settings)


@pytest.fixture
def bob_headers(bob, settings):
    return bearer(bob, settings)


@pytest.fixture
def carol_headers(carol, settings):
    return bearer(carol, settings)
