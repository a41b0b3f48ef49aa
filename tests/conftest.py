"""
Shared fixtures for the canvas backend tests.

Every test gets its own Flask app bound to a fresh SQLite file under
pytest's tmp_path, so the bootstrap runs against an empty database.
"""

import pytest

from canvas_app import create_app, db
from canvas_app.config import Config

TEST_ACCESS_KEY = 'test-access-key'


def make_config(tmp_path, **overrides):
    """Builds a Config subclass pointing at files under tmp_path."""
    attrs = {
        'TESTING': True,
        'ACCESS_KEY': TEST_ACCESS_KEY,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///' + str(tmp_path / 'database.sqlite'),
        'STATIC_ROOT': str(tmp_path),
    }
    attrs.update(overrides)
    return type('TestConfig', (Config,), attrs)


@pytest.fixture
def app(tmp_path):
    app = create_app(make_config(tmp_path))
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {'x-access-key': TEST_ACCESS_KEY}


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield
