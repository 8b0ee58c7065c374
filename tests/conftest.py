import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'app', 'config', and 'trackhub' import correctly
_TESTS_DIR = os.path.dirname(__file__)
_ROOT_DIR = os.path.abspath(os.path.join(_TESTS_DIR, os.pardir))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

from tests.support import factories as test_factories


@pytest.fixture
def database_uri(tmp_path_factory):
    """A fresh sqlite file per test so autoincrement ids start at 1."""
    db_dir = tmp_path_factory.mktemp("db")
    db_path = Path(db_dir) / "test.sqlite"
    return f"sqlite:///{db_path.as_posix()}"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, database_uri):
    """Ensure a clean env for tests with per-test sqlite files."""
    monkeypatch.setenv("DATABASE_URL", database_uri)
    monkeypatch.delenv("PORT", raising=False)
    yield


@pytest.fixture
def app(database_uri):
    import app as app_module

    application = app_module.create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": database_uri,
        }
    )
    yield application
    app_module.dispose_database(application)


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield app


@pytest.fixture
def db_session(app_context):
    from trackhub.database.db_manager import db

    test_factories.set_session(db.session)
    try:
        yield db.session
    finally:
        try:
            db.session.rollback()
        except Exception:
            pass
        db.session.remove()
        test_factories.reset_session()


@pytest.fixture
def factories(db_session):
    yield test_factories


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_client(client):
    resp = client.get('/seed_db')
    assert resp.status_code == 200
    return client
