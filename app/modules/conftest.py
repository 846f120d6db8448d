import pytest

from app import create_app, db


@pytest.fixture(scope="session")
def test_app():
    """Create and configure a new app instance for the whole test session."""
    test_app = create_app("testing")

    with test_app.app_context():
        yield test_app


@pytest.fixture(scope="module")
def test_client(test_app):
    """
    Module-scoped client over a freshly created schema.

    Test modules extend this fixture to load the data they need.
    """
    with test_app.test_client() as testing_client:
        with test_app.app_context():
            db.drop_all()
            db.create_all()

            yield testing_client

            db.session.remove()
            db.drop_all()


@pytest.fixture(scope="function")
def clean_database(test_app):
    db.session.remove()
    db.drop_all()
    db.create_all()
    yield
    db.session.remove()
    db.drop_all()
    db.create_all()
