"""
Shared pytest fixtures for the task API test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Database setup/teardown
- Test client creation
"""

import os
import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from apiserver import create_app, db
from apiserver.models import Task


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The 'session' scope means the same app instance is reused
    for all tests, improving performance.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Tables are dropped and recreated up front so that leftovers from an
    aborted run never leak in, and dropped again afterwards. Dropping the
    table also resets the id sequence, so the first task of a test gets
    id 1.

    Args:
        app: Flask application fixture.

    Yields:
        SQLAlchemy database handle.
    """
    with app.app_context():
        db.drop_all()
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(db_session):
    """
    Factory fixture for creating Task instances directly in the database.

    Args:
        db_session: Database session fixture.

    Returns:
        Function that creates and returns Task instances.

    Example:
        def test_something(task_factory):
            task = task_factory(content="Water the plants")
            assert task.id is not None
    """

    def _create_task(content: str | None = None, done: bool = False) -> Task:
        task = Task(content=content or fake.sentence(nb_words=4), done=done)
        db_session.session.add(task)
        db_session.session.commit()
        return task

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single undone task."""
    return task_factory(content="TDD practice")


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """
    Create a handful of tasks, some of them already done.

    Returns:
        List of Task instances in insertion order.
    """
    return [
        task_factory(content="Write failing test"),
        task_factory(content="Make it pass", done=True),
        task_factory(content="Refactor"),
    ]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict:
    """Provide a valid task payload for POST/PUT requests."""
    return {"content": "TDD practice", "done": False}


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
