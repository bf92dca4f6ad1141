"""Shared fixtures for the Review Board API tests.

Run with: pytest tests/
"""

import logging

import pytest
from fastapi.testclient import TestClient

from review_board_api.app.core.config import Settings
from review_board_api.app.core.logging_config import FILE_HANDLER_PREFIX
from review_board_api.app.core.storage import ReviewStorage
from review_board_api.app.main import create_app
from review_board_api.app.services.review_service import ReviewService


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo level changes and file handlers that create_app makes."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(FILE_HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def reviews_file(tmp_path):
    """Path of a backing file that does not exist yet."""
    return tmp_path / "reviews.json"


@pytest.fixture
def storage(reviews_file):
    return ReviewStorage(reviews_file)


@pytest.fixture
def service(storage):
    return ReviewService(storage)


@pytest.fixture
def settings(reviews_file):
    return Settings(reviews_file=str(reviews_file), log_level="WARNING")


@pytest.fixture
def client(settings):
    """A test client whose startup has run against an empty store."""
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_review():
    return {"name": "Ann", "review": "Great"}
