"""Shared fixtures for API tests."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from feedback_hub.api.app import create_app
from feedback_hub.api.dependencies import get_feedback_repository
from feedback_hub.feedback.repository import FeedbackRepository


@pytest.fixture
def mock_database():
    """Mock Database: connect/close succeed, health_check answers True."""
    db = AsyncMock()
    db.connect = AsyncMock()
    db.close = AsyncMock()
    db.execute = AsyncMock()
    db.health_check = AsyncMock(return_value=True)
    return db


@pytest.fixture
def mock_feedback_repo():
    """Mock FeedbackRepository; create echoes its argument back."""
    repo = AsyncMock(spec=FeedbackRepository)
    repo.create = AsyncMock(side_effect=lambda feedback: feedback)
    repo.list_all = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def app(mock_database, mock_feedback_repo):
    app = create_app(database=mock_database)
    app.dependency_overrides[get_feedback_repository] = lambda: mock_feedback_repo
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI TestClient with the feedback repository overridden."""
    with TestClient(app) as c:
        yield c
