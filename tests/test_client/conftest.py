"""Fixtures for client tests."""

from unittest.mock import AsyncMock

import httpx
import pytest_asyncio

from feedback_hub.api.app import create_app
from feedback_hub.api.dependencies import get_feedback_repository
from feedback_hub.client.api import FeedbackAPI


class _ListRepository:
    def __init__(self):
        self.records = []

    async def create(self, feedback):
        self.records.append(feedback)
        return feedback

    async def list_all(self):
        return list(reversed(self.records))


@pytest_asyncio.fixture
async def asgi_api():
    """FeedbackAPI talking to the FastAPI app through ASGITransport."""
    app = create_app(database=AsyncMock())
    repo = _ListRepository()
    app.dependency_overrides[get_feedback_repository] = lambda: repo

    transport = httpx.ASGITransport(app=app)
    async with FeedbackAPI("http://testserver", transport=transport) as api:
        yield api
