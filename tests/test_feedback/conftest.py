"""Shared fixtures for feedback tests."""

from unittest.mock import AsyncMock

import pytest

from feedback_hub.feedback.repository import FeedbackRepository


@pytest.fixture
def mock_database():
    """Mock Database with async fetch methods."""
    db = AsyncMock()
    db.execute = AsyncMock()
    db.fetchrow = AsyncMock()
    db.fetch = AsyncMock(return_value=[])
    db.fetchval = AsyncMock()
    return db


class InMemoryFeedbackRepository:
    """List-backed stand-in for FeedbackRepository with the same interface."""

    def __init__(self):
        self.records = []

    async def create_tables(self):
        return None

    async def create(self, feedback):
        self.records.append(feedback)
        return feedback

    async def list_all(self):
        # Newest insert first on timestamp ties, like a serial insert order.
        return sorted(reversed(self.records), key=lambda f: f.created_at, reverse=True)

    async def count(self):
        return len(self.records)


@pytest.fixture
def memory_repo():
    """In-memory repository for service-level tests."""
    return InMemoryFeedbackRepository()


@pytest.fixture
def mock_repo():
    """Mock FeedbackRepository."""
    repo = AsyncMock(spec=FeedbackRepository)
    repo.create = AsyncMock()
    repo.list_all = AsyncMock(return_value=[])
    return repo
