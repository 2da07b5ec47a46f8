"""Shared fixtures for UI state tests."""

from unittest.mock import AsyncMock

import pytest

from feedback_hub.client.api import ClientResult, FeedbackAPI
from feedback_hub.feedback.schemas import FeedbackAnalytics


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mock_api(sample_feedback):
    """Mock FeedbackAPI answering every call successfully."""
    api = AsyncMock(spec=FeedbackAPI)
    api.submit_feedback = AsyncMock(
        return_value=ClientResult(
            success=True,
            data=sample_feedback,
            message="Feedback submitted successfully.",
        )
    )
    api.get_all_feedback = AsyncMock(return_value=ClientResult(success=True, data=[]))
    api.get_analytics = AsyncMock(
        return_value=ClientResult(success=True, data=FeedbackAnalytics())
    )
    return api
