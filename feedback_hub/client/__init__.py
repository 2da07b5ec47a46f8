"""Client data layer for the feedback API."""

from feedback_hub.client.api import ClientResult, FeedbackAPI

__all__ = ["ClientResult", "FeedbackAPI"]
