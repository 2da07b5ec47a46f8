"""Feedback domain: records, persistence, validation, and analytics.

Components:
- Feedback / FeedbackAnalytics: Dataclasses for stored records and aggregates
- FeedbackConfig: Pydantic settings for validation and presentation defaults
- FeedbackRepository: asyncpg persistence for the feedback table
- FeedbackService: create, list_all, and get_analytics operations
- ValidationError / ServerError: Error taxonomy mapped to HTTP 400 / 500
"""

from feedback_hub.feedback.config import FeedbackConfig
from feedback_hub.feedback.errors import FeedbackError, ServerError, ValidationError
from feedback_hub.feedback.repository import FeedbackRepository
from feedback_hub.feedback.schemas import Feedback, FeedbackAnalytics
from feedback_hub.feedback.service import FeedbackService, compute_analytics

__all__ = [
    "Feedback",
    "FeedbackAnalytics",
    "FeedbackConfig",
    "FeedbackError",
    "FeedbackRepository",
    "FeedbackService",
    "ServerError",
    "ValidationError",
    "compute_analytics",
]
