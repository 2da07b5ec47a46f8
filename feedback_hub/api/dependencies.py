"""
Dependency injection for FastAPI endpoints.

The Database handle is created once by the application factory and
kept on ``app.state``; per-request dependencies wrap it in a
repository and service.
"""

from fastapi import Depends, Request

from feedback_hub.feedback.config import FeedbackConfig
from feedback_hub.feedback.repository import FeedbackRepository
from feedback_hub.feedback.service import FeedbackService
from feedback_hub.storage.database import Database


def get_database(request: Request) -> Database:
    """Get the process-wide Database held by the application."""
    return request.app.state.database


def get_feedback_config(request: Request) -> FeedbackConfig:
    return request.app.state.feedback_config


def get_feedback_repository(
    database: Database = Depends(get_database),
) -> FeedbackRepository:
    """Get a FeedbackRepository bound to the application's Database."""
    return FeedbackRepository(database)


def get_feedback_service(
    repository: FeedbackRepository = Depends(get_feedback_repository),
    config: FeedbackConfig = Depends(get_feedback_config),
) -> FeedbackService:
    """Get a FeedbackService for the current request."""
    return FeedbackService(repository, config)
