"""Feedback endpoints for submitting, listing, and summarising feedback."""

import time

import structlog
from fastapi import APIRouter, Depends, status

from feedback_hub.api.dependencies import get_feedback_service
from feedback_hub.api.models import (
    AnalyticsResponse,
    ErrorResponse,
    FeedbackCreateResponse,
    FeedbackItem,
    FeedbackListResponse,
    FeedbackRequest,
)
from feedback_hub.feedback.errors import ServerError, ValidationError
from feedback_hub.feedback.service import FeedbackService

logger = structlog.get_logger(__name__)
router = APIRouter()

SUBMITTED_MESSAGE = "Feedback submitted successfully."


@router.post(
    "/feedback",
    response_model=FeedbackCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Submit feedback",
    description="Store a feedback entry. name, email, message, and rating are all required.",
)
async def submit_feedback(
    request: FeedbackRequest | None = None,
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackCreateResponse:
    request = request or FeedbackRequest()
    start_time = time.perf_counter()

    try:
        created = await service.create(
            name=request.name,
            email=request.email,
            message=request.message,
            rating=request.rating,
        )
    except ValidationError as e:
        logger.info("Feedback rejected", reason=e.message)
        raise
    except Exception as e:
        logger.error("submit_feedback_failed", error=str(e), exc_info=True)
        raise ServerError() from e

    latency_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "Feedback created",
        feedback_id=created.feedback_id,
        rating=created.rating,
        latency_ms=round(latency_ms, 2),
    )

    return FeedbackCreateResponse(
        message=SUBMITTED_MESSAGE,
        data=FeedbackItem.from_feedback(created),
    )


@router.get(
    "/feedback",
    response_model=FeedbackListResponse,
    responses={500: {"model": ErrorResponse, "description": "Server error"}},
    summary="List feedback",
    description="Return every feedback record, newest first. Not paginated.",
)
async def list_feedback(
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackListResponse:
    start_time = time.perf_counter()

    try:
        feedbacks = await service.list_all()
    except Exception as e:
        logger.error("list_feedback_failed", error=str(e), exc_info=True)
        raise ServerError() from e

    latency_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "Feedback listed",
        total=len(feedbacks),
        latency_ms=round(latency_ms, 2),
    )

    return FeedbackListResponse(
        total=len(feedbacks),
        feedbacks=[FeedbackItem.from_feedback(f) for f in feedbacks],
    )


@router.get(
    "/feedback/analytics",
    response_model=AnalyticsResponse,
    responses={500: {"model": ErrorResponse, "description": "Server error"}},
    summary="Get feedback analytics",
    description=(
        "Total count, average rating, and positive (4-5) versus "
        "negative (1-3) counts over all feedback."
    ),
)
async def get_analytics(
    service: FeedbackService = Depends(get_feedback_service),
) -> AnalyticsResponse:
    start_time = time.perf_counter()

    try:
        analytics = await service.get_analytics()
    except Exception as e:
        logger.error("get_analytics_failed", error=str(e), exc_info=True)
        raise ServerError() from e

    latency_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "Feedback analytics computed",
        total=analytics.total,
        latency_ms=round(latency_ms, 2),
    )

    return AnalyticsResponse.from_analytics(analytics)
