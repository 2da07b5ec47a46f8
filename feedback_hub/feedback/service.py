"""Feedback service: validation, creation, listing, and analytics."""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from feedback_hub.feedback.config import FeedbackConfig
from feedback_hub.feedback.errors import ValidationError
from feedback_hub.feedback.repository import FeedbackRepository
from feedback_hub.feedback.schemas import Feedback, FeedbackAnalytics

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required."
INVALID_RATING_MESSAGE = "Rating must be a number."


class FeedbackService:
    """
    Business operations over the feedback store.

    Server-side validation is presence-only: every field must be truthy.
    Email format and rating bounds are the form's job, unless
    ``FeedbackConfig.strict_rating`` is enabled, which adds a bounds check.

    Usage:
        service = FeedbackService(FeedbackRepository(db))
        created = await service.create("Anna", "anna@example.com", "Great!", 5)
        stats = await service.get_analytics()
    """

    def __init__(
        self,
        repository: FeedbackRepository,
        config: FeedbackConfig | None = None,
    ) -> None:
        self._repo = repository
        self._config = config or FeedbackConfig()

    async def create(
        self,
        name: Any,
        email: Any,
        message: Any,
        rating: Any,
    ) -> Feedback:
        """
        Validate and persist a new feedback record.

        Args:
            name: Submitter name.
            email: Submitter email.
            message: Feedback text.
            rating: Star rating.

        Returns:
            The stored Feedback with its assigned id and timestamp.

        Raises:
            ValidationError: If any field is missing or falsy, the rating is
                not numeric, or it is out of bounds while
                strict_rating is enabled.
        """
        if not name or not email or not message or not rating:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        rating = _coerce_rating(rating)
        if self._config.strict_rating and not (
            self._config.min_rating <= rating <= self._config.max_rating
        ):
            raise ValidationError(
                f"Rating must be between {self._config.min_rating} "
                f"and {self._config.max_rating}."
            )

        feedback = Feedback(
            name=str(name),
            email=str(email),
            message=str(message),
            rating=rating,
        )
        created = await self._repo.create(feedback)
        logger.debug(f"Stored feedback {created.feedback_id} (rating={created.rating})")
        return created

    async def list_all(self) -> list[Feedback]:
        """Return every feedback record, newest first."""
        feedbacks = await self._repo.list_all()
        return sorted(feedbacks, key=lambda f: f.created_at, reverse=True)

    async def get_analytics(self) -> FeedbackAnalytics:
        """Compute aggregate metrics over every stored record."""
        feedbacks = await self._repo.list_all()
        return compute_analytics(feedbacks)


def _coerce_rating(value: Any) -> int:
    """Accept ints and numeric strings (``"4"``); anything else is rejected."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(INVALID_RATING_MESSAGE) from None


def compute_analytics(feedbacks: list[Feedback]) -> FeedbackAnalytics:
    """
    Aggregate a list of feedback records.

    A rating of exactly 3 counts as negative.
    """
    total = len(feedbacks)
    if total == 0:
        return FeedbackAnalytics()

    ratings = [f.rating for f in feedbacks]
    positive = sum(1 for f in feedbacks if f.is_positive)
    negative = sum(1 for rating in ratings if rating <= 3)

    return FeedbackAnalytics(
        total=total,
        avg_rating=round_rating(sum(ratings) / total),
        positive=positive,
        negative=negative,
    )


def round_rating(value: float) -> float:
    """Round to one decimal place, halves away from zero (3.25 -> 3.3)."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
