"""
Request and response models for the feedback API.

Wire field names follow the JSON contract the form and dashboard use
(``createdAt``, ``avgRating``), so they are camelCase here.
"""

from typing import Any

from pydantic import BaseModel, Field

from feedback_hub.feedback.schemas import Feedback, FeedbackAnalytics


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    message: str = Field(..., description="Human-readable error message")


class FeedbackRequest(BaseModel):
    """Request model for submitting feedback.

    Fields are untyped and optional at the schema level so that missing or
    falsy values (``""``, ``0``, ``null``) reach the service and produce
    "All fields are required." rather than a schema error.
    """

    name: Any = Field(default=None, description="Submitter name")
    email: Any = Field(default=None, description="Submitter email")
    message: Any = Field(default=None, description="Feedback text")
    rating: Any = Field(default=None, description="Star rating (1-5)")


class FeedbackItem(BaseModel):
    """A single stored feedback record."""

    id: str = Field(..., description="Feedback identifier")
    name: str
    email: str
    message: str
    rating: int
    createdAt: str = Field(..., description="ISO-8601 creation timestamp")

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "FeedbackItem":
        return cls(**feedback.to_dict())


class FeedbackCreateResponse(BaseModel):
    """Response model for a successful submission."""

    message: str = Field(..., description="Confirmation message")
    data: FeedbackItem


class FeedbackListResponse(BaseModel):
    """Response model for listing all feedback."""

    total: int = Field(..., description="Number of records returned")
    feedbacks: list[FeedbackItem] = Field(
        default_factory=list,
        description="Records ordered newest first",
    )


class AnalyticsResponse(BaseModel):
    """Response model for aggregate feedback analytics."""

    total: int = Field(..., description="Total number of feedback records")
    avgRating: float = Field(..., description="Average rating, one decimal place")
    positive: int = Field(..., description="Records rated 4 or 5")
    negative: int = Field(..., description="Records rated 3 or lower")

    @classmethod
    def from_analytics(cls, analytics: FeedbackAnalytics) -> "AnalyticsResponse":
        return cls(**analytics.to_dict())


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="healthy or unhealthy")
    database: bool = Field(..., description="Whether the database answered")
    latency_ms: float = Field(..., description="Database check latency in milliseconds")
    details: dict[str, Any] = Field(default_factory=dict)
