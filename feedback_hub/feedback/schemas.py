"""Schema definitions for feedback records.

Maps 1:1 to the ``feedback`` database table. Each record is one
user-submitted entry: who sent it, what they said, and a star rating.
Records are append-only; nothing updates or deletes them.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

# Ratings at or above this count as positive, everything else as negative.
POSITIVE_RATING_THRESHOLD = 4


@dataclass
class Feedback:
    """A persisted feedback record from the feedback table.

    Attributes:
        name: Name of the person leaving feedback.
        email: Contact email (format is only checked client-side).
        message: Free-form text, may contain line breaks.
        rating: Star rating, 1 (poor) to 5 (excellent) from the form.
        feedback_id: Identifier assigned on creation (feedback_{uuid_hex[:12]}).
        created_at: When the feedback was submitted.
    """

    name: str
    email: str
    message: str
    rating: int
    feedback_id: str = field(
        default_factory=lambda: f"feedback_{uuid.uuid4().hex[:12]}"
    )
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def is_positive(self) -> bool:
        return self.rating >= POSITIVE_RATING_THRESHOLD

    def to_dict(self) -> dict[str, Any]:
        """Wire representation used by the HTTP API."""
        return {
            "id": self.feedback_id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "rating": self.rating,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Feedback":
        """Build a Feedback from its wire representation."""
        created_at = data["createdAt"]
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        return cls(
            feedback_id=data["id"],
            name=data["name"],
            email=data["email"],
            message=data["message"],
            rating=int(data["rating"]),
            created_at=created_at,
        )


@dataclass(frozen=True)
class FeedbackAnalytics:
    """Aggregate metrics computed over every stored feedback record.

    Attributes:
        total: Number of records.
        avg_rating: Mean rating rounded to one decimal, 0 when there are no records.
        positive: Records rated 4 or higher.
        negative: Records rated 3 or lower.
    """

    total: int = 0
    avg_rating: float = 0
    positive: int = 0
    negative: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "avgRating": self.avg_rating,
            "positive": self.positive,
            "negative": self.negative,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FeedbackAnalytics":
        return cls(
            total=int(data.get("total", 0)),
            avg_rating=float(data.get("avgRating", 0)),
            positive=int(data.get("positive", 0)),
            negative=int(data.get("negative", 0)),
        )
