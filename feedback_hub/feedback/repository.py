"""Feedback repository for persistence and retrieval.

Thin asyncpg layer over the ``feedback`` table. Aggregation happens in
FeedbackService over the full record list, not in SQL.
"""

import logging
from typing import Any

from feedback_hub.feedback.schemas import Feedback
from feedback_hub.storage.database import Database

logger = logging.getLogger(__name__)

_CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS feedback (
    feedback_id  TEXT PRIMARY KEY,
    name         TEXT NOT NULL,
    email        TEXT NOT NULL,
    message      TEXT NOT NULL,
    rating       INTEGER NOT NULL,
    created_at   TIMESTAMPTZ NOT NULL DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS idx_feedback_created_at
    ON feedback(created_at DESC);
"""

_INSERT_SQL = """
INSERT INTO feedback (
    feedback_id, name, email, message, rating, created_at
) VALUES ($1, $2, $3, $4, $5, $6)
RETURNING *
"""

_LIST_ALL_SQL = """
SELECT * FROM feedback
ORDER BY created_at DESC
"""


class FeedbackRepository:
    """Repository for feedback persistence and querying.

    Provides create, list_all, and count operations for Feedback
    records stored in the ``feedback`` table.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    async def create_tables(self) -> None:
        """Create the feedback table and its index if they do not exist."""
        await self._db.execute(_CREATE_TABLE_SQL)
        logger.info("Feedback table ready")

    async def create(self, feedback: Feedback) -> Feedback:
        """Insert a new feedback record.

        Args:
            feedback: Feedback to persist.

        Returns:
            The created Feedback as stored.
        """
        row = await self._db.fetchrow(
            _INSERT_SQL,
            feedback.feedback_id,
            feedback.name,
            feedback.email,
            feedback.message,
            feedback.rating,
            feedback.created_at,
        )
        return _row_to_feedback(row)

    async def list_all(self) -> list[Feedback]:
        """Get every feedback record, newest first."""
        rows = await self._db.fetch(_LIST_ALL_SQL)
        return [_row_to_feedback(row) for row in rows]

    async def count(self) -> int:
        """Count stored feedback records."""
        value = await self._db.fetchval("SELECT COUNT(*) FROM feedback")
        return int(value or 0)


def _row_to_feedback(row: Any) -> Feedback:
    """Convert an asyncpg Record to a Feedback."""
    return Feedback(
        feedback_id=row["feedback_id"],
        name=row["name"],
        email=row["email"],
        message=row["message"],
        rating=row["rating"],
        created_at=row["created_at"],
    )
