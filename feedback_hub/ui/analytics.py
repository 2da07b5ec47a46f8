"""Analytics cards: total, average rating, positive vs negative."""

import logging

from feedback_hub.client.api import FeedbackAPI
from feedback_hub.feedback.schemas import FeedbackAnalytics
from feedback_hub.feedback.service import compute_analytics
from feedback_hub.ui.trigger import SequenceGuard

logger = logging.getLogger(__name__)


class AnalyticsCards:
    """
    Holds the latest stats and recomputes them when the trigger moves.

    Stats are derived from the full feedback list with the same
    aggregation the server uses. A failed fetch leaves the previous
    stats in place.
    """

    def __init__(self, api: FeedbackAPI):
        self._api = api
        self._guard = SequenceGuard()
        self._seen_trigger: int | None = None
        self.analytics = FeedbackAnalytics()

    async def refresh(self) -> bool:
        """
        Refetch the list and recompute.

        Returns:
            True if new stats were applied.
        """
        ticket = self._guard.issue()
        result = await self._api.get_all_feedback()
        if not self._guard.accept(ticket):
            logger.debug(f"Dropped stale feedback list for analytics (request {ticket})")
            return False
        if not result.success:
            return False
        self.analytics = compute_analytics(result.data)
        return True

    async def sync(self, trigger_value: int) -> None:
        if trigger_value != self._seen_trigger:
            self._seen_trigger = trigger_value
            await self.refresh()

    def render(self) -> list[tuple[str, str]]:
        """(title, value) pairs, one per card."""
        a = self.analytics
        average = f"{a.avg_rating:.1f}" if a.total else "0"
        return [
            ("Total Feedbacks", str(a.total)),
            ("Average Rating", f"{average} ★"),
            ("Positive vs Negative", f"{a.positive} positive / {a.negative} negative"),
        ]
