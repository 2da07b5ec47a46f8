"""
Feedback table state: fetching, name search, and CSV export.
"""

import csv
import logging
from datetime import datetime, tzinfo
from pathlib import Path

from feedback_hub.client.api import FeedbackAPI
from feedback_hub.feedback.config import FeedbackConfig
from feedback_hub.feedback.schemas import Feedback
from feedback_hub.ui.stars import render_stars
from feedback_hub.ui.trigger import SequenceGuard

logger = logging.getLogger(__name__)

CSV_HEADER = ["Name", "Email", "Rating", "Message", "Created At"]
EMPTY_EXPORT_MESSAGE = "No feedbacks to export"
NO_RESULTS_MESSAGE = "No matching results"


def filter_by_name(feedbacks: list[Feedback], term: str) -> list[Feedback]:
    """Case-insensitive substring match on name. An empty term keeps everything."""
    needle = term.lower()
    return [f for f in feedbacks if needle in f.name.lower()]


def format_timestamp(value: datetime, tz: tzinfo | None = None) -> str:
    """Format like ``Jan 5, 2026, 09:07 AM`` in the given (or local) time zone."""
    local = value.astimezone(tz)
    return f"{local:%b} {local.day}, {local.year}, {local:%I:%M %p}"


def feedback_to_row(feedback: Feedback, tz: tzinfo | None = None) -> list[str]:
    """One CSV row; line breaks in the message become spaces."""
    return [
        feedback.name,
        feedback.email,
        str(feedback.rating),
        feedback.message.replace("\r\n", " ").replace("\n", " "),
        format_timestamp(feedback.created_at, tz),
    ]


def write_csv(feedbacks: list[Feedback], path: Path, tz: tzinfo | None = None) -> Path:
    """Write feedback rows with a header line to ``path``."""
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for feedback in feedbacks:
            writer.writerow(feedback_to_row(feedback, tz))
    return path


class FeedbackTable:
    """
    Table of all feedback with a derived, filtered view.

    ``filtered`` is recomputed whenever the search term or the fetched
    list changes. Refreshes are ordered with a SequenceGuard, so when two
    fetches overlap the older response never replaces a newer one.
    """

    def __init__(
        self,
        api: FeedbackAPI,
        tz: tzinfo | None = None,
        config: FeedbackConfig | None = None,
    ):
        self._api = api
        self._config = config or FeedbackConfig()
        self._tz = tz
        self._guard = SequenceGuard()
        self._search_term = ""
        self._seen_trigger: int | None = None

        self.feedbacks: list[Feedback] = []
        self.filtered: list[Feedback] = []

    @property
    def is_loading(self) -> bool:
        return self._guard.in_flight

    @property
    def search_term(self) -> str:
        return self._search_term

    @search_term.setter
    def search_term(self, term: str) -> None:
        self._search_term = term
        self._recompute()

    def _recompute(self) -> None:
        self.filtered = filter_by_name(self.feedbacks, self._search_term)

    async def refresh(self) -> bool:
        """
        Refetch the full list.

        Returns:
            True if the response was applied, False if a newer one already was.
        """
        ticket = self._guard.issue()
        result = await self._api.get_all_feedback()
        if not self._guard.accept(ticket):
            logger.debug(f"Dropped stale feedback list (request {ticket})")
            return False
        if result.success:
            self.feedbacks = list(result.data)
            self._recompute()
        return True

    async def sync(self, trigger_value: int) -> None:
        """Refresh if the trigger moved since the last sync."""
        if trigger_value != self._seen_trigger:
            self._seen_trigger = trigger_value
            await self.refresh()

    def export_csv(self, path: Path | str | None = None) -> Path | None:
        """
        Export the currently filtered rows to ``path`` (default: the
        configured export filename in the working directory).

        Returns:
            The written path, or None when there is nothing to export.
        """
        if not self.filtered:
            logger.info(EMPTY_EXPORT_MESSAGE)
            return None
        return write_csv(self.filtered, Path(path or self._config.export_filename), self._tz)

    def render_rows(self) -> list[str]:
        """Text rows for terminal display, one per filtered record."""
        if not self.filtered:
            return [NO_RESULTS_MESSAGE]
        return [
            " | ".join([
                f.name,
                f.email,
                render_stars(f.rating),
                f.message.replace("\n", " "),
                format_timestamp(f.created_at, self._tz),
            ])
            for f in self.filtered
        ]
