"""Top-level view state wiring the form to the cards and the table."""

import asyncio
from datetime import tzinfo

from feedback_hub.client.api import FeedbackAPI
from feedback_hub.feedback.config import FeedbackConfig
from feedback_hub.ui.analytics import AnalyticsCards
from feedback_hub.ui.form import FeedbackForm
from feedback_hub.ui.table import FeedbackTable
from feedback_hub.ui.trigger import RefreshTrigger


class Dashboard:
    """
    The feedback page: a form, analytics cards, and a table.

    A successful submission fires the shared RefreshTrigger; ``sync()``
    then refetches every view whose last-seen trigger value is behind.

    Usage:
        async with FeedbackAPI() as api:
            dashboard = Dashboard(api)
            await dashboard.sync()
            ...
            if (await dashboard.form.submit()).success:
                await dashboard.sync()
    """

    def __init__(
        self,
        api: FeedbackAPI,
        config: FeedbackConfig | None = None,
        tz: tzinfo | None = None,
    ):
        self.trigger = RefreshTrigger()
        self.form = FeedbackForm(api, on_submitted=self.trigger.fire, config=config)
        self.cards = AnalyticsCards(api)
        self.table = FeedbackTable(api, tz=tz, config=config)

    async def sync(self) -> None:
        value = self.trigger.value
        await asyncio.gather(self.cards.sync(value), self.table.sync(value))
