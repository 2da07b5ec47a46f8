"""Tests for the dashboard wiring between form, cards, and table."""

import pytest

from feedback_hub.client.api import ClientResult
from feedback_hub.ui.dashboard import Dashboard
from feedback_hub.ui.form import FormState


def _fill(form) -> None:
    form.set_field("name", "Anna")
    form.set_field("email", "anna@example.com")
    form.set_field("message", "Loved it")
    form.set_rating(4)


class TestDashboard:
    """A successful submission refreshes both data views."""

    @pytest.mark.asyncio
    async def test_initial_sync_loads_both_views(self, mock_api):
        dashboard = Dashboard(mock_api)

        await dashboard.sync()

        # One list fetch for the cards, one for the table.
        assert mock_api.get_all_feedback.await_count == 2
        mock_api.get_analytics.assert_not_called()

    @pytest.mark.asyncio
    async def test_submission_triggers_refresh(self, mock_api, sample_feedback):
        dashboard = Dashboard(mock_api)
        await dashboard.sync()

        mock_api.get_all_feedback.return_value = ClientResult(success=True, data=[sample_feedback])

        form = dashboard.form
        _fill(form)
        await form.submit()

        assert dashboard.trigger.value == 1
        assert form.state is FormState.THANK_YOU

        await dashboard.sync()

        assert dashboard.table.feedbacks == [sample_feedback]
        assert dashboard.cards.analytics.total == 1
        assert dashboard.cards.analytics.avg_rating == 4.0
        assert mock_api.get_all_feedback.await_count == 4

    @pytest.mark.asyncio
    async def test_failed_submission_does_not_refresh(self, mock_api):
        mock_api.submit_feedback.return_value = ClientResult(success=False, message="Server error")
        dashboard = Dashboard(mock_api)
        await dashboard.sync()

        form = dashboard.form
        _fill(form)
        await form.submit()
        await dashboard.sync()

        assert dashboard.trigger.value == 0
        assert mock_api.get_all_feedback.await_count == 2
