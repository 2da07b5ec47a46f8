"""View state for the feedback page: form, analytics cards, and table.

Components:
- FeedbackForm: field validation and the submit/thank-you state machine
- AnalyticsCards: aggregate stats refreshed on trigger changes
- FeedbackTable: full list with name search and CSV export
- Dashboard: wires the three together through a RefreshTrigger
- render_stars: star-rating visualization shared by form and table
"""

from feedback_hub.ui.analytics import AnalyticsCards
from feedback_hub.ui.dashboard import Dashboard
from feedback_hub.ui.form import FeedbackForm, FormState
from feedback_hub.ui.stars import render_stars
from feedback_hub.ui.table import FeedbackTable
from feedback_hub.ui.trigger import RefreshTrigger, SequenceGuard

__all__ = [
    "AnalyticsCards",
    "Dashboard",
    "FeedbackForm",
    "FeedbackTable",
    "FormState",
    "RefreshTrigger",
    "SequenceGuard",
    "render_stars",
]
