"""
Feedback form state.

Holds the four form fields, validates them (stricter than the server:
email syntax and rating bounds are checked here), and drives the
submission state machine:

    idle -> submitting -> thank_you (expires after a few seconds) -> idle

A failed submission goes straight back to idle and keeps the failure
message for display.
"""

import re
import time
from collections.abc import Callable
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from feedback_hub.client.api import ClientResult, FeedbackAPI
from feedback_hub.feedback.config import FeedbackConfig
from feedback_hub.ui.stars import render_stars

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
FIELDS = ("name", "email", "message", "rating")
INVALID_RATING_ERROR = "Rating must be a number"


class FormState(str, Enum):
    """Submission lifecycle of the form."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    THANK_YOU = "thank_you"


@dataclass
class FormData:
    name: str = ""
    email: str = ""
    message: str = ""
    rating: int | None = None


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def parse_rating(value: Any) -> int | None:
    """
    Normalize a rating picked or typed into the form.

    ``None`` and blank strings mean "not chosen". Raises ValueError for
    values ``int()`` cannot convert, such as ``"four"`` or ``"4.5"``.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid rating {value!r}") from None


def validate_form(data: FormData, min_rating: int = 1, max_rating: int = 5) -> dict[str, str]:
    """
    Check every field and return error messages keyed by field name.

    An empty dict means the form can be submitted.
    """
    errors: dict[str, str] = {}

    if not data.name.strip():
        errors["name"] = "Name is required"

    if not data.email.strip():
        errors["email"] = "Email is required"
    elif not is_valid_email(data.email):
        errors["email"] = "Please enter a valid email"

    if not data.message.strip():
        errors["message"] = "Message is required"

    if not data.rating:
        errors["rating"] = "Rating is required"
    elif data.rating < min_rating or data.rating > max_rating:
        errors["rating"] = f"Rating must be between {min_rating} and {max_rating}"

    return errors


class FeedbackForm:
    """
    State for the feedback submission form.

    Args:
        api: Client used to submit feedback.
        on_submitted: Called with no arguments after a successful submission.
        config: Rating bounds and thank-you duration.
        clock: Monotonic time source, injectable for tests.

    Example:
        form = FeedbackForm(api, on_submitted=trigger.fire)
        form.set_field("name", "Anna")
        ...
        result = await form.submit()
    """

    def __init__(
        self,
        api: FeedbackAPI,
        on_submitted: Callable[[], Any] | None = None,
        config: FeedbackConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._api = api
        self._on_submitted = on_submitted
        self._config = config or FeedbackConfig()
        self._clock = clock

        self.data = FormData()
        self.errors: dict[str, str] = {}
        self.last_message: str | None = None
        self.hovered_star = 0
        self._submitting = False
        self._thank_you_until: float | None = None

    @property
    def state(self) -> FormState:
        if self._submitting:
            return FormState.SUBMITTING
        if self._thank_you_until is not None:
            if self._clock() < self._thank_you_until:
                return FormState.THANK_YOU
            self._thank_you_until = None
        return FormState.IDLE

    @property
    def is_valid(self) -> bool:
        """Whether the current field values pass validation (does not touch errors)."""
        return not validate_form(
            self.data, self._config.min_rating, self._config.max_rating
        )

    @property
    def can_submit(self) -> bool:
        return self.state == FormState.IDLE and self.is_valid

    def set_field(self, name: str, value: Any) -> None:
        """Update a field and clear its error.

        A rating that cannot be read as a number leaves the rating unset and
        records a field error instead.
        """
        if name not in FIELDS:
            raise KeyError(f"Unknown form field {name!r}")
        self.errors.pop(name, None)
        if name == "rating":
            try:
                value = parse_rating(value)
            except ValueError:
                self.data.rating = None
                self.errors["rating"] = INVALID_RATING_ERROR
                return
        setattr(self.data, name, value)

    def set_rating(self, rating: int | str | None) -> None:
        self.set_field("rating", rating)

    def hover(self, star: int) -> None:
        self.hovered_star = star

    def rating_display(self) -> str:
        """Stars for the picker: the hovered star wins over the selection."""
        shown = self.hovered_star or self.data.rating
        return render_stars(shown, self._config.max_rating, show_value=False)

    def validate(self) -> bool:
        self.errors = validate_form(
            self.data, self._config.min_rating, self._config.max_rating
        )
        return not self.errors

    def dismiss_thank_you(self) -> None:
        """Leave the thank-you state early ("Submit Another Feedback")."""
        self._thank_you_until = None

    def reset(self) -> None:
        self.data = FormData()
        self.errors = {}
        self.hovered_star = 0

    async def submit(self) -> ClientResult | None:
        """
        Validate and send the form.

        Returns:
            The client result, or None when validation failed or the form
            is not idle (a submission is running or the thank-you
            message is showing).
        """
        if self.state is not FormState.IDLE:
            return None
        if not self.validate():
            return None

        self._submitting = True
        try:
            result = await self._api.submit_feedback(asdict(self.data))
        finally:
            self._submitting = False

        self.last_message = result.message
        if result.success:
            self.reset()
            self._thank_you_until = self._clock() + self._config.thank_you_seconds
            if self._on_submitted is not None:
                self._on_submitted()
        return result
