"""Error taxonomy for the feedback service.

ValidationError is surfaced to callers as HTTP 400, ServerError (and any
other unexpected exception) as HTTP 500 with a generic message.
"""


class FeedbackError(Exception):
    """Base exception for feedback service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FeedbackError):
    """Raised when submitted feedback is missing fields or out of bounds."""

    pass


class ServerError(FeedbackError):
    """Raised when the feedback store cannot complete an operation."""

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
