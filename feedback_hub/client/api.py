"""
HTTP client for the feedback API.

Wraps the three feedback endpoints and folds every outcome into a
ClientResult so that views never deal with transport errors:

- submit_feedback: failure carries the server's message or a fallback
- get_all_feedback: failure carries an empty list
- get_analytics: failure carries zeroed analytics

Failures are logged and never retried.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from feedback_hub.config.settings import get_settings
from feedback_hub.feedback.schemas import Feedback, FeedbackAnalytics

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Failed to submit feedback"


@dataclass
class ClientResult:
    """Normalized outcome of an API call.

    Attributes:
        success: Whether the server answered with a 2xx status.
        data: Payload on success, or the fallback value on failure.
        message: Server or fallback message, when there is one.
    """

    success: bool
    data: Any = None
    message: str | None = None


class FeedbackAPI:
    """
    Async client for the feedback endpoints.

    Example:
        async with FeedbackAPI("http://localhost:5000") as api:
            result = await api.submit_feedback({
                "name": "Anna", "email": "anna@example.com",
                "message": "Great service", "rating": 5,
            })
            if result.success:
                print(result.message)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root (without the /feedback path). Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
            transport: Optional httpx transport, e.g. ASGITransport for in-process use.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.client_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "FeedbackAPI":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("FeedbackAPI must be used as async context manager")
        return self._client

    async def submit_feedback(self, payload: dict[str, Any]) -> ClientResult:
        """POST /feedback."""
        try:
            response = await self.client.post("/feedback", json=payload)
            response.raise_for_status()
            body = response.json()
            return ClientResult(
                success=True,
                data=Feedback.from_dict(body["data"]),
                message=body.get("message"),
            )
        except (httpx.HTTPError, ValueError, KeyError) as e:
            server_message = _server_message(e)
            logger.error(f"Submit feedback failed: {server_message or e}")
            return ClientResult(
                success=False,
                message=server_message or SUBMIT_FAILED_MESSAGE,
            )

    async def get_all_feedback(self) -> ClientResult:
        """GET /feedback."""
        try:
            response = await self.client.get("/feedback")
            response.raise_for_status()
            body = response.json()
            return ClientResult(
                success=True,
                data=[Feedback.from_dict(item) for item in body["feedbacks"]],
            )
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error(f"Get feedback failed: {_server_message(e) or e}")
            return ClientResult(success=False, data=[])

    async def get_analytics(self) -> ClientResult:
        """GET /feedback/analytics."""
        try:
            response = await self.client.get("/feedback/analytics")
            response.raise_for_status()
            return ClientResult(
                success=True,
                data=FeedbackAnalytics.from_dict(response.json()),
            )
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error(f"Get analytics failed: {_server_message(e) or e}")
            return ClientResult(success=False, data=FeedbackAnalytics())


def _server_message(exc: Exception) -> str | None:
    """Extract the ``message`` field from an error response, if any."""
    if not isinstance(exc, httpx.HTTPStatusError):
        return None
    try:
        body = exc.response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
