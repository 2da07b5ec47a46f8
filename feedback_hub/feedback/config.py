"""Feedback service configuration.

Controls validation strictness and presentation defaults. All settings
can be overridden via ``FEEDBACK_*`` environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedbackConfig(BaseSettings):
    """Configuration for the feedback system."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDBACK_",
        case_sensitive=False,
        extra="ignore",
    )

    strict_rating: bool = Field(
        default=False,
        description="Reject ratings outside min_rating..max_rating on the server",
    )
    min_rating: int = Field(default=1, ge=1, description="Lowest star rating")
    max_rating: int = Field(default=5, ge=1, le=10, description="Highest star rating")
    thank_you_seconds: float = Field(
        default=5.0,
        ge=0.0,
        description="How long the form shows the thank-you view after a submission",
    )
    export_filename: str = Field(
        default="feedbacks.csv",
        description="Default file name for CSV exports",
    )
