"""Storage layer for feedback persistence."""

from feedback_hub.storage.database import Database

__all__ = ["Database"]
