"""Feedback Hub - feedback collection, persistence, and analytics."""

__version__ = "0.1.0"
