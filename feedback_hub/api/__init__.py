"""
FastAPI feedback service.

Provides REST API for feedback collection with:
- POST /feedback - Submit feedback
- GET /feedback - List feedback, newest first
- GET /feedback/analytics - Aggregate ratings
- GET /health - Service health check
"""

from feedback_hub.api.app import create_app

__all__ = ["create_app"]
