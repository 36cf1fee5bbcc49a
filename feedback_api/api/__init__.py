"""Feedback API routes."""

from feedback_api.api.contact import ContactController
from feedback_api.api.health import health

__all__ = ["ContactController", "health"]
