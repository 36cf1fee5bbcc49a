"""Feedback API services."""

from feedback_api.services.submissions import SubmissionListing, SubmissionService

__all__ = ["SubmissionListing", "SubmissionService"]
