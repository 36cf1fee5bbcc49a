"""Feedback API database models."""

from feedback_api.models.base import Base
from feedback_api.models.submission import Submission, SubmissionCategory

__all__ = [
    "Base",
    "Submission",
    "SubmissionCategory",
]
