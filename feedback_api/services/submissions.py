"""Persisting and listing contact submissions."""

import logging
import uuid
from dataclasses import asdict, dataclass
from typing import List

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError

from feedback_api.database import Database
from feedback_api.errors import StorageError
from feedback_api.models import Submission
from feedback_api.utils.logging import error_log
from feedback_api.validation import SubmissionRecord

logger = logging.getLogger("FeedbackAPI.submissions")

CREATE_FAILED = "Failed to submit contact form. Please try again later."
LIST_FAILED = "Failed to fetch submissions"


@dataclass
class SubmissionListing:
    count: int
    submissions: List[Submission]


class SubmissionService:
    """Single-shot reads and writes against the submissions table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def create(self, record: SubmissionRecord) -> uuid.UUID:
        """Store a validated record and return its generated id."""
        submission = Submission(**asdict(record))
        try:
            async with self.database.session() as session:
                session.add(submission)
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            error_log("Failed to store submission", exc=e, context={"email": record.email})
            raise StorageError(CREATE_FAILED) from e

        logger.info(f"Contact form submitted successfully: {submission.id}")
        return submission.id

    async def list(self) -> SubmissionListing:
        """All submissions, newest first."""
        stmt = select(Submission).order_by(desc(Submission.created_at), Submission.id)
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                submissions = list(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            error_log("Failed to fetch submissions", exc=e)
            raise StorageError(LIST_FAILED) from e

        return SubmissionListing(count=len(submissions), submissions=submissions)
