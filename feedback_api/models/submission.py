"""Contact form submission model."""

import enum
from typing import Optional

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from feedback_api.models.base import Base


class SubmissionCategory(str, enum.Enum):
    """What kind of message the visitor is sending."""
    FEEDBACK = "feedback"
    SUGGESTION = "suggestion"
    PROBLEM = "problem"


class Submission(Base):
    """A feedback/contact message left through the form."""

    __tablename__ = "contact_submissions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    category: Mapped[SubmissionCategory] = mapped_column(
        Enum(
            SubmissionCategory,
            native_enum=False,
            length=32,
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Submission {self.email} [{self.category.value}] ({self.created_at})>"
