"""Contact form API endpoints."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from litestar import Controller, Request, get, post
from litestar.di import NamedDependency
from litestar.enums import RequestEncodingType
from litestar.exceptions import ClientException, SerializationException
from litestar.status_codes import HTTP_201_CREATED
from pydantic import BaseModel

from feedback_api.services import SubmissionService
from feedback_api.utils.logging import debug_log
from feedback_api.validation import validate_submission

logger = logging.getLogger("FeedbackAPI.contact")

THANK_YOU = "Your message has been received. We will get back to you soon!"


# --- Response Schemas ---

class SubmissionItem(BaseModel):
    """Stored submission as returned by the listing."""
    id: str
    name: str
    last_name: str
    email: str
    department: Optional[str]
    category: str
    message: str
    created_at: datetime


class SubmissionListResponse(BaseModel):
    """All submissions, newest first."""
    success: bool
    count: int
    submissions: List[SubmissionItem]


async def read_payload(request: Request) -> Dict[str, Any]:
    """Request body as a field mapping.

    The form posts JSON, but plain url-encoded and multipart HTML forms are
    read too. Repeated form keys keep their first value.
    """
    content_type, _ = request.content_type
    if content_type in (RequestEncodingType.URL_ENCODED, RequestEncodingType.MULTI_PART):
        form = await request.form()
        return {key: form.get(key) for key in form.keys()}

    try:
        payload = await request.json()
    except SerializationException as e:
        raise ClientException(str(e)) from e
    if not isinstance(payload, dict):
        raise ClientException("Request body must be a JSON object")
    return payload


# --- Controller ---

class ContactController(Controller):
    """Submitting the contact form and reading back what was sent."""

    path = "/api"
    tags = ["contact"]

    @post("/contact", status_code=HTTP_201_CREATED)
    async def submit_contact(
        self,
        request: Request,
        submissions: NamedDependency[SubmissionService],
    ) -> Dict[str, Any]:
        """Validate and store a contact form submission.

        Field errors surface as a 400 through the ValidationError handler.
        """
        data = await read_payload(request)
        debug_log("Contact payload received with fields: %s", sorted(data))
        record = validate_submission(data)
        submission_id = await submissions.create(record)

        return {
            "success": True,
            "message": THANK_YOU,
            "submissionId": str(submission_id),
        }

    @get("/submissions")
    async def list_submissions(
        self,
        submissions: NamedDependency[SubmissionService],
    ) -> SubmissionListResponse:
        """List every submission, newest first."""
        listing = await submissions.list()
        return SubmissionListResponse(
            success=True,
            count=listing.count,
            submissions=[
                SubmissionItem(
                    id=str(s.id),
                    name=s.name,
                    last_name=s.last_name,
                    email=s.email,
                    department=s.department,
                    category=s.category.value,
                    message=s.message,
                    created_at=s.created_at,
                )
                for s in listing.submissions
            ],
        )
