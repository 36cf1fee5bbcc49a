"""Field rules for contact form payloads.

Each field maps to an ordered list of ``(predicate, message)`` pairs applied to
the trimmed value. Every rule of every field is checked, and the errors come
back in field order, then rule order, so an empty name reports both the
required and the length message. Keys that are not listed here are ignored.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from feedback_api.emails import normalize_email
from feedback_api.errors import FieldError, ValidationError
from feedback_api.models import SubmissionCategory

Rule = Tuple[Callable[[str], bool], str]

CATEGORIES = [c.value for c in SubmissionCategory]
OPTIONAL_FIELDS = {"department"}


def _not_empty(value: str) -> bool:
    return value != ""


def _length(min_length: int = 0, max_length: Optional[int] = None) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        if len(value) < min_length:
            return False
        return max_length is None or len(value) <= max_length
    return check


def _is_email(value: str) -> bool:
    return normalize_email(value) is not None


def _one_of(choices: List[str]) -> Callable[[str], bool]:
    return lambda value: value in choices


RULES: Dict[str, List[Rule]] = {
    "name": [
        (_not_empty, "Name is required"),
        (_length(2, 255), "Name must be between 2 and 255 characters"),
    ],
    "lastName": [
        (_not_empty, "Last name is required"),
        (_length(2, 255), "Last name must be between 2 and 255 characters"),
    ],
    "email": [
        (_not_empty, "Email is required"),
        (_is_email, "Must be a valid email address"),
    ],
    "department": [
        (_length(max_length=255), "Department must be less than 255 characters"),
    ],
    "category": [
        (_not_empty, "Category is required"),
        (_one_of(CATEGORIES), f"Category must be one of: {', '.join(CATEGORIES)}"),
    ],
    "message": [
        (_not_empty, "Message is required"),
        (_length(10, 5000), "Message must be between 10 and 5000 characters"),
    ],
}


@dataclass(frozen=True)
class SubmissionRecord:
    """A payload that passed every rule, ready to be stored."""
    name: str
    last_name: str
    email: str
    department: Optional[str]
    category: SubmissionCategory
    message: str


def clean(value: Any) -> str:
    """Trimmed string form of a raw payload value; missing becomes ''."""
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.strip()


def collect_errors(payload: Mapping[str, Any]) -> List[FieldError]:
    """Run every field's rules and return every violation in field order."""
    errors = []
    for field, rules in RULES.items():
        value = clean(payload.get(field))
        if field in OPTIONAL_FIELDS and not value:
            continue
        for predicate, message in rules:
            if not predicate(value):
                errors.append(FieldError(field=field, message=message))
    return errors


def validate_submission(payload: Mapping[str, Any]) -> SubmissionRecord:
    """Validate and normalize a raw contact payload.

    Raises:
        ValidationError: with the full list of field errors.
    """
    errors = collect_errors(payload)
    if errors:
        raise ValidationError(errors)

    return SubmissionRecord(
        name=clean(payload.get("name")),
        last_name=clean(payload.get("lastName")),
        email=normalize_email(clean(payload.get("email"))),
        department=clean(payload.get("department")) or None,
        category=SubmissionCategory(clean(payload.get("category"))),
        message=clean(payload.get("message")),
    )
