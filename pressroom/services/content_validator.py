import logging
from dataclasses import dataclass
from typing import Iterable, List

from pressroom.schemas.content import ContentRecord
from pressroom.services.content_index import parse_date

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "categories", "date", "published")


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    message: str


def validate_record(record: ContentRecord) -> List[ValidationIssue]:
    """Authoring checks for a single content file, stricter than the index."""
    if record.metadata is None:
        return [ValidationIssue(record.path, "Missing or unreadable front matter")]

    metadata = record.metadata
    issues = []

    missing = [
        field for field in REQUIRED_FIELDS if metadata.get(field) in (None, "", [])
    ]
    if missing:
        issues.append(
            ValidationIssue(record.path, f"Missing required fields: {', '.join(missing)}")
        )

    categories = metadata.get("categories")
    if categories is not None and not isinstance(categories, list):
        issues.append(ValidationIssue(record.path, "Categories must be an array"))

    date = metadata.get("date")
    if date not in (None, "") and parse_date(date) is None:
        issues.append(ValidationIssue(record.path, "Invalid date format"))

    return issues


def validate_records(records: Iterable[ContentRecord]) -> List[ValidationIssue]:
    issues = []
    for record in records:
        found = validate_record(record)
        if found:
            logger.debug(f"{record.path}: {len(found)} issue(s)")
        issues.extend(found)
    return issues
