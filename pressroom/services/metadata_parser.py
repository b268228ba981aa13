import datetime
import logging
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Collection, Optional, Union

from pydantic import ValidationError

from pressroom.schemas.blog import ContentType, Post
from pressroom.schemas.content import ContentRecord
from pressroom.utils import estimate_reading_time

logger = logging.getLogger(__name__)

DEFAULT_RESERVED = ("content", "blog", "newsletter")
UNPUBLISHED = "unpublished"
INDEX_FILENAMES = ("index.md",)


@dataclass(frozen=True)
class Ok:
    post: Post


@dataclass(frozen=True)
class Skip:
    reason: str


ParseResult = Union[Ok, Skip]


def derive_slug(path: str, reserved: Collection[str] = DEFAULT_RESERVED) -> Optional[str]:
    """
    Slug for a content path: the post folder for `<slug>/index.md` layouts,
    the file stem for flat `<section>/<slug>.md` layouts.
    Returns None when the result is empty, hidden or a reserved segment.
    """
    pure = PurePosixPath(path)
    parent = pure.parent.name
    if pure.name in INDEX_FILENAMES or (parent and parent not in reserved):
        slug = parent
    else:
        slug = pure.name

    slug = slug.removesuffix(".md")
    if not slug or slug.startswith(".") or slug in reserved:
        return None
    return slug


def resolve_content_type(path: str, explicit=None) -> ContentType:
    if explicit:
        return ContentType(explicit)
    segments = PurePosixPath(path).parts
    return ContentType.NEWSLETTER if "newsletter" in segments else ContentType.ARTICLE


def parse_record(
    record: ContentRecord,
    *,
    reserved: Collection[str] = DEFAULT_RESERVED,
    include_unpublished: bool = False,
) -> ParseResult:
    """Validate a raw record and turn it into a Post, or say why it was skipped."""
    if record.body is None:
        return Skip("not a content module")
    metadata = record.metadata
    if metadata is None:
        return Skip("missing metadata")

    slug = derive_slug(record.path, reserved)
    if not slug:
        return Skip("invalid slug")

    title = _normalize_text(metadata.get("title")).strip()
    if not title:
        return Skip("missing title")

    categories = metadata.get("categories", [])
    if categories is None:
        categories = []
    if not isinstance(categories, (list, tuple)):
        return Skip("categories must be a list")

    if not metadata.get("published") and not include_unpublished:
        return Skip(UNPUBLISHED)

    try:
        content_type = resolve_content_type(record.path, metadata.get("type"))
    except ValueError:
        return Skip(f"unknown content type {metadata.get('type')!r}")

    issue = metadata.get("issue")
    if issue is not None:
        try:
            issue = _coerce_issue(issue)
        except (TypeError, ValueError):
            return Skip(f"invalid issue {issue!r}")

    description = _normalize_text(metadata.get("description"))
    try:
        post = Post(
            title=title,
            slug=slug,
            description=description,
            summary=_normalize_text(metadata.get("summary")),
            date=_convert_date(metadata.get("date")),
            categories=[str(c) for c in categories if c is not None],
            published=bool(metadata.get("published")),
            cover=record.cover,
            readTime=estimate_reading_time(description),
            type=content_type,
            issue=issue,
        )
    except ValidationError as e:
        return Skip(f"invalid metadata: {e.error_count()} error(s)")

    return Ok(post)


def parse_or_none(record: ContentRecord, **kwargs) -> Optional[Post]:
    result = parse_record(record, **kwargs)
    if isinstance(result, Skip):
        if result.reason == UNPUBLISHED:
            logger.debug(f"Skipping unpublished {record.path}")
        else:
            logger.warning(f"Skipping {record.path}: {result.reason}")
        return None
    return result.post


def _normalize_text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _convert_date(value) -> str:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return ""
    return str(value)


def _coerce_issue(value) -> int:
    if isinstance(value, bool):
        raise TypeError("issue must be a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("issue must be a whole number")
    return int(value)
