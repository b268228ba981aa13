import logging
from dataclasses import dataclass
from typing import Collection, Iterable, Union

from pressroom.schemas.blog import Post
from pressroom.schemas.content import ContentRecord
from pressroom.services.metadata_parser import (
    DEFAULT_RESERVED,
    Skip,
    derive_slug,
    parse_record,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    post: Post
    record: ContentRecord


@dataclass(frozen=True)
class NotFound:
    slug: str

    @property
    def message(self) -> str:
        return f'Post "{self.slug}" not found'


def find_by_slug(
    records: Iterable[ContentRecord],
    slug: str,
    *,
    reserved: Collection[str] = DEFAULT_RESERVED,
    include_unpublished: bool = False,
) -> Union[Resolved, NotFound]:
    """
    Resolve `slug` against the first record whose derived slug matches.
    Unpublished posts resolve only when `include_unpublished` is set.
    """
    match = next(
        (record for record in records if derive_slug(record.path, reserved) == slug),
        None,
    )
    if match is None:
        return NotFound(slug)

    result = parse_record(
        match, reserved=reserved, include_unpublished=include_unpublished
    )
    if isinstance(result, Skip):
        logger.info(f"Slug {slug!r} matched {match.path} but it was skipped: {result.reason}")
        return NotFound(slug)
    return Resolved(post=result.post, record=match)
