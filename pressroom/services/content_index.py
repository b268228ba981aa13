import datetime
import logging
import threading
from email.utils import parsedate_to_datetime
from typing import Collection, Iterable, List, Optional, Tuple

from pressroom.schemas.blog import ContentType, Post
from pressroom.schemas.content import ContentRecord
from pressroom.services.metadata_parser import DEFAULT_RESERVED, parse_or_none

logger = logging.getLogger(__name__)


def parse_date(value) -> Optional[datetime.datetime]:
    """
    Parse a post date into an aware UTC datetime.
    Returns None for anything unparseable or out of range; never raises.
    """
    if isinstance(value, datetime.datetime):
        return _as_utc(value)
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day, tzinfo=datetime.timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _as_utc(datetime.datetime.fromisoformat(iso))
    except ValueError:
        pass

    try:
        return _as_utc(datetime.datetime.strptime(text, "%Y/%m/%d"))
    except ValueError:
        pass

    try:
        return _as_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError, OverflowError):
        return None


def _as_utc(value: datetime.datetime) -> Optional[datetime.datetime]:
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    try:
        return value.astimezone(datetime.timezone.utc)
    except OverflowError:
        # Offset dates at either end of the calendar have no UTC equivalent
        return None


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    """
    Newest first. The sort is stable, so posts sharing a date keep their
    discovery order. Posts with unparseable dates go last, in discovery order.
    """
    dated = []
    undated = []
    for post in posts:
        parsed = parse_date(post.date)
        if parsed is None:
            undated.append(post)
        else:
            dated.append((parsed, post))

    dated.sort(key=lambda item: item[0], reverse=True)
    return [post for _, post in dated] + undated


def build_posts(
    records: Iterable[ContentRecord],
    *,
    reserved: Collection[str] = DEFAULT_RESERVED,
    include_unpublished: bool = False,
) -> List[Post]:
    posts = []
    for record in records:
        post = parse_or_none(
            record, reserved=reserved, include_unpublished=include_unpublished
        )
        if post:
            posts.append(post)
    return sort_posts(posts)


def filter_by_type(posts: Iterable[Post], content_type: ContentType) -> List[Post]:
    return [post for post in posts if post.type == content_type]


class ContentIndex:
    """
    Lazily loaded, cached snapshot of the content collection.
    Call invalidate() to force the next read to hit the repo again.
    """

    def __init__(self, repo, reserved: Collection[str] = DEFAULT_RESERVED):
        self.repo = repo
        self.reserved = tuple(reserved)
        self._lock = threading.Lock()
        self._records: Optional[Tuple[ContentRecord, ...]] = None
        self._posts: Optional[Tuple[Post, ...]] = None

    @property
    def loaded(self) -> bool:
        return self._posts is not None

    def _snapshot(self) -> Tuple[Tuple[ContentRecord, ...], Tuple[Post, ...]]:
        with self._lock:
            if self._posts is None:
                records = tuple(self.repo.list_records())
                posts = tuple(build_posts(records, reserved=self.reserved))
                self._records, self._posts = records, posts
                logger.info(
                    f"Indexed {len(posts)} published posts from {len(records)} content files"
                )
            return self._records, self._posts

    def load(self) -> Tuple[Post, ...]:
        return self._snapshot()[1]

    def invalidate(self) -> None:
        with self._lock:
            self._records = None
            self._posts = None
        logger.info("Content index invalidated")

    def posts(self) -> Tuple[Post, ...]:
        return self.load()

    def records(self) -> Tuple[ContentRecord, ...]:
        return self._snapshot()[0]

    def by_type(self, content_type: ContentType) -> List[Post]:
        return filter_by_type(self.load(), content_type)
