import datetime

import pytest

from pressroom.schemas.blog import ContentType
from pressroom.schemas.content import ContentRecord
from pressroom.services.content_index import (
    ContentIndex,
    build_posts,
    parse_date,
    sort_posts,
)
from tests.conftest import FakeRepo, make_post, make_record, make_records

UTC = datetime.timezone.utc


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-15", datetime.datetime(2024, 1, 15, tzinfo=UTC)),
        ("2024-01-15T10:30:00Z", datetime.datetime(2024, 1, 15, 10, 30, tzinfo=UTC)),
        ("2024-01-15T12:00:00+02:00", datetime.datetime(2024, 1, 15, 10, 0, tzinfo=UTC)),
        ("2024/01/15", datetime.datetime(2024, 1, 15, tzinfo=UTC)),
        ("Mon, 15 Jan 2024 00:00:00 GMT", datetime.datetime(2024, 1, 15, tzinfo=UTC)),
        (datetime.date(2024, 1, 15), datetime.datetime(2024, 1, 15, tzinfo=UTC)),
    ],
)
def test_parse_date_accepts_common_formats(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "invalid-date",
        "",
        "   ",
        None,
        "2024-13-45",
        42,
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:00:00-05:00",
        "1 Jan 99999999999 00:00:00 +0000",
        datetime.datetime(1, 1, 1, tzinfo=datetime.timezone(datetime.timedelta(hours=1))),
    ],
)
def test_parse_date_returns_none_for_invalid_values(value):
    assert parse_date(value) is None


def test_sort_posts_newest_first():
    posts = [
        make_post(slug="old", date="2023-01-01"),
        make_post(slug="new", date="2024-06-01"),
        make_post(slug="mid", date="2023-12-31"),
    ]

    assert [p.slug for p in sort_posts(posts)] == ["new", "mid", "old"]


def test_sort_posts_keeps_discovery_order_for_equal_dates():
    posts = [
        make_post(slug="b", date="2024-01-01"),
        make_post(slug="a", date="2024-01-01"),
        make_post(slug="c", date="2024-01-01T00:00:00Z"),
    ]

    assert [p.slug for p in sort_posts(posts)] == ["b", "a", "c"]


def test_sort_posts_puts_invalid_dates_last_without_raising():
    posts = [
        make_post(slug="broken", date="not-a-date"),
        make_post(slug="valid", date="2020-01-01"),
        make_post(slug="empty", date=""),
    ]

    assert [p.slug for p in sort_posts(posts)] == ["valid", "broken", "empty"]


def test_build_posts_filters_unpublished_and_malformed_records():
    records = [
        make_record("published", date="2024-01-02"),
        make_record("draft", date="2024-01-03", published=False),
        ContentRecord(path="content/blog/broken/index.md", metadata=None, body="x"),
        make_record("older", date="2024-01-01"),
    ]

    posts = build_posts(records)

    assert [p.slug for p in posts] == ["published", "older"]
    assert all(p.published for p in posts)


def test_build_posts_keeps_duplicate_slugs():
    records = [
        make_record("same", date="2024-01-01"),
        ContentRecord(
            path="content/newsletter/same/index.md",
            metadata={"title": "Same again", "date": "2024-01-02", "published": True},
            body="",
        ),
    ]

    assert [p.slug for p in build_posts(records)] == ["same", "same"]


def test_build_posts_survives_out_of_range_dates():
    records = [
        make_record("good", date="2024-01-01"),
        make_record("edge", date="0001-01-01T00:00:00+01:00"),
        make_record("far", date="1 Jan 99999999999 00:00:00 +0000"),
    ]

    posts = build_posts(records)

    assert [p.slug for p in posts] == ["good", "edge", "far"]


def test_index_loads_once_and_caches():
    repo = FakeRepo(make_records(3))
    index = ContentIndex(repo)

    assert index.loaded is False
    first = index.load()
    second = index.posts()

    assert repo.calls == 1
    assert first is second
    assert [p.slug for p in first] == ["test-post-3", "test-post-2", "test-post-1"]
    assert len(index.records()) == 3


def test_index_invalidate_forces_reload():
    repo = FakeRepo(make_records(2))
    index = ContentIndex(repo)
    index.load()

    repo.records.append(make_record("fresh", date="2025-01-01"))
    index.invalidate()

    assert index.loaded is False
    assert index.posts()[0].slug == "fresh"
    assert repo.calls == 2


def test_index_by_type_filters_posts():
    repo = FakeRepo(
        [
            make_record("article-1", date="2024-01-01"),
            make_record("issue-1", section="newsletter", date="2024-01-02"),
            make_record("article-2", date="2024-01-03"),
        ]
    )
    index = ContentIndex(repo)

    assert [p.slug for p in index.by_type(ContentType.ARTICLE)] == ["article-2", "article-1"]
    assert [p.slug for p in index.by_type(ContentType.NEWSLETTER)] == ["issue-1"]


def test_index_propagates_repo_errors_and_stays_unloaded():
    repo = FakeRepo(error=OSError("disk gone"))
    index = ContentIndex(repo)

    with pytest.raises(OSError, match="disk gone"):
        index.load()

    assert index.loaded is False
