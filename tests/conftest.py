from pressroom.schemas.blog import ContentType, Post
from pressroom.schemas.content import ContentRecord


class FakeRepo:
    """
    Minimal content repo stand-in.
    Counts list_records() calls so caching can be asserted.
    """

    def __init__(self, records=None, error: Exception | None = None):
        self.records = list(records or [])
        self.error = error
        self.calls = 0

    def list_records(self):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.records)


def make_record(
    slug: str,
    *,
    section: str = "blog",
    title: str | None = None,
    date: str = "2024-01-15",
    published: bool = True,
    description: str = "A short description of the post.",
    body: str | None = "Post body",
    cover: str | None = None,
    **extra,
) -> ContentRecord:
    metadata = {
        "title": title if title is not None else slug.replace("-", " ").title(),
        "description": description,
        "summary": f"Summary of {slug}",
        "date": date,
        "categories": ["testing"],
        "published": published,
        **extra,
    }
    return ContentRecord(
        path=f"content/{section}/{slug}/index.md",
        metadata=metadata,
        cover=cover,
        body=body,
    )


def make_records(count: int = 5, **overrides) -> list[ContentRecord]:
    """Records dated 2024-01-01 onwards, in ascending date order."""
    return [
        make_record(f"test-post-{i + 1}", date=f"2024-01-{i + 1:02d}", **overrides)
        for i in range(count)
    ]


def make_post(**overrides) -> Post:
    fields = {
        "title": "Test Post Title",
        "slug": "test-post-slug",
        "description": "This is a test post description.",
        "summary": "A brief summary of the test post",
        "date": "2024-01-15",
        "categories": ["testing", "development"],
        "published": True,
        "cover": "/images/test-cover.jpg",
        "readTime": 2,
        "type": ContentType.ARTICLE,
    }
    fields.update(overrides)
    return Post(**fields)


def make_posts(count: int = 5, **overrides) -> list[Post]:
    return [
        make_post(
            **{
                "title": f"Test Post {i + 1}",
                "slug": f"test-post-{i + 1}",
                "date": f"2024-01-{i + 1:02d}",
                **overrides,
            }
        )
        for i in range(count)
    ]
