from typing import Callable, Iterable, Mapping, Optional, Union

from pressroom.schemas.blog import ContentType, Post
from pressroom.schemas.content import SitemapEntry
from pressroom.services.feed import xml_escape

XML_HEADER = '<?xml version="1.0" encoding="UTF-8" ?>'
URLSET_OPEN = """<urlset
  xmlns="https://www.sitemaps.org/schemas/sitemap/0.9"
  xmlns:xhtml="https://www.w3.org/1999/xhtml"
  xmlns:mobile="https://www.google.com/schemas/sitemap-mobile/1.0"
  xmlns:news="https://www.google.com/schemas/sitemap-news/0.9"
  xmlns:image="https://www.google.com/schemas/sitemap-image/1.1"
  xmlns:video="https://www.google.com/schemas/sitemap-video/1.1"
>"""

DEFAULT_SECTIONS = {
    ContentType.ARTICLE: "blog",
    ContentType.NEWSLETTER: "newsletter",
}


def section_mapper(sections: Mapping[ContentType, str]) -> Callable[[Post], str]:
    def section_for(post: Post) -> str:
        return sections.get(post.type, sections[ContentType.ARTICLE])

    return section_for


def post_entry(post: Post, section: str) -> SitemapEntry:
    return SitemapEntry(path=f"/{section}/{post.slug}", lastmod=post.date or None)


def build_url(entry: SitemapEntry, base_url: str) -> str:
    loc = f"<loc>{xml_escape(base_url + entry.path)}</loc>"
    mod = f"<lastmod>{xml_escape(entry.lastmod)}</lastmod>" if entry.lastmod else ""
    return f"<url>{loc}{mod}</url>"


def render_sitemap(
    static_routes: Iterable[Union[str, SitemapEntry]],
    posts: Iterable[Post],
    base_url: str,
    section_for: Optional[Callable[[Post], str]] = None,
) -> str:
    """
    Sitemap with one <url> per static route followed by one per post,
    both in input order. Duplicate slugs are passed through as-is.
    """
    base_url = base_url.rstrip("/")
    section_for = section_for or section_mapper(DEFAULT_SECTIONS)

    entries = [
        route if isinstance(route, SitemapEntry) else SitemapEntry(path=route)
        for route in static_routes
    ]
    entries.extend(post_entry(post, section_for(post)) for post in posts)

    urls = "\n  ".join(build_url(entry, base_url) for entry in entries)
    return f"{XML_HEADER}\n{URLSET_OPEN}\n  {urls}\n</urlset>"
