import logging
import re
from email.utils import format_datetime
from typing import Iterable
from xml.sax.saxutils import escape

from pressroom.schemas.blog import Post
from pressroom.schemas.content import ChannelConfig
from pressroom.services.content_index import parse_date

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}
# Anything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def xml_escape(value) -> str:
    """Escape the five predefined XML entities and drop characters XML cannot carry."""
    text = _INVALID_XML_CHARS.sub("", str(value or ""))
    return escape(text, _QUOTE_ENTITIES)


def format_rfc1123(value) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    return format_datetime(parsed, usegmt=True)


def render_item(post: Post, base_url: str) -> str:
    link = xml_escape(f"{base_url}/{post.slug}")
    pub_date = format_rfc1123(post.date)
    if pub_date == INVALID_DATE:
        logger.warning(f"Post {post.slug} has an invalid date: {post.date!r}")
    return "\n".join(
        [
            "<item>",
            f"<title>{xml_escape(post.title)}</title>",
            f"<description>{xml_escape(post.description)}</description>",
            f"<link>{link}</link>",
            f'<guid isPermaLink="true">{link}</guid>',
            f"<pubDate>{pub_date}</pubDate>",
            "</item>",
        ]
    )


def render_feed(posts: Iterable[Post], channel: ChannelConfig) -> str:
    """RSS 2.0 document for `posts`, kept in the order given."""
    base_url = channel.url.rstrip("/")
    lines = [
        '<rss xmlns:atom="http://www.w3.org/2005/Atom" version="2.0">',
        "<channel>",
        f"<title>{xml_escape(channel.title)}</title>",
        f"<description>{xml_escape(channel.description)}</description>",
        f"<link>{xml_escape(base_url)}</link>",
        f'<atom:link href="{xml_escape(base_url)}/rss.xml" rel="self" type="application/rss+xml"/>',
    ]
    lines.extend(render_item(post, base_url) for post in posts)
    lines.extend(["</channel>", "</rss>"])
    return "\n".join(lines).strip()
