import logging
from typing import List, Optional, Union

from pressroom.schemas.blog import ContentType, PaginatedPosts, Post, PostDetail
from pressroom.services.content_index import ContentIndex, filter_by_type
from pressroom.services.feed import render_feed
from pressroom.services.paginator import paginate
from pressroom.services.sitemap import render_sitemap, section_mapper
from pressroom.services.slug_resolver import NotFound, find_by_slug
from pressroom.settings import Settings

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, index: ContentIndex, settings: Settings):
        self.index = index
        self.settings = settings

    def list_all(self, content_type: Optional[ContentType] = None) -> List[Post]:
        posts = list(self.index.posts())
        if content_type is not None:
            posts = filter_by_type(posts, content_type)
        return posts

    def list_posts(
        self, page=None, page_size=None, content_type: Optional[ContentType] = None
    ) -> PaginatedPosts:
        return paginate(
            self.list_all(content_type),
            page,
            page_size,
            default_page=self.settings.DEFAULT_PAGE,
            default_page_size=self.settings.DEFAULT_PAGE_SIZE,
        )

    def get_post(
        self,
        slug: str,
        url: str,
        *,
        preview: bool = False,
        content_type: Optional[ContentType] = None,
    ) -> Union[PostDetail, NotFound]:
        include_unpublished = preview and self.settings.ALLOW_PREVIEW
        if preview and not self.settings.ALLOW_PREVIEW:
            logger.debug(f"Preview requested for {slug} but previews are disabled")

        result = find_by_slug(
            self.index.records(),
            slug,
            reserved=self.index.reserved,
            include_unpublished=include_unpublished,
        )
        if isinstance(result, NotFound):
            return result
        if content_type is not None and result.post.type != content_type:
            return NotFound(slug)

        return PostDetail(
            **result.post.model_dump(),
            content=result.record.body or "",
            url=url,
        )

    def render_feed(self) -> str:
        return render_feed(self.index.posts(), self.settings.channel)

    def render_sitemap(self) -> str:
        sections = {
            ContentType.ARTICLE: self.settings.ARTICLE_SECTION,
            ContentType.NEWSLETTER: self.settings.NEWSLETTER_SECTION,
        }
        return render_sitemap(
            self.settings.STATIC_ROUTES,
            self.index.posts(),
            self.settings.channel.url,
            section_for=section_mapper(sections),
        )
