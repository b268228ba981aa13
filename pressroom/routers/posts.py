import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from pressroom import dependencies as deps
from pressroom.schemas.blog import ContentType, Post, PostDetail
from pressroom.services.posts_service import PostsService
from pressroom.services.slug_resolver import NotFound

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/posts")
def list_posts(
    page: Optional[str] = Query(None),
    pageSize: Optional[str] = Query(None),
    type: Optional[ContentType] = Query(None),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Paginated listing of published posts, newest first."""
    try:
        result = service.list_posts(page, pageSize, content_type=type)
        # nextPage / previousPage are left out entirely when there is no such page
        return JSONResponse(result.model_dump(mode="json", exclude_none=True))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/api/posts/{slug}", response_model=PostDetail, response_model_exclude_none=True)
def get_post(
    slug: str,
    request: Request,
    preview: bool = False,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    return _resolve(service, slug, request.url.path, preview=preview)


@router.get("/blog", response_model=List[Post], response_model_exclude_none=True)
def list_articles(service: PostsService = Depends(deps.get_posts_service)):
    return _list_by_type(service, ContentType.ARTICLE)


@router.get("/newsletter", response_model=List[Post], response_model_exclude_none=True)
def list_newsletter_issues(service: PostsService = Depends(deps.get_posts_service)):
    return _list_by_type(service, ContentType.NEWSLETTER)


@router.get("/blog/{slug}", response_model=PostDetail, response_model_exclude_none=True)
def get_article(
    slug: str,
    request: Request,
    preview: bool = False,
    service: PostsService = Depends(deps.get_posts_service),
):
    return _resolve(
        service, slug, request.url.path, preview=preview, content_type=ContentType.ARTICLE
    )


@router.get(
    "/newsletter/{slug}", response_model=PostDetail, response_model_exclude_none=True
)
def get_newsletter_issue(
    slug: str,
    request: Request,
    preview: bool = False,
    service: PostsService = Depends(deps.get_posts_service),
):
    return _resolve(
        service,
        slug,
        request.url.path,
        preview=preview,
        content_type=ContentType.NEWSLETTER,
    )


def _list_by_type(service: PostsService, content_type: ContentType) -> List[Post]:
    try:
        return service.list_all(content_type)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing {content_type.value} posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


def _resolve(
    service: PostsService,
    slug: str,
    url: str,
    *,
    preview: bool = False,
    content_type: Optional[ContentType] = None,
) -> PostDetail:
    try:
        post = service.get_post(slug, url, preview=preview, content_type=content_type)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")

    if isinstance(post, NotFound):
        raise HTTPException(status_code=404, detail=post.message)
    return post
