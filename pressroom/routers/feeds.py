import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from pressroom import dependencies as deps
from pressroom.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()

XML_MEDIA_TYPE = "application/xml"


@router.get("/rss.xml")
def rss_feed(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return Response(content=service.render_feed(), media_type=XML_MEDIA_TYPE)
    except Exception as e:
        logger.error(f"Failed to render RSS feed: {e}")
        raise HTTPException(status_code=500, detail="Failed to render feed")


@router.get("/sitemap.xml")
def sitemap(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return Response(content=service.render_sitemap(), media_type=XML_MEDIA_TYPE)
    except Exception as e:
        logger.error(f"Failed to render sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to render sitemap")
