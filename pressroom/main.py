import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pressroom import dependencies as deps
from pressroom.routers import feeds, posts
from pressroom.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pressroom API", description="Articles, newsletter issues and feeds")


def load_content_index():
    index = deps.get_content_index(deps.get_settings())
    index.load()
    return index


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        index = load_content_index()
    except Exception as e:
        logger.error(f"Failed to load content index: {e}")
        raise
    logger.info("Content index loaded")

    try:
        yield
    finally:
        index.invalidate()
        logger.info("Content index released")


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(feeds.router)


@app.get("/")
async def root():
    return {"message": "Pressroom API is running"}
