import argparse
import logging
from pathlib import Path

from pressroom.dependencies import build_content_index
from pressroom.services.posts_service import PostsService
from pressroom.settings import settings

logger = logging.getLogger(__name__)


def build(out_dir: Path) -> None:
    index = build_content_index(settings)
    service = PostsService(index=index, settings=settings)
    index.load()

    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / "rss.xml").write_text(service.render_feed(), encoding="utf-8")
    (out_dir / "sitemap.xml").write_text(service.render_sitemap(), encoding="utf-8")
    logger.info(f"Wrote rss.xml and sitemap.xml for {len(index.posts())} posts to {out_dir}")


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Write the RSS feed and sitemap to disk.")
    parser.add_argument("--out", default="build", help="Output directory.")
    args = parser.parse_args()

    try:
        build(Path(args.out))
    except Exception as e:
        logger.error(f"Feed build failed: {e}", exc_info=True)
        raise SystemExit(1)
