from pathlib import Path
from typing import List, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from pressroom.schemas.content import ChannelConfig


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content source
    CONTENT_DIR: str = "src/content"
    CONTENT_SECTIONS: List[str] = ["blog", "newsletter"]
    CONTENT_GLOB: str = "**/*.md"

    # Channel
    SITE_TITLE: str = "Pressroom"
    SITE_DESCRIPTION: str = "Articles and newsletter issues"
    SITE_URL: str = "http://localhost:8000"

    # Routes
    ARTICLE_SECTION: str = "blog"
    NEWSLETTER_SECTION: str = "newsletter"
    STATIC_ROUTES: List[str] = [
        "/",
        "/blog",
        "/newsletter",
        "/about",
        "/search",
        "/rss.xml",
    ]

    # Listing
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_SIZE: int = 5

    # Serve unpublished posts on detail views when ?preview=true is passed
    ALLOW_PREVIEW: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def reserved_segments(self) -> Tuple[str, ...]:
        """Path segments that can never be a slug."""
        return (self.content_path.name, *self.CONTENT_SECTIONS)

    @property
    def channel(self) -> ChannelConfig:
        return ChannelConfig(
            title=self.SITE_TITLE,
            description=self.SITE_DESCRIPTION,
            url=self.SITE_URL,
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
