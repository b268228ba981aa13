from typing import Optional

from pydantic import BaseModel, field_validator


class ContentRecord(BaseModel):
    """A markdown file as found on disk, before any validation."""

    path: str
    metadata: Optional[dict] = None
    cover: Optional[str] = None
    body: Optional[str] = None  # None means "not a content module"


class ChannelConfig(BaseModel):
    title: str
    description: str
    url: str

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class SitemapEntry(BaseModel):
    path: str
    lastmod: Optional[str] = None
