from typing import Optional

from fastapi import Depends

from pressroom.repos.content_repo import FileContentRepo
from pressroom.services.content_index import ContentIndex
from pressroom.services.posts_service import PostsService
from pressroom.settings import Settings, settings

_content_index: Optional[ContentIndex] = None


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def build_content_index(current_settings: Settings) -> ContentIndex:
    repo = FileContentRepo(
        current_settings.content_path,
        sections=current_settings.CONTENT_SECTIONS,
        pattern=current_settings.CONTENT_GLOB,
    )
    return ContentIndex(repo, reserved=current_settings.reserved_segments)


def get_content_index(current_settings: Settings = Depends(get_settings)) -> ContentIndex:
    global _content_index
    if _content_index is None:
        _content_index = build_content_index(current_settings)
    return _content_index


def get_posts_service(
    index: ContentIndex = Depends(get_content_index),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(index=index, settings=current_settings)
