from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ContentType(str, Enum):
    ARTICLE = "article"
    NEWSLETTER = "newsletter"


class Post(BaseModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: str = ""
    summary: str = ""
    date: str = ""
    categories: List[str] = Field(default_factory=list)
    published: bool = False
    cover: Optional[str] = None
    readTime: int = Field(ge=1)
    type: ContentType = ContentType.ARTICLE
    issue: Optional[int] = None


class PostDetail(Post):
    content: str
    url: str


class PageInfo(BaseModel):
    currentPage: int
    total: int
    totalPages: int
    nextPage: Optional[int] = None
    previousPage: Optional[int] = None


class PaginatedPosts(BaseModel):
    data: List[Post] = Field(default_factory=list)
    pageInfo: PageInfo
