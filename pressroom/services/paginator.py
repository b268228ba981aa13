import re
from typing import Sequence

from pressroom.schemas.blog import PageInfo, PaginatedPosts, Post

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 5

_INTEGER = re.compile(r"\+?\d+")


def normalize_positive_int(value, default: int) -> int:
    """
    Coerce a query value to a positive integer.
    Non-numeric, fractional, zero and negative values fall back to `default`.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        number = int(value.strip())
        return number if number > 0 else default
    return default


def paginate(
    posts: Sequence[Post],
    page=DEFAULT_PAGE,
    page_size=DEFAULT_PAGE_SIZE,
    *,
    default_page: int = DEFAULT_PAGE,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> PaginatedPosts:
    page = normalize_positive_int(page, default_page)
    page_size = normalize_positive_int(page_size, default_page_size)

    total = len(posts)
    total_pages = -(-total // page_size)
    start = (page - 1) * page_size
    data = list(posts[start : start + page_size]) if start < total else []

    return PaginatedPosts(
        data=data,
        pageInfo=PageInfo(
            currentPage=page,
            total=total,
            totalPages=total_pages,
            nextPage=page + 1 if page < total_pages else None,
            previousPage=page - 1 if page > 1 else None,
        ),
    )
