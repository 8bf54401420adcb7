"""
Pagination helpers shared by list endpoints.
"""

from math import ceil
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from core.config import Settings, get_settings


T = TypeVar('T')


class PaginationMeta(BaseModel):
    """Standard pagination metadata"""
    current_page: int = Field(description="Current page number (1-indexed)")
    per_page: int = Field(description="Number of items per page")
    total: int = Field(description="Total number of items")
    total_pages: int = Field(description="Total number of pages")
    has_next: bool = Field(description="Whether there is a next page")
    has_prev: bool = Field(description="Whether there is a previous page")
    pages: List[Optional[int]] = Field(
        default_factory=list,
        description="Page numbers to display, null marks a gap"
    )


class Page(BaseModel, Generic[T]):
    items: List[T]
    meta: PaginationMeta


def page_numbers(current_page: int, total_pages: int, window: int = 1) -> List[Optional[int]]:
    """
    Page numbers for a pager: always the first and last page, plus
    ``window`` pages either side of the current one. Gaps are ``None``.

    >>> page_numbers(5, 10)
    [1, None, 4, 5, 6, None, 10]
    """
    if total_pages <= 0:
        return []

    shown = {1, total_pages}
    for page in range(current_page - window, current_page + window + 1):
        if 1 <= page <= total_pages:
            shown.add(page)

    result: List[Optional[int]] = []
    previous = 0
    for page in sorted(shown):
        if page - previous == 2:
            # Fill a one-page gap instead of marking it
            result.append(previous + 1)
        elif page - previous > 2:
            result.append(None)
        result.append(page)
        previous = page
    return result


def build_meta(page: int, per_page: int, total: int) -> PaginationMeta:
    total_pages = ceil(total / per_page) if per_page > 0 else 0
    return PaginationMeta(
        current_page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
        pages=page_numbers(page, total_pages),
    )


def offset_for(page: int, per_page: int) -> int:
    return (page - 1) * per_page


def resolve_page_size(size: Optional[int], settings: Optional[Settings] = None) -> int:
    """Requested page size, defaulting to and capped by the configured limits"""
    settings = settings or get_settings()
    if size is None:
        return settings.default_page_size
    return min(size, settings.max_page_size)
