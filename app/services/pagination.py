# app/services/pagination.py
"""
Filter, ordering and metadata helpers shared by the list endpoints.

Two paging styles are in use:
- offset paging (users): limit/offset with a ``hasMore`` flag
- page paging (discussions, comments): fixed page size with ``totalPages``
"""
import math
from typing import Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Query

from app.schemas.base import OffsetMeta, PageMeta

PAGE_SIZE = 10
DEFAULT_USER_LIMIT = 50
MAX_USER_LIMIT = 100

SORT_ASC = "asc"
SORT_DESC = "desc"


def search_filter(search: Optional[str], *columns):
    """
    Case-insensitive substring match of ``search`` against any of ``columns``.
    ``%`` and ``_`` in the search text match themselves, not any character.
    Returns None when there is nothing to filter on.
    """
    if not search or not search.strip():
        return None
    term = search.strip()
    return or_(*[column.icontains(term, autoescape=True) for column in columns])


def apply_search(query: Query, search: Optional[str], *columns) -> Query:
    criterion = search_filter(search, *columns)
    if criterion is not None:
        query = query.filter(criterion)
    return query


def order_by_column(column, sort_order: str):
    return column.asc() if sort_order == SORT_ASC else column.desc()


def page_bounds(page: int, page_size: int = PAGE_SIZE) -> Tuple[int, int]:
    """(offset, limit) for a 1-based page number."""
    return (page - 1) * page_size, page_size


def total_pages(total: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(total / page_size)


def page_meta(page: int, total: int, page_size: int = PAGE_SIZE) -> PageMeta:
    return PageMeta(page=page, total=total, total_pages=total_pages(total, page_size))


def offset_meta(total: int, limit: int, offset: int) -> OffsetMeta:
    return OffsetMeta(total=total, limit=limit, offset=offset, has_more=offset + limit < total)


def paginate_page(query: Query, page: int, page_size: int = PAGE_SIZE):
    """Run a page-style query. Returns (items, meta)."""
    total = query.order_by(None).count()
    offset, limit = page_bounds(page, page_size)
    items = query.offset(offset).limit(limit).all()
    return items, page_meta(page, total, page_size)


def paginate_offset(query: Query, limit: int, offset: int):
    """Run an offset-style query. Returns (items, meta)."""
    total = query.order_by(None).count()
    items = query.offset(offset).limit(limit).all()
    return items, offset_meta(total, limit, offset)
