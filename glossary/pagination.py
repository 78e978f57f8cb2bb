"""
Page-count and page-link generation for term listings.

At most ``WINDOW_SIZE`` numbered links are shown.  With more pages than
that, the window slides with the current page and is clamped to the
first / last page::

    total=9, current=1 -> 1..7
    total=9, current=5 -> 2..8
    total=9, current=9 -> 3..9
"""

from __future__ import annotations

import math
from typing import List
from urllib.parse import urlencode

from glossary.models import FilterCriteria, PageLink, Pagination
from glossary.query_builder import PAGE_SIZE

WINDOW_SIZE = 7
DEFAULT_BASE_PATH = '/terms'


def total_pages(total_count: int, page_size: int = PAGE_SIZE) -> int:
    if total_count <= 0:
        return 0
    return math.ceil(total_count / page_size)


def page_window(current_page: int, pages: int, window: int = WINDOW_SIZE) -> List[int]:
    """Return the page numbers to display around *current_page*."""
    if pages <= window:
        return list(range(1, pages + 1))
    half = window // 2
    if current_page <= half + 1:
        start = 1
    elif current_page >= pages - half:
        start = pages - window + 1
    else:
        start = current_page - half
    return list(range(start, start + window))


def build_page_query(criteria: FilterCriteria, page: int) -> str:
    """Query string for *page* that keeps every active filter."""
    params = [('page', str(page))]
    if criteria.category:
        params.append(('category', criteria.category))
    if criteria.difficulty:
        params.append(('difficulty', criteria.difficulty))
    if criteria.query:
        params.append(('q', criteria.query))
    return urlencode(params)


def page_href(criteria: FilterCriteria, page: int, base_path: str = DEFAULT_BASE_PATH) -> str:
    return f'{base_path}?{build_page_query(criteria, page)}'


def view_all_href(base_path: str = DEFAULT_BASE_PATH) -> str:
    """Link back to the unfiltered listing."""
    return base_path


def build_pagination(criteria: FilterCriteria, total_count: int,
                     page_size: int = PAGE_SIZE,
                     base_path: str = DEFAULT_BASE_PATH) -> Pagination:
    """Assemble the pagination block for a listing page.

    No links are produced when everything fits on a single page.
    """
    current = criteria.page
    pages = total_pages(total_count, page_size)
    pagination = Pagination(current_page=current, total_pages=pages)
    if pages <= 1:
        return pagination

    pagination.pages = [
        PageLink(page=p, href=page_href(criteria, p, base_path), is_current=(p == current))
        for p in page_window(current, pages)
    ]
    if current > 1:
        # past the end, "previous" points at the last real page
        previous = min(current - 1, pages)
        pagination.previous = PageLink(page=previous, href=page_href(criteria, previous, base_path))
    if current < pages:
        pagination.next = PageLink(page=current + 1, href=page_href(criteria, current + 1, base_path))
    return pagination
