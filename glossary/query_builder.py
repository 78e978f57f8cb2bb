"""
Translate :class:`FilterCriteria` into a content-API query.

The builder is pure: identical criteria always yield an identical
:class:`TermQuery`, and the criteria object is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from glossary.expressions import And, Contains, Equals, to_wire
from glossary.models import FilterCriteria

PAGE_SIZE = 12
DEFAULT_ORDERS = 'order'

# Term fields referenced by filter clauses
CATEGORY_FIELD = 'category'
DIFFICULTY_FIELD = 'difficulty'
SEARCH_TITLE_FIELD = 'search_title'


@dataclass(frozen=True)
class TermQuery:
    """A fully resolved term listing request."""
    limit: int
    offset: int
    orders: str = DEFAULT_ORDERS
    filters: And = And()

    def to_params(self) -> dict:
        """Return the request parameters; ``filters`` is omitted when empty."""
        params = {
            'limit': self.limit,
            'offset': self.offset,
            'orders': self.orders,
        }
        wire = to_wire(self.filters)
        if wire:
            params['filters'] = wire
        return params


def page_offset(page: int, page_size: int = PAGE_SIZE) -> int:
    """Zero-based offset of *page* (1-based)."""
    return (page - 1) * page_size


def build_filter_expression(criteria: FilterCriteria) -> And:
    """Build the AND-combined filter for every criterion that is present."""
    clauses = []
    if criteria.category:
        clauses.append(Equals(CATEGORY_FIELD, criteria.category))
    if criteria.difficulty:
        clauses.append(Contains(DIFFICULTY_FIELD, criteria.difficulty))
    if criteria.query:
        # search_title already carries spelling / abbreviation variants,
        # so the raw query is matched as-is
        clauses.append(Contains(SEARCH_TITLE_FIELD, criteria.query))
    return And(tuple(clauses))


def build_term_query(criteria: FilterCriteria, page_size: int = PAGE_SIZE,
                     orders: Optional[str] = None) -> TermQuery:
    """Return the paginated, filtered query for *criteria*."""
    return TermQuery(
        limit=page_size,
        offset=page_offset(criteria.page, page_size),
        orders=orders or DEFAULT_ORDERS,
        filters=build_filter_expression(criteria),
    )
