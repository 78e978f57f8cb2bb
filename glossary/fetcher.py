"""
Result Fetcher – the read boundary to the content store.

Owns no state beyond the request handler it wraps.  Every method either
returns parsed models or raises :class:`RemoteUnavailable`.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from glossary.expressions import Equals, Expression, to_wire
from glossary.models import Category, ResultPage, Term
from glossary.parsers.content_parser import (
    first_or_none,
    parse_category_list,
    parse_term_list,
)
from glossary.query_builder import DEFAULT_ORDERS, TermQuery
from utils.request_handler import RequestHandler

logger = logging.getLogger(__name__)

TERMS_ENDPOINT = 'terms'
CATEGORIES_ENDPOINT = 'categories'
CATEGORY_LIMIT = 100


class ResultFetcher:
    """Fetch terms and categories from the content API."""

    def __init__(self, handler: RequestHandler):
        self.handler = handler

    def fetch(self, expression: Optional[Expression], sort_order: str = DEFAULT_ORDERS,
              limit: int = 12, offset: int = 0) -> ResultPage:
        """Return one page of terms matching *expression*.

        Raises:
            RemoteUnavailable: store unreachable or payload malformed.
        """
        params = {'limit': limit, 'offset': offset, 'orders': sort_order}
        filters = to_wire(expression)
        if filters:
            params['filters'] = filters
        payload = self.handler.get_json(TERMS_ENDPOINT, params=params)
        terms, total_count, got_offset, got_limit = parse_term_list(payload)
        logger.info(f"Fetched {len(terms)}/{total_count} terms (offset={offset}, filters={filters or '-'})")
        return ResultPage(terms=terms, total_count=total_count, offset=got_offset, limit=got_limit)

    def fetch_query(self, query: TermQuery) -> ResultPage:
        return self.fetch(query.filters, query.orders, query.limit, query.offset)

    def list_categories(self) -> List[Category]:
        payload = self.handler.get_json(
            CATEGORIES_ENDPOINT,
            params={'limit': CATEGORY_LIMIT, 'orders': DEFAULT_ORDERS},
        )
        return parse_category_list(payload)

    def get_term(self, slug: str) -> Optional[Term]:
        """Look up a single term by its URL slug; ``None`` when absent."""
        page = self.fetch(Equals('slug', slug), limit=1)
        return first_or_none(page.terms)
