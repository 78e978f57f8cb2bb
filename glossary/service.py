"""
Page assembly for listing, category and detail views.

A listing page needs two independent reads (terms + categories).  They are
issued concurrently and joined before anything is assembled, so a caller
gets either a complete :class:`TermsPage` or a :class:`RemoteUnavailable`
exception, never a half-filled page.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from glossary.fetcher import ResultFetcher
from glossary.models import Category, FilterCriteria, NoMatches, ResultPage, Term, TermsPage
from glossary.pagination import DEFAULT_BASE_PATH, build_pagination, view_all_href
from glossary.query_builder import build_term_query
from glossary.refiner import refine

logger = logging.getLogger(__name__)


def load_terms_page(fetcher: ResultFetcher, criteria: FilterCriteria,
                    base_path: str = DEFAULT_BASE_PATH) -> TermsPage:
    """Fetch one filtered page of terms plus the category list.

    Raises:
        RemoteUnavailable: either read failed.
    """
    query = build_term_query(criteria)
    with ThreadPoolExecutor(max_workers=2) as executor:
        terms_future = executor.submit(fetcher.fetch_query, query)
        categories_future = executor.submit(fetcher.list_categories)
        # .result() re-raises RemoteUnavailable from the worker thread
        result = terms_future.result()
        categories = categories_future.result()

    return _assemble_page(criteria, result, categories, criteria, base_path)


def load_category_page(fetcher: ResultFetcher, slug: str,
                       page: int = 1) -> Optional[Tuple[Category, TermsPage]]:
    """Terms belonging to the category with URL *slug*; ``None`` if unknown.

    The slug is resolved against the category list, which the page needs
    anyway, so a category page costs one category read and one term read.
    """
    categories = fetcher.list_categories()
    category = next((c for c in categories if c.slug == slug), None)
    if category is None:
        logger.info(f"Unknown category slug: {slug}")
        return None

    criteria = FilterCriteria(category=category.id, page=max(page, 1))
    result = fetcher.fetch_query(build_term_query(criteria))
    # The category is part of the path, so links must not repeat it
    link_criteria = replace(criteria, category=None)
    terms_page = _assemble_page(criteria, result, categories, link_criteria, f'/category/{slug}')
    return category, terms_page


def _assemble_page(criteria: FilterCriteria, result: ResultPage, categories: List[Category],
                   link_criteria: FilterCriteria, base_path: str) -> TermsPage:
    page = TermsPage(
        criteria=criteria,
        terms=result.terms,
        categories=categories,
        total_count=result.total_count,
        pagination=build_pagination(link_criteria, result.total_count, base_path=base_path),
    )
    if not result.terms:
        logger.info(f"No terms matched {criteria}")
        page.no_matches = NoMatches(view_all_href=view_all_href(base_path))
    return page


def load_term_detail(fetcher: ResultFetcher, slug: str) -> Optional[Term]:
    return fetcher.get_term(slug)


def refine_loaded(candidates: Iterable[Term], criteria: FilterCriteria) -> TermsPage:
    """Narrow an already-loaded batch in memory.

    The result only ever contains members of *candidates*; nothing is
    fetched, so pagination is not produced for refined results.
    """
    terms = refine(candidates, criteria)
    page = TermsPage(criteria=criteria, terms=terms, total_count=len(terms))
    if not terms:
        page.no_matches = NoMatches()
    return page
