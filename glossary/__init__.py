"""
IT Glossary – search layer.

This package turns URL filter parameters into content-API queries, fetches
and parses glossary terms, refines already-loaded batches in memory, and
exposes the result through a thin FastAPI REST interface.

Quick start (Python)::

    from glossary import FilterCriteria, ResultFetcher, load_terms_page
    from utils.request_handler import create_request_handler_from_config

    fetcher = ResultFetcher(create_request_handler_from_config())
    page = load_terms_page(fetcher, FilterCriteria(query='暗号'))

Quick start (REST)::

    uvicorn glossary.server:app --reload
"""

__version__ = '0.1.0'

from glossary.models import (
    Category,
    Term,
    FilterCriteria,
    ResultPage,
    PageLink,
    Pagination,
    NoMatches,
    TermsPage,
)
from glossary.expressions import Equals, Contains, And
from glossary.query_builder import PAGE_SIZE, TermQuery, build_filter_expression, build_term_query
from glossary.refiner import refine
from glossary.pagination import build_pagination, page_window, total_pages
from glossary.fetcher import ResultFetcher
from glossary.service import load_terms_page, load_category_page, load_term_detail, refine_loaded
from utils.request_handler import RemoteUnavailable

__all__ = [
    # Models
    'Category',
    'Term',
    'FilterCriteria',
    'ResultPage',
    'PageLink',
    'Pagination',
    'NoMatches',
    'TermsPage',
    # Expressions / query building
    'Equals',
    'Contains',
    'And',
    'PAGE_SIZE',
    'TermQuery',
    'build_filter_expression',
    'build_term_query',
    # Refinement / pagination
    'refine',
    'build_pagination',
    'page_window',
    'total_pages',
    # I/O
    'ResultFetcher',
    'RemoteUnavailable',
    'load_terms_page',
    'load_category_page',
    'load_term_detail',
    'refine_loaded',
]
