"""
Thin FastAPI REST layer over the glossary search pipeline.

Run with::

    uvicorn glossary.server:app --reload --port 8100

Endpoints are plain ``def`` functions: the content-API client is blocking,
so FastAPI runs them in its worker thread pool.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from glossary import __version__
from glossary.fetcher import ResultFetcher
from glossary.models import FilterCriteria
from glossary.parsers import parse_term
from glossary.service import (
    load_category_page,
    load_term_detail,
    load_terms_page,
    refine_loaded,
)
from utils.request_handler import RemoteUnavailable, create_request_handler_from_config

logger = logging.getLogger(__name__)

UNAVAILABLE_DETAIL = 'Content service is temporarily unavailable'

app = FastAPI(
    title='IT Glossary API',
    version=__version__,
    description='Search, filter and browse IT glossary terms.',
)

_fetcher: Optional[ResultFetcher] = None


def get_fetcher() -> ResultFetcher:
    """Lazily build the shared fetcher from ``config.py`` settings."""
    global _fetcher
    if _fetcher is None:
        _fetcher = ResultFetcher(create_request_handler_from_config())
    return _fetcher


def _unavailable(exc: RemoteUnavailable) -> HTTPException:
    logger.error(f"Content store unavailable: {exc}")
    return HTTPException(status_code=503, detail=UNAVAILABLE_DETAIL)


# ---------------------------------------------------------------------------
# Request / response schemas (Pydantic models for FastAPI validation)
# ---------------------------------------------------------------------------

class RefinePayload(BaseModel):
    """POST body for the in-memory refine endpoint.

    ``terms`` are raw content-API entries, exactly as they were loaded.
    """
    terms: List[dict] = Field(default_factory=list)
    category: Optional[str] = None
    difficulty: Optional[str] = None
    q: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = 'ok'
    version: str = __version__


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get('/api/health', response_model=HealthResponse)
def health_check():
    """Simple liveness probe."""
    return HealthResponse()


@app.get('/api/terms')
def api_list_terms(
    page: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    difficulty: Optional[str] = Query(None),
    q: Optional[str] = Query(None),
    fetcher: ResultFetcher = Depends(get_fetcher),
):
    """Filtered, paginated term listing with categories and page links."""
    criteria = FilterCriteria.from_query_params(
        {'page': page, 'category': category, 'difficulty': difficulty, 'q': q}
    )
    try:
        result = load_terms_page(fetcher, criteria)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except RemoteUnavailable as exc:
        raise _unavailable(exc) from exc
    return result.to_dict()


@app.get('/api/terms/{slug}')
def api_term_detail(slug: str, fetcher: ResultFetcher = Depends(get_fetcher)):
    """Full term entry for a detail page."""
    try:
        term = load_term_detail(fetcher, slug)
    except ValueError:
        # not a valid slug, so no term can have it
        term = None
    except RemoteUnavailable as exc:
        raise _unavailable(exc) from exc
    if term is None:
        raise HTTPException(status_code=404, detail=f'Term not found: {slug}')
    return term.to_dict()


@app.get('/api/categories')
def api_list_categories(fetcher: ResultFetcher = Depends(get_fetcher)):
    try:
        categories = fetcher.list_categories()
    except RemoteUnavailable as exc:
        raise _unavailable(exc) from exc
    return {'categories': [c.to_dict() for c in categories]}


@app.get('/api/categories/{slug}')
def api_category_detail(
    slug: str,
    page: Optional[str] = Query(None),
    fetcher: ResultFetcher = Depends(get_fetcher),
):
    """A category and one page of its terms."""
    page_num = FilterCriteria.from_query_params({'page': page}).page
    try:
        loaded = load_category_page(fetcher, slug, page_num)
    except RemoteUnavailable as exc:
        raise _unavailable(exc) from exc
    if loaded is None:
        raise HTTPException(status_code=404, detail=f'Category not found: {slug}')
    category, terms_page = loaded
    result = terms_page.to_dict()
    result['category'] = category.to_dict()
    return result


@app.post('/api/refine')
def api_refine(payload: RefinePayload):
    """Re-filter an already-loaded batch without calling the content API."""
    try:
        candidates = [parse_term(item) for item in payload.terms]
    except RemoteUnavailable as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    criteria = FilterCriteria.from_query_params(
        {'category': payload.category, 'difficulty': payload.difficulty, 'q': payload.q}
    )
    result = refine_loaded(candidates, criteria)
    return {
        'terms': [t.to_list_item() for t in result.terms],
        'total_count': result.total_count,
        'no_matches': result.no_matches.to_dict() if result.no_matches else None,
    }
