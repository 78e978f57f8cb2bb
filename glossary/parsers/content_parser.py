"""
Parsers for content-API JSON payloads.

List endpoints answer with an envelope::

    {"contents": [...], "totalCount": 120, "offset": 0, "limit": 12}

Any payload that does not have this shape, or whose entries lack the
required ``id`` / ``title`` (terms) or ``id`` / ``name`` (categories), is
reported as :class:`RemoteUnavailable` - the store answered, but not with
data we can render.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple, TypeVar

from glossary.models import Category, Term
from glossary.parsers.common import (
    html_to_text,
    coerce_str_list,
    coerce_optional_int,
    coerce_optional_str,
)
from utils.request_handler import RemoteUnavailable

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _require(item: dict, key: str, kind: str):
    value = item.get(key)
    if value is None or value == '':
        raise RemoteUnavailable(f"{kind} entry missing '{key}': {item.get('id', '?')}")
    return value


def parse_category(item) -> Category:
    """Build a :class:`Category` from one ``categories`` entry."""
    if not isinstance(item, dict):
        raise RemoteUnavailable(f"Category entry is not an object: {type(item).__name__}")
    return Category(
        id=str(_require(item, 'id', 'Category')),
        name=str(_require(item, 'name', 'Category')),
        icon=item.get('icon') or '',
        slug=item.get('slug') or '',
        description=coerce_optional_str(item.get('description')),
    )


def parse_term(item) -> Term:
    """Build a :class:`Term` from one ``terms`` entry.

    The referenced category is embedded by the API; a dangling or
    unexpanded reference leaves ``category`` as ``None``.
    """
    if not isinstance(item, dict):
        raise RemoteUnavailable(f"Term entry is not an object: {type(item).__name__}")

    category = None
    raw_category = item.get('category')
    if isinstance(raw_category, dict) and raw_category.get('id'):
        category = parse_category(raw_category)
    elif raw_category:
        logger.debug("Term %s has unexpanded category reference", item.get('id'))

    description = item.get('description') or ''
    return Term(
        id=str(_require(item, 'id', 'Term')),
        title=str(_require(item, 'title', 'Term')),
        slug=item.get('slug') or '',
        description=description,
        category=category,
        difficulty=coerce_str_list(item.get('difficulty')),
        search_title=coerce_optional_str(item.get('search_title')),
        published_at=item.get('publishedAt') or '',
        order=coerce_optional_int(item.get('order')),
        description_text=html_to_text(description),
    )


def _parse_envelope(payload, parse_item: Callable[[dict], T]) -> Tuple[List[T], int, int, int]:
    if not isinstance(payload, dict) or not isinstance(payload.get('contents'), list):
        raise RemoteUnavailable("Malformed list payload: 'contents' missing")
    if payload.get('totalCount') is None:
        raise RemoteUnavailable("Malformed list payload: 'totalCount' missing")
    contents = payload['contents']
    try:
        total_count = int(payload['totalCount'])
        offset = int(payload.get('offset', 0))
        limit = int(payload.get('limit', len(contents)))
    except (TypeError, ValueError) as exc:
        raise RemoteUnavailable(f"Malformed list payload: {exc}") from exc
    items = [parse_item(item) for item in contents]
    return items, total_count, offset, limit


def parse_term_list(payload) -> Tuple[List[Term], int, int, int]:
    """Return ``(terms, total_count, offset, limit)`` from a terms envelope."""
    terms, total_count, offset, limit = _parse_envelope(payload, parse_term)
    logger.debug('Parsed %d terms (totalCount=%d)', len(terms), total_count)
    return terms, total_count, offset, limit


def parse_category_list(payload) -> List[Category]:
    categories, _, _, _ = _parse_envelope(payload, parse_category)
    logger.debug('Parsed %d categories', len(categories))
    return categories


def first_or_none(items: List[T]) -> Optional[T]:
    return items[0] if items else None
