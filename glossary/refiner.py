"""
In-memory refinement of an already-loaded batch of terms.

``refine()`` re-applies the category / difficulty / free-text criteria to
the candidate batch without another round trip to the content API.  It
always starts from the batch it is given, so callers must pass the
original candidates (not a previous result) whenever the criteria change.

Only the loaded batch is searched: a term that exists remotely but was
not part of the candidates is never returned.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from glossary.models import FilterCriteria, Term


def matches_category(term: Term, category_id: Optional[str]) -> bool:
    if not category_id:
        return True
    return term.category is not None and term.category.id == category_id


def matches_difficulty(term: Term, difficulty: Optional[str]) -> bool:
    if not difficulty:
        return True
    return difficulty in (term.difficulty or [])


def matches_query(term: Term, query: Optional[str]) -> bool:
    """Case-insensitive substring match against ``search_title`` only.

    Terms without a ``search_title`` never match a non-empty query; the
    raw title is not consulted.
    """
    if not query:
        return True
    if not term.search_title:
        return False
    return query.casefold() in term.search_title.casefold()


def matches(term: Term, criteria: FilterCriteria) -> bool:
    """True when *term* satisfies every criterion present in *criteria*."""
    return (
        matches_category(term, criteria.category)
        and matches_difficulty(term, criteria.difficulty)
        and matches_query(term, criteria.query)
    )


def refine(candidates: Iterable[Term], criteria: FilterCriteria) -> List[Term]:
    """Return the candidates satisfying *criteria*, in their original order."""
    return [term for term in candidates if matches(term, criteria)]
