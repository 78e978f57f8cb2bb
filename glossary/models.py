"""
Data models for the IT glossary search layer.

All models use dataclasses for lightweight internal usage and easy
serialisation to dicts / JSON (for the FastAPI REST layer).
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Optional, Mapping


# ---------------------------------------------------------------------------
# Difficulty enumeration
# ---------------------------------------------------------------------------

DIFFICULTY_LABELS = {
    'beginner': '初級',
    'intermediate': '中級',
    'advanced': '上級',
}

DIFFICULTY_COLORS = {
    'beginner': 'bg-green-100 text-green-800',
    'intermediate': 'bg-yellow-100 text-yellow-800',
    'advanced': 'bg-red-100 text-red-800',
}

_NEUTRAL_COLOR = 'bg-gray-100 text-gray-800'


def get_difficulty_label(difficulty: List[str]) -> str:
    """Return the display label for the first difficulty of a term.

    Unknown values are shown as-is; an empty list yields ``''``.
    """
    if not difficulty:
        return ''
    first = difficulty[0]
    return DIFFICULTY_LABELS.get(first, first)


def get_difficulty_color(difficulty: List[str]) -> str:
    """Return the badge colour classes for the first difficulty of a term."""
    if not difficulty:
        return _NEUTRAL_COLOR
    return DIFFICULTY_COLORS.get(difficulty[0], _NEUTRAL_COLOR)


# ---------------------------------------------------------------------------
# Content entries
# ---------------------------------------------------------------------------

@dataclass
class Category:
    """A grouping of terms (セキュリティ, ネットワーク …)."""
    id: str
    name: str
    icon: str = ''
    slug: str = ''
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Term:
    """One glossary entry as delivered by the content API.

    Attributes:
        difficulty: One or more labels from ``DIFFICULTY_LABELS``.
        search_title: Synonym-expanded title produced upstream, used only
                      for substring search.  ``None`` when the entry was
                      never enriched.
        description_text: Plain-text rendering of ``description`` for list
                          excerpts.
    """
    id: str
    title: str
    slug: str = ''
    description: str = ''
    category: Optional[Category] = None
    difficulty: List[str] = field(default_factory=list)
    search_title: Optional[str] = None
    published_at: str = ''
    order: Optional[int] = None
    description_text: str = ''

    def to_dict(self) -> dict:
        return asdict(self)

    def to_list_item(self) -> dict:
        """Return the compact dict rendered by list / search views."""
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'href': f'/terms/{self.slug}',
            'excerpt': self.description_text,
            'difficulty': list(self.difficulty),
            'difficulty_label': get_difficulty_label(self.difficulty),
            'difficulty_color': get_difficulty_color(self.difficulty),
            'category': self.category.to_dict() if self.category else None,
        }


# ---------------------------------------------------------------------------
# Filter criteria
# ---------------------------------------------------------------------------

def _clean(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class FilterCriteria:
    """Active narrowing parameters derived from the page URL.

    An absent (``None``) criterion means "no constraint".  ``page`` is
    always >= 1.
    """
    category: Optional[str] = None
    difficulty: Optional[str] = None
    query: Optional[str] = None
    page: int = 1

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f'page must be >= 1, got {self.page}')

    @classmethod
    def from_query_params(cls, params: Mapping) -> 'FilterCriteria':
        """Build criteria from ``page`` / ``category`` / ``difficulty`` / ``q``.

        Blank values count as absent; a missing, non-numeric or
        non-positive page falls back to 1.
        """
        try:
            page = int(params.get('page') or 1)
        except (TypeError, ValueError):
            page = 1
        return cls(
            category=_clean(params.get('category')),
            difficulty=_clean(params.get('difficulty')),
            query=_clean(params.get('q')),
            page=max(page, 1),
        )

    @property
    def is_empty(self) -> bool:
        """True when no narrowing criterion is set (page is ignored)."""
        return not (self.category or self.difficulty or self.query)

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------

@dataclass
class ResultPage:
    """One page of terms plus the remote-wide match count."""
    terms: List[Term] = field(default_factory=list)
    total_count: int = 0
    offset: int = 0
    limit: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PageLink:
    """A numbered (or previous / next) pagination link."""
    page: int
    href: str
    is_current: bool = False


@dataclass
class Pagination:
    current_page: int = 1
    total_pages: int = 0
    pages: List[PageLink] = field(default_factory=list)
    previous: Optional[PageLink] = None
    next: Optional[PageLink] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class NoMatches:
    """Empty-result state shown instead of the term list."""
    message: str = '用語が見つかりません'
    hint: str = '選択した条件に該当する用語がありません。フィルター条件を変更してお試しください。'
    view_all_href: str = '/terms'
    view_all_label: str = 'すべての用語を表示'

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TermsPage:
    """Everything a listing / search view needs to render."""
    criteria: FilterCriteria
    terms: List[Term] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
    total_count: int = 0
    pagination: Pagination = field(default_factory=Pagination)
    no_matches: Optional[NoMatches] = None

    def to_dict(self) -> dict:
        return {
            'criteria': self.criteria.to_dict(),
            'terms': [t.to_list_item() for t in self.terms],
            'categories': [c.to_dict() for c in self.categories],
            'total_count': self.total_count,
            'pagination': self.pagination.to_dict(),
            'no_matches': self.no_matches.to_dict() if self.no_matches else None,
        }
