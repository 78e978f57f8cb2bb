"""
Content-API payload parsers – public API.

Usage::

    from glossary.parsers import parse_term_list, parse_category_list
"""

from glossary.parsers.common import html_to_text
from glossary.parsers.content_parser import (
    parse_term,
    parse_category,
    parse_term_list,
    parse_category_list,
)

__all__ = [
    'parse_term',
    'parse_category',
    'parse_term_list',
    'parse_category_list',
    'html_to_text',
]
