"""
Shared helpers used by the content-API payload parsers.
"""

from __future__ import annotations

import re
import logging
from typing import List, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r'\s+')


# ---------------------------------------------------------------------------
# Rich-text handling
# ---------------------------------------------------------------------------

def html_to_text(html_content: Optional[str]) -> str:
    """Flatten a rich-text (HTML) field into a single line of plain text.

    ``<p>ファイアウォールは<strong>通信</strong>を制御</p>``
    → ``ファイアウォールは 通信 を制御``
    """
    if not html_content:
        return ''
    if '<' not in html_content:
        return _WHITESPACE_RE.sub(' ', html_content).strip()
    soup = BeautifulSoup(html_content, 'html.parser')
    text = soup.get_text(' ', strip=True)
    return _WHITESPACE_RE.sub(' ', text).strip()


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------

def coerce_str_list(value) -> List[str]:
    """Normalise a select field into a list of labels.

    microCMS returns multi-select fields as lists; single selects and
    hand-entered data may arrive as a bare string.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v not in (None, '')]
    logger.debug("Unexpected select value type: %s", type(value).__name__)
    return []


def coerce_optional_int(value) -> Optional[int]:
    if value is None or value == '':
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-integer order value: %r", value)
        return None


def coerce_optional_str(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None
