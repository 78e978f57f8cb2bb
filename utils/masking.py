"""
Masking utilities for sensitive data in logs.

Different masking strategies are applied based on the sensitivity level:
- Full masking (100%): API keys, tokens
- Partial masking: service domains, hostnames (show first/last few chars)
"""

import re
from typing import Dict, Optional

# Header names whose values must never reach the logs
SENSITIVE_HEADERS = ('x-microcms-api-key', 'authorization', 'cookie')


def mask_full(value: Optional[str]) -> str:
    """
    Fully mask a sensitive value (100% hidden).

    Returns:
        '********' if value exists, 'None' if value is None/empty
    """
    if not value:
        return 'None'
    return '********'


def mask_partial(value: Optional[str], show_start: int = 2, show_end: int = 2,
                 min_masked: int = 2) -> str:
    """
    Partially mask a value, showing first and last few characters.

    Examples:
        'my-glossary' -> 'my*******ry'
        'docs' -> 'd**s'
        'abc' -> 'a*c'
    """
    if not value:
        return 'None'

    text = str(value)
    length = len(text)

    if length <= 2:
        return '*' * length
    if length == 3:
        return text[0] + '*' + text[-1]

    hidden = length - show_start - show_end
    if hidden < min_masked:
        # Shrink the visible edges, keeping at least one char on each side
        hidden = min(min_masked, length - 2)
        visible = length - hidden
        show_start = min(show_start, max(1, visible - 1))
        show_end = max(1, visible - show_start)
        hidden = length - show_start - show_end

    return text[:show_start] + '*' * hidden + text[-show_end:]


def mask_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Return a copy of *headers* with credential values fully masked."""
    if not headers:
        return {}
    return {
        name: mask_full(value) if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def mask_url(url: Optional[str]) -> str:
    """
    Mask the host of a URL, keeping scheme and path.

    Examples:
        'https://abc.io/api/v1' -> 'https://ab**io/api/v1'
    """
    if not url:
        return 'None'
    match = re.match(r'^(https?://)([^/]+)(.*)$', str(url))
    if not match:
        return mask_partial(url)
    return f"{match.group(1)}{mask_partial(match.group(2))}{match.group(3)}"
