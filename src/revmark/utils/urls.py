#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/utils/urls.py
"""URL helpers for link and image conversion."""

from __future__ import annotations

import logging
import re
from typing import Iterable
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

# IETF RFC 3986 scheme syntax
_SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+\-.]*):")


def get_scheme(url: str) -> str:
    """Return the lowercase URI scheme of ``url``, or ``""`` for relative URLs.

    Parameters
    ----------
    url : str
        Raw ``href``/``src`` value

    Returns
    -------
    str
        Scheme without the trailing colon

    Examples
    --------
    >>> get_scheme("HTTPS://example.com")
    'https'
    >>> get_scheme("images/logo.png")
    ''

    """
    if not url:
        return ""

    match = _SCHEME_PATTERN.match(url.strip())
    if match is None:
        return ""
    return match.group(1).lower()


def is_scheme_allowed(scheme: str, allowed_schemes: Iterable[str]) -> bool:
    """Check ``scheme`` against an allow-list.

    An empty allow-list permits every scheme. Relative URLs (empty scheme) are
    only permitted by a non-empty list when it contains ``""``. The comparison
    is case-insensitive.

    Parameters
    ----------
    scheme : str
        Scheme returned by :func:`get_scheme`
    allowed_schemes : iterable of str
        Allowed scheme names

    Returns
    -------
    bool
        True if the scheme may be emitted

    """
    allowed = {s.lower() for s in allowed_schemes}
    if not allowed:
        return True

    permitted = scheme.lower() in allowed
    if not permitted:
        logger.debug("URI scheme %r is not in the allow-list %s", scheme, sorted(allowed))
    return permitted


def encode_url(url: str) -> str:
    """Percent-encode characters that terminate a Markdown link destination.

    Parameters
    ----------
    url : str
        Raw ``href``/``src`` value

    Returns
    -------
    str
        URL with spaces and parentheses encoded

    """
    return url.strip().replace("(", "%28").replace(")", "%29").replace(" ", "%20")


def is_absolute_url(url: str) -> bool:
    """Return True when ``url`` parses with both a scheme and a location or path."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path)
