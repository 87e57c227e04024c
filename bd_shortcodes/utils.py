"""Utility functions for bd-shortcodes.

Key functions:
    slugify: Convert a name to a URL/CSS friendly slug.
    join_root_url: Prefix a site-relative path with the site URL.
"""

from __future__ import annotations

import re


def slugify(name: str) -> str:
    """Convert a name to a lowercase, hyphen separated slug.

    Args:
        name: Any display name, e.g. a menu name.

    Returns:
        Slug safe for ids and class names.

    Examples:
        >>> slugify("Primary Menu")
        'primary-menu'
    """
    cleaned = re.sub(r"[^a-zA-Z0-9]+", "-", name)
    return cleaned.strip("-").lower()


def join_root_url(root_url: str, path: str) -> str:
    """Prefix a site-relative path with the site URL.

    Absolute URLs and protocol-relative paths are returned as given, so menu
    items and archive links may already point elsewhere.

    Examples:
        >>> join_root_url('https://example.com/', '2024/01/')
        'https://example.com/2024/01/'

        >>> join_root_url('https://example.com', 'https://cdn.test/a.png')
        'https://cdn.test/a.png'
    """
    if not root_url or path.startswith(("http://", "https://", "//")):
        return path
    return f"{root_url.rstrip('/')}/{path.lstrip('/')}"
