"""Wildcard matching of action ids.

A pattern ending in ``*`` matches every id that starts with the text
before the ``*``; any other pattern matches only the identical id.
Matching is case-sensitive and has no regex or glob semantics: a ``*``
anywhere but at the end is an ordinary character.
"""
from __future__ import annotations

from collections.abc import Iterable

from action_filters.core.types import WILDCARD


def match_wildcard(pattern: str, identifier: str) -> bool:
    """Return ``True`` if *identifier* matches *pattern*.

    Examples
    --------
    >>> match_wildcard("admin/*", "admin/delete")
    True
    >>> match_wildcard("admin/*", "Admin/delete")
    False
    >>> match_wildcard("site/index", "site/index/extra")
    False
    """
    if pattern.endswith(WILDCARD):
        return identifier.startswith(pattern[: -len(WILDCARD)])
    return identifier == pattern


def match_any(patterns: Iterable[str], identifier: str) -> bool:
    """Return ``True`` if *identifier* matches at least one of *patterns*."""
    return any(match_wildcard(pattern, identifier) for pattern in patterns)
