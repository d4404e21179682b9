"""Action filters.

This subpackage provides:

* **ActionFilter** -- the base class: ``only`` / ``except`` applicability
  and the before/after hook contract.
* **match_wildcard** -- trailing-``*`` prefix matching of action ids.
* **resolve_action_id** -- action ids relative to the host a filter is
  attached to.
* **CallbackFilter**, **AccessFilter**, **LoggingFilter** -- stock filters.
"""
from __future__ import annotations

from action_filters.filters.base import ActionFilter
from action_filters.filters.builtin import AccessFilter, CallbackFilter, LoggingFilter
from action_filters.filters.resolver import resolve_action_id
from action_filters.filters.wildcard import match_any, match_wildcard

__all__ = [
    "ActionFilter",
    "AccessFilter",
    "CallbackFilter",
    "LoggingFilter",
    "match_any",
    "match_wildcard",
    "resolve_action_id",
]
