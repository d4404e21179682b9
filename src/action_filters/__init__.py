"""Action filters -- before/after interception of named actions.

Filters wrap the execution of actions with ordered before/after hooks,
apply selectively through ``only`` / ``except`` wildcard patterns over
action ids, and always nest properly: a filter's after hook runs if and
only if its before hook approved the action and the action ran.

Layers
------
* Core types, errors, config, interfaces (:mod:`action_filters.core`)
* Filters (:mod:`action_filters.filters`)
* Hosts and dispatch (:mod:`action_filters.dispatch`)
"""
from __future__ import annotations

__version__ = "1.0.0a1"

# ---------------------------------------------------------------------------
# Core -- types, errors, config, interfaces
# ---------------------------------------------------------------------------
from action_filters.core.config import FilterConfig
from action_filters.core.errors import (
    ActionNotFound,
    ConfigurationError,
    FilterError,
    InvalidCallError,
    InvalidFilterConfig,
    UnknownHookChannel,
)
from action_filters.core.interfaces import ActionLike, HookHost, ScopedHost
from action_filters.core.types import ActionContext, ActionId, HookChannel

# ---------------------------------------------------------------------------
# Hosts and dispatch
# ---------------------------------------------------------------------------
from action_filters.dispatch import (
    Action,
    Component,
    Controller,
    Module,
    run_filtered,
)

# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------
from action_filters.filters import (
    AccessFilter,
    ActionFilter,
    CallbackFilter,
    LoggingFilter,
    match_wildcard,
    resolve_action_id,
)

__all__ = [
    "__version__",
    # Core
    "ActionContext",
    "ActionId",
    "ActionLike",
    "FilterConfig",
    "HookChannel",
    "HookHost",
    "ScopedHost",
    # Errors
    "ActionNotFound",
    "ConfigurationError",
    "FilterError",
    "InvalidCallError",
    "InvalidFilterConfig",
    "UnknownHookChannel",
    # Dispatch
    "Action",
    "Component",
    "Controller",
    "Module",
    "run_filtered",
    # Filters
    "AccessFilter",
    "ActionFilter",
    "CallbackFilter",
    "LoggingFilter",
    "match_wildcard",
    "resolve_action_id",
]
