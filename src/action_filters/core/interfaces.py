"""Structural interfaces consumed by the filter core.

The core needs very little from its environment: a host that accepts
hook registrations, and actions that can report their own identifier.
Both are defined as ``typing.Protocol`` classes decorated with
``@runtime_checkable`` so that ``isinstance`` checks work at run-time
in addition to static analysis.

Concrete hosts live in :mod:`action_filters.dispatch.hosts`.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from action_filters.core.types import ActionContext, HookChannel

Handler = Callable[["ActionContext"], None]
"""A hook channel handler."""


@runtime_checkable
class ActionLike(Protocol):
    """An action as seen by filters."""

    @property
    def id(self) -> str:
        """The action id relative to its controller, e.g. ``"delete"``."""
        ...

    @property
    def unique_id(self) -> str:
        """The fully-qualified id, e.g. ``"admin/user/delete"``."""
        ...


@runtime_checkable
class HookHost(Protocol):
    """The hook registry a filter attaches to."""

    def on(
        self,
        channel: HookChannel | str,
        handler: Handler,
        priority: int = 0,
        *,
        append: bool = True,
    ) -> None:
        """Register *handler* on *channel*."""
        ...

    def off(self, channel: HookChannel | str, handler: Handler | None = None) -> bool:
        """Remove *handler* (or every handler) from *channel*."""
        ...


@runtime_checkable
class ScopedHost(Protocol):
    """A host nested under a scope whose id prefixes its actions' ids.

    Modules implement this; controllers do not.
    """

    @property
    def scope_id(self) -> str:
        """The scope's own unique id.  Empty for a root scope."""
        ...
