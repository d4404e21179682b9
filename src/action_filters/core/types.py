"""Shared value types for the action filter pipeline.

Key design decisions:
* ``ActionId`` is a ``NewType`` wrapper around ``str`` so identifiers
  stay plain strings while remaining distinct for static checkers.
* ``HookChannel`` uses *string* values matching the event names hosts
  have always used (``beforeAction`` / ``afterAction``).
* ``ActionContext`` is a plain mutable dataclass rather than a Pydantic
  model: it is created once per invocation, mutated in place by hooks
  and never serialised.
"""
from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NewType

if TYPE_CHECKING:
    from action_filters.core.interfaces import ActionLike, HookHost

# ---------------------------------------------------------------------------
# Value types (NewType wrappers)
# ---------------------------------------------------------------------------

ActionId = NewType("ActionId", str)
"""Action identifier in the form ``module/controller/action`` (or a suffix of it)."""

WILDCARD = "*"
"""Trailing marker that turns a pattern into a prefix pattern."""

SEPARATOR = "/"
"""Segment separator inside an :data:`ActionId`."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class HookChannel(enum.StrEnum):
    """The two hook channels every host exposes."""

    BEFORE_ACTION = "beforeAction"
    AFTER_ACTION = "afterAction"


# ---------------------------------------------------------------------------
# Per-invocation context
# ---------------------------------------------------------------------------

AfterHook = Callable[["ActionContext"], None]
"""A one-shot after hook armed for a single invocation."""


@dataclass(slots=True)
class ArmedHook:
    """An after hook armed by a host's before channel for one invocation."""

    host: HookHost
    hook: AfterHook


@dataclass(slots=True, weakref_slot=True, eq=False)
class ActionContext:
    """State shared by every hook of a single action invocation.

    Attributes
    ----------
    action:
        The action being run.
    result:
        The action result.  ``None`` until the action body runs; replaced
        by each after hook in turn.
    valid:
        ``False`` once a filter has vetoed the action.
    handled:
        ``True`` stops the remaining handlers of the channel currently
        being triggered.

    Contexts compare and hash by identity, and are weakly referenceable,
    so filters can key per-invocation state on them.
    """

    action: ActionLike
    result: Any = None
    valid: bool = True
    handled: bool = False
    _armed: list[ArmedHook] = field(default_factory=list, repr=False)

    # -- Armed after hooks --------------------------------------------------

    def arm(self, host: HookHost, hook: AfterHook) -> None:
        """Arm *hook* to run once when *host* fires its after channel."""
        self._armed.append(ArmedHook(host, hook))

    def disarm(self, host: HookHost) -> list[AfterHook]:
        """Pop and return the hooks armed for *host*, innermost first.

        Hosts unwind in the reverse of the order they were entered, so the
        hooks armed for *host* are always on top of the stack.
        """
        hooks: list[AfterHook] = []
        while self._armed and self._armed[-1].host is host:
            hooks.append(self._armed.pop().hook)
        return hooks

    def armed_count(self, host: HookHost | None = None) -> int:
        """Return the number of armed hooks, optionally only for *host*."""
        if host is None:
            return len(self._armed)
        return sum(1 for entry in self._armed if entry.host is host)

    def halt(self) -> None:
        """Veto the action and stop the current channel."""
        self.valid = False
        self.handled = True
