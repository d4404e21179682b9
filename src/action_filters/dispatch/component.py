"""Hook registry shared by every host.

A :class:`Component` keeps two ordered handler lists, one per
:class:`~action_filters.core.types.HookChannel`, plus an ordered mapping
of named filters attached to it.  Handlers run in registration order;
the ``beforeAction`` channel stops as soon as a handler marks the
context handled (a vetoing filter does).

``afterAction`` is special: before the persistent handlers run, the
component pops and runs the after hooks its own filters armed for this
invocation, innermost first.  Those armed hooks live on the
:class:`~action_filters.core.types.ActionContext`, so nothing about an
invocation is stored on the component.

Components are **not** thread-safe to mutate while an action runs.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from action_filters.core.errors import UnknownHookChannel
from action_filters.core.types import ActionContext, HookChannel

if TYPE_CHECKING:
    from action_filters.core.interfaces import Handler
    from action_filters.filters.base import ActionFilter

logger = logging.getLogger(__name__)


def _channel(channel: HookChannel | str) -> HookChannel:
    try:
        return HookChannel(channel)
    except ValueError:
        raise UnknownHookChannel(
            f"Unknown hook channel '{channel}'",
            details={"channel": str(channel)},
        ) from None


class Component:
    """Base class for objects that run actions and accept filters."""

    def __init__(self) -> None:
        self._hooks: dict[HookChannel, list[tuple[int, Handler]]] = {
            channel: [] for channel in HookChannel
        }
        self._filters: dict[str, ActionFilter] = {}

    # -- Hook registry --------------------------------------------------------

    def on(
        self,
        channel: HookChannel | str,
        handler: Handler,
        priority: int = 0,
        *,
        append: bool = True,
    ) -> None:
        """Register *handler* on *channel*.

        Parameters
        ----------
        channel:
            ``"beforeAction"`` or ``"afterAction"``.
        handler:
            Called with the invocation's
            :class:`~action_filters.core.types.ActionContext`.  Registering
            an equal handler twice has no effect.
        priority:
            Handlers with a higher priority run first.  Handlers of equal
            priority run in registration order, which is how filters are
            ordered: they all register with the default priority.
        append:
            ``False`` puts the handler in front of the other handlers of
            its priority instead of behind them.

        Raises
        ------
        UnknownHookChannel
            If *channel* is not a hook channel.
        """
        handlers = self._hooks[_channel(channel)]
        if any(registered == handler for _, registered in handlers):
            return
        if append:
            index = next(
                (i for i, (p, _) in enumerate(handlers) if p < priority),
                len(handlers),
            )
        else:
            index = next(
                (i for i, (p, _) in enumerate(handlers) if p <= priority),
                len(handlers),
            )
        handlers.insert(index, (priority, handler))

    def off(self, channel: HookChannel | str, handler: Handler | None = None) -> bool:
        """Remove *handler* from *channel*, or every handler when omitted.

        Returns ``True`` if anything was removed.
        """
        handlers = self._hooks[_channel(channel)]
        if handler is None:
            removed = bool(handlers)
            handlers.clear()
            return removed
        for index, (_, registered) in enumerate(handlers):
            if registered == handler:
                del handlers[index]
                return True
        return False

    def has_handlers(self, channel: HookChannel | str) -> bool:
        """Return whether any handler is registered on *channel*."""
        return bool(self._hooks[_channel(channel)])

    def trigger(self, channel: HookChannel | str, context: ActionContext) -> None:
        """Run the handlers of *channel* against *context*."""
        channel = _channel(channel)
        context.handled = False

        if channel is HookChannel.AFTER_ACTION:
            for hook in context.disarm(self):
                hook(context)

        # iterate over a copy: a handler may detach itself or others
        for _, handler in list(self._hooks[channel]):
            handler(context)
            if context.handled:
                logger.debug(
                    "%s stopped on %r for action '%s'",
                    channel.value,
                    self,
                    context.action.unique_id,
                )
                break

    def before_action(self, context: ActionContext) -> bool:
        """Trigger ``beforeAction``.  Returns whether the action may run."""
        self.trigger(HookChannel.BEFORE_ACTION, context)
        return context.valid

    def after_action(self, context: ActionContext) -> Any:
        """Trigger ``afterAction``.  Returns the processed result."""
        self.trigger(HookChannel.AFTER_ACTION, context)
        return context.result

    # -- Named filters ----------------------------------------------------------

    @property
    def filters(self) -> dict[str, ActionFilter]:
        """The attached filters by name, in attachment order."""
        return dict(self._filters)

    def get_filter(self, name: str) -> ActionFilter | None:
        """Return the filter attached under *name*, or ``None``."""
        return self._filters.get(name)

    def attach_filter(self, name: str, action_filter: ActionFilter) -> ActionFilter:
        """Attach *action_filter* under *name*.

        Attaching the filter already registered under *name* changes
        nothing.  A different filter registered under *name* is detached
        first.  A filter attached elsewhere (another host, or this one under
        another name) is detached from there, then registered here at the
        end of the order.
        """
        current = self._filters.get(name)
        if current is action_filter:
            return action_filter
        if current is not None:
            del self._filters[name]
            current.detach()

        owner = action_filter.owner
        if isinstance(owner, Component):
            owner._forget(action_filter)
        action_filter.detach()

        self._filters[name] = action_filter
        action_filter.attach(self)
        return action_filter

    def attach_filters(self, filters: Mapping[str, ActionFilter]) -> None:
        """Attach every filter of *filters*, in mapping order."""
        for name, action_filter in filters.items():
            self.attach_filter(name, action_filter)

    def detach_filter(self, name: str) -> ActionFilter | None:
        """Detach and return the filter attached under *name*, if any."""
        action_filter = self._filters.pop(name, None)
        if action_filter is not None and action_filter.owner is self:
            action_filter.detach()
        return action_filter

    def _forget(self, action_filter: ActionFilter) -> None:
        """Drop every name *action_filter* is registered under."""
        for name in [n for n, f in self._filters.items() if f is action_filter]:
            del self._filters[name]
