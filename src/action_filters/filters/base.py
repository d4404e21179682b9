"""Base class for action filters.

An action filter takes part in the action execution workflow by
responding to the ``beforeAction`` and ``afterAction`` hook channels of
the host (module or controller) it is attached to.

Per invocation a filter is in one of these states:

.. code-block:: text

    Idle ──inactive──> Skipped
      |
      +──before_action() is True──> Armed ──action ran──> Done
      |
      +──before_action() is False──> Halted

Only an *Armed* filter ever reaches :meth:`ActionFilter.after_action`,
and only when the action itself executed.  The armed after hook lives on
the invocation's :class:`~action_filters.core.types.ActionContext`, not
on the filter, so a filter may serve any number of invocations.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import partial
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from action_filters.core.config import FilterConfig
from action_filters.core.errors import InvalidFilterConfig
from action_filters.core.types import ActionContext, ActionId, HookChannel
from action_filters.filters.resolver import resolve_action_id
from action_filters.filters.wildcard import match_any

if TYPE_CHECKING:
    from typing import Self

    from action_filters.core.interfaces import ActionLike, HookHost

logger = logging.getLogger(__name__)


class ActionFilter:
    """Base class for action filters.

    Subclasses override :meth:`before_action` to veto actions and
    :meth:`after_action` to post-process results.

    Parameters
    ----------
    only:
        Action id patterns this filter applies to.  ``None`` (the
        default) or an empty list means every action, unless listed in
        *except_*.  Patterns may end in ``*``, e.g. ``"site/*"``.
    except_:
        Action id patterns this filter never applies to.  An id matching
        both lists is excluded.

    When the filter is attached to a module, ids are relative to that
    module and include child module and controller ids.
    """

    def __init__(
        self,
        *,
        only: Iterable[str] | None = None,
        except_: Iterable[str] | None = None,
    ) -> None:
        self.only: list[str] | None = list(only) if only is not None else None
        self.except_: list[str] = list(except_) if except_ is not None else []
        self._owner: HookHost | None = None
        self._cycle: object | None = None

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> Self:
        """Build a filter from a configuration mapping.

        ``only`` and ``except`` are validated by
        :class:`~action_filters.core.config.FilterConfig`; every other key
        is passed to the constructor as a keyword argument.

        Raises
        ------
        InvalidFilterConfig
            If the mapping fails validation or carries options the
            filter class does not accept.
        """
        try:
            config = FilterConfig.model_validate(dict(data))
        except ValidationError as exc:
            raise InvalidFilterConfig(
                f"Invalid configuration for {cls.__name__}: "
                f"{exc.error_count()} validation error(s)",
                details={"filter": cls.__name__, "errors": exc.errors(include_url=False)},
            ) from exc

        try:
            return cls(only=config.only, except_=config.except_, **config.options)
        except TypeError as exc:
            raise InvalidFilterConfig(
                f"Invalid configuration for {cls.__name__}: {exc}",
                details={"filter": cls.__name__, "options": sorted(config.options)},
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(only={self.only!r}, except_={self.except_!r})"

    # -- Attachment ---------------------------------------------------------

    @property
    def owner(self) -> HookHost | None:
        """The host this filter is attached to, or ``None``."""
        return self._owner

    def attach(self, owner: HookHost) -> None:
        """Attach the filter to *owner*, registering its before hook.

        Attaching to the current owner again changes nothing.  Attaching
        to a different host detaches from the previous one first.
        """
        if self._owner is owner:
            return
        if self._owner is not None:
            self.detach()
        self._owner = owner
        self._cycle = object()
        owner.on(HookChannel.BEFORE_ACTION, self.before_filter)
        logger.debug("%r attached to %r", self, owner)

    def detach(self) -> None:
        """Detach the filter from its owner.  A no-op when not attached."""
        if self._owner is None:
            return
        self._owner.off(HookChannel.BEFORE_ACTION, self.before_filter)
        self._owner.off(HookChannel.AFTER_ACTION, self.after_filter)
        logger.debug("%r detached from %r", self, self._owner)
        self._owner = None
        self._cycle = None

    # -- Hook bodies ----------------------------------------------------------

    def before_filter(self, context: ActionContext) -> None:
        """Handle the owner's ``beforeAction`` channel."""
        if self._owner is None or not self.is_active(context.action):
            return

        if self.before_action(context.action):
            # after_filter runs only if before_filter succeeded, so that
            # before and after calls nest properly
            context.arm(self._owner, partial(self.after_filter, cycle=self._cycle))
        else:
            logger.debug("%r vetoed action %r", self, context.action.unique_id)
            context.halt()

    def after_filter(self, context: ActionContext, cycle: object | None = None) -> None:
        """Handle the owner's ``afterAction`` channel for an armed invocation.

        *cycle* is the attachment the hook was armed under.  The hook does
        nothing once that attachment has ended, even if the filter has
        been attached again since.
        """
        if not self._in_cycle(cycle):
            return
        context.result = self.after_action(context.action, context.result)

    def _in_cycle(self, cycle: object | None) -> bool:
        """Return whether a hook armed under *cycle* may still run."""
        return self._owner is not None and (cycle is None or cycle is self._cycle)

    # -- Overridable hooks ------------------------------------------------------

    def before_action(self, action: ActionLike) -> bool:
        """Called right before *action* runs, after all outer filters.

        Override to veto the action by returning ``False``.
        """
        return True

    def after_action(self, action: ActionLike, result: Any) -> Any:
        """Called right after *action* ran.  Returns the processed result."""
        return result

    # -- Applicability ----------------------------------------------------------

    def get_action_id(self, action: ActionLike) -> ActionId:
        """Return the id of *action* relative to the owner."""
        return resolve_action_id(action, self._owner)

    def is_active(self, action: ActionLike) -> bool:
        """Return whether the filter applies to *action*."""
        action_id = self.get_action_id(action)
        only_match = not self.only or match_any(self.only, action_id)
        except_match = match_any(self.except_, action_id)
        return only_match and not except_match
