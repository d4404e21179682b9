"""Stock action filters.

* :class:`CallbackFilter` -- before/after hooks supplied as callables.
* :class:`AccessFilter` -- vetoes actions a predicate does not allow.
* :class:`LoggingFilter` -- logs each action with its elapsed time.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any
from weakref import WeakKeyDictionary

from action_filters.filters.base import ActionFilter

if TYPE_CHECKING:
    from action_filters.core.interfaces import ActionLike
    from action_filters.core.types import ActionContext

logger = logging.getLogger(__name__)


class CallbackFilter(ActionFilter):
    """A filter whose hooks are plain callables.

    Parameters
    ----------
    before:
        ``before(action) -> bool``.  Returning ``False`` vetoes the
        action.  Omitted means always continue.
    after:
        ``after(action, result) -> result``.  Omitted means the result
        passes through unchanged.
    """

    def __init__(
        self,
        before: Callable[[ActionLike], bool] | None = None,
        after: Callable[[ActionLike, Any], Any] | None = None,
        *,
        only: Iterable[str] | None = None,
        except_: Iterable[str] | None = None,
    ) -> None:
        super().__init__(only=only, except_=except_)
        self._before = before
        self._after = after

    def before_action(self, action: ActionLike) -> bool:
        if self._before is None:
            return True
        return bool(self._before(action))

    def after_action(self, action: ActionLike, result: Any) -> Any:
        if self._after is None:
            return result
        return self._after(action, result)


class AccessFilter(ActionFilter):
    """Vetoes every action for which *predicate* returns ``False``.

    A denial is an ordinary outcome: the action does not run and the
    invocation context reports ``valid is False``.  Denied action ids are
    kept in :attr:`denied`, most recent last.

    Parameters
    ----------
    predicate:
        ``predicate(action) -> bool``; ``True`` allows the action.
    """

    def __init__(
        self,
        predicate: Callable[[ActionLike], bool],
        *,
        only: Iterable[str] | None = None,
        except_: Iterable[str] | None = None,
    ) -> None:
        super().__init__(only=only, except_=except_)
        self._predicate = predicate
        self.denied: list[str] = []

    def before_action(self, action: ActionLike) -> bool:
        if self._predicate(action):
            return True
        self.denied.append(action.unique_id)
        logger.warning("Access denied to action '%s'", action.unique_id)
        return False


class LoggingFilter(ActionFilter):
    """Logs entry into and exit from each action, with the elapsed time.

    Start times are kept per invocation context and held weakly, so an
    invocation vetoed by a later filter leaves nothing behind.

    Parameters
    ----------
    logger:
        Logger to write to.  Defaults to this module's logger.
    level:
        Level of the emitted records.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        *,
        only: Iterable[str] | None = None,
        except_: Iterable[str] | None = None,
    ) -> None:
        super().__init__(only=only, except_=except_)
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self._started: WeakKeyDictionary[ActionContext, float] = WeakKeyDictionary()

    def before_action(self, action: ActionLike) -> bool:
        self.logger.log(self.level, "Running action '%s'", action.unique_id)
        return True

    def before_filter(self, context: ActionContext) -> None:
        armed = context.armed_count()
        super().before_filter(context)
        if context.armed_count() > armed:
            self._started[context] = time.perf_counter()

    def after_filter(self, context: ActionContext, cycle: object | None = None) -> None:
        if not self._in_cycle(cycle):
            return
        started = self._started.pop(context, None)
        super().after_filter(context, cycle)
        elapsed = time.perf_counter() - started if started is not None else 0.0
        self.logger.log(
            self.level,
            "Finished action '%s' in %.3f ms",
            context.action.unique_id,
            elapsed * 1000,
        )
