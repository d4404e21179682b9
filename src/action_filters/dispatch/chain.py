"""Running an action through the filters of a stack of nested hosts.

Hosts are given outermost first (e.g. the modules from the root down,
then the controller).  Their ``beforeAction`` channels fire in that
order and their ``afterAction`` channels in the reverse order, so with
filters F1, F2 on a module and F3 on its controller::

    F1.before -> F2.before -> F3.before -> action
    action -> F3.after -> F2.after -> F1.after

The first veto stops everything: no later before hook, no action body
and no after hook runs, and the returned context has ``valid is False``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from action_filters.core.types import ActionContext

if TYPE_CHECKING:
    from action_filters.core.interfaces import ActionLike
    from action_filters.dispatch.component import Component

logger = logging.getLogger(__name__)


def run_filtered(
    hosts: Sequence[Component],
    action: ActionLike,
    body: Callable[[], Any],
) -> ActionContext:
    """Run *body* as *action* inside the filters of *hosts*.

    Parameters
    ----------
    hosts:
        The hosts whose filters apply, outermost first.
    action:
        The action being run; passed to every filter.
    body:
        Runs the action and returns its result.

    Returns
    -------
    ActionContext
        The finished context.  ``context.result`` holds the result after
        every after hook, or ``None`` when the action was vetoed.
    """
    context = ActionContext(action)

    for host in hosts:
        if not host.before_action(context):
            logger.debug(
                "Action '%s' vetoed by a filter of %r",
                action.unique_id,
                host,
            )
            return context

    context.result = body()

    for host in reversed(hosts):
        host.after_action(context)
    return context
