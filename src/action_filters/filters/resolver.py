"""Resolution of an action's id relative to the host a filter is attached to.

Filters attached to a controller see bare action ids (``"delete"``).
Filters attached to a module see ids relative to that module, so a
module ``admin`` running ``admin/user/delete`` resolves it as
``user/delete`` no matter how deeply ``admin`` itself is nested.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from action_filters.core.interfaces import ScopedHost
from action_filters.core.types import SEPARATOR, ActionId

if TYPE_CHECKING:
    from action_filters.core.interfaces import ActionLike


def resolve_action_id(action: ActionLike, host: object | None) -> ActionId:
    """Return the id of *action* as seen from *host*.

    Parameters
    ----------
    action:
        The action being filtered.
    host:
        The object the filter is attached to.  When it exposes a scope
        (:class:`~action_filters.core.interfaces.ScopedHost`) the scope
        prefix is stripped from the action's unique id, once.  Any other
        host yields the action's own id.
    """
    if isinstance(host, ScopedHost):
        scope = host.scope_id
        unique_id = action.unique_id
        prefix = scope + SEPARATOR
        if scope and unique_id.startswith(prefix):
            return ActionId(unique_id[len(prefix):])
        return ActionId(unique_id)
    return ActionId(action.id)
