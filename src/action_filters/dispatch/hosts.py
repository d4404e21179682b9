"""Minimal modules, controllers and actions.

These give filters something to attach to and give actions hierarchical
ids, so the pipeline can be used without a surrounding framework:

.. code-block:: text

    app (root module, unique id "")
    └── admin (module, unique id "admin")
        └── user (controller, unique id "admin/user")
            └── delete (action, unique id "admin/user/delete")

A filter on ``admin`` sees ``user/delete``; a filter on ``user`` sees
``delete``.  Resolving routes to controllers is left to the caller.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from action_filters.core.errors import ActionNotFound
from action_filters.core.types import SEPARATOR, ActionContext
from action_filters.dispatch.chain import run_filtered
from action_filters.dispatch.component import Component


def _join(prefix: str, child_id: str) -> str:
    return f"{prefix}{SEPARATOR}{child_id}" if prefix else child_id


class Module(Component):
    """A scope grouping controllers and child modules.

    A module without a parent is the root (the application): its
    ``unique_id`` is empty and it does not prefix ids below it.
    """

    def __init__(self, id: str, parent: Module | None = None) -> None:
        super().__init__()
        self.id = id
        self.parent = parent

    def __repr__(self) -> str:
        return f"Module({self.unique_id or self.id!r})"

    @property
    def unique_id(self) -> str:
        if self.parent is None:
            return ""
        return _join(self.parent.unique_id, self.id)

    @property
    def scope_id(self) -> str:
        return self.unique_id

    def ancestors(self) -> list[Module]:
        """Return this module and its ancestors, root first."""
        chain: list[Module] = []
        module: Module | None = self
        while module is not None:
            chain.append(module)
            module = module.parent
        chain.reverse()
        return chain


class Action:
    """A runnable action belonging to a controller."""

    def __init__(
        self,
        id: str,
        controller: Controller,
        handler: Callable[..., Any],
    ) -> None:
        self.id = id
        self.controller = controller
        self._handler = handler

    def __repr__(self) -> str:
        return f"Action({self.unique_id!r})"

    @property
    def unique_id(self) -> str:
        return _join(self.controller.unique_id, self.id)

    def run(self, *args: Any, **kwargs: Any) -> Any:
        return self._handler(*args, **kwargs)


class Controller(Component):
    """Runs actions through the filters of its modules and its own.

    Actions are methods named ``action_<name>`` (dashes in an action id
    map to underscores, so ``"view-all"`` runs ``action_view_all``) or
    entries of :meth:`actions`, which take precedence.
    """

    ACTION_PREFIX = "action_"

    def __init__(self, id: str, module: Module | None = None) -> None:
        super().__init__()
        self.id = id
        self.module = module

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.unique_id!r})"

    @property
    def unique_id(self) -> str:
        if self.module is None:
            return self.id
        return _join(self.module.unique_id, self.id)

    def actions(self) -> dict[str, Callable[..., Any]]:
        """Standalone actions by id.  Override to declare them."""
        return {}

    def create_action(self, id: str) -> Action:
        """Return the action named *id*.

        Raises
        ------
        ActionNotFound
            If the controller defines no such action.
        """
        handler = self.actions().get(id)
        if handler is None:
            method = getattr(self, self.ACTION_PREFIX + id.replace("-", "_"), None)
            if callable(method):
                handler = method
        if handler is None:
            raise ActionNotFound(
                f"Unable to resolve action '{_join(self.unique_id, id)}'",
                details={"controller": self.unique_id, "action": id},
            )
        return Action(id, self, handler)

    def run_action_context(self, id: str, *args: Any, **kwargs: Any) -> ActionContext:
        """Run action *id* and return the finished invocation context."""
        action = self.create_action(id)
        hosts: list[Component] = []
        if self.module is not None:
            hosts.extend(self.module.ancestors())
        hosts.append(self)
        return run_filtered(hosts, action, lambda: action.run(*args, **kwargs))

    def run_action(self, id: str, *args: Any, **kwargs: Any) -> Any:
        """Run action *id* and return its result, or ``None`` if vetoed."""
        return self.run_action_context(id, *args, **kwargs).result
