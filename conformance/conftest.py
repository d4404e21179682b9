"""Shared fixtures for the conformance tests.

Provides a hook journal, a factory for journaling filters built from the
public :class:`CallbackFilter`, and a small application tree.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from action_filters.core.interfaces import ActionLike
from action_filters.dispatch.hosts import Controller, Module
from action_filters.filters.builtin import CallbackFilter

class ScenarioController(Controller):
    """Root-level controller whose actions echo their route."""

    def __init__(self, id: str, module: Module, journal: list[str]) -> None:
        super().__init__(id, module)
        self.journal = journal

    def action_delete(self) -> str:
        self.journal.append("action")
        return "R0"

    def action_check(self) -> str:
        self.journal.append("action")
        return "R0"


@pytest.fixture()
def journal() -> list[str]:
    return []


@pytest.fixture()
def journaling_filter(journal: list[str]) -> Callable[..., CallbackFilter]:
    """Factory: ``journaling_filter(name, allow=True, only=..., except_=...)``.

    The filter journals ``<name>.before`` / ``<name>.after`` and wraps the
    result as ``<name>(<result>)``.
    """

    def _make(name: str, allow: bool = True, **kwargs: Any) -> CallbackFilter:
        def _before(action: ActionLike) -> bool:
            journal.append(f"{name}.before")
            return allow

        def _after(action: ActionLike, result: Any) -> Any:
            journal.append(f"{name}.after")
            return f"{name}({result})"

        return CallbackFilter(_before, _after, **kwargs)

    return _make


@pytest.fixture()
def app() -> Module:
    return Module("app")


@pytest.fixture()
def admin_controller(app: Module, journal: list[str]) -> ScenarioController:
    """Controller ``admin`` directly under the root module."""
    return ScenarioController("admin", app, journal)


@pytest.fixture()
def health_controller(app: Module, journal: list[str]) -> ScenarioController:
    """Controller ``health`` directly under the root module."""
    return ScenarioController("health", app, journal)
