"""Shared fixtures for the unit tests.

Provides a journal that records hook calls in order, a factory for
filters that write to it, and a small module/controller tree.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from action_filters.core.interfaces import ActionLike
from action_filters.dispatch.hosts import Controller, Module
from action_filters.filters.base import ActionFilter


class RecordingFilter(ActionFilter):
    """Journals its hook calls and wraps results as ``name(result)``."""

    def __init__(
        self,
        name: str,
        journal: list[str],
        *,
        veto: bool = False,
        only: Iterable[str] | None = None,
        except_: Iterable[str] | None = None,
    ) -> None:
        super().__init__(only=only, except_=except_)
        self.name = name
        self.journal = journal
        self.veto = veto

    def before_action(self, action: ActionLike) -> bool:
        self.journal.append(f"{self.name}.before")
        return not self.veto

    def after_action(self, action: ActionLike, result: Any) -> Any:
        self.journal.append(f"{self.name}.after")
        return f"{self.name}({result})"


class UserController(Controller):
    """A controller with a few journaled actions."""

    def __init__(self, id: str, module: Module | None, journal: list[str]) -> None:
        super().__init__(id, module)
        self.journal = journal

    def actions(self) -> dict[str, Callable[..., Any]]:
        return {"ping": self._ping}

    def _ping(self) -> str:
        self.journal.append("ping")
        return "pong"

    def action_delete(self, user_id: int = 0) -> str:
        self.journal.append("action")
        return f"deleted {user_id}"

    def action_view_all(self) -> str:
        self.journal.append("action")
        return "all"


@pytest.fixture()
def journal() -> list[str]:
    return []


@pytest.fixture()
def make_filter(journal: list[str]) -> Callable[..., RecordingFilter]:
    """Factory for :class:`RecordingFilter` instances sharing ``journal``."""

    def _make(name: str, **kwargs: Any) -> RecordingFilter:
        return RecordingFilter(name, journal, **kwargs)

    return _make


@pytest.fixture()
def app() -> Module:
    """The root module."""
    return Module("app")


@pytest.fixture()
def admin(app: Module) -> Module:
    """A module ``admin`` directly under the root."""
    return Module("admin", app)


@pytest.fixture()
def controller(admin: Module, journal: list[str]) -> UserController:
    """Controller ``admin/user``."""
    return UserController("user", admin, journal)
