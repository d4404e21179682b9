#!/usr/bin/env python3
"""Action filters quickstart.

Demonstrates the core workflow:

1. Build a small module / controller tree.
2. Attach an access filter to a module and a logging filter to the root.
3. Run an allowed action and inspect the result.
4. Run a vetoed action and inspect the context.

Run:
    python examples/quickstart.py
"""
from __future__ import annotations

import logging

from action_filters import (
    AccessFilter,
    ActionFilter,
    Controller,
    LoggingFilter,
    Module,
)


class UserController(Controller):
    def action_view(self, user_id: int) -> dict[str, object]:
        return {"id": user_id, "name": "Ada"}

    def action_delete(self, user_id: int) -> str:
        return f"deleted {user_id}"


class EnvelopeFilter(ActionFilter):
    """Wraps every result in a response envelope."""

    def after_action(self, action, result):
        return {"route": action.unique_id, "data": result}


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # -- Step 1: Module tree ---------------------------------------------------
    app = Module("app")
    admin = Module("admin", app)
    users = UserController("user", admin)

    # -- Step 2: Filters ---------------------------------------------------------
    app.attach_filter("log", LoggingFilter(except_=["health/*"]))
    admin.attach_filter(
        "access",
        AccessFilter(lambda action: action.id != "delete", only=["user/*"]),
    )
    users.attach_filter("envelope", EnvelopeFilter.from_config({"only": ["view"]}))

    # -- Step 3: Allowed action --------------------------------------------------
    print(f"[1] view   -> {users.run_action('view', 7)}")

    # -- Step 4: Vetoed action ---------------------------------------------------
    context = users.run_action_context("delete", 7)
    print(f"[2] delete -> valid={context.valid} result={context.result!r}")


if __name__ == "__main__":
    main()
