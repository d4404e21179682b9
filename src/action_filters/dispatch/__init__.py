"""Hosts and the before/after dispatch protocol.

This subpackage provides:

* **Component** -- the ordered ``beforeAction`` / ``afterAction`` hook
  registry and named filter registry every host inherits.
* **run_filtered** -- runs an action through the filters of a stack of
  nested hosts with correctly nested before/after calls.
* **Module**, **Controller**, **Action** -- minimal hosts and actions
  with hierarchical ids.
"""
from __future__ import annotations

from action_filters.dispatch.chain import run_filtered
from action_filters.dispatch.component import Component
from action_filters.dispatch.hosts import Action, Controller, Module

__all__ = [
    "Action",
    "Component",
    "Controller",
    "Module",
    "run_filtered",
]
