"""Action filter error-code hierarchy.

Hierarchy
---------
::

    FilterError
    +-- ConfigurationError      (AF-E1xx)
    |   +-- UnknownHookChannel  (AF-E101)
    |   +-- InvalidFilterConfig (AF-E102)
    +-- InvalidCallError        (AF-E2xx)
        +-- ActionNotFound      (AF-E201)

A filter vetoing an action is *not* an error: it is reported through
``ActionContext.valid`` and never raised.

Usage
-----
Raise concrete subclasses directly::

    raise ActionNotFound("site/missing")

Catch by category::

    try:
        ...
    except ConfigurationError:
        # handles UnknownHookChannel, InvalidFilterConfig
        ...
"""
from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class FilterError(Exception):
    """Base exception for all action filter errors.

    Attributes
    ----------
    code : str
        Error code, e.g. ``"AF-E101"``.
    message : str
        Human-readable description.
    details : dict[str, Any]
        Machine-readable context specific to the error instance.
    resolution : str
        Suggested action for the caller.
    """

    code: str = "AF-E000"
    message: str = "Unknown action filter error"
    resolution: str = ""

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        resolution: str | None = None,
    ) -> None:
        self.details: dict[str, Any] = details or {}
        if message is not None:
            self.message = message
        if resolution is not None:
            self.resolution = resolution
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ===================================================================
# Category base classes
# ===================================================================

class ConfigurationError(FilterError):
    """AF-E1xx -- Invalid configuration of a filter or host."""

    code = "AF-E1XX"


class InvalidCallError(FilterError):
    """AF-E2xx -- A method was called with arguments it cannot honour."""

    code = "AF-E2XX"


# ===================================================================
# AF-E1xx -- Configuration
# ===================================================================

class UnknownHookChannel(ConfigurationError):
    """AF-E101 -- The hook channel name is not recognised."""

    code = "AF-E101"
    message = "Unknown hook channel"
    resolution = "Use one of the HookChannel values: 'beforeAction' or 'afterAction'."


class InvalidFilterConfig(ConfigurationError):
    """AF-E102 -- A filter configuration mapping failed validation."""

    code = "AF-E102"
    message = "Invalid filter configuration"
    resolution = (
        "Pass 'only' and 'except' as lists of strings and make sure any "
        "extra option is accepted by the filter class."
    )


# ===================================================================
# AF-E2xx -- Invalid calls
# ===================================================================

class ActionNotFound(InvalidCallError):
    """AF-E201 -- The controller does not define the requested action."""

    code = "AF-E201"
    message = "Action not found"
    resolution = (
        "Define an 'action_<name>' method on the controller or register "
        "the action in Controller.actions()."
    )

