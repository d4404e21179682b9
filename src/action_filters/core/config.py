"""Action filter configuration.

Defines the validated configuration model a filter is built from.  Only
``only`` and ``except`` decide whether a filter applies to an action;
any other key is an option of the concrete filter class and is passed
through to its constructor untouched.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FilterConfig(BaseModel):
    """Applicability options shared by every action filter.

    ``except`` is a Python keyword, so the field is exposed as
    ``except_`` and accepts ``except`` as its alias.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="allow")

    only: list[str] | None = Field(
        default=None,
        description=(
            "Action id patterns the filter applies to.  ``None`` or an "
            "empty list means every action."
        ),
    )
    except_: list[str] = Field(
        default_factory=list,
        alias="except",
        description=(
            "Action id patterns the filter never applies to.  Wins over "
            "``only`` when both match."
        ),
    )

    @property
    def options(self) -> dict[str, Any]:
        """Extra keys not recognised as applicability options."""
        return dict(self.model_extra or {})
