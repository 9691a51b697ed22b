"""Shared helpers for query builders."""

from __future__ import annotations

import copy
from typing import Any, TypeVar

from ..core.exceptions import InvalidParamsError

Q = TypeVar("Q", bound="QueryBuilder")

Params = list[tuple[str, str]]


def render_value(value: Any) -> str:
    """Render a filter value the way the API expects it on the query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class QueryBuilder:
    """Base class for fluent, mutable filter accumulators.

    Setters record a value and return ``self``. A builder is rendered once
    per request with ``to_params()``; use ``copy()`` to derive the next
    request instead of mutating one that was already sent.
    """

    def copy(self: Q) -> Q:
        return copy.deepcopy(self)

    def validate(self) -> None:
        """Raise ``InvalidParamsError`` if the accumulated filters are invalid."""
        reason = self.rejection_reason()
        if reason is not None:
            raise InvalidParamsError(reason, status_code=None)

    def is_valid(self) -> bool:
        return self.rejection_reason() is None

    def rejection_reason(self) -> str | None:
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name.lstrip('_')}={value!r}" for name, value in vars(self).items() if value is not None
        )
        return f"{type(self).__name__}({fields})"
