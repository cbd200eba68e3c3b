"""
Query filters for list operations.

``SearchParams`` is immutable: every setter returns a new instance, so a base
filter can be shared and refined without affecting other callers::

    recent = search().creation_gte(date(2024, 1, 1))
    first_page = recent.limit(10)
    second_page = first_page.offset(10)
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from .encoding import format_date

__all__ = ["SearchParams", "search"]

_Value = Union[int, str, date, Decimal]


def _stringify(value: _Value) -> str:
    if isinstance(value, date):
        return format_date(value)
    return str(value)


class SearchParams:
    """List filter with the gateway's reserved query keys."""

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, _Value]] = None) -> None:
        self._values: Mapping[str, _Value] = MappingProxyType(dict(values or {}))

    def _with(self, key: str, value: _Value) -> "SearchParams":
        updated = dict(self._values)
        updated[key] = value
        return SearchParams(updated)

    def limit(self, limit: int) -> "SearchParams":
        return self._with("limit", limit)

    def offset(self, offset: int) -> "SearchParams":
        return self._with("offset", offset)

    def creation(self, creation: date) -> "SearchParams":
        return self._with("creation", creation)

    def creation_gte(self, creation: date) -> "SearchParams":
        return self._with("creation[gte]", creation)

    def creation_lte(self, creation: date) -> "SearchParams":
        return self._with("creation[lte]", creation)

    def amount(self, amount: Decimal) -> "SearchParams":
        return self._with("amount", amount)

    def amount_gte(self, amount: Decimal) -> "SearchParams":
        return self._with("amount[gte]", amount)

    def amount_lte(self, amount: Decimal) -> "SearchParams":
        return self._with("amount[lte]", amount)

    def order_id(self, order_id: str) -> "SearchParams":
        return self._with("order_id", order_id)

    def status(self, status: str) -> "SearchParams":
        return self._with("status", status)

    def as_map(self) -> Dict[str, str]:
        return {key: _stringify(value) for key, value in self._values.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchParams):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.as_map().items())))

    def __repr__(self) -> str:
        return f"SearchParams({self.as_map()!r})"


def search() -> SearchParams:
    """Start an empty filter; equivalent to ``SearchParams()``."""
    return SearchParams()
