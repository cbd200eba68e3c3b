"""
Conversion of typed request parameters into their wire representation.
"""

from __future__ import annotations

import dataclasses
import enum
from datetime import date, datetime
from decimal import Decimal
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Tuple, TypeVar

from .errors import EncodingError

__all__ = [
    "RequestParams",
    "encode_params",
    "encode_value",
    "format_date",
]

P = TypeVar("P", bound="RequestParams")


def format_date(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime("%Y-%m-%d")


def encode_value(value: Any) -> Any:
    """
    Return the wire form of a single parameter value.

    Decimals keep the precision they were built with, datetimes keep their
    offset. ``None`` entries inside mappings are dropped.
    """
    if isinstance(value, RequestParams):
        return value.as_map()
    if isinstance(value, bool):
        return value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return format_date(value)
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Mapping):
        return {
            str(key): encode_value(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    return value


class RequestParams:
    """
    Base for immutable request parameter bundles.

    Subclasses are frozen dataclasses whose fields default to ``None``. A field
    left at ``None`` is absent from the wire map; any other value, including an
    empty string, is sent. ``_required`` names the fields that must be set
    before encoding, ``_path_fields`` the ones that travel in the URL instead
    of the body.
    """

    _required: ClassVar[Tuple[str, ...]] = ()
    _path_fields: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, Mapping) and not isinstance(value, MappingProxyType):
                object.__setattr__(self, field.name, MappingProxyType(dict(value)))
            elif isinstance(value, list):
                object.__setattr__(self, field.name, tuple(value))

    def with_values(self: P, **changes: Any) -> P:
        """Return a copy with ``changes`` applied; ``self`` is left untouched."""
        return dataclasses.replace(self, **changes)

    def missing_fields(self) -> Tuple[str, ...]:
        return tuple(name for name in self._required if getattr(self, name) is None)

    def as_map(self) -> Dict[str, Any]:
        return encode_params(self)


def encode_params(params: RequestParams) -> Dict[str, Any]:
    """
    Encode ``params`` into an ordered body mapping.

    Raises :class:`EncodingError` when a required field is unset.
    """
    missing = params.missing_fields()
    if missing:
        raise EncodingError(
            f"{type(params).__name__} is missing required field(s): {', '.join(missing)}"
        )

    encoded: Dict[str, Any] = {}
    for field in dataclasses.fields(params):
        if field.name in params._path_fields:
            continue
        value = getattr(params, field.name)
        if value is None:
            continue
        encoded[field.name] = encode_value(value)
    return encoded
