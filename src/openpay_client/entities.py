"""
Immutable value objects decoded from gateway responses.

Every decoder is a ``from_payload`` classmethod. Top-level entities require an
``id``; everything else is optional because the gateway omits fields freely.
Malformed values raise :class:`DeserializationError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .core.errors import DeserializationError

__all__ = [
    "Address",
    "BankAccount",
    "Card",
    "CardPoints",
    "Charge",
    "Customer",
    "ExchangeRate",
    "Fee",
    "FeeDetail",
    "Merchant",
    "Payout",
    "PointsBalance",
    "Refund",
]


def _frozen(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(payload))


def _empty_raw() -> Mapping[str, Any]:
    return MappingProxyType({})


def _require_id(payload: Mapping[str, Any], entity: str) -> str:
    value = payload.get("id")
    if not isinstance(value, str) or not value:
        raise DeserializationError(f"{entity} payload has no 'id'")
    return value


def _str(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise DeserializationError(f"'{key}' must be a scalar, got {type(value).__name__}")
    return str(value)


def _int(payload: Mapping[str, Any], key: str) -> Optional[int]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise DeserializationError(f"'{key}' must be an integer, got a boolean")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise DeserializationError(f"'{key}' must be an integer, got {value!r}") from exc


def _decimal(payload: Mapping[str, Any], key: str) -> Optional[Decimal]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or isinstance(value, (dict, list)):
        raise DeserializationError(f"'{key}' must be a number, got {value!r}")
    try:
        return value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise DeserializationError(f"'{key}' must be a number, got {value!r}") from exc


def _bool(payload: Mapping[str, Any], key: str) -> Optional[bool]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise DeserializationError(f"'{key}' must be a boolean, got {value!r}")
    return value


def _datetime(payload: Mapping[str, Any], key: str) -> Optional[datetime]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DeserializationError(f"'{key}' must be a timestamp string, got {value!r}")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise DeserializationError(f"'{key}' is not an ISO-8601 timestamp: {value!r}") from exc


def _nested(payload: Mapping[str, Any], key: str, decoder):
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise DeserializationError(f"'{key}' must be an object, got {type(value).__name__}")
    return decoder(value)


def _metadata(payload: Mapping[str, Any]) -> Optional[Mapping[str, str]]:
    value = payload.get("metadata")
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise DeserializationError("'metadata' must be an object")
    entries = {}
    for key, item in value.items():
        if item is None:
            continue
        if isinstance(item, (Mapping, list)):
            raise DeserializationError(f"metadata value for '{key}' must be a scalar")
        entries[str(key)] = str(item)
    return MappingProxyType(entries)


@dataclass(frozen=True)
class Address:
    line1: Optional[str] = None
    line2: Optional[str] = None
    line3: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    country_code: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Address":
        return cls(
            line1=_str(payload, "line1"),
            line2=_str(payload, "line2"),
            line3=_str(payload, "line3"),
            postal_code=_str(payload, "postal_code"),
            state=_str(payload, "state"),
            city=_str(payload, "city"),
            country_code=_str(payload, "country_code"),
        )


@dataclass(frozen=True)
class FeeDetail:
    """Commission the gateway charged on a transaction."""

    amount: Optional[Decimal] = None
    tax: Optional[Decimal] = None
    currency: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FeeDetail":
        return cls(
            amount=_decimal(payload, "amount"),
            tax=_decimal(payload, "tax"),
            currency=_str(payload, "currency"),
        )


@dataclass(frozen=True)
class ExchangeRate:
    from_currency: Optional[str] = None
    to_currency: Optional[str] = None
    date: Optional[str] = None
    value: Optional[Decimal] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ExchangeRate":
        return cls(
            from_currency=_str(payload, "from"),
            to_currency=_str(payload, "to"),
            date=_str(payload, "date"),
            value=_decimal(payload, "value"),
        )


@dataclass(frozen=True)
class CardPoints:
    used: Optional[Decimal] = None
    remaining: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    caption: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CardPoints":
        return cls(
            used=_decimal(payload, "used"),
            remaining=_decimal(payload, "remaining"),
            amount=_decimal(payload, "amount"),
            caption=_str(payload, "caption"),
        )


@dataclass(frozen=True)
class PointsBalance:
    points_type: Optional[str] = None
    remaining_points: Optional[int] = None
    remaining_mxn: Optional[Decimal] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PointsBalance":
        return cls(
            points_type=_str(payload, "points_type"),
            remaining_points=_int(payload, "remaining_points"),
            remaining_mxn=_decimal(payload, "remaining_mxn"),
        )


@dataclass(frozen=True)
class BankAccount:
    clabe: Optional[str] = None
    holder_name: Optional[str] = None
    alias: Optional[str] = None
    bank_name: Optional[str] = None
    bank_code: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BankAccount":
        return cls(
            clabe=_str(payload, "clabe"),
            holder_name=_str(payload, "holder_name"),
            alias=_str(payload, "alias"),
            bank_name=_str(payload, "bank_name"),
            bank_code=_str(payload, "bank_code"),
        )


@dataclass(frozen=True)
class Card:
    id: Optional[str]
    holder_name: Optional[str] = None
    card_number: Optional[str] = None
    cvv2: Optional[str] = None
    expiration_month: Optional[str] = None
    expiration_year: Optional[str] = None
    brand: Optional[str] = None
    type: Optional[str] = None
    bank_name: Optional[str] = None
    bank_code: Optional[str] = None
    customer_id: Optional[str] = None
    allows_charges: Optional[bool] = None
    allows_payouts: Optional[bool] = None
    points_card: Optional[bool] = None
    points_type: Optional[str] = None
    creation_date: Optional[datetime] = None
    address: Optional[Address] = None
    raw: Mapping[str, Any] = field(default_factory=_empty_raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Card":
        return cls._decode(payload, _require_id(payload, "Card"))

    @classmethod
    def embedded(cls, payload: Mapping[str, Any]) -> "Card":
        """Decode a card nested in a transaction, where the id may be absent."""
        return cls._decode(payload, _str(payload, "id"))

    @classmethod
    def _decode(cls, payload: Mapping[str, Any], card_id: Optional[str]) -> "Card":
        return cls(
            id=card_id,
            holder_name=_str(payload, "holder_name"),
            card_number=_str(payload, "card_number"),
            cvv2=_str(payload, "cvv2"),
            expiration_month=_str(payload, "expiration_month"),
            expiration_year=_str(payload, "expiration_year"),
            brand=_str(payload, "brand"),
            type=_str(payload, "type"),
            bank_name=_str(payload, "bank_name"),
            bank_code=_str(payload, "bank_code"),
            customer_id=_str(payload, "customer_id"),
            allows_charges=_bool(payload, "allows_charges"),
            allows_payouts=_bool(payload, "allows_payouts"),
            points_card=_bool(payload, "points_card"),
            points_type=_str(payload, "points_type"),
            creation_date=_datetime(payload, "creation_date"),
            address=_nested(payload, "address", Address.from_payload),
            raw=_frozen(payload),
        )


@dataclass(frozen=True)
class Refund:
    """Refund transaction embedded in the charge it reverses."""

    id: Optional[str] = None
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    status: Optional[str] = None
    authorization: Optional[str] = None
    operation_type: Optional[str] = None
    transaction_type: Optional[str] = None
    currency: Optional[str] = None
    order_id: Optional[str] = None
    customer_id: Optional[str] = None
    creation_date: Optional[datetime] = None
    operation_date: Optional[datetime] = None
    fee: Optional[FeeDetail] = None
    raw: Mapping[str, Any] = field(default_factory=_empty_raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Refund":
        return cls(
            id=_str(payload, "id"),
            amount=_decimal(payload, "amount"),
            description=_str(payload, "description"),
            status=_str(payload, "status"),
            authorization=_str(payload, "authorization"),
            operation_type=_str(payload, "operation_type"),
            transaction_type=_str(payload, "transaction_type"),
            currency=_str(payload, "currency"),
            order_id=_str(payload, "order_id"),
            customer_id=_str(payload, "customer_id"),
            creation_date=_datetime(payload, "creation_date"),
            operation_date=_datetime(payload, "operation_date"),
            fee=_nested(payload, "fee", FeeDetail.from_payload),
            raw=_frozen(payload),
        )


@dataclass(frozen=True)
class Charge:
    id: str
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    status: Optional[str] = None
    method: Optional[str] = None
    authorization: Optional[str] = None
    operation_type: Optional[str] = None
    transaction_type: Optional[str] = None
    currency: Optional[str] = None
    order_id: Optional[str] = None
    customer_id: Optional[str] = None
    error_message: Optional[str] = None
    conciliated: Optional[bool] = None
    creation_date: Optional[datetime] = None
    operation_date: Optional[datetime] = None
    card: Optional[Card] = None
    fee: Optional[FeeDetail] = None
    refund: Optional[Refund] = None
    exchange_rate: Optional[ExchangeRate] = None
    card_points: Optional[CardPoints] = None
    metadata: Optional[Mapping[str, str]] = None
    raw: Mapping[str, Any] = field(default_factory=_empty_raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Charge":
        return cls(
            id=_require_id(payload, "Charge"),
            amount=_decimal(payload, "amount"),
            description=_str(payload, "description"),
            status=_str(payload, "status"),
            method=_str(payload, "method"),
            authorization=_str(payload, "authorization"),
            operation_type=_str(payload, "operation_type"),
            transaction_type=_str(payload, "transaction_type"),
            currency=_str(payload, "currency"),
            order_id=_str(payload, "order_id"),
            customer_id=_str(payload, "customer_id"),
            error_message=_str(payload, "error_message"),
            conciliated=_bool(payload, "conciliated"),
            creation_date=_datetime(payload, "creation_date"),
            operation_date=_datetime(payload, "operation_date"),
            card=_nested(payload, "card", Card.embedded),
            fee=_nested(payload, "fee", FeeDetail.from_payload),
            refund=_nested(payload, "refund", Refund.from_payload),
            exchange_rate=_nested(payload, "exchange_rate", ExchangeRate.from_payload),
            card_points=_nested(payload, "card_points", CardPoints.from_payload),
            metadata=_metadata(payload),
            raw=_frozen(payload),
        )


@dataclass(frozen=True)
class Fee:
    """A commission charged by the merchant to one of its customers."""

    id: str
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    status: Optional[str] = None
    authorization: Optional[str] = None
    operation_type: Optional[str] = None
    transaction_type: Optional[str] = None
    currency: Optional[str] = None
    order_id: Optional[str] = None
    customer_id: Optional[str] = None
    error_message: Optional[str] = None
    creation_date: Optional[datetime] = None
    operation_date: Optional[datetime] = None
    raw: Mapping[str, Any] = field(default_factory=_empty_raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Fee":
        return cls(
            id=_require_id(payload, "Fee"),
            amount=_decimal(payload, "amount"),
            description=_str(payload, "description"),
            status=_str(payload, "status"),
            authorization=_str(payload, "authorization"),
            operation_type=_str(payload, "operation_type"),
            transaction_type=_str(payload, "transaction_type"),
            currency=_str(payload, "currency"),
            order_id=_str(payload, "order_id"),
            customer_id=_str(payload, "customer_id"),
            error_message=_str(payload, "error_message"),
            creation_date=_datetime(payload, "creation_date"),
            operation_date=_datetime(payload, "operation_date"),
            raw=_frozen(payload),
        )


@dataclass(frozen=True)
class Payout:
    id: str
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    status: Optional[str] = None
    method: Optional[str] = None
    authorization: Optional[str] = None
    operation_type: Optional[str] = None
    transaction_type: Optional[str] = None
    currency: Optional[str] = None
    order_id: Optional[str] = None
    customer_id: Optional[str] = None
    error_message: Optional[str] = None
    creation_date: Optional[datetime] = None
    operation_date: Optional[datetime] = None
    bank_account: Optional[BankAccount] = None
    card: Optional[Card] = None
    fee: Optional[FeeDetail] = None
    raw: Mapping[str, Any] = field(default_factory=_empty_raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Payout":
        return cls(
            id=_require_id(payload, "Payout"),
            amount=_decimal(payload, "amount"),
            description=_str(payload, "description"),
            status=_str(payload, "status"),
            method=_str(payload, "method"),
            authorization=_str(payload, "authorization"),
            operation_type=_str(payload, "operation_type"),
            transaction_type=_str(payload, "transaction_type"),
            currency=_str(payload, "currency"),
            order_id=_str(payload, "order_id"),
            customer_id=_str(payload, "customer_id"),
            error_message=_str(payload, "error_message"),
            creation_date=_datetime(payload, "creation_date"),
            operation_date=_datetime(payload, "operation_date"),
            bank_account=_nested(payload, "bank_account", BankAccount.from_payload),
            card=_nested(payload, "card", Card.embedded),
            fee=_nested(payload, "fee", FeeDetail.from_payload),
            raw=_frozen(payload),
        )


@dataclass(frozen=True)
class Customer:
    id: str
    name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    external_id: Optional[str] = None
    status: Optional[str] = None
    balance: Optional[Decimal] = None
    clabe: Optional[str] = None
    creation_date: Optional[datetime] = None
    address: Optional[Address] = None
    raw: Mapping[str, Any] = field(default_factory=_empty_raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Customer":
        return cls(
            id=_require_id(payload, "Customer"),
            name=_str(payload, "name"),
            last_name=_str(payload, "last_name"),
            email=_str(payload, "email"),
            phone_number=_str(payload, "phone_number"),
            external_id=_str(payload, "external_id"),
            status=_str(payload, "status"),
            balance=_decimal(payload, "balance"),
            clabe=_str(payload, "clabe"),
            creation_date=_datetime(payload, "creation_date"),
            address=_nested(payload, "address", Address.from_payload),
            raw=_frozen(payload),
        )


@dataclass(frozen=True)
class Merchant:
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    balance: Optional[Decimal] = None
    available_funds: Optional[Decimal] = None
    clabe: Optional[str] = None
    creation_date: Optional[datetime] = None
    raw: Mapping[str, Any] = field(default_factory=_empty_raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Merchant":
        return cls(
            id=_require_id(payload, "Merchant"),
            name=_str(payload, "name"),
            email=_str(payload, "email"),
            phone=_str(payload, "phone"),
            status=_str(payload, "status"),
            balance=_decimal(payload, "balance"),
            available_funds=_decimal(payload, "available_funds"),
            clabe=_str(payload, "clabe"),
            creation_date=_datetime(payload, "creation_date"),
            raw=_frozen(payload),
        )
