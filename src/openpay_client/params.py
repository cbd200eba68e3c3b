"""
Request parameter types for each resource.

All of them are frozen dataclasses; build a new value with keyword arguments
or derive one with :meth:`RequestParams.with_values`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Mapping, Optional

from .core.encoding import RequestParams

__all__ = [
    "AddressParams",
    "BankAccountParams",
    "ConfirmCaptureParams",
    "CreateCardChargeParams",
    "CreateCardParams",
    "CreateCustomerParams",
    "CreateFeeParams",
    "CreatePayoutParams",
    "Currency",
    "RefundParams",
    "UseCardPoints",
]


class Currency(enum.Enum):
    MXN = "MXN"
    USD = "USD"


class UseCardPoints(enum.Enum):
    NONE = "NONE"
    MIXED = "MIXED"
    ONLY_POINTS = "ONLY_POINTS"


@dataclass(frozen=True)
class AddressParams(RequestParams):
    line1: Optional[str] = None
    line2: Optional[str] = None
    line3: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    country_code: Optional[str] = None


@dataclass(frozen=True)
class CreateCardParams(RequestParams):
    """A card to register, or to charge directly without storing it."""

    card_number: Optional[str] = None
    holder_name: Optional[str] = None
    cvv2: Optional[str] = None
    expiration_month: Optional[str | int] = None
    expiration_year: Optional[str | int] = None
    device_session_id: Optional[str] = None
    token_id: Optional[str] = None
    address: Optional[AddressParams] = None

    _required = ("card_number", "holder_name", "expiration_month", "expiration_year")

    def as_map(self):
        encoded = super().as_map()
        for key in ("expiration_month", "expiration_year"):
            value = getattr(self, key)
            if isinstance(value, int):
                encoded[key] = f"{value:02d}"
        return encoded


@dataclass(frozen=True)
class CreateCustomerParams(RequestParams):
    name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    external_id: Optional[str] = None
    requires_account: Optional[bool] = None
    address: Optional[AddressParams] = None

    _required = ("name",)


@dataclass(frozen=True)
class CreateCardChargeParams(RequestParams):
    """
    Charge against a stored card (``source_id``) or an inline ``card``.

    ``customer_id`` selects the customer-scoped endpoint and is not sent in
    the body. Whether a card source is present is checked by the gateway.
    ``method`` defaults to ``"card"``.
    """

    amount: Optional[Decimal] = None
    description: Optional[str] = None
    method: Optional[str] = "card"
    source_id: Optional[str] = None
    card: Optional[CreateCardParams] = None
    order_id: Optional[str] = None
    currency: Optional[Currency] = None
    capture: Optional[bool] = None
    cvv2: Optional[str] = None
    device_session_id: Optional[str] = None
    use_card_points: Optional[UseCardPoints] = None
    due_date: Optional[datetime] = None
    metadata: Optional[Mapping[str, str]] = None
    customer_id: Optional[str] = None

    _required = ("amount", "description", "method")
    _path_fields = ("customer_id",)


@dataclass(frozen=True)
class ConfirmCaptureParams(RequestParams):
    """Capture a charge previously created with ``capture=False``."""

    charge_id: Optional[str] = None
    amount: Optional[Decimal] = None
    customer_id: Optional[str] = None

    _required = ("charge_id", "amount")
    _path_fields = ("charge_id", "customer_id")


@dataclass(frozen=True)
class RefundParams(RequestParams):
    """
    Refund a charge, fully or by ``amount``.

    Leave ``customer_id`` unset to refund a merchant charge. An explicit value,
    even an empty one, routes the refund through that customer and the gateway
    decides whether it is valid.
    """

    charge_id: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    order_id: Optional[str] = None
    customer_id: Optional[str] = None

    _required = ("charge_id",)
    _path_fields = ("charge_id", "customer_id")


@dataclass(frozen=True)
class CreateFeeParams(RequestParams):
    customer_id: Optional[str] = None
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    order_id: Optional[str] = None

    _required = ("customer_id", "amount", "description")


@dataclass(frozen=True)
class BankAccountParams(RequestParams):
    clabe: Optional[str] = None
    holder_name: Optional[str] = None
    alias: Optional[str] = None

    _required = ("clabe", "holder_name")


@dataclass(frozen=True)
class CreatePayoutParams(RequestParams):
    """
    Send funds to a bank account, a card, or a stored destination.

    ``method`` is ``"bank_account"`` or ``"card"``; left unset it follows
    whether an inline ``card`` was given.
    """

    amount: Optional[Decimal] = None
    method: Optional[str] = None
    description: Optional[str] = None
    order_id: Optional[str] = None
    destination_id: Optional[str] = None
    bank_account: Optional[BankAccountParams] = None
    card: Optional[CreateCardParams] = None
    customer_id: Optional[str] = None

    _required = ("amount", "method")
    _path_fields = ("customer_id",)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.method is None:
            object.__setattr__(self, "method", "card" if self.card is not None else "bank_account")
