"""
Card charges, their capture and their refunds.

Creating an uncaptured charge and confirming it later are two separate calls;
if the second one fails the first charge stays ``in_progress`` and it is up to
the caller to retry or cancel it.
"""

from __future__ import annotations

import warnings
from typing import List, Optional

from ..core.operations import ResourceOperations, ResourceSpec
from ..core.search import SearchParams
from ..core.transport import JsonTransportClient
from ..entities import Charge
from ..params import ConfirmCaptureParams, CreateCardChargeParams, RefundParams

MERCHANT_CHARGES = ResourceSpec("/v1/{merchant_id}/charges", Charge.from_payload)
CUSTOMER_CHARGES = ResourceSpec(
    "/v1/{merchant_id}/customers/{customer_id}/charges", Charge.from_payload
)
MERCHANT_CAPTURE = ResourceSpec(
    "/v1/{merchant_id}/charges/{charge_id}/capture", Charge.from_payload
)
CUSTOMER_CAPTURE = ResourceSpec(
    "/v1/{merchant_id}/customers/{customer_id}/charges/{charge_id}/capture",
    Charge.from_payload,
)
MERCHANT_REFUND = ResourceSpec(
    "/v1/{merchant_id}/charges/{charge_id}/refund", Charge.from_payload
)
CUSTOMER_REFUND = ResourceSpec(
    "/v1/{merchant_id}/customers/{customer_id}/charges/{charge_id}/refund",
    Charge.from_payload,
)


class ChargeOperations:
    def __init__(self, client: JsonTransportClient, merchant_id: str) -> None:
        self._merchant_charges = ResourceOperations(client, merchant_id, MERCHANT_CHARGES)
        self._customer_charges = ResourceOperations(client, merchant_id, CUSTOMER_CHARGES)
        self._merchant_capture = ResourceOperations(client, merchant_id, MERCHANT_CAPTURE)
        self._customer_capture = ResourceOperations(client, merchant_id, CUSTOMER_CAPTURE)
        self._merchant_refund = ResourceOperations(client, merchant_id, MERCHANT_REFUND)
        self._customer_refund = ResourceOperations(client, merchant_id, CUSTOMER_REFUND)

    def _scope(self, customer_id: Optional[str]) -> ResourceOperations:
        return self._merchant_charges if customer_id is None else self._customer_charges

    def create(
        self,
        params: CreateCardChargeParams,
        *,
        timeout: Optional[float] = None,
    ) -> Charge:
        """Charge a card; ``params.customer_id`` selects the customer endpoint."""
        return self._scope(params.customer_id).create(
            params, timeout=timeout, customer_id=params.customer_id
        )

    def get(
        self,
        charge_id: str,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Charge:
        return self._scope(customer_id).fetch(charge_id, timeout=timeout, customer_id=customer_id)

    def list(
        self,
        search: Optional[SearchParams] = None,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> List[Charge]:
        return self._scope(customer_id).list(search, timeout=timeout, customer_id=customer_id)

    def confirm_capture(
        self,
        params: ConfirmCaptureParams,
        *,
        timeout: Optional[float] = None,
    ) -> Charge:
        operations = (
            self._merchant_capture if params.customer_id is None else self._customer_capture
        )
        body = params.as_map()
        return operations.create(
            body,
            timeout=timeout,
            charge_id=params.charge_id,
            customer_id=params.customer_id,
        )

    def refund(self, params: RefundParams, *, timeout: Optional[float] = None) -> Charge:
        """Refund a charge and return it with its ``refund`` populated."""
        operations = (
            self._merchant_refund if params.customer_id is None else self._customer_refund
        )
        body = params.as_map()
        return operations.create(
            body,
            timeout=timeout,
            charge_id=params.charge_id,
            customer_id=params.customer_id,
        )

    def refund_charge(
        self,
        charge_id: str,
        description: Optional[str],
        order_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Charge:
        """Positional form of :meth:`refund`, kept for older integrations."""
        warnings.warn(
            "refund_charge() is deprecated, use refund(RefundParams(...))",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.refund(
            RefundParams(charge_id=charge_id, description=description, order_id=order_id),
            timeout=timeout,
        )
