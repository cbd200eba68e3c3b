"""
Payouts from the merchant (or a customer) balance to a bank account or card.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.operations import ResourceOperations, ResourceSpec
from ..core.search import SearchParams
from ..core.transport import JsonTransportClient
from ..entities import Payout
from ..params import CreatePayoutParams

MERCHANT_PAYOUTS = ResourceSpec("/v1/{merchant_id}/payouts", Payout.from_payload)
CUSTOMER_PAYOUTS = ResourceSpec(
    "/v1/{merchant_id}/customers/{customer_id}/payouts", Payout.from_payload
)


class PayoutOperations:
    def __init__(self, client: JsonTransportClient, merchant_id: str) -> None:
        self._merchant_payouts = ResourceOperations(client, merchant_id, MERCHANT_PAYOUTS)
        self._customer_payouts = ResourceOperations(client, merchant_id, CUSTOMER_PAYOUTS)

    def _scope(self, customer_id: Optional[str]) -> ResourceOperations:
        return self._merchant_payouts if customer_id is None else self._customer_payouts

    def create(self, params: CreatePayoutParams, *, timeout: Optional[float] = None) -> Payout:
        return self._scope(params.customer_id).create(
            params, timeout=timeout, customer_id=params.customer_id
        )

    def get(
        self,
        payout_id: str,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Payout:
        return self._scope(customer_id).fetch(payout_id, timeout=timeout, customer_id=customer_id)

    def list(
        self,
        search: Optional[SearchParams] = None,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> List[Payout]:
        return self._scope(customer_id).list(search, timeout=timeout, customer_id=customer_id)
