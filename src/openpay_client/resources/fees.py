"""
Fees the merchant charges to its customers.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from ..core.operations import ResourceOperations, ResourceSpec
from ..core.search import SearchParams
from ..core.transport import JsonTransportClient
from ..entities import Fee
from ..params import CreateFeeParams

FEES = ResourceSpec("/v1/{merchant_id}/fees", Fee.from_payload)


class FeeOperations:
    def __init__(self, client: JsonTransportClient, merchant_id: str) -> None:
        self._fees = ResourceOperations(client, merchant_id, FEES)

    def create(self, params: CreateFeeParams, *, timeout: Optional[float] = None) -> Fee:
        return self._fees.create(params, timeout=timeout)

    def create_for_customer(
        self,
        customer_id: str,
        amount: Decimal,
        description: str,
        order_id: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Fee:
        return self.create(
            CreateFeeParams(
                customer_id=customer_id,
                amount=amount,
                description=description,
                order_id=order_id,
            ),
            timeout=timeout,
        )

    def list(
        self,
        search: Optional[SearchParams] = None,
        *,
        timeout: Optional[float] = None,
    ) -> List[Fee]:
        return self._fees.list(search, timeout=timeout)
