"""
Customer accounts registered under the merchant.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.operations import ResourceOperations, ResourceSpec
from ..core.search import SearchParams
from ..core.transport import JsonTransportClient
from ..entities import Customer
from ..params import CreateCustomerParams

CUSTOMERS = ResourceSpec("/v1/{merchant_id}/customers", Customer.from_payload)


class CustomerOperations:
    def __init__(self, client: JsonTransportClient, merchant_id: str) -> None:
        self._customers = ResourceOperations(client, merchant_id, CUSTOMERS)

    def create(self, params: CreateCustomerParams, *, timeout: Optional[float] = None) -> Customer:
        return self._customers.create(params, timeout=timeout)

    def get(self, customer_id: str, *, timeout: Optional[float] = None) -> Customer:
        return self._customers.fetch(customer_id, timeout=timeout)

    def list(
        self,
        search: Optional[SearchParams] = None,
        *,
        timeout: Optional[float] = None,
    ) -> List[Customer]:
        return self._customers.list(search, timeout=timeout)

    def delete(self, customer_id: str, *, timeout: Optional[float] = None) -> None:
        self._customers.delete(customer_id, timeout=timeout)
