"""
Merchant account details.
"""

from __future__ import annotations

from typing import Optional

from ..core.operations import ResourceOperations, ResourceSpec
from ..core.transport import JsonTransportClient
from ..entities import Merchant

MERCHANT = ResourceSpec("/v1/{merchant_id}", Merchant.from_payload)


class MerchantOperations:
    def __init__(self, client: JsonTransportClient, merchant_id: str) -> None:
        self._merchant = ResourceOperations(client, merchant_id, MERCHANT)

    def get(self, *, timeout: Optional[float] = None) -> Merchant:
        return self._merchant.fetch(timeout=timeout)
