"""
Cards stored for the merchant or for one of its customers.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.operations import ResourceOperations, ResourceSpec
from ..core.search import SearchParams
from ..core.transport import JsonTransportClient
from ..entities import Card, PointsBalance
from ..params import CreateCardParams

MERCHANT_CARDS = ResourceSpec("/v1/{merchant_id}/cards", Card.from_payload)
CUSTOMER_CARDS = ResourceSpec("/v1/{merchant_id}/customers/{customer_id}/cards", Card.from_payload)
CARD_POINTS = ResourceSpec("/v1/{merchant_id}/cards/{card_id}/points", PointsBalance.from_payload)


class CardOperations:
    """
    Card operations; pass ``customer_id`` to work on a customer's cards
    instead of the merchant's.
    """

    def __init__(self, client: JsonTransportClient, merchant_id: str) -> None:
        self._merchant_cards = ResourceOperations(client, merchant_id, MERCHANT_CARDS)
        self._customer_cards = ResourceOperations(client, merchant_id, CUSTOMER_CARDS)
        self._points = ResourceOperations(client, merchant_id, CARD_POINTS)

    def _scope(self, customer_id: Optional[str]) -> ResourceOperations:
        return self._merchant_cards if customer_id is None else self._customer_cards

    def create(
        self,
        params: CreateCardParams,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Card:
        return self._scope(customer_id).create(params, timeout=timeout, customer_id=customer_id)

    def get(
        self,
        card_id: str,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Card:
        return self._scope(customer_id).fetch(card_id, timeout=timeout, customer_id=customer_id)

    def list(
        self,
        search: Optional[SearchParams] = None,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> List[Card]:
        return self._scope(customer_id).list(search, timeout=timeout, customer_id=customer_id)

    def delete(
        self,
        card_id: str,
        *,
        customer_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._scope(customer_id).delete(card_id, timeout=timeout, customer_id=customer_id)

    def points(self, card_id: str, *, timeout: Optional[float] = None) -> PointsBalance:
        """Loyalty points balance of a merchant card."""
        return self._points.fetch(timeout=timeout, card_id=card_id)
