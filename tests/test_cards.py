"""
Card resource tests against the in-memory gateway.
"""

from decimal import Decimal

import pytest

from openpay_client import ClassifiedError, CreateCardParams, ErrorCategory, search
from conftest import MERCHANT_ID


def _card(number="4242424242424242", holder="Juanito Perez Nunez"):
    return CreateCardParams(
        card_number=number,
        holder_name=holder,
        cvv2="111",
        expiration_month=9,
        expiration_year=20,
    )


def test_create_card(api, gateway):
    card = api.cards.create(_card())

    assert card.card_number == "424242XXXXXX4242"
    assert card.holder_name == "Juanito Perez Nunez"
    assert card.cvv2 is None
    assert gateway.calls[0]["url"].endswith(f"/v1/{MERCHANT_ID}/cards")


def test_get_card(api):
    created = api.cards.create(_card())

    card = api.cards.get(created.id)

    assert card.id == created.id
    assert card.card_number == "424242XXXXXX4242"


def test_card_points(api):
    card = api.cards.create(_card())

    balance = api.cards.points(card.id)

    assert balance.points_type == "bancomer"
    assert balance.remaining_points == 450
    assert balance.remaining_mxn == Decimal("33.750")


def test_get_unknown_card_is_not_found(api):
    with pytest.raises(ClassifiedError) as excinfo:
        api.cards.get("kfaq5dm5pq1qefzev3nz")

    assert excinfo.value.category is ErrorCategory.NOT_FOUND
    assert excinfo.value.http_status == 404
    assert excinfo.value.error_code


def test_delete_then_get_is_not_found(api):
    card = api.cards.create(_card())

    api.cards.delete(card.id)

    with pytest.raises(ClassifiedError) as excinfo:
        api.cards.get(card.id)
    assert excinfo.value.http_status == 404


def test_delete_twice_is_not_found(api):
    card = api.cards.create(_card())
    api.cards.delete(card.id)

    with pytest.raises(ClassifiedError) as excinfo:
        api.cards.delete(card.id)

    assert excinfo.value.category is ErrorCategory.NOT_FOUND


def test_list_cards_paginates(api):
    numbers = [
        "5555555555554444",
        "4111111111111111",
        "4242424242424242",
        "4000000000000002",
        "5105105105105100",
    ]
    created = [api.cards.create(_card(number=n)) for n in numbers]

    everything = api.cards.list()
    first = api.cards.list(search().limit(2))
    second = api.cards.list(search().limit(2).offset(2))

    assert len(everything) >= 3
    assert all(card.id for card in everything)
    assert len(first) == 2
    assert len(second) == 2
    assert {c.id for c in first}.isdisjoint({c.id for c in second})
    assert {c.id for c in first + second} <= {c.id for c in created}


def test_customer_cards_use_customer_path(api, gateway):
    gateway.seed(f"/v1/{MERCHANT_ID}/customers", {"id": "cus1", "name": "Juan"})

    card = api.cards.create(_card(), customer_id="cus1")
    listed = api.cards.list(customer_id="cus1")

    assert gateway.calls[0]["url"].endswith(f"/v1/{MERCHANT_ID}/customers/cus1/cards")
    assert [c.id for c in listed] == [card.id]
    assert api.cards.list() == []
