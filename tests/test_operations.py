"""
Resource binding and path resolution tests.
"""

from decimal import Decimal

import pytest

from openpay_client import (
    Card,
    CreateFeeParams,
    EncodingError,
    Fee,
    ResourceOperations,
    ResourceSpec,
    search,
)
from conftest import MERCHANT_ID, MockResponse

CUSTOMER_FEES = ResourceSpec("/v1/{merchant_id}/customers/{customer_id}/fees", Fee.from_payload)


def test_spec_lists_placeholders():
    assert CUSTOMER_FEES.placeholders == ("merchant_id", "customer_id")


def test_resolve_path_substitutes_ids(transport):
    ops = ResourceOperations(transport, MERCHANT_ID, CUSTOMER_FEES)

    assert ops.resolve_path(customer_id="c1") == f"/v1/{MERCHANT_ID}/customers/c1/fees"
    assert ops.resolve_path("f1", customer_id="c1") == f"/v1/{MERCHANT_ID}/customers/c1/fees/f1"


def test_unresolved_placeholder_is_rejected_before_sending(transport, gateway):
    ops = ResourceOperations(transport, MERCHANT_ID, CUSTOMER_FEES)

    with pytest.raises(EncodingError) as excinfo:
        ops.list(search().limit(1))

    assert "customer_id" in str(excinfo.value)
    assert gateway.calls == []


def test_empty_identifier_is_a_valid_substitution(transport):
    ops = ResourceOperations(transport, MERCHANT_ID, CUSTOMER_FEES)

    assert ops.resolve_path(customer_id="") == f"/v1/{MERCHANT_ID}/customers//fees"


def test_identifiers_are_quoted_not_validated(transport):
    ops = ResourceOperations(
        transport, MERCHANT_ID, ResourceSpec("/v1/{merchant_id}/cards", Card.from_payload)
    )

    assert ops.resolve_path("a/b c") == f"/v1/{MERCHANT_ID}/cards/a%2Fb%20c"


def test_create_encodes_params(transport, gateway):
    gateway.queue.append(MockResponse(200, '{"id": "fee1", "amount": 5.50}'))
    ops = ResourceOperations(
        transport, MERCHANT_ID, ResourceSpec("/v1/{merchant_id}/fees", Fee.from_payload)
    )

    fee = ops.create(
        CreateFeeParams(customer_id="c1", amount=Decimal("5.50"), description="Cargo")
    )

    assert fee.amount == Decimal("5.50")
    assert gateway.calls[0]["body"] == {
        "customer_id": "c1",
        "amount": "5.50",
        "description": "Cargo",
    }


def test_create_with_incomplete_params_never_sends(transport, gateway):
    ops = ResourceOperations(
        transport, MERCHANT_ID, ResourceSpec("/v1/{merchant_id}/fees", Fee.from_payload)
    )

    with pytest.raises(EncodingError):
        ops.create(CreateFeeParams(customer_id="c1"))

    assert gateway.calls == []


def test_list_passes_search_map(transport, gateway):
    gateway.queue.append(MockResponse(200, "[]"))
    ops = ResourceOperations(
        transport, MERCHANT_ID, ResourceSpec("/v1/{merchant_id}/fees", Fee.from_payload)
    )

    ops.list(search().limit(2).offset(2))

    assert gateway.calls[0]["params"] == {"limit": "2", "offset": "2"}
