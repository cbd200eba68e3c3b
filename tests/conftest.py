"""Test configuration and fixtures."""

import itertools
import json
from decimal import Decimal
from urllib.parse import urlsplit

import pytest

from openpay_client import ClientConfig, JsonTransportClient, OpenpayAPI

MERCHANT_ID = "mzdtln0bmtms6o3kck8f"
BASE_URL = "https://sandbox-api.openpay.mx"
RESOURCE_NAMES = {"cards", "charges", "customers", "fees", "payouts"}
DEFAULT_PAGE_SIZE = 10


class MockResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text

    def json(self):
        return json.loads(self.text)


def error_body(http_code, error_code, description):
    return json.dumps(
        {
            "category": "request",
            "description": description,
            "http_code": http_code,
            "error_code": error_code,
            "request_id": "4ddcc8b1-fc4e-4dde-8ff9-2d4dc1c7bbbb",
        }
    )


def _dumps(payload):
    return json.dumps(payload, default=str)


class FakeGateway:
    """
    In-memory Openpay sandbox implementing ``Session.request``.

    Every call is recorded in ``calls``. ``queue`` lets a test script the next
    responses (a ``MockResponse`` or an exception instance to raise).
    """

    def __init__(self):
        self.collections = {}
        self.merchant = {
            "id": MERCHANT_ID,
            "name": "Comercio de prueba",
            "email": "comercio@example.com",
            "status": "active",
            "balance": "1000.00",
            "creation_date": "2014-01-07T10:22:31-06:00",
        }
        self.calls = []
        self.queue = []
        self._ids = (f"tr{n:018d}" for n in itertools.count(1))

    def request(self, method, url, params=None, data=None, headers=None, auth=None, timeout=None):
        body = json.loads(data) if data else None
        self.calls.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "body": body,
                "headers": headers,
                "auth": auth,
                "timeout": timeout,
            }
        )
        if self.queue:
            scripted = self.queue.pop(0)
            if isinstance(scripted, Exception):
                raise scripted
            return scripted
        return self._route(method, urlsplit(url).path, params or {}, body)

    def seed(self, collection, entity):
        self.collections.setdefault(collection, {})[entity["id"]] = entity
        return entity

    def _not_found(self):
        return MockResponse(404, error_body(404, 1005, "The requested resource doesn't exist"))

    def _route(self, method, path, params, body):
        segments = path.strip("/").split("/")
        if segments[:2] != ["v1", MERCHANT_ID]:
            return MockResponse(401, error_body(401, 1002, "The api key or merchant id are invalid"))

        if "customers" in segments[2:-1]:
            index = segments.index("customers")
            customer_id = segments[index + 1]
            customers = self.collections.get(f"/v1/{MERCHANT_ID}/customers", {})
            if customer_id not in customers:
                return self._not_found()

        if len(segments) == 2:
            return MockResponse(200, _dumps(self.merchant))

        last = segments[-1]
        if last in RESOURCE_NAMES:
            return self._collection(method, path, params, body)
        if last == "points":
            return MockResponse(
                200, '{"points_type": "bancomer", "remaining_points": 450, "remaining_mxn": 33.750}'
            )
        if last in ("refund", "capture"):
            return self._transition(last, "/" + "/".join(segments[:-2]), segments[-2], body)
        return self._item(method, "/" + "/".join(segments[:-1]), last)

    def _collection(self, method, path, params, body):
        entities = self.collections.setdefault(path, {})
        if method == "POST":
            entity = dict(body)
            entity["id"] = next(self._ids)
            entity["creation_date"] = "2014-05-26T11:56:25-05:00"
            if path.endswith("/charges"):
                if "source_id" not in entity and "card" not in entity:
                    return MockResponse(
                        400, error_body(400, 1001, "The card or source_id is required")
                    )
                entity["status"] = "completed" if entity.get("capture", True) else "in_progress"
                entity["fee"] = {"amount": "2.90", "tax": "0.46", "currency": "MXN"}
                card = entity.get("card")
                if card is not None:
                    entity["card"] = {
                        "card_number": card["card_number"][:6] + "XXXXXX" + card["card_number"][-4:],
                        "holder_name": card["holder_name"],
                    }
            if path.endswith("/cards"):
                number = entity["card_number"]
                entity["card_number"] = number[:6] + "XXXXXX" + number[-4:]
                entity.pop("cvv2", None)
            entities[entity["id"]] = entity
            return MockResponse(200, _dumps(entity))
        if method == "GET":
            results = list(entities.values())
            if "order_id" in params:
                results = [e for e in results if e.get("order_id") == params["order_id"]]
            if "amount" in params:
                results = [e for e in results if Decimal(e["amount"]) == Decimal(params["amount"])]
            if "creation[gte]" in params and params["creation[gte]"] > "2014-05-26":
                results = []
            offset = int(params.get("offset", 0))
            limit = int(params.get("limit", DEFAULT_PAGE_SIZE))
            return MockResponse(200, _dumps(results[offset:offset + limit]))
        return MockResponse(405, "")

    def _item(self, method, collection, entity_id):
        entities = self.collections.get(collection, {})
        if entity_id not in entities:
            return self._not_found()
        if method == "DELETE":
            del entities[entity_id]
            return MockResponse(204, "")
        return MockResponse(200, _dumps(entities[entity_id]))

    def _transition(self, action, collection, charge_id, body):
        charges = self.collections.get(collection, {})
        if charge_id not in charges:
            return self._not_found()
        charge = charges[charge_id]
        if action == "capture":
            charge["amount"] = body["amount"]
            charge["status"] = "completed"
        else:
            charge["refund"] = {
                "id": next(self._ids),
                "amount": body.get("amount", charge["amount"]),
                "description": body.get("description"),
                "status": "completed",
                "transaction_type": "refund",
            }
        return MockResponse(200, _dumps(charge))


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def config():
    return ClientConfig(merchant_id=MERCHANT_ID, private_key="sk_e568c42a6c384b7ab02cd47d2e407cab")


@pytest.fixture
def transport(config, gateway):
    return JsonTransportClient(config, session=gateway)


@pytest.fixture
def api(config, gateway):
    return OpenpayAPI(config, session=gateway)
