"""
List filter tests.
"""

from datetime import date, datetime
from decimal import Decimal

from openpay_client import SearchParams, search


def test_empty_search_has_no_keys():
    assert search().as_map() == {}


def test_each_setter_produces_its_key():
    params = (
        search()
        .limit(2)
        .offset(4)
        .creation(date(2024, 1, 5))
        .creation_gte(date(2024, 1, 1))
        .creation_lte(date(2024, 1, 31))
        .amount(Decimal("10.00"))
        .amount_gte(Decimal("1.5"))
        .amount_lte(Decimal("100"))
        .order_id("ord-1")
        .status("completed")
    )

    assert params.as_map() == {
        "limit": "2",
        "offset": "4",
        "creation": "2024-01-05",
        "creation[gte]": "2024-01-01",
        "creation[lte]": "2024-01-31",
        "amount": "10.00",
        "amount[gte]": "1.5",
        "amount[lte]": "100",
        "order_id": "ord-1",
        "status": "completed",
    }


def test_key_present_only_when_setter_called():
    assert set(search().order_id("x").as_map()) == {"order_id"}
    assert set(search().limit(5).status("failed").as_map()) == {"limit", "status"}


def test_setting_twice_overwrites():
    params = search().limit(5).limit(3)

    assert params.as_map() == {"limit": "3"}


def test_setters_do_not_mutate_the_original():
    base = search().status("completed")
    paged = base.limit(10)

    assert base.as_map() == {"status": "completed"}
    assert paged.as_map() == {"status": "completed", "limit": "10"}


def test_datetime_filter_uses_date_part():
    params = search().creation(datetime(2024, 6, 30, 23, 15))

    assert params.as_map() == {"creation": "2024-06-30"}


def test_conflicting_filters_are_passed_through():
    params = search().creation(date(2024, 1, 5)).creation_gte(date(2024, 1, 1))

    assert params.as_map() == {"creation": "2024-01-05", "creation[gte]": "2024-01-01"}


def test_equality():
    assert search().limit(2) == SearchParams({"limit": 2})
    assert search().limit(2) != search().limit(3)
