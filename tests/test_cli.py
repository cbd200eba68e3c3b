"""
Command-line interface tests.
"""

import json
from unittest.mock import patch

import pytest

from openpay_client import cli
from conftest import MERCHANT_ID, FakeGateway

SETTINGS = [
    "--env-file",
    "/nonexistent/.env",
    "--set",
    f"OPENPAY_MERCHANT_ID={MERCHANT_ID}",
    "--set",
    "OPENPAY_PRIVATE_KEY=sk_test",
]


@pytest.fixture
def fake_session():
    gateway = FakeGateway()
    with patch("openpay_client.cli.requests.Session", return_value=gateway):
        yield gateway


def test_merchant_command(fake_session, capsys):
    assert cli.run_cli(SETTINGS + ["merchant"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["id"] == MERCHANT_ID


def test_list_command_passes_filters(fake_session, capsys):
    exit_code = cli.run_cli(
        SETTINGS + ["charges", "list", "--limit", "2", "--creation-gte", "2024-01-01"]
    )

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == []
    assert fake_session.calls[0]["params"] == {"limit": "2", "creation[gte]": "2024-01-01"}


def test_get_unknown_returns_error_code(fake_session):
    assert cli.run_cli(SETTINGS + ["cards", "get", "kfaq5dm5pq1qefzev3nz"]) == 1


def test_missing_credentials(fake_session, monkeypatch):
    monkeypatch.delenv("OPENPAY_MERCHANT_ID", raising=False)
    monkeypatch.delenv("OPENPAY_PRIVATE_KEY", raising=False)

    assert cli.run_cli(["--env-file", "/nonexistent/.env", "merchant"]) == 1


def test_bad_override_is_rejected():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--set", "novalue", "merchant"])


def test_build_search_returns_none_without_filters():
    args = cli.build_parser().parse_args(["fees", "list"])

    assert cli.build_search(args) is None
