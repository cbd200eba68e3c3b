"""
Command-line interface for inspecting Openpay resources.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Sequence, Tuple

import requests

from .api import OpenpayAPI, create_client
from .core.config import ConfigError, load_client_config
from .core.errors import OpenpayError
from .core.search import SearchParams


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a YYYY-MM-DD date, got '{value}'") from exc


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"Expected a decimal amount, got '{value}'") from exc


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _add_search_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, help="Maximum number of results")
    parser.add_argument("--offset", type=int, help="Number of results to skip")
    parser.add_argument("--order-id", help="Filter by order id")
    parser.add_argument("--status", help="Filter by status")
    parser.add_argument("--amount", type=_decimal, help="Filter by exact amount")
    parser.add_argument("--creation", type=_iso_date, help="Created on this date")
    parser.add_argument("--creation-gte", type=_iso_date, help="Created on or after")
    parser.add_argument("--creation-lte", type=_iso_date, help="Created on or before")


def _add_customer_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--customer-id", help="Operate on this customer's resources")


def build_search(args: argparse.Namespace) -> Optional[SearchParams]:
    setters = (
        ("limit", args.limit),
        ("offset", args.offset),
        ("order_id", args.order_id),
        ("status", args.status),
        ("amount", args.amount),
        ("creation", args.creation),
        ("creation_gte", args.creation_gte),
        ("creation_lte", args.creation_lte),
    )
    params = SearchParams()
    for name, value in setters:
        if value is not None:
            params = getattr(params, name)(value)
    return params if params.as_map() else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openpay-client",
        description="Query Openpay resources for the configured merchant",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing OPENPAY_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING)",
    )

    resources = parser.add_subparsers(dest="resource", required=True)
    resources.add_parser("merchant", help="Show the merchant account")

    for name, customer_scoped, actions in (
        ("customers", False, ("list", "get", "delete")),
        ("cards", True, ("list", "get", "delete")),
        ("charges", True, ("list", "get")),
        ("fees", False, ("list",)),
        ("payouts", True, ("list", "get")),
    ):
        resource_parser = resources.add_parser(name, help=f"Work with {name}")
        verbs = resource_parser.add_subparsers(dest="action", required=True)
        for action in actions:
            verb = verbs.add_parser(action)
            if action == "list":
                _add_search_arguments(verb)
            else:
                verb.add_argument("id", help="Resource identifier")
            if customer_scoped:
                _add_customer_argument(verb)
    return parser


def _scope(args: argparse.Namespace) -> dict[str, Any]:
    customer_id = getattr(args, "customer_id", None)
    return {} if customer_id is None else {"customer_id": customer_id}


def dispatch(api: OpenpayAPI, args: argparse.Namespace) -> Any:
    """Run the command described by ``args``; returns the raw JSON to print."""
    if args.resource == "merchant":
        return dict(api.merchant.get().raw)

    operations = getattr(api, args.resource)
    if args.action == "list":
        entities = operations.list(build_search(args), **_scope(args))
        return [dict(entity.raw) for entity in entities]
    if args.action == "get":
        return dict(operations.get(args.id, **_scope(args)).raw)
    operations.delete(args.id, **_scope(args))
    return {"deleted": args.id}


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    api = create_client(config=config, session=requests.Session())
    try:
        result = dispatch(api, args)
    except OpenpayError as exc:
        logging.error("Request failed: %s", exc)
        return 1

    print(json.dumps(result, indent=2, default=str, ensure_ascii=False))
    return 0


def main() -> None:
    sys.exit(run_cli())
