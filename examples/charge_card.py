"""
Minimal script that uses the public API to charge a stored card and refund it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Iterable, Tuple

from openpay_client import (
    ClassifiedError,
    ConfigError,
    CreateCardChargeParams,
    EncodingError,
    ErrorCategory,
    RefundParams,
    create_client,
    load_client_config,
)


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"Invalid amount '{value}'") from exc


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Charge a stored card using the SDK API")
    parser.add_argument("card_id", help="Identifier of a card stored for the merchant")
    parser.add_argument("--amount", type=_amount, default=Decimal("10.00"))
    parser.add_argument("--description", default="Pago de taxi")
    parser.add_argument("--order-id", help="Merchant order identifier")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing OPENPAY_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--refund",
        action="store_true",
        help="Refund the charge right after creating it",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(
            env_file=args.env_file,
            overrides=_build_overrides(args.set or ()),
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    api = create_client(config=config)
    params = CreateCardChargeParams(
        source_id=args.card_id,
        amount=args.amount,
        description=args.description,
        order_id=args.order_id,
    )

    try:
        charge = api.charges.create(params)
    except EncodingError as exc:
        logging.error("Incomplete charge: %s", exc)
        return 1
    except ClassifiedError as exc:
        if exc.category is ErrorCategory.SERVICE_UNAVAILABLE:
            logging.error("Gateway unreachable, try again later: %s", exc)
        else:
            logging.error("Charge rejected: %s", exc)
        return 1

    logging.info("Charge %s is %s for %s %s", charge.id, charge.status, charge.amount, charge.currency)

    if not args.refund:
        return 0

    try:
        refunded = api.charges.refund(RefundParams(charge_id=charge.id, description="Reembolso"))
    except ClassifiedError as exc:
        logging.error("Charge %s was created but the refund failed: %s", charge.id, exc)
        return 1

    logging.info("Refund %s completed", refunded.refund.id if refunded.refund else None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
