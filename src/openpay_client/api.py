"""
Public, high-level entry point for the Openpay REST API.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.config import ClientConfig, ClientParameters, load_client_config
from .core.transport import JsonTransportClient
from .resources import (
    CardOperations,
    ChargeOperations,
    CustomerOperations,
    FeeOperations,
    MerchantOperations,
    PayoutOperations,
)

__all__ = ["OpenpayAPI", "create_client"]


class OpenpayAPI:
    """
    All resources of one merchant, sharing a single transport client::

        api = OpenpayAPI(ClientConfig(merchant_id="m123", private_key="sk_..."))
        recent = api.charges.list(search().limit(5))
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.client = JsonTransportClient(config, session=session)
        merchant_id = config.merchant_id
        self.merchant = MerchantOperations(self.client, merchant_id)
        self.customers = CustomerOperations(self.client, merchant_id)
        self.cards = CardOperations(self.client, merchant_id)
        self.charges = ChargeOperations(self.client, merchant_id)
        self.fees = FeeOperations(self.client, merchant_id)
        self.payouts = PayoutOperations(self.client, merchant_id)


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    merchant_id: Optional[str] = None,
    private_key: Optional[str] = None,
    base_url: Optional[str] = None,
    production: Optional[bool] = None,
    timeout_seconds: Optional[float | int | str] = None,
    user_agent: Optional[str] = None,
) -> OpenpayAPI:
    """
    Construct an :class:`OpenpayAPI`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            merchant_id,
            private_key,
            base_url,
            production,
            timeout_seconds,
            user_agent,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            merchant_id=merchant_id,
            private_key=private_key,
            base_url=base_url,
            production=production,
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
        )
    return OpenpayAPI(cfg, session=session)
