"""
Public facade for the Openpay client package.

The most useful pieces are re-exported here so integrators can
``from openpay_client import ...`` without navigating the package.
"""

from .api import OpenpayAPI, create_client
from .core import (
    ClassifiedError,
    ClientConfig,
    ClientParameters,
    ConfigError,
    DeserializationError,
    EncodingError,
    ErrorCategory,
    JsonTransportClient,
    OpenpayError,
    RequestParams,
    ResourceOperations,
    ResourceSpec,
    SearchParams,
    load_client_config,
    search,
)
from .entities import (
    Address,
    BankAccount,
    Card,
    CardPoints,
    Charge,
    Customer,
    ExchangeRate,
    Fee,
    FeeDetail,
    Merchant,
    Payout,
    PointsBalance,
    Refund,
)
from .params import (
    AddressParams,
    BankAccountParams,
    ConfirmCaptureParams,
    CreateCardChargeParams,
    CreateCardParams,
    CreateCustomerParams,
    CreateFeeParams,
    CreatePayoutParams,
    Currency,
    RefundParams,
    UseCardPoints,
)

__version__ = "0.1.0"

__all__ = (
    "Address",
    "AddressParams",
    "BankAccount",
    "BankAccountParams",
    "Card",
    "CardPoints",
    "Charge",
    "ClassifiedError",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "ConfirmCaptureParams",
    "CreateCardChargeParams",
    "CreateCardParams",
    "CreateCustomerParams",
    "CreateFeeParams",
    "CreatePayoutParams",
    "Currency",
    "Customer",
    "DeserializationError",
    "EncodingError",
    "ErrorCategory",
    "ExchangeRate",
    "Fee",
    "FeeDetail",
    "JsonTransportClient",
    "Merchant",
    "OpenpayAPI",
    "OpenpayError",
    "Payout",
    "PointsBalance",
    "Refund",
    "RefundParams",
    "RequestParams",
    "ResourceOperations",
    "ResourceSpec",
    "SearchParams",
    "UseCardPoints",
    "create_client",
    "load_client_config",
    "search",
)
