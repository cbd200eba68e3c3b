"""
Per-resource operations built on :class:`~openpay_client.core.ResourceOperations`.
"""

from .cards import CardOperations
from .charges import ChargeOperations
from .customers import CustomerOperations
from .fees import FeeOperations
from .merchant import MerchantOperations
from .payouts import PayoutOperations

__all__ = [
    "CardOperations",
    "ChargeOperations",
    "CustomerOperations",
    "FeeOperations",
    "MerchantOperations",
    "PayoutOperations",
]
