"""
Domain models and value objects.

Contains fundamental domain entities like Denomination, ProductLine,
StockEntry, PurchaseRequest/PurchaseResult and domain errors.
"""

from vending.core.domain.errors import (
    ChangeUnavailableError,
    ErrorCode,
    InsufficientCashProvidedError,
    InsufficientDenominationError,
    InsufficientStockError,
    UnknownProductError,
    VendingError,
)
from vending.core.domain.money import (
    Denomination,
    DenominationKey,
    MoneyType,
    new_cash,
    new_coin,
    total_value,
)
from vending.core.domain.product import ProductLine, ProductType, StockEntry
from vending.core.domain.purchase import (
    MachineStatus,
    PurchaseOutcome,
    PurchaseRequest,
    PurchaseResult,
)

__all__ = [
    # Money
    "MoneyType",
    "Denomination",
    "DenominationKey",
    "new_coin",
    "new_cash",
    "total_value",
    # Products
    "ProductType",
    "ProductLine",
    "StockEntry",
    # Purchase
    "PurchaseRequest",
    "PurchaseResult",
    "PurchaseOutcome",
    "MachineStatus",
    # Errors
    "ErrorCode",
    "VendingError",
    "UnknownProductError",
    "InsufficientCashProvidedError",
    "InsufficientStockError",
    "ChangeUnavailableError",
    "InsufficientDenominationError",
]
