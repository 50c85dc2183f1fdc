"""
Domain errors — типизированные отказы транзакционного ядра

Все ошибки поднимаются до непосредственного вызывающего кода, не
подавляются и не повторяются автоматически. Ни одна ошибка не фатальна:
после любого отказа оба ledger остаются в исходном состоянии.

Порядок приоритета при проверке покупки фиксирован:
    UNKNOWN_PRODUCT > INSUFFICIENT_CASH_PROVIDED > INSUFFICIENT_STOCK > CHANGE_UNAVAILABLE
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Коды доменных ошибок."""

    UNKNOWN_PRODUCT = "UNKNOWN_PRODUCT"
    INSUFFICIENT_CASH_PROVIDED = "INSUFFICIENT_CASH_PROVIDED"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    CHANGE_UNAVAILABLE = "CHANGE_UNAVAILABLE"
    INSUFFICIENT_DENOMINATION = "INSUFFICIENT_DENOMINATION"


# =============================================================================
# BASE
# =============================================================================


class VendingError(Exception):
    """
    Базовая доменная ошибка с кодом и сообщением.

    str(error) имеет вид "<CODE>: <message>".
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


# =============================================================================
# ERRORS
# =============================================================================


class UnknownProductError(VendingError):
    """Запрошенный тип товара отсутствует в каталоге."""

    code = ErrorCode.UNKNOWN_PRODUCT

    def __init__(self, product_type: object) -> None:
        name = getattr(product_type, "value", product_type)
        super().__init__(f"Product {name} is not in the catalog")
        self.product_type = product_type


class InsufficientCashProvidedError(VendingError):
    """Сумма внесённых денег меньше стоимости запрошенных товаров."""

    code = ErrorCode.INSUFFICIENT_CASH_PROVIDED

    def __init__(self, total_tendered: int, total_cost: int) -> None:
        super().__init__(
            f"Tendered {total_tendered} is less than total cost {total_cost}"
        )
        self.total_tendered = total_tendered
        self.total_cost = total_cost


class InsufficientStockError(VendingError):
    """Запрошенное количество товара превышает остаток."""

    code = ErrorCode.INSUFFICIENT_STOCK

    def __init__(self, product_type: object, requested: int, remaining: int) -> None:
        name = getattr(product_type, "value", product_type)
        super().__init__(
            f"Requested {requested} of {name}, only {remaining} in stock"
        )
        self.product_type = product_type
        self.requested = requested
        self.remaining = remaining


class ChangeUnavailableError(VendingError):
    """Точная сдача не может быть собрана из доступных номиналов."""

    code = ErrorCode.CHANGE_UNAVAILABLE

    def __init__(self, amount: int, shortfall: Optional[int] = None) -> None:
        message = f"Exact change of {amount} cannot be composed"
        if shortfall is not None:
            message += f" ({shortfall} left uncovered)"
        super().__init__(message)
        self.amount = amount
        self.shortfall = shortfall


class InsufficientDenominationError(VendingError):
    """Изъятие большего количества единиц номинала, чем есть в автомате."""

    code = ErrorCode.INSUFFICIENT_DENOMINATION

    def __init__(self, key: tuple, requested: int, held: int) -> None:
        money_type, denomination = key
        name = getattr(money_type, "value", money_type)
        super().__init__(
            f"Requested {requested} units of {name} {denomination}, only {held} held"
        )
        self.key = key
        self.requested = requested
        self.held = held
