"""GATE 2: Stock Availability

Проверяет наличие ВСЕХ запрошенных товаров до любого коммита:
- Строки одного типа суммируются (COKE×2 + COKE×3 → COKE×5)
- Для каждого типа: stock.available(type, total_requested)
- Первый (в порядке запроса) недоступный тип → блокировка INSUFFICIENT_STOCK

Интеграция:
- GATE 0-1 должны быть PASS
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from vending.core.domain.errors import InsufficientStockError, VendingError
from vending.core.domain.product import ProductLine, ProductType
from vending.gatekeeper.gates.gate_01_cash import Gate01Result
from vending.ledger.stock_ledger import StockLedger


@dataclass(frozen=True)
class Gate02Result:
    """Результат GATE 2."""

    entry_allowed: bool
    block_reason: str

    # Суммарно запрошенное количество по типам (порядок первого появления)
    requested: dict[ProductType, int] = field(default_factory=dict)
    short_product: Optional[ProductType] = None

    error: Optional[VendingError] = None

    details: str = ""


def aggregate_lines(products: Sequence[ProductLine]) -> dict[ProductType, int]:
    """Суммирование количеств по типу товара."""
    requested: dict[ProductType, int] = {}
    for line in products:
        requested[line.type] = requested.get(line.type, 0) + line.count
    return requested


class Gate02Stock:
    """GATE 2: наличие товаров на складе."""

    def evaluate(
        self,
        gate01_result: Gate01Result,
        stock: StockLedger,
        products: Sequence[ProductLine],
    ) -> Gate02Result:
        """Оценка GATE 2.

        Args:
            gate01_result: результат GATE 1
            stock: stock ledger (только чтение)
            products: запрошенные товары

        Returns:
            Gate02Result с агрегированным запросом или блокировкой
        """
        requested = aggregate_lines(products)

        if not gate01_result.entry_allowed:
            return Gate02Result(
                entry_allowed=False,
                block_reason=gate01_result.block_reason,
                requested=requested,
                error=gate01_result.error,
                details=f"GATE 1 blocked: {gate01_result.details}",
            )

        for product_type, count in requested.items():
            if not stock.available(product_type, count):
                error = InsufficientStockError(
                    product_type, requested=count, remaining=stock.remaining(product_type)
                )
                return Gate02Result(
                    entry_allowed=False,
                    block_reason=error.code.value,
                    requested=requested,
                    short_product=product_type,
                    error=error,
                    details=str(error),
                )

        return Gate02Result(
            entry_allowed=True,
            block_reason="",
            requested=requested,
            details=f"PASS: {', '.join(f'{t.value}x{c}' for t, c in requested.items())}",
        )
