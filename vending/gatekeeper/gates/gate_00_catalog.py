"""GATE 0: Catalog / Total Cost

Первый gate в цепочке проверки покупки:
- Каждый запрошенный тип товара должен быть в каталоге
- Вычисляет total_cost = Σ rate × count по строкам запроса

Блокировка: UNKNOWN_PRODUCT (высший приоритет среди отказов покупки).
Gate не изменяет состояние ledger.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from vending.core.domain.errors import UnknownProductError, VendingError
from vending.core.domain.product import ProductLine, ProductType
from vending.ledger.stock_ledger import StockLedger


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    entry_allowed: bool
    block_reason: str

    total_cost: int
    unknown_product: Optional[ProductType]

    # Ошибка для вызывающего кода (None при PASS)
    error: Optional[VendingError]

    details: str


class Gate00Catalog:
    """GATE 0: проверка каталога и расчёт стоимости.

    Порядок проверок:
    1. Строки запроса в порядке следования: тип в каталоге → rate × count
    2. Первый неизвестный тип → блокировка
    """

    def evaluate(
        self,
        stock: StockLedger,
        products: Sequence[ProductLine],
    ) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            stock: stock ledger (только чтение)
            products: запрошенные товары

        Returns:
            Gate00Result с total_cost или блокировкой UNKNOWN_PRODUCT
        """
        total_cost = 0
        for line in products:
            try:
                rate = stock.price_of(line.type)
            except UnknownProductError as e:
                return Gate00Result(
                    entry_allowed=False,
                    block_reason=e.code.value,
                    total_cost=0,
                    unknown_product=line.type,
                    error=e,
                    details=str(e),
                )
            total_cost += rate * line.count

        return Gate00Result(
            entry_allowed=True,
            block_reason="",
            total_cost=total_cost,
            unknown_product=None,
            error=None,
            details=f"PASS: total_cost={total_cost}, lines={len(products)}",
        )
