"""Stock Ledger — цены и остатки товаров.

Состояние: ProductType → (rate, count), ключ уникален.
- rate неизменяем после инициализации
- count >= 0 всегда
"""

from typing import Iterable, Iterator

from vending.core.domain.errors import InsufficientStockError, UnknownProductError
from vending.core.domain.product import ProductType, StockEntry


class StockSnapshot:
    """Read-only снапшот каталога.

    Ленивый: StockEntry создаются при итерации. Перезапускаемый: каждая
    итерация начинается заново по зафиксированным при создании данным.
    """

    def __init__(self, rows: Iterable[tuple[ProductType, int, int]]):
        self._rows = tuple(rows)

    def __iter__(self) -> Iterator[StockEntry]:
        for product_type, rate, count in self._rows:
            yield StockEntry(type=product_type, rate=rate, count=count)

    def __len__(self) -> int:
        return len(self._rows)


class StockLedger:
    """Stock Ledger: цена за единицу и остаток по каждому товару."""

    def __init__(self, catalog: Iterable[StockEntry] = ()):
        """
        Args:
            catalog: позиции каталога (типы уникальны)

        Raises:
            ValueError: при повторяющемся типе товара
        """
        self._rates: dict[ProductType, int] = {}
        self._counts: dict[ProductType, int] = {}
        for entry in catalog:
            if entry.type in self._rates:
                raise ValueError(f"Duplicate catalog entry for {entry.type.value}")
            self._rates[entry.type] = entry.rate
            self._counts[entry.type] = entry.count

    def __contains__(self, product_type: object) -> bool:
        return product_type in self._rates

    def price_of(self, product_type: ProductType) -> int:
        """Цена за единицу.

        Raises:
            UnknownProductError: если товара нет в каталоге
        """
        try:
            return self._rates[product_type]
        except KeyError:
            raise UnknownProductError(product_type) from None

    def remaining(self, product_type: ProductType) -> int:
        """Остаток товара.

        Raises:
            UnknownProductError: если товара нет в каталоге
        """
        if product_type not in self._counts:
            raise UnknownProductError(product_type)
        return self._counts[product_type]

    def available(self, product_type: ProductType, requested_count: int) -> bool:
        """True если остаток >= requested_count (False для неизвестного товара)."""
        return product_type in self._counts and self._counts[product_type] >= requested_count

    def decrement(self, product_type: ProductType, count: int) -> None:
        """Списание count единиц товара.

        Raises:
            UnknownProductError: если товара нет в каталоге
            InsufficientStockError: если остаток < count
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        remaining = self.remaining(product_type)
        if remaining < count:
            raise InsufficientStockError(product_type, requested=count, remaining=remaining)
        self._counts[product_type] = remaining - count

    def restock(self, product_type: ProductType, count: int) -> None:
        """Пополнение остатка товара из каталога. Цена не меняется.

        Raises:
            UnknownProductError: если товара нет в каталоге
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._counts[product_type] = self.remaining(product_type) + count

    def snapshot(self) -> StockSnapshot:
        """Read-only снапшот (type, rate, count) в порядке каталога."""
        return StockSnapshot(
            (product_type, self._rates[product_type], count)
            for product_type, count in self._counts.items()
        )
