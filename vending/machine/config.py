"""Machine configuration — seed каталог и seed содержимое money ledger.

Конфигурация по умолчанию:
- products: COKE rate 20 ×10, DEW rate 30 ×10, PEPSI rate 25 ×10
- money: COIN 1 ×100, CASH 10 ×20
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from vending.core.contracts.validators import validate_machine_config
from vending.core.domain.money import Denomination, MoneyType
from vending.core.domain.product import ProductType, StockEntry


def _default_products() -> tuple[StockEntry, ...]:
    return (
        StockEntry(type=ProductType.COKE, rate=20, count=10),
        StockEntry(type=ProductType.DEW, rate=30, count=10),
        StockEntry(type=ProductType.PEPSI, rate=25, count=10),
    )


def _default_money() -> tuple[Denomination, ...]:
    return (
        Denomination(type=MoneyType.COIN, denomination=1, count=100),
        Denomination(type=MoneyType.CASH, denomination=10, count=20),
    )


@dataclass(frozen=True)
class MachineConfig:
    """Конфигурация автомата.

    Seed состояние применяется один раз при создании VendingMachine.
    Типы товаров и ключи номиналов должны быть уникальны.
    """

    products: tuple[StockEntry, ...] = field(default_factory=_default_products)
    money: tuple[Denomination, ...] = field(default_factory=_default_money)

    def __post_init__(self) -> None:
        product_types = [p.type for p in self.products]
        if len(set(product_types)) != len(product_types):
            raise ValueError(f"Duplicate product types in config: {product_types}")

        keys = [d.key for d in self.money]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate denominations in config: {keys}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MachineConfig":
        """Конфигурация из dict (формат machine_config контракта).

        Raises:
            ValidationError: если данные не соответствуют схеме
            ValueError: при повторяющихся типах товаров или номиналах
        """
        validate_machine_config(data)
        return cls(
            products=tuple(StockEntry.model_validate(p) for p in data["products"]),
            money=tuple(Denomination.model_validate(d) for d in data["money"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "products": [p.model_dump(mode="json") for p in self.products],
            "money": [d.model_dump(mode="json") for d in self.money],
        }


def load_machine_config(path: Union[str, Path]) -> MachineConfig:
    """Загрузка конфигурации из JSON файла."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return MachineConfig.from_dict(data)
