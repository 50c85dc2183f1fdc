"""
Denomination — Модель денежной единицы

Immutable Pydantic модель, представляющая номинал (монета или купюра)
и количество единиц этого номинала.

Один и тот же тип модели используется для:
- внесённых денег (count = количество внесённых единиц)
- содержимого money ledger (count = количество единиц в автомате)
- плана сдачи (count = количество единиц к выдаче)

Ключ номинала — пара (type, denomination). Два номинала с одинаковым
count, но разным type или denomination — разные номиналы.
"""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class MoneyType(str, Enum):
    """Класс денежной единицы"""

    COIN = "COIN"
    CASH = "CASH"


# Ключ номинала в ledger
DenominationKey = tuple[MoneyType, int]


# =============================================================================
# DENOMINATION MODEL
# =============================================================================


class Denomination(BaseModel):
    """
    Номинал и количество единиц.

    Immutable модель (frozen=True). Изменение количества выполняется
    только через MoneyLedger, который хранит собственные счётчики.
    """

    type: MoneyType = Field(..., description="Класс денежной единицы (COIN/CASH)")
    denomination: int = Field(
        ..., gt=0, description="Номинал в минимальных единицах валюты"
    )
    count: int = Field(..., ge=0, description="Количество единиц")

    model_config = {"frozen": True}

    @property
    def key(self) -> DenominationKey:
        """Ключ номинала (type, denomination)."""
        return (self.type, self.denomination)

    @property
    def value(self) -> int:
        """Суммарная стоимость: denomination × count."""
        return self.denomination * self.count

    def with_count(self, count: int) -> "Denomination":
        """Копия номинала с другим количеством."""
        return Denomination(type=self.type, denomination=self.denomination, count=count)


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def new_coin(count: int, denomination: int = 1) -> Denomination:
    """Монеты: по умолчанию номинал 1."""
    return Denomination(type=MoneyType.COIN, denomination=denomination, count=count)


def new_cash(count: int, denomination: int = 10) -> Denomination:
    """Купюры: по умолчанию номинал 10."""
    return Denomination(type=MoneyType.CASH, denomination=denomination, count=count)


def total_value(denominations: Iterable[Denomination]) -> int:
    """
    Суммарная стоимость последовательности номиналов.

    Чистая функция: Σ denomination × count. Не зависит от состояния ledger,
    используется для суммы внесённых денег и суммы сдачи.

    Args:
        denominations: Последовательность номиналов

    Returns:
        Суммарная стоимость в минимальных единицах валюты
    """
    return sum(d.value for d in denominations)
