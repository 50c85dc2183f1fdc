"""
Purchase — Модели запроса, результата и статуса автомата

Форма моделей совпадает с внешним интерфейсом:
- PurchaseRequest:  {money: [{type, denomination, count}], products: [{type, count}]}
- PurchaseResult:   {money: [{type, denomination, count}], products: [{type, count}]}
- MachineStatus:    {money: [{type, denomination, count}], products: [{type, rate, count}]}

Все модели immutable. Сериализация для транспорта — model_dump(mode="json").
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from .errors import VendingError
from .money import Denomination
from .product import ProductLine, StockEntry


# =============================================================================
# REQUEST / RESULT
# =============================================================================


class PurchaseRequest(BaseModel):
    """Запрос на покупку: внесённые деньги и запрошенные товары."""

    money: list[Denomination] = Field(..., description="Внесённые номиналы")
    products: list[ProductLine] = Field(..., description="Запрошенные товары")

    model_config = {"frozen": True}


class PurchaseResult(BaseModel):
    """Результат успешной покупки: сдача и выданные товары."""

    money: list[Denomination] = Field(
        default_factory=list, description="Выданная сдача (план сдачи)"
    )
    products: list[ProductLine] = Field(
        default_factory=list, description="Выданные товары"
    )

    model_config = {"frozen": True}


class MachineStatus(BaseModel):
    """
    Снапшот состояния автомата.

    Отражает только закоммиченное состояние обоих ledger.
    """

    money: list[Denomination] = Field(..., description="Содержимое money ledger")
    products: list[StockEntry] = Field(..., description="Содержимое stock ledger")

    model_config = {"frozen": True}


# =============================================================================
# OUTCOME
# =============================================================================


@dataclass(frozen=True)
class PurchaseOutcome:
    """
    Исход покупки: либо result, либо типизированная ошибка.

    Ровно одно из полей result / error не None.
    """

    result: Optional[PurchaseResult]
    error: Optional[VendingError]

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: PurchaseResult) -> "PurchaseOutcome":
        return cls(result=result, error=None)

    @classmethod
    def failure(cls, error: VendingError) -> "PurchaseOutcome":
        return cls(result=None, error=error)

    def unwrap(self) -> PurchaseResult:
        """
        Результат покупки или исходная ошибка.

        Raises:
            VendingError: если исход — отказ
        """
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result
