"""
Product — Модели товаров

- ProductLine: строка запроса/выдачи (тип + количество)
- StockEntry: позиция каталога (тип + цена за единицу + остаток)
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class ProductType(str, Enum):
    """SKU товара"""

    COKE = "COKE"
    DEW = "DEW"
    PEPSI = "PEPSI"


# =============================================================================
# PRODUCT MODELS
# =============================================================================


class ProductLine(BaseModel):
    """
    Строка запроса на покупку или выданного товара.

    count — запрошенное (или выданное) количество единиц.
    """

    type: ProductType = Field(..., description="SKU товара")
    count: int = Field(..., ge=0, description="Количество единиц")

    model_config = {"frozen": True}


class StockEntry(BaseModel):
    """
    Позиция каталога: цена за единицу и текущий остаток.

    rate неизменяем после инициализации ledger.
    """

    type: ProductType = Field(..., description="SKU товара")
    rate: int = Field(..., gt=0, description="Цена за единицу")
    count: int = Field(..., ge=0, description="Остаток на складе")

    model_config = {"frozen": True}
