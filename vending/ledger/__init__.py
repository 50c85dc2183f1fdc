"""Ledgers — состояние автомата: деньги и товары.

- MoneyLedger: номиналы в автомате и сборка сдачи
- StockLedger: цены и остатки товаров
"""

from .money_ledger import MoneyLedger
from .stock_ledger import StockLedger, StockSnapshot

__all__ = [
    "MoneyLedger",
    "StockLedger",
    "StockSnapshot",
]
