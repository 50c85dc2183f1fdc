"""Gates — индивидуальные гейты проверки покупки.

Фиксированный порядок (он же приоритет ошибок):
- GATE 0: Catalog / Total Cost (UNKNOWN_PRODUCT)
- GATE 1: Cash Sufficiency (INSUFFICIENT_CASH_PROVIDED)
- GATE 2: Stock Availability (INSUFFICIENT_STOCK)
- GATE 3: Change Plan (CHANGE_UNAVAILABLE)
"""

from .gate_00_catalog import Gate00Catalog, Gate00Result
from .gate_01_cash import Gate01Cash, Gate01Result
from .gate_02_stock import Gate02Result, Gate02Stock, aggregate_lines
from .gate_03_change import Gate03Change, Gate03Result

__all__ = [
    "Gate00Catalog",
    "Gate00Result",
    "Gate01Cash",
    "Gate01Result",
    "Gate02Stock",
    "Gate02Result",
    "aggregate_lines",
    "Gate03Change",
    "Gate03Result",
]
