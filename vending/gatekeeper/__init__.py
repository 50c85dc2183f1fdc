"""Gatekeeper — система гейтов для допуска покупки к коммиту.

- 4 gates с фиксированным порядком
- Ни один gate не изменяет состояние ledger
- Первый заблокировавший gate определяет ошибку покупки
"""

from .gates import (
    Gate00Catalog,
    Gate00Result,
    Gate01Cash,
    Gate01Result,
    Gate02Result,
    Gate02Stock,
    Gate03Change,
    Gate03Result,
)

__all__ = [
    "Gate00Catalog",
    "Gate00Result",
    "Gate01Cash",
    "Gate01Result",
    "Gate02Stock",
    "Gate02Result",
    "Gate03Change",
    "Gate03Result",
]
