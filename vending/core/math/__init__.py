"""
Core math modules для Vending

Алгоритм сборки сдачи и вспомогательные операции над наборами номиналов.
"""

from vending.core.math.change_making import (
    EMPTY_PLAN,
    is_canonical_system,
    make_change_greedy,
    merge_denominations,
    sort_for_change,
)

__all__ = [
    "EMPTY_PLAN",
    "make_change_greedy",
    "merge_denominations",
    "sort_for_change",
    "is_canonical_system",
]
