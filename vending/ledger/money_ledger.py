"""Money Ledger — учёт номиналов, находящихся в автомате.

Состояние:
- Упорядоченное множество номиналов с ключом (type, denomination)
- Порядок ключей — порядок первого deposit (seed порядок)
- count >= 0 всегда

Операции:
- deposit: увеличение счётчика (создаёт ключ при отсутствии), всегда успешно
- withdraw: уменьшение счётчика, InsufficientDenominationError при нехватке
- total_value: чистая сумма Σ denomination × count по последовательности
- make_change: план сдачи по текущему состоянию + дополнительным номиналам

Ledger не синхронизирован сам по себе: все мутации выполняются внутри
критической секции VendingMachine.
"""

import logging
from typing import Iterable, Iterator, Sequence

from vending.core.domain.errors import InsufficientDenominationError
from vending.core.domain.money import Denomination, DenominationKey, total_value
from vending.core.math.change_making import (
    is_canonical_system,
    make_change_greedy,
    merge_denominations,
)

logger = logging.getLogger(__name__)


class MoneyLedger:
    """Money Ledger: счётчики номиналов и сборка сдачи."""

    def __init__(self, seed: Iterable[Denomination] = ()):
        """
        Args:
            seed: начальное содержимое (ключи могут повторяться, количества суммируются)
        """
        self._counts: dict[DenominationKey, int] = {}
        for d in seed:
            self.deposit(d, d.count)

        if self._counts and not is_canonical_system(k[1] for k in self._counts):
            logger.warning(
                "Denomination set %s is not canonical: greedy change may miss "
                "exact compositions",
                sorted({k[1] for k in self._counts}),
            )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def deposit(self, denomination: Denomination, count: int) -> None:
        """Добавление count единиц номинала.

        Args:
            denomination: номинал (используется только ключ type/denomination)
            count: количество единиц (>= 0)
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        key = denomination.key
        self._counts[key] = self._counts.get(key, 0) + count

    def withdraw(self, denomination: Denomination, count: int) -> None:
        """Изъятие count единиц номинала.

        Raises:
            InsufficientDenominationError: если в ledger меньше count единиц
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        key = denomination.key
        held = self._counts.get(key, 0)
        if held < count:
            raise InsufficientDenominationError(key, requested=count, held=held)
        self._counts[key] = held - count

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @staticmethod
    def total_value(denominations: Iterable[Denomination]) -> int:
        """Σ denomination × count по последовательности (не зависит от ledger)."""
        return total_value(denominations)

    def count_of(self, denomination: Denomination) -> int:
        """Количество единиц номинала в ledger (0 если ключа нет)."""
        return self._counts.get(denomination.key, 0)

    def balance(self) -> int:
        """Суммарная стоимость содержимого ledger."""
        return sum(face * count for (_, face), count in self._counts.items())

    def denominations(self) -> list[Denomination]:
        """Копия содержимого ledger в порядке ключей."""
        return [
            Denomination(type=money_type, denomination=face, count=count)
            for (money_type, face), count in self._counts.items()
        ]

    def __iter__(self) -> Iterator[Denomination]:
        return iter(self.denominations())

    def make_change(
        self, amount: int, extra: Sequence[Denomination] = ()
    ) -> list[Denomination]:
        """План сдачи для гипотетического состояния: ledger + extra.

        Состояние ledger не изменяется. extra — обычно внесённые покупателем
        деньги, которыми автомат может воспользоваться для сдачи.

        Args:
            amount: сумма сдачи
            extra: номиналы, ещё не внесённые в ledger

        Returns:
            План сдачи (номиналы с count > 0, убывание номинала)

        Raises:
            ChangeUnavailableError: если точная сдача не собирается
        """
        hypothetical = merge_denominations(self.denominations(), extra)
        plan = make_change_greedy(amount, hypothetical)
        logger.debug(
            "Change plan for %d: %s",
            amount,
            [(d.type.value, d.denomination, d.count) for d in plan],
        )
        return plan
