"""GATE 3: Change Plan

Последний gate перед коммитом:
- change_due == 0 → пустой план, сборка сдачи не выполняется
- Иначе план собирается по ГИПОТЕТИЧЕСКОМУ состоянию:
  текущие номиналы money ledger + внесённые покупателем номиналы
- Точная сдача не собирается → блокировка CHANGE_UNAVAILABLE

Внесённые деньги не поглощаются: gate только читает money ledger.

Интеграция:
- GATE 0-2 должны быть PASS
- change_due из GATE 1
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from vending.core.domain.errors import ChangeUnavailableError, VendingError
from vending.core.domain.money import Denomination
from vending.gatekeeper.gates.gate_01_cash import Gate01Result
from vending.gatekeeper.gates.gate_02_stock import Gate02Result
from vending.ledger.money_ledger import MoneyLedger


@dataclass(frozen=True)
class Gate03Result:
    """Результат GATE 3."""

    entry_allowed: bool
    block_reason: str

    change_due: int
    plan: tuple[Denomination, ...]

    error: Optional[VendingError]

    details: str


class Gate03Change:
    """GATE 3: план сдачи."""

    def evaluate(
        self,
        gate01_result: Gate01Result,
        gate02_result: Gate02Result,
        money_ledger: MoneyLedger,
        tendered: Sequence[Denomination],
    ) -> Gate03Result:
        """Оценка GATE 3.

        Args:
            gate01_result: результат GATE 1 (change_due)
            gate02_result: результат GATE 2
            money_ledger: money ledger (только чтение)
            tendered: внесённые номиналы

        Returns:
            Gate03Result с планом сдачи или блокировкой
        """
        change_due = gate01_result.change_due

        if not gate02_result.entry_allowed:
            return Gate03Result(
                entry_allowed=False,
                block_reason=gate02_result.block_reason,
                change_due=change_due,
                plan=(),
                error=gate02_result.error,
                details=f"GATE 2 blocked: {gate02_result.details}",
            )

        if change_due == 0:
            return Gate03Result(
                entry_allowed=True,
                block_reason="",
                change_due=0,
                plan=(),
                error=None,
                details="PASS: exact tender, no change due",
            )

        try:
            plan = money_ledger.make_change(change_due, extra=tendered)
        except ChangeUnavailableError as e:
            return Gate03Result(
                entry_allowed=False,
                block_reason=e.code.value,
                change_due=change_due,
                plan=(),
                error=e,
                details=str(e),
            )

        return Gate03Result(
            entry_allowed=True,
            block_reason="",
            change_due=change_due,
            plan=tuple(plan),
            error=None,
            details=f"PASS: change_due={change_due}, units={sum(d.count for d in plan)}",
        )
