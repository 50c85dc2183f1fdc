"""GATE 1: Cash Sufficiency

Проверяет, что внесённых денег достаточно:
- total_tendered = Σ denomination × count по внесённым номиналам
- total_tendered >= total_cost (из GATE 0)
- change_due = total_tendered - total_cost

Частичная оплата / кредит не поддерживаются: любая недостача — блокировка
INSUFFICIENT_CASH_PROVIDED.

Интеграция:
- Использует total_cost из GATE 0 (должен быть PASS)
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from vending.core.domain.errors import InsufficientCashProvidedError, VendingError
from vending.core.domain.money import Denomination, total_value
from vending.gatekeeper.gates.gate_00_catalog import Gate00Result


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    entry_allowed: bool
    block_reason: str

    total_tendered: int
    total_cost: int
    change_due: int

    error: Optional[VendingError]

    details: str


class Gate01Cash:
    """GATE 1: достаточность внесённых денег."""

    def evaluate(
        self,
        gate00_result: Gate00Result,
        money: Sequence[Denomination],
    ) -> Gate01Result:
        """Оценка GATE 1.

        Args:
            gate00_result: результат GATE 0 (total_cost)
            money: внесённые номиналы

        Returns:
            Gate01Result с change_due или блокировкой
        """
        total_tendered = total_value(money)
        total_cost = gate00_result.total_cost

        # 1. GATE 0 блокировка пропускается без изменений
        if not gate00_result.entry_allowed:
            return Gate01Result(
                entry_allowed=False,
                block_reason=gate00_result.block_reason,
                total_tendered=total_tendered,
                total_cost=total_cost,
                change_due=0,
                error=gate00_result.error,
                details=f"GATE 0 blocked: {gate00_result.details}",
            )

        # 2. Недостаточно денег
        if total_tendered < total_cost:
            error = InsufficientCashProvidedError(total_tendered, total_cost)
            return Gate01Result(
                entry_allowed=False,
                block_reason=error.code.value,
                total_tendered=total_tendered,
                total_cost=total_cost,
                change_due=0,
                error=error,
                details=str(error),
            )

        # 3. PASS
        change_due = total_tendered - total_cost
        return Gate01Result(
            entry_allowed=True,
            block_reason="",
            total_tendered=total_tendered,
            total_cost=total_cost,
            change_due=change_due,
            error=None,
            details=f"PASS: tendered={total_tendered}, cost={total_cost}, change_due={change_due}",
        )
