"""
Change Making — Greedy composition of exact change

Модуль собирает точную сдачу из ограниченного набора номиналов:
- Greedy: номиналы перебираются от большего к меньшему
- На каждом шаге берётся min(remaining // face_value, available_count) единиц
- Успех: remaining == 0
- Отказ: номиналы исчерпаны при remaining > 0 → ChangeUnavailableError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сумма плана сдачи в точности равна запрошенной сумме
2. Количество каждого номинала в плане <= доступного количества
3. Порядок плана — убывание номинала (при равном номинале — порядок входа)
4. Функции чистые: входные последовательности не изменяются

ОГРАНИЧЕНИЕ:
Greedy находит точное решение, когда оно существует, только для
"канонических" наборов номиналов при достаточном количестве мелких единиц
(например, {1, 10} автомата по умолчанию). Для произвольных наборов
(например, {1, 3, 4} и сумма 6) greedy может не найти решение, которое
нашёл бы DP-алгоритм. Это известное ограничение, а не ошибка:
is_canonical_system() позволяет обнаружить неканонический набор заранее.
"""

from typing import Final, Iterable, Sequence

from vending.core.domain.errors import ChangeUnavailableError
from vending.core.domain.money import Denomination, DenominationKey


# =============================================================================
# CONSTANTS
# =============================================================================

# Нулевая сдача — пустой план
EMPTY_PLAN: Final[tuple[Denomination, ...]] = ()


# =============================================================================
# HELPERS
# =============================================================================


def merge_denominations(
    *groups: Iterable[Denomination],
) -> list[Denomination]:
    """
    Объединение нескольких наборов номиналов по ключу (type, denomination).

    Количества одинаковых ключей суммируются. Порядок ключей — порядок
    первого появления.

    Args:
        groups: Наборы номиналов (например, содержимое ledger и внесённые деньги)

    Returns:
        Список номиналов с уникальными ключами
    """
    counts: dict[DenominationKey, int] = {}
    templates: dict[DenominationKey, Denomination] = {}
    for group in groups:
        for d in group:
            counts[d.key] = counts.get(d.key, 0) + d.count
            templates.setdefault(d.key, d)
    return [templates[key].with_count(count) for key, count in counts.items()]


def sort_for_change(denominations: Sequence[Denomination]) -> list[Denomination]:
    """
    Порядок перебора greedy: от большего номинала к меньшему.

    sorted() стабилен, поэтому при равном номинале сохраняется порядок входа.
    """
    return sorted(denominations, key=lambda d: d.denomination, reverse=True)


# =============================================================================
# GREEDY CHANGE
# =============================================================================


def make_change_greedy(
    amount: int, available: Sequence[Denomination]
) -> list[Denomination]:
    """
    Greedy-план точной сдачи.

    Args:
        amount: Сумма сдачи (>= 0)
        available: Доступные номиналы с количествами (ключи уникальны)

    Returns:
        План сдачи: номиналы с count > 0 в порядке убывания номинала.
        Для amount == 0 — пустой список.

    Raises:
        ValueError: если amount < 0
        ChangeUnavailableError: если точная сдача не собирается greedy

    Examples:
        >>> plan = make_change_greedy(15, [new_coin(100), new_cash(20)])
        >>> [(d.denomination, d.count) for d in plan]
        [(10, 1), (1, 5)]
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")

    remaining = amount
    plan: list[Denomination] = []

    for d in sort_for_change(available):
        if remaining == 0:
            break
        if d.count == 0 or d.denomination > remaining:
            continue

        take = min(remaining // d.denomination, d.count)
        plan.append(d.with_count(take))
        remaining -= take * d.denomination

    if remaining > 0:
        raise ChangeUnavailableError(amount, shortfall=remaining)

    return plan


# =============================================================================
# CANONICAL SYSTEM CHECK
# =============================================================================


def is_canonical_system(face_values: Iterable[int]) -> bool:
    """
    Проверка, что greedy оптимален для набора номиналов (неограниченное количество).

    Контрпример, если существует, меньше суммы двух крупнейших номиналов,
    поэтому достаточно сравнить greedy с DP на суммах до этой границы.
    Набор без номинала 1 считается неканоническим: часть сумм не собирается вовсе.

    Args:
        face_values: Номиналы (положительные целые)

    Returns:
        True если greedy всегда находит решение с минимальным числом единиц
    """
    coins = sorted(set(face_values), reverse=True)
    if not coins or coins[-1] != 1:
        return False
    if len(coins) <= 2:
        return True

    bound = coins[0] + coins[1]
    # min_units[a] — минимальное число единиц для суммы a
    min_units = [0] + [bound] * bound
    for a in range(1, bound):
        min_units[a] = 1 + min(min_units[a - c] for c in coins if c <= a)

        greedy_units = 0
        remaining = a
        for c in coins:
            greedy_units += remaining // c
            remaining %= c
        if greedy_units > min_units[a]:
            return False

    return True
