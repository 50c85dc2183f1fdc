"""Purchase Orchestrator — протокол покупки с семантикой all-or-nothing.

Порядок выполнения process_purchase (одна критическая секция):
1. GATE 0: total_cost, UNKNOWN_PRODUCT
2. GATE 1: total_tendered >= total_cost, INSUFFICIENT_CASH_PROVIDED
3. GATE 2: наличие всех товаров, INSUFFICIENT_STOCK
4. GATE 3: план сдачи по (ledger + tender), CHANGE_UNAVAILABLE
5. Commit: deposit tender → withdraw план сдачи → decrement stock

Любой отказ на шагах 1-4 не изменяет ни один ledger. Commit выполняется
только после PASS всех gates и не может завершиться ошибкой: план сдачи
собран по состоянию, которое получается ровно после deposit tender.

Конкурентность: один RLock на автомат. Покупки, административные
deposit/withdraw/restock и show_status сериализуются этим lock.
"""

import logging
import threading
from typing import Any, Dict, Optional, Sequence

from vending.core.contracts.validators import validate_purchase_request
from vending.core.domain.money import Denomination
from vending.core.domain.product import ProductLine, ProductType
from vending.core.domain.purchase import (
    MachineStatus,
    PurchaseOutcome,
    PurchaseRequest,
    PurchaseResult,
)
from vending.gatekeeper.gates import (
    Gate00Catalog,
    Gate01Cash,
    Gate02Stock,
    Gate03Change,
    Gate03Result,
)
from vending.ledger.money_ledger import MoneyLedger
from vending.ledger.stock_ledger import StockLedger
from vending.machine.config import MachineConfig

logger = logging.getLogger(__name__)


class VendingMachine:
    """Purchase Orchestrator: владеет обоими ledger и единственным lock."""

    def __init__(self, money_ledger: MoneyLedger, stock_ledger: StockLedger):
        self._money = money_ledger
        self._stock = stock_ledger
        self._lock = threading.RLock()

        self._gate00 = Gate00Catalog()
        self._gate01 = Gate01Cash()
        self._gate02 = Gate02Stock()
        self._gate03 = Gate03Change()

    @classmethod
    def from_config(cls, config: Optional[MachineConfig] = None) -> "VendingMachine":
        """Автомат с seed состоянием из конфигурации (по умолчанию — MachineConfig())."""
        config = config or MachineConfig()
        return cls(
            money_ledger=MoneyLedger(config.money),
            stock_ledger=StockLedger(config.products),
        )

    @property
    def money_ledger(self) -> MoneyLedger:
        return self._money

    @property
    def stock_ledger(self) -> StockLedger:
        return self._stock

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def show_status(self) -> MachineStatus:
        """Снапшот закоммиченного состояния (только чтение)."""
        with self._lock:
            return MachineStatus(
                money=self._money.denominations(),
                products=list(self._stock.snapshot()),
            )

    # -------------------------------------------------------------------------
    # Purchase
    # -------------------------------------------------------------------------

    def _run_gates(
        self,
        money: Sequence[Denomination],
        products: Sequence[ProductLine],
    ) -> Gate03Result:
        """GATE 0-3 по текущему состоянию. Вызывается под lock."""
        gate00 = self._gate00.evaluate(self._stock, products)
        gate01 = self._gate01.evaluate(gate00, money)
        gate02 = self._gate02.evaluate(gate01, self._stock, products)
        gate03 = self._gate03.evaluate(gate01, gate02, self._money, money)
        logger.debug("Purchase gates: %s", gate03.details)
        return gate03

    def _commit(
        self,
        money: Sequence[Denomination],
        products: Sequence[ProductLine],
        plan: Sequence[Denomination],
    ) -> None:
        for d in money:
            self._money.deposit(d, d.count)
        for d in plan:
            self._money.withdraw(d, d.count)
        for line in products:
            self._stock.decrement(line.type, line.count)

    def evaluate_purchase(
        self,
        money: Sequence[Denomination],
        products: Sequence[ProductLine],
    ) -> PurchaseOutcome:
        """Проверка покупки без коммита (dry run).

        Returns:
            PurchaseOutcome с результатом, который дал бы коммит, или ошибкой
        """
        with self._lock:
            decision = self._run_gates(money, products)
        if not decision.entry_allowed:
            assert decision.error is not None
            return PurchaseOutcome.failure(decision.error)
        return PurchaseOutcome.success(
            PurchaseResult(money=list(decision.plan), products=list(products))
        )

    def try_purchase(
        self,
        money: Sequence[Denomination],
        products: Sequence[ProductLine],
    ) -> PurchaseOutcome:
        """Покупка с результатом в виде PurchaseOutcome (без exception).

        Проверка и коммит выполняются в одной критической секции.
        """
        with self._lock:
            decision = self._run_gates(money, products)
            if not decision.entry_allowed:
                assert decision.error is not None
                logger.info("Purchase rejected: %s", decision.error)
                return PurchaseOutcome.failure(decision.error)

            self._commit(money, products, decision.plan)

        result = PurchaseResult(money=list(decision.plan), products=list(products))
        logger.info(
            "Purchase committed: products=%s change=%d",
            [(p.type.value, p.count) for p in products],
            decision.change_due,
        )
        return PurchaseOutcome.success(result)

    def process_purchase(
        self,
        money: Sequence[Denomination],
        products: Sequence[ProductLine],
    ) -> PurchaseResult:
        """Покупка: сдача и выданные товары.

        Raises:
            UnknownProductError: товар не в каталоге
            InsufficientCashProvidedError: внесено меньше стоимости
            InsufficientStockError: товара недостаточно
            ChangeUnavailableError: точная сдача не собирается
        """
        return self.try_purchase(money, products).unwrap()

    def purchase(self, request: PurchaseRequest) -> PurchaseResult:
        """process_purchase для PurchaseRequest."""
        return self.process_purchase(request.money, request.products)

    # -------------------------------------------------------------------------
    # Transport mapping (dict in → dict out)
    # -------------------------------------------------------------------------

    def status_payload(self) -> Dict[str, Any]:
        """show_status() в формате machine_status контракта."""
        return self.show_status().model_dump(mode="json")

    def purchase_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """process_purchase() для dict в формате purchase_request контракта.

        Raises:
            ValidationError: если data не соответствует purchase_request
            VendingError: доменный отказ покупки
        """
        validate_purchase_request(data)
        request = PurchaseRequest.model_validate(data)
        return self.purchase(request).model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Administrative operations
    # -------------------------------------------------------------------------

    def deposit(self, denomination: Denomination, count: Optional[int] = None) -> None:
        """Пополнение номинала (count по умолчанию — denomination.count)."""
        count = denomination.count if count is None else count
        with self._lock:
            self._money.deposit(denomination, count)
        logger.info(
            "Deposited %d x %s %d", count, denomination.type.value, denomination.denomination
        )

    def withdraw(self, denomination: Denomination, count: Optional[int] = None) -> None:
        """Изъятие номинала (count по умолчанию — denomination.count).

        Raises:
            InsufficientDenominationError: если единиц номинала недостаточно
        """
        count = denomination.count if count is None else count
        with self._lock:
            self._money.withdraw(denomination, count)
        logger.info(
            "Withdrew %d x %s %d", count, denomination.type.value, denomination.denomination
        )

    def restock(self, product_type: ProductType, count: int) -> None:
        """Пополнение остатка товара.

        Raises:
            UnknownProductError: если товара нет в каталоге
        """
        with self._lock:
            self._stock.restock(product_type, count)
        logger.info("Restocked %d x %s", count, product_type.value)
