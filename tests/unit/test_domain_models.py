"""
Тесты для domain моделей

Покрывает:
- Denomination: валидация, ключ, стоимость, immutability
- ProductLine / StockEntry: валидация
- PurchaseRequest / PurchaseResult / MachineStatus: сериализация
- PurchaseOutcome: success / failure / unwrap
- Domain errors: коды и сообщения
"""

import pytest
from pydantic import ValidationError

from vending.core.domain import (
    ChangeUnavailableError,
    Denomination,
    ErrorCode,
    InsufficientCashProvidedError,
    InsufficientDenominationError,
    InsufficientStockError,
    MachineStatus,
    MoneyType,
    ProductLine,
    ProductType,
    PurchaseOutcome,
    PurchaseRequest,
    PurchaseResult,
    StockEntry,
    UnknownProductError,
    VendingError,
    new_cash,
    new_coin,
    total_value,
)


# =============================================================================
# DENOMINATION
# =============================================================================


class TestDenomination:
    """Тесты Denomination."""

    def test_new_coin_defaults(self):
        coin = new_coin(5)
        assert coin.type == MoneyType.COIN
        assert coin.denomination == 1
        assert coin.count == 5

    def test_new_cash_defaults(self):
        cash = new_cash(2)
        assert cash.type == MoneyType.CASH
        assert cash.denomination == 10
        assert cash.value == 20

    def test_key_distinguishes_kind(self):
        """COIN 10 и CASH 10 — разные номиналы даже при равном count."""
        coin10 = Denomination(type=MoneyType.COIN, denomination=10, count=3)
        cash10 = Denomination(type=MoneyType.CASH, denomination=10, count=3)
        assert coin10.key != cash10.key
        assert coin10 != cash10

    def test_rejects_non_positive_face_value(self):
        with pytest.raises(ValidationError):
            Denomination(type=MoneyType.COIN, denomination=0, count=1)

    def test_rejects_negative_count(self):
        with pytest.raises(ValidationError):
            Denomination(type=MoneyType.COIN, denomination=1, count=-1)

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            Denomination(type="TOKEN", denomination=1, count=1)

    def test_frozen(self):
        coin = new_coin(1)
        with pytest.raises(ValidationError):
            coin.count = 2

    def test_with_count(self):
        cash = new_cash(2)
        copy = cash.with_count(7)
        assert copy.key == cash.key
        assert copy.count == 7
        assert cash.count == 2

    def test_total_value(self):
        assert total_value([new_coin(7), new_cash(3)]) == 37
        assert total_value([]) == 0


# =============================================================================
# PRODUCTS
# =============================================================================


class TestProducts:
    """Тесты ProductLine и StockEntry."""

    def test_product_line_from_string_type(self):
        line = ProductLine(type="PEPSI", count=2)
        assert line.type == ProductType.PEPSI

    def test_product_line_rejects_negative_count(self):
        with pytest.raises(ValidationError):
            ProductLine(type=ProductType.COKE, count=-1)

    def test_stock_entry_requires_positive_rate(self):
        with pytest.raises(ValidationError):
            StockEntry(type=ProductType.COKE, rate=0, count=1)

    def test_unknown_sku_rejected(self):
        with pytest.raises(ValidationError):
            ProductLine(type="FANTA", count=1)


# =============================================================================
# PURCHASE MODELS
# =============================================================================


class TestPurchaseModels:
    """Тесты PurchaseRequest / PurchaseResult / MachineStatus."""

    def test_request_from_wire_format(self):
        request = PurchaseRequest.model_validate(
            {
                "money": [{"type": "CASH", "denomination": 10, "count": 3}],
                "products": [{"type": "PEPSI", "count": 1}],
            }
        )
        assert request.money == [new_cash(3)]
        assert request.products == [ProductLine(type=ProductType.PEPSI, count=1)]

    def test_result_dump_matches_wire_format(self):
        result = PurchaseResult(
            money=[new_coin(5)],
            products=[ProductLine(type=ProductType.PEPSI, count=1)],
        )
        assert result.model_dump(mode="json") == {
            "money": [{"type": "COIN", "denomination": 1, "count": 5}],
            "products": [{"type": "PEPSI", "count": 1}],
        }

    def test_empty_result(self):
        result = PurchaseResult()
        assert result.money == []
        assert result.products == []

    def test_status_dump(self):
        status = MachineStatus(
            money=[new_coin(100)],
            products=[StockEntry(type=ProductType.COKE, rate=20, count=10)],
        )
        assert status.model_dump(mode="json") == {
            "money": [{"type": "COIN", "denomination": 1, "count": 100}],
            "products": [{"type": "COKE", "rate": 20, "count": 10}],
        }


# =============================================================================
# OUTCOME
# =============================================================================


class TestPurchaseOutcome:
    """Тесты PurchaseOutcome."""

    def test_success(self):
        result = PurchaseResult()
        outcome = PurchaseOutcome.success(result)
        assert outcome.ok
        assert outcome.unwrap() is result

    def test_failure_unwrap_raises_stored_error(self):
        error = InsufficientCashProvidedError(1, 20)
        outcome = PurchaseOutcome.failure(error)
        assert not outcome.ok
        assert outcome.result is None
        with pytest.raises(InsufficientCashProvidedError) as exc_info:
            outcome.unwrap()
        assert exc_info.value is error


# =============================================================================
# ERRORS
# =============================================================================


class TestErrors:
    """Тесты доменных ошибок."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (UnknownProductError(ProductType.DEW), ErrorCode.UNKNOWN_PRODUCT),
            (InsufficientCashProvidedError(1, 20), ErrorCode.INSUFFICIENT_CASH_PROVIDED),
            (
                InsufficientStockError(ProductType.COKE, requested=13, remaining=10),
                ErrorCode.INSUFFICIENT_STOCK,
            ),
            (ChangeUnavailableError(5), ErrorCode.CHANGE_UNAVAILABLE),
            (
                InsufficientDenominationError(
                    (MoneyType.COIN, 1), requested=101, held=100
                ),
                ErrorCode.INSUFFICIENT_DENOMINATION,
            ),
        ],
    )
    def test_codes(self, error, code):
        assert isinstance(error, VendingError)
        assert error.code == code
        assert str(error).startswith(f"{code.value}: ")

    def test_unknown_product_message(self):
        error = UnknownProductError(ProductType.DEW)
        assert str(error) == "UNKNOWN_PRODUCT: Product DEW is not in the catalog"
        assert error.product_type == ProductType.DEW

    def test_insufficient_stock_attributes(self):
        error = InsufficientStockError(ProductType.COKE, requested=13, remaining=10)
        assert error.requested == 13
        assert error.remaining == 10
        assert "COKE" in str(error)

    def test_change_unavailable_shortfall(self):
        error = ChangeUnavailableError(5, shortfall=5)
        assert error.amount == 5
        assert error.shortfall == 5
        assert "5 left uncovered" in str(error)
