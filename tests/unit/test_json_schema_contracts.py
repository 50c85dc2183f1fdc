"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (minimum/enum)
- Интеграция с Pydantic моделями и VendingMachine
"""

import pytest
from jsonschema import ValidationError

from vending import VendingMachine
from vending.core.contracts import (
    MachineConfigValidator,
    MachineStatusValidator,
    PurchaseRequestValidator,
    PurchaseResultValidator,
    SchemaLoader,
    validate_machine_config,
    validate_machine_status,
    validate_purchase_request,
    validate_purchase_result,
)
from vending.core.domain import ProductLine, ProductType, PurchaseResult, new_coin


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_purchase_request():
    """Валидный purchase_request."""
    return {
        "money": [{"type": "CASH", "denomination": 10, "count": 3}],
        "products": [{"type": "PEPSI", "count": 1}],
    }


@pytest.fixture
def valid_machine_config():
    """Валидный machine_config."""
    return {
        "products": [{"type": "COKE", "rate": 20, "count": 10}],
        "money": [{"type": "COIN", "denomination": 1, "count": 100}],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader."""

    @pytest.mark.parametrize(
        "name",
        ["purchase_request", "purchase_result", "machine_status", "machine_config"],
    )
    def test_schemas_load(self, name):
        schema = SchemaLoader().load_schema(name)
        assert schema["title"] == name

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("purchase_request") is loader.load_schema(
            "purchase_request"
        )

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# PURCHASE REQUEST
# =============================================================================


class TestPurchaseRequestContract:
    """Тесты purchase_request контракта."""

    def test_valid(self, valid_purchase_request):
        validate_purchase_request(valid_purchase_request)

    def test_empty_lists_valid(self):
        validate_purchase_request({"money": [], "products": []})

    def test_missing_arrays(self):
        messages = PurchaseRequestValidator().error_messages({})
        assert "'money' is a required property" in messages
        assert "'products' is a required property" in messages

    def test_money_must_be_array(self, valid_purchase_request):
        valid_purchase_request["money"] = "10"
        assert not PurchaseRequestValidator().is_valid(valid_purchase_request)

    def test_non_numeric_count(self, valid_purchase_request):
        valid_purchase_request["money"][0]["count"] = "a"
        messages = PurchaseRequestValidator().error_messages(valid_purchase_request)
        assert len(messages) == 1
        assert messages[0].startswith("money.0.count: ")

    def test_negative_count(self, valid_purchase_request):
        valid_purchase_request["products"][0]["count"] = -1
        with pytest.raises(ValidationError):
            validate_purchase_request(valid_purchase_request)

    def test_unknown_money_type(self, valid_purchase_request):
        valid_purchase_request["money"][0]["type"] = "TOKEN"
        with pytest.raises(ValidationError):
            validate_purchase_request(valid_purchase_request)

    def test_unknown_sku(self, valid_purchase_request):
        valid_purchase_request["products"][0]["type"] = "FANTA"
        with pytest.raises(ValidationError):
            validate_purchase_request(valid_purchase_request)

    def test_zero_denomination(self, valid_purchase_request):
        valid_purchase_request["money"][0]["denomination"] = 0
        with pytest.raises(ValidationError):
            validate_purchase_request(valid_purchase_request)

    def test_extra_property(self, valid_purchase_request):
        valid_purchase_request["coupon"] = "FREE"
        with pytest.raises(ValidationError):
            validate_purchase_request(valid_purchase_request)

    def test_iter_errors_collects_all(self):
        data = {
            "money": [{"type": "COIN", "denomination": 1, "count": "x"}],
            "products": [{"type": "COKE", "count": "y"}],
        }
        assert len(list(PurchaseRequestValidator().iter_errors(data))) == 2


# =============================================================================
# RESULT / STATUS / CONFIG
# =============================================================================


class TestOutputContracts:
    """Выходные данные VendingMachine соответствуют контрактам."""

    def test_status_payload_valid(self):
        validate_machine_status(VendingMachine.from_config().status_payload())

    def test_purchase_result_valid(self, valid_purchase_request):
        machine = VendingMachine.from_config()
        validate_purchase_result(machine.purchase_payload(valid_purchase_request))

    def test_pydantic_result_valid(self):
        result = PurchaseResult(
            money=[new_coin(5)],
            products=[ProductLine(type=ProductType.PEPSI, count=1)],
        )
        assert PurchaseResultValidator().is_valid(result.model_dump(mode="json"))

    def test_result_rejects_zero_count_change(self):
        data = {
            "money": [{"type": "COIN", "denomination": 1, "count": 0}],
            "products": [],
        }
        assert not PurchaseResultValidator().is_valid(data)

    def test_status_requires_rate(self):
        data = {"money": [], "products": [{"type": "COKE", "count": 1}]}
        assert not MachineStatusValidator().is_valid(data)

    def test_config_valid(self, valid_machine_config):
        validate_machine_config(valid_machine_config)

    def test_config_rejects_zero_rate(self, valid_machine_config):
        valid_machine_config["products"][0]["rate"] = 0
        assert not MachineConfigValidator().is_valid(valid_machine_config)
