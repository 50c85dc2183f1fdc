"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам
внешнего интерфейса автомата. Использует библиотеку jsonschema.

Ядро предполагает, что входные данные уже прошли проверку формы
(неотрицательные count, известные классы номиналов). Эти валидаторы —
такая проверка для любого транспорта (REST, RPC, CLI).

Схемы:
- purchase_request.json
- purchase_result.json
- machine_status.json
- machine_config.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'purchase_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """
        Сообщения об ошибках в стабильном порядке.

        Формат: "<path>: <message>", path через точку ("money.0.count").
        Пустой path — корень документа.
        """
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(map(str, e.path))):
            path = ".".join(str(p) for p in error.path)
            messages.append(f"{path}: {error.message}" if path else error.message)
        return messages


class PurchaseRequestValidator(ContractValidator):
    """Валидатор для purchase_request контракта."""

    def __init__(self):
        super().__init__("purchase_request")


class PurchaseResultValidator(ContractValidator):
    """Валидатор для purchase_result контракта."""

    def __init__(self):
        super().__init__("purchase_result")


class MachineStatusValidator(ContractValidator):
    """Валидатор для machine_status контракта."""

    def __init__(self):
        super().__init__("machine_status")


class MachineConfigValidator(ContractValidator):
    """Валидатор для machine_config контракта."""

    def __init__(self):
        super().__init__("machine_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_purchase_request(data: Dict[str, Any]) -> None:
    """
    Валидация purchase_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PurchaseRequestValidator().validate(data)


def validate_purchase_result(data: Dict[str, Any]) -> None:
    """
    Валидация purchase_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PurchaseResultValidator().validate(data)


def validate_machine_status(data: Dict[str, Any]) -> None:
    """
    Валидация machine_status данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MachineStatusValidator().validate(data)


def validate_machine_config(data: Dict[str, Any]) -> None:
    """
    Валидация machine_config данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MachineConfigValidator().validate(data)
