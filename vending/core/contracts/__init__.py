"""
Contract Validation Module

Модуль для валидации JSON контрактов внешнего интерфейса автомата.
"""

from .validators import (
    ContractValidator,
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

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PurchaseRequestValidator",
    "PurchaseResultValidator",
    "MachineStatusValidator",
    "MachineConfigValidator",
    # Functions
    "validate_purchase_request",
    "validate_purchase_result",
    "validate_machine_status",
    "validate_machine_config",
]
