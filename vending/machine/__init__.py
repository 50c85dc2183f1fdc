"""Machine — сборка автомата: конфигурация и оркестратор покупки."""

from .config import MachineConfig, load_machine_config
from .orchestrator import VendingMachine

__all__ = [
    "MachineConfig",
    "load_machine_config",
    "VendingMachine",
]
