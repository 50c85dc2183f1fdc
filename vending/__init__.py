"""
Vending — транзакционное ядро торгового автомата.

Ledger денег, ledger товаров и оркестратор покупки с семантикой
all-or-nothing.
"""

from vending.machine import MachineConfig, VendingMachine, load_machine_config

__version__ = "0.1.0"

__all__ = [
    "MachineConfig",
    "VendingMachine",
    "load_machine_config",
]
