"""
Test suite for Vending

Contains:
- tests/unit/          : Unit tests for domain models, ledgers, gates and the orchestrator
"""
