"""
Core domain models, change-making primitives, and contracts.

This module contains the foundational building blocks that are independent
of any transport (HTTP, RPC, CLI).
"""
