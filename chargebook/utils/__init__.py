"""Shared utilities for the chargebook package.

Small file helpers used by the infrastructure adapters.
"""

__all__ = [
    "fs",
    "jsonio",
]
