"""
Domain models and value objects.

Contains serialisable snapshots of core value types.
"""

from src.core.domain.big_integer_snapshot import BigIntegerSnapshot, Limb

__all__ = [
    "BigIntegerSnapshot",
    "Limb",
]
