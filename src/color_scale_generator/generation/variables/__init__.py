"""
variables.
=========

Does: Bridge generated palettes and an external named-variable store
      (upsert / pattern lookup) plus an in-memory store implementation.
"""

from .memory_store import InMemoryVariableStore
from .reconciler import (
    ApplyResult,
    CollectionNotFound,
    ExistingColor,
    ExistingColors,
    ReconciliationFailure,
    VariableReconciler,
    VariableStoreError,
)

__all__ = [
    "VariableReconciler",
    "ExistingColor",
    "ExistingColors",
    "ApplyResult",
    "VariableStoreError",
    "CollectionNotFound",
    "ReconciliationFailure",
    "InMemoryVariableStore",
]
