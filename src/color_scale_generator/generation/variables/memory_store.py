"""
memory_store.py
===============

Does: In-process VariableStore with named collections of typed variables.
      Each create/set is atomic under a re-entrant lock; insertion order is kept
      so pattern lookups see variables in creation order.
Used by: Tests, the demo CLI, and callers without a design-tool host.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional

from color_scale_generator.generation.general.types import VariableEntry
from color_scale_generator.generation.variables.reconciler import (
    CollectionNotFound,
    ReconciliationFailure,
)

__all__ = ["InMemoryVariableStore"]

logger = logging.getLogger(__name__)


class InMemoryVariableStore:
    def __init__(self, collections: Optional[List[str]] = None):
        self._lock = threading.RLock()
        self._ids = itertools.count(1)
        self._collections: Dict[str, Dict[str, VariableEntry]] = {
            name: {} for name in (collections or [])
        }

    def _collection(self, collection: str) -> Dict[str, VariableEntry]:
        try:
            return self._collections[collection]
        except KeyError:
            raise CollectionNotFound(collection) from None

    def get_variables(self, collection: str) -> List[VariableEntry]:
        with self._lock:
            return list(self._collection(collection).values())

    def add_variable(self, collection: str, name: str, resolved_type: str, value: Any) -> VariableEntry:
        """Does: Seed a variable with an initial value (fixtures, imports)."""
        with self._lock:
            entry = self.create_variable(collection, name, resolved_type)
            return self._replace(collection, entry._replace(value=value))

    def create_variable(self, collection: str, name: str, resolved_type: str) -> VariableEntry:
        with self._lock:
            variables = self._collection(collection)
            entry = VariableEntry(
                id=f"VariableID:{next(self._ids)}",
                name=name,
                resolved_type=resolved_type,
                value=None,
            )
            variables[entry.id] = entry
            logger.debug("create %s/%s (%s)", collection, name, entry.id)
            return entry

    def set_value(self, collection: str, variable_id: str, value: Mapping[str, float]) -> VariableEntry:
        with self._lock:
            entry = self._collection(collection).get(variable_id)
            if entry is None:
                raise ReconciliationFailure(f"Unknown variable id {variable_id!r} in '{collection}'")
            return self._replace(collection, entry._replace(value=dict(value)))

    def _replace(self, collection: str, entry: VariableEntry) -> VariableEntry:
        self._collections[collection][entry.id] = entry
        return entry
