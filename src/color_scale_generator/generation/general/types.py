# color_scale_generator/generation/general/types.py
from __future__ import annotations

from typing import Any, List, Mapping, NamedTuple, Protocol, runtime_checkable

"""
types.py.

Does: Define the structural contracts between the pure core and its external
collaborators: the named variable store and the host notifier.
"""

COLOR_TYPE = "COLOR"


class VariableEntry(NamedTuple):
    """One stored variable. Color values are unit-float {'r','g','b'[,'a']} mappings."""

    id: str
    name: str
    resolved_type: str
    value: Any


@runtime_checkable
class VariableStore(Protocol):
    """
    Narrow view of a design tool's variable graph.

    Collections are addressed by name. Unknown collections raise
    CollectionNotFound; single writes are atomic, batches are not.
    """

    def get_variables(self, collection: str) -> List[VariableEntry]: ...
    def create_variable(self, collection: str, name: str, resolved_type: str) -> VariableEntry: ...
    def set_value(self, collection: str, variable_id: str, value: Mapping[str, float]) -> VariableEntry: ...


class Notifier(Protocol):
    """Fire-and-forget host message channel (banner/toast)."""

    def __call__(self, message: str, error: bool = False) -> None: ...


__all__ = ["COLOR_TYPE", "VariableEntry", "VariableStore", "Notifier"]

__docformat__ = "google"
