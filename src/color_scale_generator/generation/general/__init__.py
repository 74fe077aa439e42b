"""
general.
=======

Shared general-purpose modules used across the generation package.

Exports:
- VariableEntry / VariableStore: contract with the external variable store.
- Notifier: host message callback.
"""

from .types import COLOR_TYPE, Notifier, VariableEntry, VariableStore

__all__ = ["COLOR_TYPE", "VariableEntry", "VariableStore", "Notifier"]
