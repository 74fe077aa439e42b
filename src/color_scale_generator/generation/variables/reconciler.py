"""
reconciler.py
=============

Does: Map a generated ColorScale onto named color variables of an external
      store (find-or-create, then set value), and read existing variables back
      into a partial seed palette by case-insensitive name patterns.
Returns: VariableEntry on upsert, ExistingColors on lookup, ApplyResult on a
         whole-palette write.
Used by: Orchestrator (search / apply commands), demo and tests.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence

from color_scale_generator.generation.color.constants import SEED_ROLES, get_search_patterns
from color_scale_generator.generation.color.logic.palette import ColorScale, SeedPalette
from color_scale_generator.generation.color.utils.conversion import (
    Color,
    color_to_hex,
    color_to_unit_rgb,
    hex_to_color,
    unit_rgb_to_color,
)
from color_scale_generator.generation.general.types import COLOR_TYPE, VariableEntry, VariableStore
from color_scale_generator.generation.general.utils.log import debug

__all__ = [
    "VariableStoreError",
    "CollectionNotFound",
    "ReconciliationFailure",
    "ExistingColor",
    "ExistingColors",
    "ApplyResult",
    "VariableReconciler",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class VariableStoreError(Exception):
    """Base class for errors surfaced by the variable store collaborator."""


class CollectionNotFound(VariableStoreError, LookupError):
    """Raise when the named variable collection does not exist."""

    def __init__(self, collection: str):
        super().__init__(f"Collection '{collection}' not found")
        self.collection = collection


class ReconciliationFailure(VariableStoreError, RuntimeError):
    """Raise when a variable cannot be created or updated."""


# ── Results ──────────────────────────────────────────────────────────────────
class ExistingColor(NamedTuple):
    name: str
    value: str  # uppercase hex
    collection_name: str
    variable_id: str


class ExistingColors:
    """Best-effort partial seed palette found in a collection ({role: ExistingColor})."""

    def __init__(self, matches: Optional[Mapping[str, ExistingColor]] = None):
        self._matches: Dict[str, ExistingColor] = dict(matches or {})

    @property
    def found(self) -> bool:
        return bool(self._matches)

    def get(self, role: str) -> Optional[ExistingColor]:
        return self._matches.get(role)

    def roles(self) -> List[str]:
        return [r for r in SEED_ROLES if r in self._matches]

    def to_seed(self, default: SeedPalette) -> SeedPalette:
        """Does: Fill absent roles from `default`."""
        return default.replace_roles(
            {role: hex_to_color(m.value) for role, m in self._matches.items()}
        )

    def to_dict(self) -> Dict[str, object]:
        out: Dict[str, object] = {"found": self.found}
        for role in self.roles():
            out[role] = self._matches[role]._asdict()
        return out

    def __repr__(self) -> str:
        return f"ExistingColors(found={self.found}, roles={self.roles()})"


class ApplyResult(NamedTuple):
    success: bool
    error: Optional[str] = None
    written: int = 0


# ── Reconciler ───────────────────────────────────────────────────────────────
class VariableReconciler:
    """Read/write palette colors in one named collection of a VariableStore."""

    def __init__(
        self,
        store: VariableStore,
        collection: str,
        *,
        patterns: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        self.store = store
        self.collection = collection
        self._patterns = patterns

    @property
    def patterns(self) -> Dict[str, tuple]:
        raw = self._patterns if self._patterns is not None else get_search_patterns()
        return {role: tuple(p.lower() for p in pats) for role, pats in raw.items()}

    # -- write ---------------------------------------------------------------
    def upsert(self, name: str, color: Color) -> VariableEntry:
        """Does: Overwrite the value of variable `name`, creating it first if absent.

        Raises:
            CollectionNotFound: the target collection is missing.
            ReconciliationFailure: `name` exists but is not a color variable.
        """
        existing = next(
            (e for e in self.store.get_variables(self.collection) if e.name == name), None
        )
        if existing is None:
            existing = self.store.create_variable(self.collection, name, COLOR_TYPE)
            debug(f"created {self.collection}:{name}", topic="variables")
        elif existing.resolved_type != COLOR_TYPE:
            raise ReconciliationFailure(
                f"Variable '{name}' in '{self.collection}' has type {existing.resolved_type}"
            )
        return self.store.set_value(self.collection, existing.id, color_to_unit_rgb(color))

    def _write(self, name: str, color: Color) -> VariableEntry:
        try:
            return self.upsert(name, color)
        except VariableStoreError:
            raise
        except Exception as e:
            raise ReconciliationFailure(f"Writing '{name}' failed: {e}") from e

    def apply_palette(self, scale: ColorScale) -> ApplyResult:
        """Does: Upsert base/white, base/black then every family/step.

        Entries are written one by one; on error the ones already written stay.
        Any exception from the store is reported as a failed result, wrapped in
        ReconciliationFailure when it is not already a store error.
        """
        written = 0
        try:
            for name, color in scale.to_variables():
                self._write(name, color)
                written += 1
        except VariableStoreError as e:
            logger.error("Applying palette to '%s' failed after %d entries: %s",
                         self.collection, written, e)
            return ApplyResult(success=False, error=str(e), written=written)
        logger.info("Applied %d color variables to '%s'", written, self.collection)
        return ApplyResult(success=True, written=written)

    # -- read ----------------------------------------------------------------
    def find_by_pattern(
        self, patterns: Optional[Mapping[str, Iterable[str]]] = None
    ) -> ExistingColors:
        """Does: Match color variables to seed roles by lowercase name substrings.

        The first matching variable (store order) wins per role; roles with no
        match stay absent. Non-color or malformed values are skipped.

        Raises:
            CollectionNotFound: the target collection is missing.
        """
        table = (
            {role: tuple(p.lower() for p in pats) for role, pats in patterns.items()}
            if patterns is not None
            else self.patterns
        )
        matches: Dict[str, ExistingColor] = {}
        for entry in self.store.get_variables(self.collection):
            if entry.resolved_type != COLOR_TYPE:
                continue
            try:
                color = unit_rgb_to_color(entry.value)
            except ValueError:
                debug(f"skip {entry.name!r}: unreadable value {entry.value!r}", topic="variables")
                continue

            name = entry.name.lower()
            for role, pats in table.items():
                if role in matches:
                    continue
                if any(p in name for p in pats):
                    matches[role] = ExistingColor(
                        name=entry.name,
                        value=color_to_hex(color),
                        collection_name=self.collection,
                        variable_id=entry.id,
                    )
        logger.debug("Pattern lookup in '%s' matched %s", self.collection, sorted(matches))
        return ExistingColors(matches)
