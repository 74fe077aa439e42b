# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level entry points matching the host commands:
  - generate_colors(seed) -> ColorScale (wire form via .to_dict())
  - search_existing_colors(reconciler, timeout, default) -> SearchResult
      (store lookup on a daemon thread; default seed on timeout / store error)
  - apply_color_scale(reconciler, scale) -> ApplyResult
Each accepts an optional notifier for user-facing success/failure messages.
The data/*.json tables are read here and passed to the core as arguments.
Used by: demo CLI, host adapters, tests.
"""

import logging
import os
import queue
import threading
from typing import Iterable, Mapping, NamedTuple, Optional, Union

from color_scale_generator.generation.color.constants import get_scale_steps
from color_scale_generator.generation.color.logic.palette import (
    ColorScale,
    SeedPalette,
    build_palette,
    default_seed_palette,
)
from color_scale_generator.generation.general.types import Notifier
from color_scale_generator.generation.variables.reconciler import (
    ApplyResult,
    ExistingColors,
    VariableReconciler,
    VariableStoreError,
)

logger = logging.getLogger(__name__)

# Public toggle (env), read per call
LOOKUP_TIMEOUT_ENV = "COLOR_SCALE_LOOKUP_TIMEOUT"
DEFAULT_LOOKUP_TIMEOUT = 5.0

__all__ = [
    "LOOKUP_TIMEOUT_ENV",
    "DEFAULT_LOOKUP_TIMEOUT",
    "SearchResult",
    "lookup_timeout",
    "generate_colors",
    "search_existing_colors",
    "apply_color_scale",
]


class SearchResult(NamedTuple):
    seed: SeedPalette
    existing: ExistingColors
    from_store: bool


def _notify(notify: Optional[Notifier], message: str, error: bool = False) -> None:
    if notify is not None:
        notify(message, error=error)


def lookup_timeout() -> float:
    """Seconds from COLOR_SCALE_LOOKUP_TIMEOUT; malformed or non-positive values fall back to 5."""
    raw = os.getenv(LOOKUP_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_LOOKUP_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        logger.warning("Ignoring %s=%r; using %.1fs", LOOKUP_TIMEOUT_ENV, raw, DEFAULT_LOOKUP_TIMEOUT)
        return DEFAULT_LOOKUP_TIMEOUT
    return value


def generate_colors(
    seed: Union[SeedPalette, Mapping[str, str]],
    *,
    steps: Optional[Iterable[int]] = None,
    notify: Optional[Notifier] = None,
) -> ColorScale:
    """Build the palette for a SeedPalette or a {role: hex} mapping.

    `steps` defaults to data/scale_steps.json. Parse errors are reported
    through `notify` and re-raised unchanged.
    """
    try:
        palette_seed = seed if isinstance(seed, SeedPalette) else SeedPalette.from_mapping(seed)
        table = get_scale_steps() if steps is None else steps
        scale = build_palette(palette_seed, steps=table)
    except (KeyError, ValueError):
        _notify(notify, "Error generating color scale", error=True)
        raise
    _notify(notify, "Color scale generated successfully!")
    return scale


def _lookup_in_background(reconciler: VariableReconciler, limit: float) -> ExistingColors:
    """Run find_by_pattern on a daemon thread; raise queue.Empty after `limit` seconds.

    A store call that never returns keeps only its own thread alive, and a
    daemon thread does not hold up interpreter exit.
    """
    box: "queue.Queue[tuple[bool, object]]" = queue.Queue(maxsize=1)

    def _run() -> None:
        try:
            box.put((True, reconciler.find_by_pattern()))
        except Exception as e:  # handed back to the caller's thread
            box.put((False, e))

    threading.Thread(target=_run, name="color-lookup", daemon=True).start()
    ok, payload = box.get(timeout=limit)
    if not ok:
        raise payload  # type: ignore[misc]
    return payload  # type: ignore[return-value]


def search_existing_colors(
    reconciler: VariableReconciler,
    *,
    timeout: Optional[float] = None,
    default: Optional[SeedPalette] = None,
) -> SearchResult:
    """Pre-populate a seed palette from the store, bounded by `timeout` seconds.

    Falls back to `default` (data/default_seed.json when omitted) if the lookup
    times out or the store reports an error; matched roles override the default.
    """
    fallback = default if default is not None else default_seed_palette()
    limit = lookup_timeout() if timeout is None else timeout

    try:
        existing = _lookup_in_background(reconciler, limit)
    except queue.Empty:
        logger.warning("Lookup in '%s' timed out after %.1fs; using default seed",
                       reconciler.collection, limit)
        return SearchResult(fallback, ExistingColors(), from_store=False)
    except VariableStoreError as e:
        logger.warning("Lookup in '%s' failed (%s); using default seed", reconciler.collection, e)
        return SearchResult(fallback, ExistingColors(), from_store=False)

    logger.info("Found roles %s in '%s'", existing.roles(), reconciler.collection)
    return SearchResult(existing.to_seed(fallback), existing, from_store=existing.found)


def apply_color_scale(
    reconciler: VariableReconciler,
    scale: ColorScale,
    *,
    notify: Optional[Notifier] = None,
) -> ApplyResult:
    """Write `scale` into the reconciler's collection and report the outcome."""
    result = reconciler.apply_palette(scale)
    if result.success:
        _notify(notify, f"Color scales applied successfully! ({result.written} variables)")
    else:
        _notify(notify, f"Failed to apply color scales: {result.error}", error=True)
    return result
