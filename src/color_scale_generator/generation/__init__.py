# color_scale_generator/generation/__init__.py

"""
generation.
==========

Does: Group the color codec, scale/palette generation, variable reconciliation
      and the high-level orchestrator under one namespace.
Used by: `color_scale_generator.demo`, library callers and tests.
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
