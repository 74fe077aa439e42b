"""
color_scale_generator
=====================

Does: Root package for the design-system color scale generator.
Returns: Exposes the generation subpackages (`generation.color`, `generation.variables`,
         `generation.orchestrator`) through a stable namespace.
Used by: All higher-level imports starting from `color_scale_generator.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
