"""Cell-level cleaning helpers."""

from .value_caster import cast_value, sanitize_cells

__all__ = ["cast_value", "sanitize_cells"]
