"""Tiling stages: boundary trace, focus-group consolidation."""
