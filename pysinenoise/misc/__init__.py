"""
Miscellaneous Utilities for PySineNoise

Helpers that don't belong to the core pipeline.

Available Functions:
- preview_grid: Draw a normalized grid with matplotlib

Author: B.G.
"""

from .preview import preview_grid

# Export public API
__all__ = [
    "preview_grid"
]
