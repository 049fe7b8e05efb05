"""
Rendering module for PySineNoise.

The image sink: turns pixel buffers (or a per-pixel colour producer) into PNG
files. Failures surface as RenderError, a subclass of OSError carrying the
destination in its ``output`` attribute.

Author: B.G.
"""

from .sink import RenderError, write_png, render, render_grid

__all__ = ["RenderError", "write_png", "render", "render_grid"]
