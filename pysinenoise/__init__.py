"""
PySineNoise: procedural terrain images from summed sine fields.

A noise field is built from randomized sinusoidal ridges added together with
a geometric per-octave fall-off, sampled over a pixel lattice, normalized to
[0, 1] and rendered to PNG with a grayscale ramp or a banded terrain palette.

Submodules:
- field: Sine / Scaled / Sum field variants and their builders
- grid: lattice sampling and min/max normalization (numpy or Taichi)
- colormap: grayscale and terracolor policies
- render: PNG image sink
- driver: render jobs and the reference runs
- misc: matplotlib preview helper
- cli: command line entry points (loaded lazily)

Usage:
    import pysinenoise as psn

    field = psn.field.scale(psn.field.fractal_field(200, 0.98, seed=42), 0.25)
    grid = psn.grid.sample_and_normalize(field, 200, 200)
    psn.render.render_grid(grid, "terracolor", "terrain.png")

Author: B.G.
"""

__version__ = "0.1.0"

from . import constants
from . import field
from . import grid
from . import colormap
from . import render
from . import driver
from . import misc

__all__ = [
    "__version__",
    "constants",
    "field",
    "grid",
    "colormap",
    "render",
    "driver",
    "misc",
    "cli",
]


def __getattr__(name):
    if name == "cli":
        import importlib
        return importlib.import_module(".cli", __name__)
    raise AttributeError(name)
