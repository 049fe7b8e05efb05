"""
Global constants for PySineNoise.

Reference-run parameters and numeric types shared across modules. There is no
configuration file: these values are the defaults of the library functions and
of the CLI options.

Author: B.G.
"""

import math

import numpy as np

# Numeric type of sampled grids
FLOAT_TYPE_NP = np.float64

# Full turn, range of the random octave angle and phase
TWO_PI = 2.0 * math.pi

# Reference runs
DEFAULT_SIZE = 200
DEFAULT_OCTAVES = 200
DEFAULT_FALL_OFF = 0.98

# Single-octave test image: sine ridges at 10x frequency
SINE_SCALE = 0.1
SINE_OUTPUT = "test.png"

# Fractal terrains: whole sum shrunk so the square shows several ridges
TERRAIN_SCALE = 0.25
TERRAIN_OUTPUTS = ("terraina.png", "terrainb.png", "terrainc.png")

BACKENDS = ("numpy", "taichi")

# Octaves scaled below this are dropped from fractal sums: their amplitude is
# far below float resolution and x/factor would approach float overflow
MIN_OCTAVE_FACTOR = 1e-150
