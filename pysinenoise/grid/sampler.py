"""
Grid sampling and normalization for PySineNoise.

Discretizes a field over a rectangular pixel lattice mapped onto the centered
unit square [-0.5, 0.5) x [-0.5, 0.5), then rescales the samples into [0, 1]
using the observed minimum and maximum.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def _check_size(width, height):
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or int(value) != value or value < 1:
            raise ValueError(f"{name} must be an integer >= 1, got {value}")
    return int(width), int(height)


def lattice(width: int, height: int):
    """
    Field-space coordinates of every pixel.

    Args:
        width: Number of columns
        height: Number of rows

    Returns:
        tuple: (X, Y) arrays of shape (height, width) holding x/width - 0.5
        and y/height - 0.5 for column x and row y
    """
    width, height = _check_size(width, height)
    xs = np.arange(width, dtype=cte.FLOAT_TYPE_NP) / width - 0.5
    ys = np.arange(height, dtype=cte.FLOAT_TYPE_NP) / height - 0.5
    return np.meshgrid(xs, ys)


def sample_field(field, width: int, height: int, backend: str = "numpy") -> np.ndarray:
    """
    Evaluate a field at every pixel of a width x height lattice.

    Args:
        field: Field to sample
        width: Number of columns (>= 1)
        height: Number of rows (>= 1)
        backend: "numpy" (vectorized evaluation of the field tree) or
                 "taichi" (flattened terms evaluated in a Taichi kernel,
                 requires ti.init() beforehand)

    Returns:
        numpy.ndarray: raw samples of shape (height, width)

    Raises:
        ValueError: for invalid sizes or an unknown backend
    """
    if backend not in cte.BACKENDS:
        raise ValueError(f"backend must be one of {cte.BACKENDS}, got '{backend}'")

    if backend == "taichi":
        from .taichi_sampler import sample_field_taichi
        return sample_field_taichi(field, width, height)

    X, Y = lattice(width, height)
    samples = np.asarray(field(X, Y), dtype=cte.FLOAT_TYPE_NP)
    return np.array(np.broadcast_to(samples, X.shape))


def normalize_grid(samples: np.ndarray, verbose: bool = False):
    """
    Rescale samples into [0, 1] using their minimum and maximum.

    A constant grid (max == min) has no range to stretch and is mapped to all
    zeros.

    Args:
        samples: 2D array of raw field values
        verbose: Print the observed range and degenerate-grid warnings

    Returns:
        tuple: (grid, vmin, vmax) where grid is a new float64 array in [0, 1]

    Raises:
        ValueError: if samples is not 2D or holds non-finite values
    """
    samples = np.asarray(samples, dtype=cte.FLOAT_TYPE_NP)
    if samples.ndim != 2:
        raise ValueError("samples must be a 2D array")
    if not np.all(np.isfinite(samples)):
        raise ValueError("samples contain non-finite values")

    vmin = float(samples.min())
    vmax = float(samples.max())

    if verbose:
        print(f"Min: {vmin}, Max: {vmax}")

    if vmin == vmax:
        if verbose:
            print("Warning: field is constant over the grid, mapping to 0.0")
        return np.zeros_like(samples), vmin, vmax

    grid = np.clip((samples - vmin) / (vmax - vmin), 0.0, 1.0)
    return grid, vmin, vmax


def sample_and_normalize(field, width: int, height: int, verbose: bool = False,
                         backend: str = "numpy") -> np.ndarray:
    """
    Sample a field over a pixel lattice and normalize it to [0, 1].

    Args:
        field: Field to sample
        width: Number of columns (>= 1)
        height: Number of rows (>= 1)
        verbose: Print the pre-normalization min/max
        backend: Sampling backend, see sample_field()

    Returns:
        numpy.ndarray: grid of shape (height, width) with values in [0, 1];
        the sample minimum maps to 0.0 and the maximum to 1.0

    Example:
        grid = sample_and_normalize(sine_field(0.0, 0.0), 4, 4)
    """
    samples = sample_field(field, width, height, backend=backend)
    grid, _, _ = normalize_grid(samples, verbose=verbose)
    return grid
