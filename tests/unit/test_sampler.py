"""Unit tests for grid sampling and normalization."""

import math

import numpy as np
import pytest

from pysinenoise.field import Sum, fractal_field, scale, sine_field
from pysinenoise.grid import lattice, normalize_grid, sample_and_normalize, sample_field


@pytest.mark.unit
def test_lattice_coordinates():
    X, Y = lattice(5, 3)
    assert X.shape == (3, 5)
    assert Y.shape == (3, 5)
    np.testing.assert_array_equal(X[0], np.arange(5) / 5 - 0.5)
    np.testing.assert_array_equal(Y[:, 0], np.arange(3) / 3 - 0.5)
    assert X[0, 0] == -0.5
    assert Y[0, 0] == -0.5


@pytest.mark.unit
def test_sine_4x4_samples_and_normalization():
    """Hand-computed 4x4 grid of sin(x/4 - 0.5)."""
    row = [math.sin(-0.5), math.sin(-0.25), 0.0, math.sin(0.25)]

    samples = sample_field(sine_field(0.0, 0.0), 4, 4)
    assert samples.shape == (4, 4)
    for j in range(4):
        assert samples[j].tolist() == pytest.approx(row, abs=1e-15)

    grid = sample_and_normalize(sine_field(0.0, 0.0), 4, 4)
    lo, hi = row[0], row[3]
    expected = [(v - lo) / (hi - lo) for v in row]
    for j in range(4):
        assert grid[j].tolist() == pytest.approx(expected, abs=1e-12)
    assert np.all(grid[:, 0] == 0.0)
    assert np.all(grid[:, 3] == 1.0)


@pytest.mark.unit
def test_sampling_follows_field_orientation():
    """Ridges facing y: every row is uniform, rows differ."""
    samples = sample_field(sine_field(math.pi / 2, 0.3), 6, 5)
    for j in range(5):
        assert np.allclose(samples[j], samples[j, 0])
    assert not np.allclose(samples[:, 0], samples[0, 0])


@pytest.mark.unit
@pytest.mark.parametrize("width, height", [(2, 3), (7, 5), (16, 9), (1, 8), (8, 1)])
def test_normalized_grid_in_unit_interval(width, height, small_terrain):
    grid = sample_and_normalize(small_terrain, width, height)
    assert grid.shape == (height, width)
    assert grid.min() == 0.0
    assert grid.max() == 1.0
    assert np.all((grid >= 0.0) & (grid <= 1.0))


@pytest.mark.unit
def test_sine_field_scaled_grid_unit_interval():
    grid = sample_and_normalize(scale(sine_field(1.0, 2.0), 0.1), 32, 20)
    assert grid.min() == 0.0
    assert grid.max() == 1.0


@pytest.mark.unit
@pytest.mark.parametrize("width, height", [(1, 1), (4, 4), (13, 6)])
def test_constant_field_maps_to_zero(width, height):
    grid = sample_and_normalize(Sum(()), width, height)
    assert grid.shape == (height, width)
    assert not np.any(np.isnan(grid))
    assert np.all(grid == 0.0)


@pytest.mark.unit
def test_verbose_reports_range(capsys):
    sample_and_normalize(sine_field(0.0, 0.0), 4, 4, verbose=True)
    out = capsys.readouterr().out.strip()
    assert out.startswith("Min: ")
    lo, hi = (float(part.split(": ")[1]) for part in out.split(", "))
    assert lo == pytest.approx(math.sin(-0.5))
    assert hi == pytest.approx(math.sin(0.25))


@pytest.mark.unit
def test_verbose_warns_on_constant_field(capsys):
    sample_and_normalize(fractal_field(0, 0.5), 3, 3, verbose=True)
    assert "constant" in capsys.readouterr().out


@pytest.mark.unit
def test_normalize_returns_range():
    samples = np.array([[2.0, 4.0], [3.0, 6.0]])
    grid, vmin, vmax = normalize_grid(samples)
    assert (vmin, vmax) == (2.0, 6.0)
    np.testing.assert_allclose(grid, [[0.0, 0.5], [0.25, 1.0]])
    # input left untouched
    assert samples[0, 0] == 2.0


@pytest.mark.unit
def test_normalize_rejects_non_finite():
    with pytest.raises(ValueError):
        normalize_grid(np.array([[np.nan, 1.0], [0.0, 2.0]]))
    with pytest.raises(ValueError):
        normalize_grid(np.array([[np.inf, 1.0]]))


@pytest.mark.unit
def test_normalize_rejects_non_2d():
    with pytest.raises(ValueError):
        normalize_grid(np.zeros(4))


@pytest.mark.unit
@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (2.5, 4), (-1, 3)])
def test_invalid_sizes(width, height):
    with pytest.raises(ValueError):
        sample_and_normalize(sine_field(0.0, 0.0), width, height)


@pytest.mark.unit
def test_unknown_backend():
    with pytest.raises(ValueError):
        sample_field(sine_field(0.0, 0.0), 4, 4, backend="cuda")


@pytest.mark.unit
def test_seeded_grids_are_byte_identical():
    a = sample_and_normalize(fractal_field(30, 0.95, seed=99), 24, 24)
    b = sample_and_normalize(fractal_field(30, 0.95, seed=99), 24, 24)
    assert a.tobytes() == b.tobytes()
