"""
Field builders for PySineNoise.

Constructors for the three kinds of field used by the renderer: a single sine
ridge pattern, a rescaled field, and the fractal sum of randomized octaves.
Randomness is drawn once, when the field is built; the returned field is
deterministic afterwards.

Author: B.G.
"""

import math

import numpy as np

from .. import constants as cte
from .fields import Field, Scaled, Sine, Sum


def sine_field(alpha: float, offset: float) -> Field:
    """
    Build a single sinusoidal ridge field.

    Args:
        alpha: Direction of the ridges' normal in radians
        offset: Phase shift in radians

    Returns:
        Field evaluating sin(cos(alpha)*x + sin(alpha)*y + offset),
        with values in [-1, 1]
    """
    return Sine(float(alpha), float(offset))


def scale(field: Field, factor: float) -> Field:
    """
    Rescale both the spatial period and the amplitude of a field.

    Args:
        field: Field to wrap
        factor: Multiplier; the result evaluates field(x/factor, y/factor) * factor

    Returns:
        Scaled field

    Raises:
        ValueError: if factor is zero or not finite
    """
    factor = float(factor)
    if factor == 0.0 or not math.isfinite(factor):
        raise ValueError(f"scale factor must be finite and non-zero, got {factor}")
    return Scaled(field, factor)


def fractal_field(octaves: int, fall_off: float, seed=None, rng=None) -> Field:
    """
    Build a fractal field as the sum of randomized sine octaves.

    Octave i is a sine field with its own random direction and phase, both
    drawn uniformly from [0, 2*pi), scaled by fall_off**i. Values of fall_off
    close to 1 keep a lot of fine detail, values close to 0 leave a field
    dominated by the first octave.

    Octaves whose factor fall_off**i drops below cte.MIN_OCTAVE_FACTOR
    (including factors that underflow to 0) contribute nothing measurable and
    are left out, together with every later octave. The returned field's
    octave_count can therefore be smaller than octaves, e.g.
    fractal_field(1100, 0.5) keeps 499 octaves.

    Args:
        octaves: Number of octaves (>= 0); 0 gives the constant-zero field
        fall_off: Per-octave shrink ratio, normally in (0, 1)
        seed: Seed for a fresh numpy Generator when rng is not given
              (None draws fresh entropy, like the reference runs)
        rng: numpy.random.Generator to draw from; takes precedence over seed

    Returns:
        Sum field with one Scaled(Sine) term per kept octave

    Raises:
        ValueError: if octaves is negative or not an integer, if
                    fall_off <= 0 while octaves > 0, or if fall_off**i
                    overflows for fall_off > 1

    Example:
        rng = np.random.default_rng(7)
        terrain = fractal_field(200, 0.98, rng=rng)
    """
    if isinstance(octaves, bool) or int(octaves) != octaves or octaves < 0:
        raise ValueError(f"octaves must be a non-negative integer, got {octaves}")
    octaves = int(octaves)
    if octaves == 0:
        return Sum(())

    if not fall_off > 0:
        raise ValueError(f"fall_off must be > 0, got {fall_off}")
    fall_off = float(fall_off)

    if rng is None:
        rng = np.random.default_rng(seed)

    terms = []
    for i in range(octaves):
        try:
            factor = fall_off ** i
        except OverflowError:
            factor = math.inf
        if not math.isfinite(factor):
            raise ValueError(f"fall_off ** {i} overflows for fall_off={fall_off}")
        if factor < cte.MIN_OCTAVE_FACTOR:
            break
        alpha = rng.uniform(0.0, cte.TWO_PI)
        offset = rng.uniform(0.0, cte.TWO_PI)
        terms.append(Scaled(Sine(float(alpha), float(offset)), factor))
    return Sum(tuple(terms))


def field_from_dict(data: dict) -> Field:
    """
    Rebuild a field from the output of ``Field.to_dict()``.

    Nodes go through the same builders as freshly generated fields, so a
    stored zero or non-finite scale factor is rejected on load.

    Args:
        data: nested dict with a "type" key of "sine", "scaled" or "sum"

    Returns:
        Field: the equivalent field tree

    Raises:
        ValueError: if a node has an unknown or missing type, lacks a
                    required key or holds a value of the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError(f"field node must be a dict, got {type(data).__name__}")

    kind = data.get("type")
    try:
        if kind == "sine":
            return sine_field(data["alpha"], data["offset"])
        if kind == "scaled":
            return scale(field_from_dict(data["inner"]), data["factor"])
        if kind == "sum":
            return Sum(tuple(field_from_dict(t) for t in data["terms"]))
    except KeyError as e:
        raise ValueError(f"{kind} field node is missing key {e}") from e
    except TypeError as e:
        raise ValueError(f"invalid {kind} field node: {e}") from e
    raise ValueError(f"Unknown field type: {kind!r}")
