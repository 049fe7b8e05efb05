"""
Noise field module for PySineNoise.

Fields are deterministic functions of 2D coordinates, represented as a small
tree of variants (Sine, Scaled, Sum) so they can be inspected, flattened for
array back-ends and serialized to JSON.

Usage:
    import pysinenoise as psn

    ridge = psn.field.sine_field(0.0, 0.0)
    zoomed = psn.field.scale(ridge, 0.1)
    terrain = psn.field.fractal_field(200, 0.98, seed=42)

Author: B.G.
"""

from .fields import Field, Sine, Scaled, Sum, SineTerm
from .builders import sine_field, scale, fractal_field, field_from_dict

__all__ = [
    "Field", "Sine", "Scaled", "Sum", "SineTerm", "field_from_dict",
    "sine_field", "scale", "fractal_field",
]
