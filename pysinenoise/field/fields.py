"""
Field variants for PySineNoise.

A field is a deterministic function from continuous 2D coordinates to a real
value. Three variants cover every field the package builds:

- Sine: a single ridge pattern sin(cos(alpha)*x + sin(alpha)*y + offset)
- Scaled: another field with period and amplitude multiplied by a factor
- Sum: the pointwise sum of any number of fields

Fields are frozen dataclasses evaluated by recursive dispatch. Coordinates can
be Python floats or numpy arrays, in which case evaluation broadcasts and the
whole lattice is computed array-at-a-time.

Author: B.G.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np


class SineTerm(NamedTuple):
    """One flattened sine: amplitude * sin(frequency * (cos(alpha) x + sin(alpha) y) + offset)."""

    alpha: float
    offset: float
    frequency: float
    amplitude: float


class Field:
    """Base class of the field variants."""

    def __call__(self, x, y):
        raise NotImplementedError

    def to_dict(self) -> dict:
        raise NotImplementedError

    def flatten(self) -> list:
        """
        Reduce the field to a flat list of sine terms.

        Scaling distributes over sums, so every field is a weighted sum of
        sines. Array back-ends that cannot recurse evaluate this list.

        Returns:
            list[SineTerm]: terms whose sum equals the field (up to rounding)
        """
        raise NotImplementedError

    @property
    def octave_count(self) -> int:
        """Number of sine leaves in the field."""
        return len(self.flatten())


@dataclass(frozen=True)
class Sine(Field):
    alpha: float
    offset: float

    def __call__(self, x, y):
        return np.sin(math.cos(self.alpha) * x + math.sin(self.alpha) * y + self.offset)

    def to_dict(self) -> dict:
        return {"type": "sine", "alpha": self.alpha, "offset": self.offset}

    def flatten(self) -> list:
        return [SineTerm(self.alpha, self.offset, 1.0, 1.0)]


@dataclass(frozen=True)
class Scaled(Field):
    inner: Field
    factor: float

    def __call__(self, x, y):
        return self.inner(x / self.factor, y / self.factor) * self.factor

    def to_dict(self) -> dict:
        return {"type": "scaled", "factor": self.factor, "inner": self.inner.to_dict()}

    def flatten(self) -> list:
        return [
            SineTerm(t.alpha, t.offset, t.frequency / self.factor, t.amplitude * self.factor)
            for t in self.inner.flatten()
        ]


@dataclass(frozen=True)
class Sum(Field):
    terms: Tuple[Field, ...] = ()

    def __call__(self, x, y):
        total = np.zeros(np.broadcast(x, y).shape)
        for term in self.terms:
            total += term(x, y)
        # Scalar in, scalar out
        return total if total.ndim else float(total)

    def to_dict(self) -> dict:
        return {"type": "sum", "terms": [t.to_dict() for t in self.terms]}

    def flatten(self) -> list:
        flat = []
        for term in self.terms:
            flat.extend(term.flatten())
        return flat

