from dataclasses import dataclass
from enum import IntEnum
import math
import numbers
from typing import Union

from signalum.core.errors import InvalidParameter, UnsupportedShape


@dataclass(frozen=True)
class Sample:
    x: float  # coordinate, fixed at construction
    y: float  # accumulated value


class NoiseShape(IntEnum):
    """
    Generation rule for a noise unit.

    UNIFORM  - uniform in [-A, A), flat envelope
    UNIT     - A with probability w(theta), else 0
    PERIODIC - uniform in [-A, A) weighted by w(theta)
    GAUSSIAN - standard normal scaled by A, flat envelope
    STEPPED  - uniform in [-A, A) held constant per frequency bucket

    UNIFORM (the default) and GAUSSIAN ignore frequency and phase; only UNIT,
    PERIODIC and STEPPED vary their pattern with position.
    """
    UNIFORM = 0
    UNIT = 1
    PERIODIC = 2
    GAUSSIAN = 3
    STEPPED = 4

    @classmethod
    def parse(cls, value: Union["NoiseShape", int, str]) -> "NoiseShape":
        """Accepts a NoiseShape, its integer code, or its name (any case)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise UnsupportedShape(f"Unsupported noise shape: {value!r}") from None
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise UnsupportedShape(f"Unsupported noise shape: {value!r}") from None
        raise UnsupportedShape(f"Unsupported noise shape: {value!r}")


DEFAULT_SHAPE = NoiseShape.UNIFORM


def finite_float(name: str, value) -> float:
    """Coerce to float, rejecting NaN/inf and non-numeric input."""
    if isinstance(value, bool):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v):
        raise InvalidParameter(f"{name} must be finite, got {v!r}")
    return v


@dataclass(frozen=True)
class NoiseUnitDescriptor:
    """Parameters of one noise pass. Built per call, never retained."""
    amplitude: float
    frequency: float  # cycles across the whole buffer
    phase: float = 0.0  # radians
    shape: NoiseShape = DEFAULT_SHAPE

    @classmethod
    def build(cls, amplitude, frequency, phase=0.0, shape=DEFAULT_SHAPE) -> "NoiseUnitDescriptor":
        """Validate raw values. Shape is checked first so it wins over other errors."""
        parsed = NoiseShape.parse(shape)
        return cls(
            amplitude=finite_float("amplitude", amplitude),
            frequency=finite_float("frequency", frequency),
            phase=finite_float("phase", phase),
            shape=parsed,
        )
