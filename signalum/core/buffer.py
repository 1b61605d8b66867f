"""
Fixed-length sample buffer. x is computed once from the index; only y mutates.
"""
import math
import numbers
from typing import Tuple

import torch

from signalum.core.errors import IndexOutOfRange, InvalidLength, InvalidParameter
from signalum.core.types import Sample, finite_float

DTYPE = torch.float64


def check_length(length) -> int:
    """Return length as int, or raise InvalidLength."""
    if isinstance(length, bool) or not isinstance(length, numbers.Integral):
        raise InvalidLength(f"length must be a positive integer, got {length!r}")
    if length <= 0:
        raise InvalidLength(f"length must be a positive integer, got {length}")
    return int(length)


def sample_axis(length: int, sample_rate: float = 1.0, start: float = 0.0) -> torch.Tensor:
    """
    Coordinates start + i / sample_rate for i in [0, length).
    Raises InvalidParameter if rounding collapses neighbouring points.
    """
    sample_rate = finite_float("sample_rate", sample_rate)
    start = finite_float("start", start)
    if sample_rate <= 0:
        raise InvalidParameter(f"sample_rate must be > 0, got {sample_rate}")
    x = start + torch.arange(length, dtype=DTYPE) / sample_rate
    if length > 1 and not bool(torch.all(x[1:] > x[:-1])):
        raise InvalidParameter(
            f"axis is not strictly increasing (start={start}, sample_rate={sample_rate})"
        )
    return x


def length_for_duration(duration: float, sample_rate: float) -> int:
    """Number of samples covering [0, duration) at sample_rate."""
    duration = finite_float("duration", duration)
    sample_rate = finite_float("sample_rate", sample_rate)
    if sample_rate <= 0:
        raise InvalidParameter(f"sample_rate must be > 0, got {sample_rate}")
    if duration <= 0:
        return 0
    return math.floor(duration * sample_rate)


class SampleBuffer:
    def __init__(self, length: int, sample_rate: float = 1.0, start: float = 0.0):
        self._length = check_length(length)
        self._x = sample_axis(self._length, sample_rate, start)
        self._y = torch.zeros(self._length, dtype=DTYPE)

    @classmethod
    def create(cls, length: int) -> "SampleBuffer":
        return cls(length)

    def __len__(self) -> int:
        return self._length

    @property
    def length(self) -> int:
        return self._length

    def accumulate(self, index: int, delta: float) -> None:
        """Add delta to y[index]."""
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise IndexOutOfRange(f"index must be an integer, got {index!r}")
        if not 0 <= index < self._length:
            raise IndexOutOfRange(f"index {index} outside [0, {self._length})")
        self._y[int(index)] += float(delta)

    def accumulate_all(self, contribution: torch.Tensor) -> None:
        """Add a full-length contribution elementwise (position order is irrelevant per element)."""
        contribution = contribution.reshape(-1)
        if contribution.shape[0] != self._length:
            raise IndexOutOfRange(
                f"contribution has {contribution.shape[0]} samples, buffer has {self._length}"
            )
        self._y.add_(contribution.to(DTYPE))

    def coordinates(self) -> torch.Tensor:
        return self._x.clone()

    def values(self) -> torch.Tensor:
        return self._y.clone()

    def snapshot(self) -> Tuple[Sample, ...]:
        """Read-only ordered copy of all samples."""
        return tuple(Sample(x, y) for x, y in zip(self._x.tolist(), self._y.tolist()))
