"""
Seeded noise units. Every contribution is a pure function of
(position, length, descriptor, seed); there is no generator state, so the order
in which positions or units are evaluated never changes a value.
"""
import math
import numbers

import torch

from signalum.core.buffer import DTYPE, check_length
from signalum.core.errors import IndexOutOfRange, InvalidParameter, UnsupportedShape
from signalum.core.types import NoiseShape, NoiseUnitDescriptor
from signalum.dsp.hashing import stream_key, uniform

TWO_PI = 2.0 * math.pi

# Buckets must fit in int64 before hashing
_BUCKET_LIMIT = 2.0 ** 62


def _stream(shape: NoiseShape, k: int = 0) -> int:
    """Two hash streams per shape so shapes never share random values."""
    return 2 * int(shape) + k


def _uniform(seed: int, shape: NoiseShape, counters: torch.Tensor, k: int = 0) -> torch.Tensor:
    u = uniform(stream_key(seed, _stream(shape, k)), counters.numpy())
    return torch.from_numpy(u)


class NoiseUnitGenerator:
    @staticmethod
    def theta(positions: torch.Tensor, length: int, frequency: float, phase: float) -> torch.Tensor:
        """Pattern angle 2*pi*frequency*(i/length) + phase. frequency=0 gives a constant."""
        p = positions.to(DTYPE) / length
        angle = TWO_PI * frequency * p + phase
        if not bool(torch.all(torch.isfinite(angle))):
            raise InvalidParameter(
                f"frequency/phase too large for a finite pattern angle (frequency={frequency}, phase={phase})"
            )
        return angle

    @staticmethod
    def weight(theta: torch.Tensor) -> torch.Tensor:
        """Periodic weight in [0, 1]: (1 + cos(theta)) / 2."""
        return 0.5 * (1.0 + torch.cos(theta))

    @staticmethod
    def buckets(positions: torch.Tensor, length: int, frequency: float, phase: float) -> torch.Tensor:
        """floor(frequency * i/length + phase/(2*pi)); frequency buckets per buffer."""
        p = positions.to(DTYPE) / length
        b = torch.floor(frequency * p + phase / TWO_PI)
        if bool(torch.any(torch.abs(b) >= _BUCKET_LIMIT)):
            raise InvalidParameter(
                f"frequency/phase too large for stepped noise (frequency={frequency}, phase={phase})"
            )
        return b.to(torch.int64)

    @staticmethod
    def shape_values(
        positions: torch.Tensor,
        length: int,
        descriptor: NoiseUnitDescriptor,
        seed: int,
    ) -> torch.Tensor:
        """Contribution of one unit at the given positions (int64 tensor)."""
        a = descriptor.amplitude
        shape = descriptor.shape

        if shape == NoiseShape.UNIFORM:
            u = _uniform(seed, shape, positions)
            return a * (2.0 * u - 1.0)

        if shape == NoiseShape.UNIT:
            u = _uniform(seed, shape, positions)
            w = NoiseUnitGenerator.weight(
                NoiseUnitGenerator.theta(positions, length, descriptor.frequency, descriptor.phase)
            )
            return torch.where(u < w, torch.full_like(u, a), torch.zeros_like(u))

        if shape == NoiseShape.PERIODIC:
            u = _uniform(seed, shape, positions)
            w = NoiseUnitGenerator.weight(
                NoiseUnitGenerator.theta(positions, length, descriptor.frequency, descriptor.phase)
            )
            return a * (2.0 * u - 1.0) * w

        if shape == NoiseShape.GAUSSIAN:
            # Box-Muller; 1 - u0 is in (0, 1] so the log is finite
            u0 = _uniform(seed, shape, positions, 0)
            u1 = _uniform(seed, shape, positions, 1)
            z = torch.sqrt(-2.0 * torch.log1p(-u0)) * torch.cos(TWO_PI * u1)
            return a * z

        if shape == NoiseShape.STEPPED:
            b = NoiseUnitGenerator.buckets(positions, length, descriptor.frequency, descriptor.phase)
            u = _uniform(seed, shape, b)
            return a * (2.0 * u - 1.0)

        raise UnsupportedShape(f"Unsupported noise shape: {shape!r}")

    @staticmethod
    def generate_block(length: int, descriptor: NoiseUnitDescriptor, seed: int) -> torch.Tensor:
        """Contributions for every position in [0, length), ascending."""
        length = check_length(length)
        positions = torch.arange(length, dtype=torch.int64)
        return NoiseUnitGenerator.shape_values(positions, length, descriptor, seed)

    @staticmethod
    def generate(position: int, length: int, descriptor: NoiseUnitDescriptor, seed: int) -> float:
        """Contribution at a single position."""
        length = check_length(length)
        if isinstance(position, bool) or not isinstance(position, numbers.Integral):
            raise IndexOutOfRange(f"position must be an integer, got {position!r}")
        if not 0 <= position < length:
            raise IndexOutOfRange(f"position {position} outside [0, {length})")
        positions = torch.tensor([int(position)], dtype=torch.int64)
        return float(NoiseUnitGenerator.shape_values(positions, length, descriptor, seed)[0])
