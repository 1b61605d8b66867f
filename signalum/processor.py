"""
SignalProcessor: owns one sample buffer and one seed, layers noise and waveform
units onto the buffer, and hands out immutable snapshots.

Every unit is validated and fully generated before the buffer is touched, so a
rejected call leaves previously accumulated state as it was.
"""
import inspect
import logging
import numbers
from typing import Optional, Tuple

import torch

from signalum.core.buffer import SampleBuffer, check_length, length_for_duration
from signalum.core.errors import InvalidParameter
from signalum.core.params import get_param
from signalum.core.types import DEFAULT_SHAPE, NoiseUnitDescriptor, Sample, finite_float
from signalum.dsp.noise import NoiseUnitGenerator
from signalum.dsp.oscillators import Oscillator

logger = logging.getLogger(__name__)

UNIT_KINDS = ("noise", "sine", "triangular", "rectangular", "sawtooth", "jump", "pulse")


def _check_seed(seed) -> int:
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise InvalidParameter(f"seed must be an integer, got {seed!r}")
    return int(seed)


class SignalProcessor:
    def __init__(self, length: int, seed: int = 0, sample_rate: float = 1.0, start: float = 0.0):
        length = check_length(length)
        self._seed = _check_seed(seed)
        self._buffer = SampleBuffer(length, sample_rate=sample_rate, start=start)
        self._sample_rate = float(sample_rate)
        self._start = float(start)
        self._units_applied = 0
        logger.debug(
            "SignalProcessor created: length=%d seed=%d sample_rate=%s start=%s",
            length, self._seed, self._sample_rate, self._start,
        )

    @classmethod
    def new(cls, length: int, seed: int) -> "SignalProcessor":
        return cls(length, seed)

    @classmethod
    def from_duration(
        cls,
        duration: float,
        seed: int = 0,
        sample_rate: float = 1.0,
        start: float = 0.0,
    ) -> "SignalProcessor":
        """Processor covering [start, start + duration) at sample_rate."""
        return cls(length_for_duration(duration, sample_rate), seed, sample_rate=sample_rate, start=start)

    @classmethod
    def from_params(cls, params: dict) -> "SignalProcessor":
        """
        Build from a resolved params dict (see signalum.params.resolve_params) and
        apply its units in order.
        """
        processor = cls(
            get_param(params, "length"),
            get_param(params, "seed", 0),
            sample_rate=get_param(params, "sample_rate", 1.0),
            start=get_param(params, "start", 0.0),
        )
        units = get_param(params, "units", []) or []
        if not isinstance(units, (list, tuple)):
            raise InvalidParameter(f"units must be a list, got {type(units).__name__}")
        for unit in units:
            processor.apply(unit)
        return processor

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        return self._buffer.length

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def start(self) -> float:
        return self._start

    @property
    def units_applied(self) -> int:
        return self._units_applied

    def __len__(self) -> int:
        return self._buffer.length

    def __repr__(self) -> str:
        return (
            f"SignalProcessor(length={self.length}, seed={self._seed}, "
            f"sample_rate={self._sample_rate}, start={self._start}, units_applied={self._units_applied})"
        )

    def _fold(self, contribution: torch.Tensor, label: str) -> None:
        self._buffer.accumulate_all(contribution)
        self._units_applied += 1
        logger.debug("applied %s unit #%d", label, self._units_applied)

    # -------------------------------------------------------------------------
    # Noise units
    # -------------------------------------------------------------------------

    def add_unit_noise(self, amplitude: float, frequency: float, phase: float = 0.0, shape=DEFAULT_SHAPE) -> None:
        """
        Add one seeded noise unit to every sample.

        Args:
            amplitude: Linear scale; 0 is a no-op, negative inverts polarity
            frequency: Pattern cycles (or buckets, for STEPPED) across the buffer
            phase: Offset in radians applied before periodic shaping
            shape: NoiseShape, its integer code, or its name

        Raises:
            UnsupportedShape: shape is not a NoiseShape
            InvalidParameter: amplitude/frequency/phase not finite
        """
        descriptor = NoiseUnitDescriptor.build(amplitude, frequency, phase, shape)
        contribution = NoiseUnitGenerator.generate_block(self.length, descriptor, self._seed)
        self._fold(contribution, f"noise/{descriptor.shape.name.lower()}")

    # -------------------------------------------------------------------------
    # Waveform units
    # -------------------------------------------------------------------------

    def add_sine(self, amplitude: float, frequency: float, phase: float = 0.0, rectify: Optional[str] = None) -> None:
        """Sine of the given cycles per buffer; rectify is None, 'half' or 'full'."""
        amplitude = finite_float("amplitude", amplitude)
        wave = Oscillator.sine(self.length, finite_float("frequency", frequency), finite_float("phase", phase))
        self._fold(amplitude * Oscillator.rectify(wave, rectify), "sine")

    def add_triangular(self, amplitude: float, frequency: float, duty_cycle: float = 0.5, phase: float = 0.0) -> None:
        amplitude = finite_float("amplitude", amplitude)
        wave = Oscillator.triangle(
            self.length,
            finite_float("frequency", frequency),
            finite_float("phase", phase),
            finite_float("duty_cycle", duty_cycle),
        )
        self._fold(amplitude * wave, "triangular")

    def add_rectangular(
        self,
        amplitude: float,
        frequency: float,
        duty_cycle: float = 0.5,
        phase: float = 0.0,
        symmetric: bool = True,
    ) -> None:
        """Square/pulse wave; symmetric swings between +/-amplitude, otherwise 0 and amplitude."""
        amplitude = finite_float("amplitude", amplitude)
        wave = Oscillator.rectangular(
            self.length,
            finite_float("frequency", frequency),
            finite_float("phase", phase),
            finite_float("duty_cycle", duty_cycle),
            symmetric=bool(symmetric),
        )
        self._fold(amplitude * wave, "rectangular")

    def add_sawtooth(self, amplitude: float, frequency: float, phase: float = 0.0) -> None:
        amplitude = finite_float("amplitude", amplitude)
        wave = Oscillator.saw(self.length, finite_float("frequency", frequency), finite_float("phase", phase))
        self._fold(amplitude * wave, "sawtooth")

    def add_unit_jump(self, at: float, amplitude: float = 1.0) -> None:
        """Step: amplitude where x > at, 0 elsewhere."""
        at = finite_float("at", at)
        amplitude = finite_float("amplitude", amplitude)
        x = self._buffer.coordinates()
        self._fold(torch.where(x > at, torch.full_like(x, amplitude), torch.zeros_like(x)), "jump")

    def add_unit_pulse(self, at: float, amplitude: float = 1.0) -> None:
        """Single impulse at the sample whose x is nearest to at (first one on ties)."""
        at = finite_float("at", at)
        amplitude = finite_float("amplitude", amplitude)
        x = self._buffer.coordinates()
        # argmin returns the first minimal index
        index = int(torch.argmin(torch.abs(x - at)))
        pulse = torch.zeros_like(x)
        pulse[index] = amplitude
        self._fold(pulse, "pulse")

    def apply(self, unit: dict) -> None:
        """
        Apply one unit described by a dict, e.g.
        {"kind": "noise", "amplitude": 0.9, "frequency": 5, "phase": 0, "shape": "unit"}.
        Missing kind means "noise".
        """
        if not isinstance(unit, dict):
            raise InvalidParameter(f"unit must be a dict, got {type(unit).__name__}")
        kind = unit.get("kind", "noise")
        args = {k: v for k, v in unit.items() if k != "kind"}
        method = {
            "noise": self.add_unit_noise,
            "sine": self.add_sine,
            "triangular": self.add_triangular,
            "rectangular": self.add_rectangular,
            "sawtooth": self.add_sawtooth,
            "jump": self.add_unit_jump,
            "pulse": self.add_unit_pulse,
        }.get(kind) if isinstance(kind, str) else None
        if method is None:
            raise InvalidParameter(f"Unknown unit kind: {kind!r} (expected one of {UNIT_KINDS})")
        try:
            inspect.signature(method).bind(**args)
        except TypeError as exc:
            raise InvalidParameter(f"Bad arguments for {kind!r} unit: {exc}") from exc
        method(**args)

    # -------------------------------------------------------------------------
    # Query
    # -------------------------------------------------------------------------

    def get_signal(self) -> Tuple[Sample, ...]:
        """All samples in ascending x; a copy, unaffected by later units."""
        return self._buffer.snapshot()

    def get_signal_tensors(self) -> Tuple[torch.Tensor, torch.Tensor]:
        """(x, y) as float64 tensor copies."""
        return self._buffer.coordinates(), self._buffer.values()
