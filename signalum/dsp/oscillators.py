"""
Deterministic periodic waveforms over buffer positions.
Frequency is in cycles across the whole buffer (same convention as noise units);
phase is in radians.
"""
import math
from typing import Optional

import torch

from signalum.core.buffer import DTYPE
from signalum.core.errors import InvalidParameter

TWO_PI = 2.0 * math.pi

RECTIFY_MODES = ("half", "full")


def _cycles(length: int, frequency: float, phase: float) -> torch.Tensor:
    """Cycle coordinate frequency * i/length + phase/(2*pi)."""
    p = torch.arange(length, dtype=DTYPE) / length
    return _finite(frequency * p + phase / TWO_PI, frequency, phase)


def _finite(values: torch.Tensor, frequency: float, phase: float) -> torch.Tensor:
    if not bool(torch.all(torch.isfinite(values))):
        raise InvalidParameter(f"frequency/phase too large for a finite waveform (frequency={frequency}, phase={phase})")
    return values


def check_duty_cycle(duty_cycle: float) -> float:
    if not 0.0 <= duty_cycle <= 1.0:
        raise InvalidParameter(f"duty_cycle must be within [0, 1], got {duty_cycle}")
    return duty_cycle


class Oscillator:
    @staticmethod
    def sine(length: int, frequency: float, phase: float = 0.0) -> torch.Tensor:
        """sin(2*pi*frequency*i/length + phase), in [-1, 1]."""
        p = torch.arange(length, dtype=DTYPE) / length
        return torch.sin(_finite(TWO_PI * frequency * p + phase, frequency, phase))

    @staticmethod
    def triangle(length: int, frequency: float, phase: float = 0.0, duty_cycle: float = 0.5) -> torch.Tensor:
        """
        Triangle wave in [-1, 1] rising for duty_cycle of each period, then falling.

        duty_cycle=0.5 is the symmetric triangle; 1.0 is a rising ramp, 0.0 a falling one.
        """
        check_duty_cycle(duty_cycle)
        x = _cycles(length, frequency, phase)
        frac = x - torch.floor(x)
        # Unused branch of torch.where still evaluates; keep both denominators nonzero
        rise = frac / max(duty_cycle, 1e-12)
        fall = 1.0 - (frac - duty_cycle) / max(1.0 - duty_cycle, 1e-12)
        wave = torch.where(frac < duty_cycle, rise, fall)
        return 2.0 * wave - 1.0

    @staticmethod
    def rectangular(
        length: int,
        frequency: float,
        phase: float = 0.0,
        duty_cycle: float = 0.5,
        symmetric: bool = True,
    ) -> torch.Tensor:
        """High (1) for the first duty_cycle of each period; low is -1 if symmetric else 0."""
        check_duty_cycle(duty_cycle)
        x = _cycles(length, frequency, phase)
        frac = x - torch.floor(x)
        low = -1.0 if symmetric else 0.0
        return torch.where(frac < duty_cycle, torch.ones_like(frac), torch.full_like(frac, low))

    @staticmethod
    def saw(length: int, frequency: float, phase: float = 0.0) -> torch.Tensor:
        """Sawtooth in [-1, 1)."""
        x = _cycles(length, frequency, phase)
        return 2 * (x - torch.floor(x + 0.5))

    @staticmethod
    def rectify(wave: torch.Tensor, mode: Optional[str]) -> torch.Tensor:
        """'half' drops negative lobes, 'full' folds them up, None passes through."""
        if mode is None:
            return wave
        if mode == "half":
            return torch.clamp(wave, min=0.0)
        if mode == "full":
            return torch.abs(wave)
        raise InvalidParameter(f"rectify must be one of {RECTIFY_MODES} or None, got {mode!r}")
