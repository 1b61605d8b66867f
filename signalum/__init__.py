"""
signalum: deterministic signal synthesis with seeded, composable noise units.
"""
from signalum.core.errors import (
    SignalumError,
    InvalidLength,
    UnsupportedShape,
    InvalidParameter,
    IndexOutOfRange,
)
from signalum.core.types import Sample, NoiseShape, NoiseUnitDescriptor, DEFAULT_SHAPE
from signalum.core.buffer import SampleBuffer
from signalum.dsp.noise import NoiseUnitGenerator
from signalum.processor import SignalProcessor

__version__ = "0.1.0"

__all__ = [
    "SignalProcessor",
    "SampleBuffer",
    "NoiseUnitGenerator",
    "NoiseUnitDescriptor",
    "NoiseShape",
    "DEFAULT_SHAPE",
    "Sample",
    "SignalumError",
    "InvalidLength",
    "UnsupportedShape",
    "InvalidParameter",
    "IndexOutOfRange",
]
