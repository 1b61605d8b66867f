"""
Exceptions raised by the engine. All derive from SignalumError so hosts can
catch one type; each also derives from the matching builtin.
"""


class SignalumError(Exception):
    """Base class for engine errors."""


class InvalidLength(SignalumError, ValueError):
    """Buffer length is not a positive integer."""


class UnsupportedShape(SignalumError, ValueError):
    """Noise shape discriminator is not one of NoiseShape."""


class InvalidParameter(SignalumError, ValueError):
    """A unit or axis parameter is non-finite or outside its domain."""


class IndexOutOfRange(SignalumError, IndexError):
    """Sample index outside [0, length). Internal only."""
