"""
Parameter schema and defaults for signal requests.
PARAM_SCHEMA documents every key (for UIs and the /schema endpoint);
DEFAULT_PRESET and UNIT_DEFAULTS are the merge base for resolve_params.
"""
from typing import Dict, Any, Literal

from signalum.core.types import NoiseShape

# Type definitions
ParamType = Literal["float", "int", "bool", "enum", "str"]
ParamGroup = Literal["axis", "noise", "waveform"]

# Schema entry structure: type, default, min, max, group, description
ParamSchemaEntry = Dict[str, Any]


def _make_param(
    param_type: ParamType,
    default: Any,
    min_val: Any,
    max_val: Any,
    group: ParamGroup,
    description: str,
) -> ParamSchemaEntry:
    """Helper to create a schema entry."""
    return {
        "type": param_type,
        "default": default,
        "min": min_val,
        "max": max_val,
        "group": group,
        "description": description,
    }


# -----------------------------------------------------------------------------
# PARAM_SCHEMA: Metadata (type, default, min, max, group, description)
# -----------------------------------------------------------------------------

PARAM_SCHEMA: Dict[str, Dict[str, ParamSchemaEntry]] = {
    "signal": {
        "length": _make_param("int", 1000, 1, None, "axis", "Number of samples"),
        "seed": _make_param("int", 0, None, None, "axis", "Seed for all noise units"),
        "sample_rate": _make_param("float", 1.0, 0.0, None, "axis", "Samples per unit of x (x = start + i / sample_rate)"),
        "start": _make_param("float", 0.0, None, None, "axis", "x of the first sample"),
    },
    "noise": {
        "amplitude": _make_param("float", 1.0, None, None, "noise", "Linear scale; negative inverts polarity"),
        "frequency": _make_param("float", 1.0, None, None, "noise", "Pattern cycles (or buckets) across the buffer"),
        "phase": _make_param("float", 0.0, None, None, "noise", "Pattern offset (radians)"),
        "shape": {
            **_make_param("enum", NoiseShape.UNIFORM.name.lower(), 0, int(max(NoiseShape)), "noise", "Noise generation rule"),
            "choices": [s.name.lower() for s in NoiseShape],
        },
    },
    "waveform": {
        "amplitude": _make_param("float", 1.0, None, None, "waveform", "Linear scale"),
        "frequency": _make_param("float", 1.0, None, None, "waveform", "Cycles across the buffer"),
        "phase": _make_param("float", 0.0, None, None, "waveform", "Phase offset (radians)"),
        "duty_cycle": _make_param("float", 0.5, 0.0, 1.0, "waveform", "High/rising fraction of each period"),
        "symmetric": _make_param("bool", True, False, True, "waveform", "Rectangular low level is -amplitude (else 0)"),
        "rectify": {
            **_make_param("str", None, None, None, "waveform", "Sine rectification"),
            "choices": [None, "half", "full"],
        },
        "at": _make_param("float", 0.0, None, None, "waveform", "x position of a jump or pulse"),
    },
}


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_PRESET: Dict[str, Any] = {
    "length": 1000,
    "seed": 0,
    "sample_rate": 1.0,
    "start": 0.0,
    "units": [],
}

# Per-kind defaults merged under each unit; only keys the unit kind accepts.
UNIT_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "noise": {"amplitude": 1.0, "frequency": 1.0, "phase": 0.0, "shape": NoiseShape.UNIFORM.name.lower()},
    "sine": {"amplitude": 1.0, "frequency": 1.0, "phase": 0.0, "rectify": None},
    "triangular": {"amplitude": 1.0, "frequency": 1.0, "duty_cycle": 0.5, "phase": 0.0},
    "rectangular": {"amplitude": 1.0, "frequency": 1.0, "duty_cycle": 0.5, "phase": 0.0, "symmetric": True},
    "sawtooth": {"amplitude": 1.0, "frequency": 1.0, "phase": 0.0},
    "jump": {"at": 0.0, "amplitude": 1.0},
    "pulse": {"at": 0.0, "amplitude": 1.0},
}
