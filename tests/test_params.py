"""
Defaults snapshot and param contract tests.
Resolved defaults = resolve_params({}). Snapshots detect drift.
Run from project root: python -m pytest tests/test_params.py -v
"""
import sys
import os
import copy
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from signalum.core.params import get_param
from signalum.params import PARAM_SCHEMA, resolve_params, to_engine_params
from signalum.params.schema import DEFAULT_PRESET, UNIT_DEFAULTS


def test_defaults_snapshot():
    resolved = resolve_params({})
    assert resolved == {
        "length": 1000,
        "seed": 0,
        "sample_rate": 1.0,
        "start": 0.0,
        "units": [],
    }


def test_user_params_override_defaults():
    resolved = resolve_params({"length": 10, "seed": 5})
    assert resolved["length"] == 10
    assert resolved["seed"] == 5
    assert resolved["sample_rate"] == 1.0


def test_units_filled_from_kind_defaults():
    resolved = resolve_params({"units": [{"amplitude": 0.9}, {"kind": "rectangular", "duty_cycle": 0.1}]})
    noise, rect = resolved["units"]
    assert noise == {"kind": "noise", "amplitude": 0.9, "frequency": 1.0, "phase": 0.0, "shape": "uniform"}
    assert rect["duty_cycle"] == 0.1
    assert rect["symmetric"] is True
    assert rect["kind"] == "rectangular"


def test_unknown_kind_passed_through():
    resolved = resolve_params({"units": [{"kind": "chirp", "rate": 2}]})
    assert resolved["units"] == [{"kind": "chirp", "rate": 2}]


def test_resolve_does_not_mutate_inputs():
    params = {"units": [{"amplitude": 0.5}]}
    snapshot = copy.deepcopy(params)
    preset = copy.deepcopy(DEFAULT_PRESET)
    resolved = resolve_params(params)
    resolved["units"].append({"kind": "sine"})
    assert params == snapshot
    assert DEFAULT_PRESET == preset


def test_schema_covers_unit_defaults():
    for kind, defaults in UNIT_DEFAULTS.items():
        group = "noise" if kind == "noise" else "waveform"
        for key in defaults:
            assert key in PARAM_SCHEMA[group], f"{kind}.{key} missing from schema"
    assert PARAM_SCHEMA["noise"]["shape"]["choices"] == ["uniform", "unit", "periodic", "gaussian", "stepped"]


def test_legacy_unit_keys_stripped(caplog):
    raw = {
        "length": 10,
        "qc": True,
        "units": [{"probability": 0.9, "duration": 5, "start_offset": 0, "amplitude": 1}],
    }
    with caplog.at_level(logging.WARNING, logger="signalum"):
        out = to_engine_params(raw)
    assert "qc" not in out
    assert out["units"] == [{"amplitude": 1}]
    # Input untouched
    assert "probability" in raw["units"][0]
    assert any("Legacy fields stripped" in r.getMessage() for r in caplog.records)


def test_get_param_dotted():
    params = {"axis": {"sample_rate": 2.0}}
    assert get_param(params, "axis.sample_rate", 1.0) == 2.0
    assert get_param(params, "axis.start", 0.0) == 0.0
    assert get_param(params, "missing.key", "d") == "d"
    assert get_param({}, "length", 3) == 3
