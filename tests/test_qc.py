"""
Tests for signalum/qc: metrics, status, fingerprint stability.
Run from project root: python -m pytest tests/test_qc.py -v
"""
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import torch
from signalum import SignalProcessor
from signalum.qc import analyze, fingerprint


def _signal(seed=0):
    p = SignalProcessor(1000, seed)
    p.add_unit_noise(0.5, 3.0, 0.0, "periodic")
    return p.get_signal_tensors()


def test_pass_for_clean_noise():
    x, y = _signal()
    result = analyze(x, y)
    assert result["status"] == "PASS"
    assert result["metrics"]["length"] == 1000
    assert 0.0 < result["metrics"]["peak"] <= 0.5


def test_zero_signal_metrics():
    x, y = SignalProcessor(10, 0).get_signal_tensors()
    result = analyze(x, y)
    assert result["status"] == "PASS"
    assert result["metrics"]["rms"] == 0.0
    assert result["metrics"]["crest_factor"] == 0.0
    assert result["metrics"]["nonzero_fraction"] == 0.0


def test_non_finite_fails():
    x = torch.arange(4, dtype=torch.float64)
    y = torch.tensor([0.0, float("nan"), 1.0, 0.0], dtype=torch.float64)
    result = analyze(x, y)
    assert result["status"] == "FAIL"
    assert any("NaN" in f for f in result["failures"])


def test_non_increasing_axis_fails():
    x = torch.tensor([0.0, 1.0, 1.0], dtype=torch.float64)
    y = torch.zeros(3, dtype=torch.float64)
    assert analyze(x, y)["status"] == "FAIL"


def test_empty_fails():
    result = analyze(torch.zeros(0), torch.zeros(0))
    assert result["status"] == "FAIL"


def test_dc_offset_warns():
    p = SignalProcessor(100, 0)
    p.add_unit_jump(at=-1.0, amplitude=1.0)
    x, y = p.get_signal_tensors()
    result = analyze(x, y)
    assert result["status"] == "WARN"
    assert any("DC offset" in w for w in result["warnings"])


def test_threshold_override():
    x, y = _signal()
    result = analyze(x, y, thresholds={"peak_max": 0.01})
    assert result["status"] == "WARN"


def test_fingerprint_stable_and_seed_sensitive():
    _, y0 = _signal(0)
    _, y0_again = _signal(0)
    _, y1 = _signal(1)
    assert fingerprint(y0) == fingerprint(y0_again)
    assert fingerprint(y0)["sha256"] != fingerprint(y1)["sha256"]
