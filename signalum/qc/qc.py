"""
Quality Control analysis for rendered signals.
Detects broken axes and non-finite values (failures) and unusually hot or
offset signals (warnings).
"""
import hashlib

import torch
from typing import Dict, Optional

from signalum.qc.thresholds import QC_THRESHOLDS


def _axis_increasing(x: torch.Tensor) -> bool:
    if x.numel() < 2:
        return True
    return bool(torch.all(x[1:] > x[:-1]))


def analyze(x: torch.Tensor, y: torch.Tensor, thresholds: Optional[Dict] = None) -> Dict:
    """
    Analyze a rendered signal.

    Args:
        x: Coordinates (1D)
        y: Values (1D)
        thresholds: Overrides for QC_THRESHOLDS

    Returns:
        Dict with metrics and pass/fail flags
    """
    thresholds = {**QC_THRESHOLDS, **(thresholds or {})}
    x = x.reshape(-1).to(torch.float64)
    y = y.reshape(-1).to(torch.float64)
    n = int(y.numel())

    failures = []
    warnings = []

    if n == 0:
        failures.append("Signal is empty")
        return {
            "status": "FAIL",
            "metrics": {"length": 0},
            "failures": failures,
            "warnings": warnings,
        }

    if x.numel() != n:
        failures.append(f"Axis length {x.numel()} != value length {n}")
    elif not _axis_increasing(x):
        failures.append("Axis is not strictly increasing")

    finite = bool(torch.all(torch.isfinite(y)))
    if not finite:
        failures.append("Signal contains NaN or Inf")

    # Basic metrics
    peak = float(torch.max(torch.abs(y)))
    rms = float(torch.sqrt(torch.mean(y ** 2)))
    mean = float(torch.mean(y))
    crest_factor = peak / rms if rms > 0 else 0.0
    nonzero_fraction = float(torch.count_nonzero(y)) / n

    metrics = {
        "length": n,
        "peak": peak,
        "rms": rms,
        "mean": mean,
        "crest_factor": crest_factor,
        "nonzero_fraction": nonzero_fraction,
    }

    if finite:
        peak_max = thresholds["peak_max"]
        if peak > peak_max:
            warnings.append(f"Peak high: {peak:.4f} > {peak_max:.4f}")

        dc_max = thresholds["dc_max"]
        if abs(mean) > dc_max:
            warnings.append(f"DC offset high: {abs(mean):.4f} > {dc_max:.4f}")

        nz_min = thresholds["nonzero_fraction_min"]
        if nonzero_fraction < nz_min:
            warnings.append(f"Too sparse: {nonzero_fraction:.4f} < {nz_min:.4f}")

    # Overall status
    status = "PASS"
    if failures:
        status = "FAIL"
    elif warnings:
        status = "WARN"

    return {
        "status": status,
        "metrics": metrics,
        "failures": failures,
        "warnings": warnings,
    }


def fingerprint(y: torch.Tensor) -> Dict:
    """SHA256 of the float64 value bytes, plus peak and RMS. Equal signals give equal hashes."""
    y = y.reshape(-1).to(torch.float64).contiguous()
    sha256 = hashlib.sha256(y.numpy().tobytes()).hexdigest()
    if y.numel() == 0:
        return {"sha256": sha256, "peak": 0.0, "rms": 0.0}
    return {
        "sha256": sha256,
        "peak": float(torch.max(torch.abs(y))),
        "rms": float(torch.sqrt(torch.mean(y ** 2))),
    }
