"""
Core rendering utilities with debug outputs, fingerprinting, and param tracing.
Used by canonical render.py tool.
"""
import sys
import os
import json
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Tuple

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from signalum.core.types import Sample
from signalum.params.engine_params import to_engine_params
from signalum.params.resolve import resolve_params
from signalum.processor import SignalProcessor
from signalum.qc import analyze, fingerprint


def _get_git_hash() -> str:
    """Get short git commit hash."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            cwd=os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except OSError:
        pass
    return "unknown"


def render_signal(
    params: dict,
    output_dir: Optional[Path] = None,
    filename: str = "signal",
    seed: Optional[int] = None,
    debug: bool = False,
    qc: bool = False,
    script_name: str = "unknown",
) -> Tuple[Tuple[Sample, ...], Dict]:
    """
    Render a signal with full param tracing and fingerprinting.

    Args:
        params: Input params dict (length, seed, sample_rate, start, units)
        output_dir: Directory to save signal JSON (None = do not write)
        filename: Base filename (without extension)
        seed: Overrides params["seed"] when given
        debug: Enable debug outputs (saves resolved.json)
        qc: Run QC analysis
        script_name: Name of calling script (for debug JSON)

    Returns:
        Tuple of (signal, debug_info_dict)
    """
    # Store input params (before any processing)
    input_params = dict(params) if params else {}

    # Step 1: Strip legacy keys, resolve params (deep-merge with defaults)
    engine_params = to_engine_params(input_params)
    if seed is not None:
        engine_params["seed"] = seed
    resolved_params = resolve_params(engine_params)

    # Step 2: Render
    processor = SignalProcessor.from_params(resolved_params)
    signal = processor.get_signal()
    x, y = processor.get_signal_tensors()

    # Step 3: Fingerprint and optional QC
    fp = fingerprint(y)
    qc_result = analyze(x, y) if qc else None

    debug_info = {
        "script_name": script_name,
        "timestamp": datetime.now().isoformat(),
        "git_hash": _get_git_hash(),
        "seed": resolved_params["seed"],
        "input_params": input_params,
        "resolved_params": resolved_params,
        "fingerprint": fp,
        "qc_result": qc_result,
        "signal_path": None,
    }

    # Step 4: Save signal JSON
    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        signal_path = output_dir / f"{filename}.json"
        with open(signal_path, "w") as f:
            json.dump([{"x": s.x, "y": s.y} for s in signal], f)
        debug_info["signal_path"] = str(signal_path)

        # Step 5: Save debug JSON if enabled
        if debug:
            json_path = output_dir / f"{filename}.resolved.json"
            with open(json_path, "w") as f:
                json.dump(debug_info, f, indent=2, default=str)

    return signal, debug_info


def get_unique_output_dir(base_name: str) -> Path:
    """
    Generate unique output directory: renders/{base_name}/YYYYMMDD_HHMMSS_{gitshort}/
    """
    now = datetime.now()
    date_str = now.strftime("%Y%m%d")
    time_str = now.strftime("%H%M%S")
    git_hash = _get_git_hash()
    short_hash = git_hash[:8] if git_hash != "unknown" else "unknown"

    unique_dir = Path("renders") / base_name / f"{date_str}_{time_str}_{short_hash}"
    return unique_dir
