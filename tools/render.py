#!/usr/bin/env python3
"""
Canonical renderer tool with debug outputs, fingerprinting, and param tracing.

Usage:
    python tools/render.py <subcommand> [options]

Subcommands:
    signal [params_json]      Render one signal from a params JSON file (or defaults)
    noise                     Render a single noise unit from command line flags
    defaults                  Print resolved default params

Options:
    --seed <int>          Seed (overrides params; default: params or 0)
    --debug               Save resolved.json with param trace
    --qc                  Run QC analysis
    --output-dir <path>   Output directory (default: unique timestamped dir)
"""
import sys
import os
import json
import argparse
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tools.render_core import render_signal, get_unique_output_dir
from signalum.core.errors import SignalumError
from signalum.core.types import NoiseShape
from signalum.params.resolve import resolve_params


def _report(debug_info: dict) -> None:
    fp = debug_info["fingerprint"]
    print(f"seed:    {debug_info['seed']}")
    print(f"sha256:  {fp['sha256']}")
    print(f"peak:    {fp['peak']:.6f}")
    print(f"rms:     {fp['rms']:.6f}")
    if debug_info["signal_path"]:
        print(f"written: {debug_info['signal_path']}")
    qc = debug_info.get("qc_result")
    if qc:
        print(f"qc:      {qc['status']}")
        for msg in qc["failures"] + qc["warnings"]:
            print(f"  - {msg}")


def _render(args, params: dict, base_name: str) -> int:
    output_dir = Path(args.output_dir) if args.output_dir else get_unique_output_dir(base_name)
    try:
        _, debug_info = render_signal(
            params,
            output_dir=output_dir,
            filename=args.filename,
            seed=args.seed,
            debug=args.debug,
            qc=args.qc,
            script_name="render.py",
        )
    except SignalumError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 2
    _report(debug_info)
    if args.qc and debug_info["qc_result"]["status"] == "FAIL":
        return 1
    return 0


def cmd_signal(args):
    """Render a signal from a params JSON file."""
    if args.params_json:
        with open(args.params_json, "r") as f:
            params = json.load(f)
    else:
        params = {}
    if args.length is not None:
        params["length"] = args.length
    return _render(args, params, "signal")


def cmd_noise(args):
    """Render one noise unit given on the command line."""
    params = {
        "length": args.length if args.length is not None else 1000,
        "units": [{
            "kind": "noise",
            "amplitude": args.amplitude,
            "frequency": args.frequency,
            "phase": args.phase,
            "shape": args.shape,
        }],
    }
    return _render(args, params, "noise")


def cmd_defaults(args):
    print(json.dumps(resolve_params({}), indent=2))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Canonical renderer tool with debug outputs and fingerprinting"
    )

    subparsers = parser.add_subparsers(dest="command", help="Subcommand")

    # Common arguments
    def add_common_args(p):
        p.add_argument("--seed", type=int, default=None, help="Seed (default: from params, else 0)")
        p.add_argument("--length", type=int, default=None, help="Number of samples")
        p.add_argument("--debug", action="store_true", help="Save resolved.json with param trace")
        p.add_argument("--qc", action="store_true", help="Run QC analysis")
        p.add_argument("--output-dir", type=str, help="Output directory (default: unique timestamped)")
        p.add_argument("--filename", type=str, default="signal", help="Output filename (without extension)")

    p_signal = subparsers.add_parser("signal", help="Render a signal from params JSON")
    p_signal.add_argument("params_json", nargs="?", help="JSON file with params (optional)")
    add_common_args(p_signal)

    p_noise = subparsers.add_parser("noise", help="Render a single noise unit")
    p_noise.add_argument("--amplitude", type=float, default=1.0)
    p_noise.add_argument("--frequency", type=float, default=1.0)
    p_noise.add_argument("--phase", type=float, default=0.0)
    p_noise.add_argument("--shape", choices=[s.name.lower() for s in NoiseShape], default="uniform")
    add_common_args(p_noise)

    subparsers.add_parser("defaults", help="Print resolved default params")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "signal":
        return cmd_signal(args)
    elif args.command == "noise":
        return cmd_noise(args)
    elif args.command == "defaults":
        return cmd_defaults(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
