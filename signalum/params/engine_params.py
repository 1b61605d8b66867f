"""
Engine params contract: only params that pass through here reach the processor.
Strips legacy unit-noise fields (the old probability/duration/start_offset
signature). In dev mode, log if legacy was present. Also holds host limits read
from the environment.
"""
from typing import Dict, Any
import os
import logging

logger = logging.getLogger("signalum")

LEGACY_UNIT_KEYS = frozenset({
    "probability",
    "duration",
    "start_offset",
})

DEV = os.environ.get("ENV", "development").lower() in ("development", "dev", "test")

# Largest length the HTTP host will render
MAX_LENGTH = int(os.environ.get("SIGNALUM_MAX_LENGTH", "1000000"))


def strip_legacy_params(unit: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a unit dict with legacy keys removed."""
    out = dict(unit)
    for key in LEGACY_UNIT_KEYS:
        out.pop(key, None)
    return out


def to_engine_params(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize a raw request body: drop the host-only "qc" flag
    and strip legacy keys from every unit. Returns a new dict.
    """
    out = {k: v for k, v in raw.items() if k != "qc"}
    units = out.get("units")
    if not isinstance(units, list):
        return out
    cleaned = []
    for index, unit in enumerate(units):
        if isinstance(unit, dict):
            found_legacy = sorted(k for k in LEGACY_UNIT_KEYS if k in unit)
            if found_legacy:
                if DEV:
                    logger.warning(
                        "[Parameter Contract] Legacy fields stripped before engine: %s (unit=%d)",
                        found_legacy,
                        index,
                    )
                unit = strip_legacy_params(unit)
        cleaned.append(unit)
    out["units"] = cleaned
    return out
