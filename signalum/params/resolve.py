"""
Parameter resolution: deep-merge DEFAULT_PRESET with incoming params, then
fill each unit from UNIT_DEFAULTS for its kind.
Incoming params override defaults at any nesting level.
"""
import copy
from typing import Dict, Any

from signalum.params.schema import DEFAULT_PRESET, UNIT_DEFAULTS


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two dicts. override values take precedence.
    Returns a new dict (does not mutate inputs).
    """
    result = copy.deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            # Recursively merge nested dicts
            result[key] = _deep_merge(result[key], value)
        else:
            # Override (or add new) key
            result[key] = copy.deepcopy(value)

    return result


def resolve_unit(unit: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fill a unit dict from its kind's defaults. Kind defaults to "noise".
    Unknown kinds (and non-dict units) are returned unchanged so the processor
    can reject them with a precise error.
    """
    if not isinstance(unit, dict):
        return unit
    kind = unit.get("kind", "noise")
    defaults = UNIT_DEFAULTS.get(kind) if isinstance(kind, str) else None
    if defaults is None:
        return copy.deepcopy(unit)
    resolved = _deep_merge(defaults, unit)
    resolved["kind"] = kind
    return resolved


def resolve_params(params: dict) -> dict:
    """
    Resolve request params by:
    1. Starting from DEFAULT_PRESET
    2. Merging incoming params onto it (user params override defaults)
    3. Resolving every entry of "units" against UNIT_DEFAULTS

    Args:
        params: Incoming params dict (may be partial)

    Returns:
        Fully resolved params dict. Inputs are not mutated.
    """
    merged = _deep_merge(DEFAULT_PRESET, params or {})
    units = merged.get("units") or []
    if isinstance(units, list):
        merged["units"] = [resolve_unit(u) for u in units]
    return merged
