"""
Parameter schema, defaults and resolution for signal requests.
Default values: single source is schema.DEFAULT_PRESET / UNIT_DEFAULTS; use resolve_params({}) for resolved defaults.
"""
from signalum.params.schema import PARAM_SCHEMA, DEFAULT_PRESET, UNIT_DEFAULTS
from signalum.params.resolve import resolve_params, resolve_unit
from signalum.params.engine_params import to_engine_params

__all__ = ["PARAM_SCHEMA", "DEFAULT_PRESET", "UNIT_DEFAULTS", "resolve_params", "resolve_unit", "to_engine_params"]
