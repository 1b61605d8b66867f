"""Deterministic generators: counter hash, noise units, oscillators."""
