"""
Counter-based pseudorandom values (SplitMix64).
Output for (key, counter) is mix64(key + (counter + 1) * GOLDEN_GAMMA), i.e. the
counter-th output of a SplitMix64 generator whose state is key. No shared state:
every value depends only on its inputs.
"""
import numpy as np

MASK64 = (1 << 64) - 1
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
STREAM_GAMMA = 0xD1B54A32D192ED03

_MUL1 = np.uint64(0xBF58476D1CE4E5B9)
_MUL2 = np.uint64(0x94D049BB133111EB)
_S30 = np.uint64(30)
_S27 = np.uint64(27)
_S31 = np.uint64(31)
_S11 = np.uint64(11)
_INV_2_53 = 2.0 ** -53


def stream_key(seed: int, stream: int = 0) -> int:
    """64-bit key for (seed, stream). Stream 0 keys on the seed itself."""
    return (int(seed) + int(stream) * STREAM_GAMMA) & MASK64


def _as_counters(counters) -> np.ndarray:
    """Integer counters (negative allowed) as wrapped uint64."""
    arr = np.atleast_1d(np.asarray(counters))
    if arr.dtype == np.uint64:
        return arr
    return arr.astype(np.int64).view(np.uint64)


def mix64(z: np.ndarray) -> np.ndarray:
    """SplitMix64 finalizer over a uint64 array."""
    with np.errstate(over="ignore"):
        z = (z ^ (z >> _S30)) * _MUL1
        z = (z ^ (z >> _S27)) * _MUL2
        return z ^ (z >> _S31)


def hash64(key: int, counters) -> np.ndarray:
    """Raw 64-bit hash for each counter."""
    c = _as_counters(counters)
    with np.errstate(over="ignore"):
        z = np.uint64(key & MASK64) + (c + np.uint64(1)) * np.uint64(GOLDEN_GAMMA)
    return mix64(z)


def uniform(key: int, counters) -> np.ndarray:
    """Float64 values in [0, 1) from the top 53 bits of each hash."""
    return (hash64(key, counters) >> _S11).astype(np.float64) * _INV_2_53
