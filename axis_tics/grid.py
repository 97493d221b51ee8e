from __future__ import annotations

import numpy as np


def tic_values(first: float, delta: float, count: int) -> np.ndarray:
    if count <= 0:
        return np.empty(0, dtype=np.float64)
    values = first + np.arange(count, dtype=np.float64) * delta
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    values[np.isclose(values, 0.0, rtol=0.0, atol=abs(delta) * 1e-9)] = 0.0
    return values


def major_minor_offset(first_major: float, first_minor: float, delta_minor: float) -> int:
    """Index of the first major tic within the minor tic sequence."""
    return int(np.rint((first_major - first_minor) / delta_minor))


def major_mask(count_minor: int, multiple: int, offset: int) -> np.ndarray:
    """Boolean mask over minor tic indices marking those that coincide with major tics."""
    if count_minor <= 0:
        return np.zeros(0, dtype=bool)
    idx = np.arange(count_minor, dtype=np.int64)
    return (idx >= offset) & ((idx - offset) % multiple == 0)
