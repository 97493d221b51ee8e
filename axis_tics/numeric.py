from __future__ import annotations

import math

import numpy as np

from axis_tics.errors import AxisTicsError

DBL_EPSILON = float(np.finfo(np.float64).eps)
ALMOST_EQUAL_FACTOR = 100.0


def almost_equal(a: float, b: float) -> bool:
    """True if a and b agree to within ALMOST_EQUAL_FACTOR machine epsilons, relative."""
    return abs(a - b) <= max(abs(a), abs(b)) * ALMOST_EQUAL_FACTOR * DBL_EPSILON


def is_power_of_ten_multiple(value: float, multiple: float) -> bool:
    """Whether value is multiple * 10**k for some integer k, up to log10 rounding."""
    if value <= 0.0:
        return False
    ratio = value / multiple
    if ratio == 0.0:
        return False
    exponent = math.log10(ratio)
    return almost_equal(float(np.rint(exponent)), exponent)


def require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise AxisTicsError(f"{name} must be finite, got {value!r}")
    return value


def is_resolvable(x: float, step: float) -> bool:
    # A step lost entirely to rounding at x cannot advance a tic fence.
    return x + step != x
