from __future__ import annotations

from axis_tics.tics import AxisTics


def axis_tics(
    x1: float,
    x2: float,
    *,
    interval: float | None = None,
    max_count: int | None = None,
) -> AxisTics:
    if interval is None and max_count is None:
        raise TypeError("one of interval or max_count is required")
    if interval is not None and max_count is not None:
        raise TypeError("interval and max_count are mutually exclusive")
    if max_count is not None:
        return AxisTics.from_count(x1, x2, max_count)
    return AxisTics.from_interval(x1, x2, interval)
