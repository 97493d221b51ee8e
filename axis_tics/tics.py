from __future__ import annotations

from dataclasses import dataclass
import numbers

import numpy as np

from axis_tics.grid import major_mask, major_minor_offset, tic_values
from axis_tics.numeric import require_finite
from axis_tics.solver import MajorTics, classify_multiple, solve_count, solve_interval, solve_minor


@dataclass(frozen=True)
class AxisTics:
    """Tics for annotating a linear axis.

    Construct with ``from_interval`` to fix the major tic interval, or with
    ``from_count`` to bound the number of major tics and let the interval be
    chosen from 1, 2, 5 or 10 times a power of ten. Major tics are a subset of
    minor tics. The record is immutable and holds only numeric parameters;
    formatting labels and drawing are left to the caller.

    An interval of zero is rejected, as are non-finite endpoints.
    """

    xmin: float
    xmax: float
    mtic: int
    ntic: int
    dtic: float
    ftic: float
    ntic_minor: int
    dtic_minor: float
    ftic_minor: float

    @classmethod
    def from_interval(cls, x1: float, x2: float, dtic: float) -> AxisTics:
        xmin, xmax = _ordered_endpoints(x1, x2)
        major = solve_interval(xmin, xmax, require_finite("dtic", dtic))
        return cls._assemble(xmin, xmax, classify_multiple(major.dtic), major)

    @classmethod
    def from_count(cls, x1: float, x2: float, ntic_max: int) -> AxisTics:
        if isinstance(ntic_max, bool) or not isinstance(ntic_max, numbers.Integral):
            raise TypeError(f"ntic_max must be an integer, got {type(ntic_max).__name__}")
        xmin, xmax = _ordered_endpoints(x1, x2)
        solution = solve_count(xmin, xmax, int(ntic_max))
        return cls._assemble(xmin, xmax, solution.multiple, solution.major)

    @classmethod
    def _assemble(cls, xmin: float, xmax: float, multiple: int, major: MajorTics) -> AxisTics:
        minor = solve_minor(xmin, xmax, major, multiple)
        return cls(
            xmin=xmin,
            xmax=xmax,
            mtic=multiple,
            ntic=major.ntic,
            dtic=major.dtic,
            ftic=major.ftic,
            ntic_minor=minor.ntic,
            dtic_minor=minor.dtic,
            ftic_minor=minor.ftic,
        )

    @property
    def count_major(self) -> int:
        return self.ntic

    @property
    def delta_major(self) -> float:
        return self.dtic

    @property
    def first_major(self) -> float:
        return self.ftic

    @property
    def count_minor(self) -> int:
        return self.ntic_minor

    @property
    def delta_minor(self) -> float:
        return self.dtic_minor

    @property
    def first_minor(self) -> float:
        return self.ftic_minor

    @property
    def multiple(self) -> int:
        """Number of minor intervals per major interval."""
        return self.mtic

    def major_values(self) -> np.ndarray:
        return tic_values(self.ftic, self.dtic, self.ntic)

    def minor_values(self) -> np.ndarray:
        return tic_values(self.ftic_minor, self.dtic_minor, self.ntic_minor)

    def minor_only_values(self) -> np.ndarray:
        offset = major_minor_offset(self.ftic, self.ftic_minor, self.dtic_minor)
        mask = major_mask(self.ntic_minor, self.mtic, offset)
        return self.minor_values()[~mask]


def _ordered_endpoints(x1: float, x2: float) -> tuple[float, float]:
    a = require_finite("x1", x1)
    b = require_finite("x2", x2)
    return (min(a, b), max(a, b))
