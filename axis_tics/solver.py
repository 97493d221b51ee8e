"""Solvers for major and minor tic parameters on a linear axis.

All functions here take endpoints already ordered so that xmin <= xmax.
Major tics are the values f + i*d in [xmin, xmax] where f is the least
multiple of d not less than xmin. Minor tics subdivide each major interval
by the tic multiple, which is one of 1, 2, 5 or 10.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import sys

from axis_tics.errors import AxisTicsError
from axis_tics.numeric import is_power_of_ten_multiple, is_resolvable

LOGGER = logging.getLogger(__name__)

TIC_MULTIPLES = (1, 2, 5, 10)
CLASSIFIER_ORDER = (10, 5, 2)
DEGENERATE_INTERVAL = 1.0
# Far above any tic count that finite doubles can resolve.
MAX_TIC_COUNT = 2**63 - 1


@dataclass(frozen=True)
class MajorTics:
    dtic: float
    ftic: float
    ntic: int


@dataclass(frozen=True)
class MinorTics:
    dtic: float
    ftic: float
    ntic: int


@dataclass(frozen=True)
class CountSolution:
    multiple: int
    major: MajorTics


def first_tic(xmin: float, d: float) -> float:
    """Least value k*d (k integer) that is not less than xmin."""
    # int() truncates toward zero, so int(xmin/d)*d can land above xmin when
    # xmin < 0; start one step lower.
    f = (int(xmin / d) - 1) * d
    while f < xmin:
        f += d
    return f


def tic_count(first: float, xmax: float, d: float) -> int:
    # Floor, not truncation: zero when the first tic is already past xmax.
    return max(0, 1 + math.floor((xmax - first) / d))


def _require_finite_span(xmin: float, xmax: float) -> float:
    span = xmax - xmin
    if not math.isfinite(span):
        raise AxisTicsError(f"axis span [{xmin!r}, {xmax!r}] overflows")
    return span


def solve_interval(xmin: float, xmax: float, dtic: float) -> MajorTics:
    _require_finite_span(xmin, xmax)
    d = abs(dtic)
    if d == 0.0:
        raise AxisTicsError("dtic must be non-zero")
    if not (is_resolvable(xmin, d) and is_resolvable(xmax, d)):
        raise AxisTicsError(f"dtic {d!r} is too small to resolve on [{xmin!r}, {xmax!r}]")
    f = first_tic(xmin, d)
    return MajorTics(dtic=d, ftic=f, ntic=tic_count(f, xmax, d))


def classify_multiple(dtic: float) -> int:
    """Return m if dtic is m * 10**k for m in (10, 5, 2), checked in that order, else 1.

    A power of ten matches all three and is classified as 10.
    """
    for multiple in CLASSIFIER_ORDER:
        if is_power_of_ten_multiple(dtic, multiple):
            return multiple
    return 1


def _exponent(span: float, m: int, ntic_max: int) -> int:
    ratio = span / (m * ntic_max)
    if ratio > 0.0:
        return int(math.log10(ratio))
    # Quotient underflowed (subnormal span); take the log of each part.
    return int(math.log10(span) - math.log10(m * ntic_max))


def _candidates(xmin: float, xmax: float, ntic_max: int, widen: int) -> list[tuple[int, MajorTics]]:
    span = xmax - xmin
    out: list[tuple[int, MajorTics]] = []
    for m in TIC_MULTIPLES:
        exponent = _exponent(span, m, ntic_max) + widen
        if exponent > sys.float_info.max_10_exp:
            continue
        d = m * math.pow(10.0, exponent)
        if not math.isfinite(d):
            continue
        if not (is_resolvable(xmin, d) and is_resolvable(xmax, d)):
            LOGGER.debug("skipping unresolvable tic interval %r on [%r, %r]", d, xmin, xmax)
            continue
        f = first_tic(xmin, d)
        out.append((m, MajorTics(dtic=d, ftic=f, ntic=tic_count(f, xmax, d))))
    return out


def solve_count(xmin: float, xmax: float, ntic_max: int) -> CountSolution:
    """Choose d = m * 10**l, m in (1, 2, 5, 10), giving the most major tics not above ntic_max.

    If the winning multiple is 1 it is reported as 10, which describes the
    same interval with a decimal minor subdivision. When even the coarsest
    finite interval exceeds ntic_max, the candidate with the fewest tics is
    returned.
    """
    ntic_max = min(max(1, ntic_max), MAX_TIC_COUNT)
    span = _require_finite_span(xmin, xmax)
    if span == 0.0:
        LOGGER.debug("zero-span axis at %r; single major tic", xmin)
        return CountSolution(multiple=10, major=MajorTics(dtic=DEGENERATE_INTERVAL, ftic=xmin, ntic=1))

    widen = 0
    previous: list[tuple[int, MajorTics]] = []
    while True:
        candidates = _candidates(xmin, xmax, ntic_max, widen)
        best: tuple[int, MajorTics] | None = None
        if not candidates and previous:
            # Wider intervals overflow; settle for the fewest tics seen last round.
            best = min(previous, key=lambda c: (c[1].ntic, -c[1].dtic))
            LOGGER.debug("no finite tic interval fits %d tics on [%r, %r]", ntic_max, xmin, xmax)
            break
        for m, major in candidates:
            nbest = 0 if best is None else best[1].ntic
            if nbest < major.ntic <= ntic_max:
                best = (m, major)
        if best is not None:
            break
        if candidates and all(major.ntic == 0 for _, major in candidates):
            # No candidate has a multiple inside the range; report zero major tics.
            best = min(candidates, key=lambda c: c[1].dtic)
            LOGGER.debug("no tic interval places a tic in [%r, %r]", xmin, xmax)
            break
        if candidates:
            previous = candidates
        widen += 1
        LOGGER.debug("no candidate fits %d tics on [%r, %r]; widening exponent by %d", ntic_max, xmin, xmax, widen)

    multiple, major = best
    LOGGER.debug("count mode chose multiple %d, dtic %r, %d tics", multiple, major.dtic, major.ntic)
    if multiple == 1:
        multiple = 10
    if major.dtic / multiple == 0.0:
        # A subnormal interval cannot be subdivided.
        multiple = 1
    return CountSolution(multiple=multiple, major=major)


def solve_minor(xmin: float, xmax: float, major: MajorTics, multiple: int) -> MinorTics:
    dm = major.dtic / multiple
    fm = major.ftic
    # Walk back from the first major tic while another minor step stays >= xmin.
    while xmin <= fm - dm < fm:
        fm -= dm
    return MinorTics(dtic=dm, ftic=fm, ntic=tic_count(fm, xmax, dm))
