from axis_tics.api import axis_tics
from axis_tics.errors import AxisTicsError
from axis_tics.numeric import almost_equal
from axis_tics.solver import CountSolution, MajorTics, MinorTics, classify_multiple
from axis_tics.tics import AxisTics

__all__ = [
    "AxisTics",
    "AxisTicsError",
    "CountSolution",
    "MajorTics",
    "MinorTics",
    "almost_equal",
    "axis_tics",
    "classify_multiple",
]
