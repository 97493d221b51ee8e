from __future__ import annotations

import math
import unittest

from axis_tics.errors import AxisTicsError
from axis_tics.numeric import (
    ALMOST_EQUAL_FACTOR,
    DBL_EPSILON,
    almost_equal,
    is_power_of_ten_multiple,
    is_resolvable,
    require_finite,
)


class NumericTests(unittest.TestCase):
    def test_epsilon_is_double_precision(self) -> None:
        self.assertEqual(DBL_EPSILON, 2.0**-52)
        self.assertEqual(ALMOST_EQUAL_FACTOR, 100.0)

    def test_almost_equal_is_relative(self) -> None:
        self.assertTrue(almost_equal(1.0, 1.0 + 1e-15))
        self.assertFalse(almost_equal(1.0, 1.0 + 1e-12))
        self.assertTrue(almost_equal(1e300, 1e300 * (1.0 + 1e-15)))
        self.assertTrue(almost_equal(0.0, 0.0))
        self.assertFalse(almost_equal(0.0, 1e-300))

    def test_power_of_ten_multiple(self) -> None:
        self.assertTrue(is_power_of_ten_multiple(0.02, 2.0))
        self.assertTrue(is_power_of_ten_multiple(5000.0, 5.0))
        self.assertTrue(is_power_of_ten_multiple(1.0, 10.0))
        self.assertFalse(is_power_of_ten_multiple(300.0, 5.0))
        self.assertFalse(is_power_of_ten_multiple(-1.0, 2.0))
        self.assertFalse(is_power_of_ten_multiple(1e-323, 5.0))

    def test_require_finite(self) -> None:
        self.assertEqual(require_finite("x", 3), 3.0)
        for bad in (math.nan, math.inf, -math.inf):
            with self.assertRaises(AxisTicsError):
                require_finite("x", bad)

    def test_axis_tics_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            require_finite("x", math.nan)

    def test_resolvable_step(self) -> None:
        self.assertTrue(is_resolvable(1.0, 0.1))
        self.assertFalse(is_resolvable(1e6, 1e-12))


if __name__ == "__main__":
    unittest.main()
