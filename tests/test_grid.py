from __future__ import annotations

import unittest

import numpy as np

from axis_tics.grid import major_mask, major_minor_offset, tic_values


class TicGridTests(unittest.TestCase):
    def test_tic_values_are_evenly_spaced(self) -> None:
        np.testing.assert_allclose(tic_values(0.0, 0.25, 5), [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_tic_values_empty_for_zero_count(self) -> None:
        values = tic_values(1.0, 0.5, 0)
        self.assertEqual(values.size, 0)
        self.assertEqual(values.dtype, np.float64)

    def test_tic_values_snaps_near_zero(self) -> None:
        values = tic_values(-0.3, 0.1, 4)
        self.assertEqual(values[3], 0.0)

    def test_major_minor_offset(self) -> None:
        self.assertEqual(major_minor_offset(0.0, -0.4, 0.1), 4)
        self.assertEqual(major_minor_offset(-2.0, -2.0, 1.0), 0)

    def test_major_mask(self) -> None:
        mask = major_mask(9, 2, 1)
        self.assertEqual(mask.tolist(), [False, True, False, True, False, True, False, True, False])
        self.assertEqual(major_mask(0, 5, 0).size, 0)


if __name__ == "__main__":
    unittest.main()
