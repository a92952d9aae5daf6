from __future__ import annotations

import unittest

import numpy as np

from rastergraph.errors import GraphError, InvalidPointsError
from rastergraph.layout import LEFT_SHIFT, MIN_EXTENT, RIGHT_SHIFT, H_ARROW_HALF, usable_extent
from rastergraph.scales import calculate_axis, map_to_pixels, padded_range, round_half_away
from rastergraph.series import DisplayPoint


class LayoutConstantsTests(unittest.TestCase):
    def test_frame_constants(self) -> None:
        self.assertEqual(LEFT_SHIFT, 10)
        self.assertEqual(RIGHT_SHIFT, 4)
        self.assertEqual(H_ARROW_HALF, 3)
        self.assertEqual(MIN_EXTENT, 24)
        self.assertEqual(usable_extent(100), 86)


class AxisCalibrationTests(unittest.TestCase):
    def test_small_range_uses_two_unit_steps(self) -> None:
        axis = calculate_axis(3.0, 1.0, 100)
        self.assertEqual(axis.min_value, 0.0)
        self.assertEqual(axis.max_value, 4.0)
        self.assertEqual(axis.tick_interval, 2.0)
        self.assertEqual(axis.tick_count, 2)
        self.assertAlmostEqual(axis.tick_pixel_spacing, 43.0)
        self.assertEqual(axis.orientation, "horizontal")

    def test_negative_range_snaps_to_interval_grid(self) -> None:
        axis = calculate_axis(-74.405, -75.727, 480)
        self.assertAlmostEqual(axis.tick_interval, 0.2)
        self.assertAlmostEqual(axis.min_value, -75.8)
        self.assertAlmostEqual(axis.max_value, -74.4)
        self.assertEqual(axis.tick_count, 7)

    def test_calibrated_range_covers_data(self) -> None:
        cases = [(0.0, 1.0), (-1e-3, 1e-3), (1.0, 1000.0), (-150.0, 150.0), (0.1, 0.7), (12345.0, 12346.5)]
        for lo, hi in cases:
            for extent in (24, 100, 480, 740):
                with self.subTest(lo=lo, hi=hi, extent=extent):
                    axis = calculate_axis(hi, lo, extent)
                    self.assertLessEqual(axis.min_value, lo)
                    self.assertGreaterEqual(axis.max_value, hi)
                    self.assertGreaterEqual(axis.tick_count, 1)
                    self.assertAlmostEqual(axis.tick_pixel_spacing * axis.tick_count, usable_extent(extent))

    def test_degenerate_range_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            calculate_axis(1.0, 1.0, 100)

    def test_tick_interval_never_shrinks_as_range_grows(self) -> None:
        for extent in (24, 100, 480, 740):
            previous = 0.0
            for k in range(120):
                span = 1e-3 * 1.23**k
                with self.subTest(extent=extent, span=span):
                    axis = calculate_axis(span, 0.0, extent)
                    self.assertGreaterEqual(axis.tick_interval, previous)
                    previous = axis.tick_interval

    def test_unrepresentable_ranges_raise_graph_errors(self) -> None:
        with self.assertRaises(InvalidPointsError) as ctx:
            calculate_axis(1.7e308, 0.0, 480)
        self.assertIsInstance(ctx.exception, GraphError)
        with self.assertRaises(InvalidPointsError):
            calculate_axis(1.795e308, 1.7e308, 480)
        with self.assertRaises(InvalidPointsError):
            calculate_axis(5e-324, 0.0, 480)

    def test_rotate_swaps_orientation_only(self) -> None:
        axis = calculate_axis(3.0, 1.0, 100)
        rotated = axis.rotate()
        self.assertEqual(rotated.orientation, "vertical")
        self.assertEqual(rotated.tick_count, axis.tick_count)
        self.assertEqual(rotated.rotate(), axis)

    def test_create_points_transposes_for_vertical_axis(self) -> None:
        axis = calculate_axis(3.0, 1.0, 100)
        horizontal = axis.create_points()
        vertical = axis.rotate().create_points()
        self.assertEqual([DisplayPoint(x=p.y, y=p.x) for p in horizontal], vertical)

    def test_create_points_draws_line_arrow_and_ticks(self) -> None:
        axis = calculate_axis(3.0, 1.0, 100)
        points = set(axis.create_points())
        tip = 100 - 2
        for x in range(LEFT_SHIFT, tip + 1):
            self.assertIn(DisplayPoint(x=x, y=LEFT_SHIFT), points)
        self.assertIn(DisplayPoint(x=tip - H_ARROW_HALF, y=LEFT_SHIFT + H_ARROW_HALF), points)
        self.assertIn(DisplayPoint(x=tip - H_ARROW_HALF, y=LEFT_SHIFT - H_ARROW_HALF), points)
        self.assertEqual(axis.tick_positions(), [10, 53, 96])
        self.assertIn(DisplayPoint(x=53, y=LEFT_SHIFT - 1), points)
        self.assertTrue(all(0 <= p.x < 100 and 0 <= p.y < 100 for p in points))


class PixelMappingTests(unittest.TestCase):
    def test_axis_bounds_map_to_plot_edges(self) -> None:
        axis_x = calculate_axis(3.0, 1.0, 100)
        axis_y = calculate_axis(7.5, -2.0, 80).rotate()
        px, py = map_to_pixels(
            np.asarray([axis_x.min_value, axis_x.max_value]),
            np.asarray([axis_y.min_value, axis_y.max_value]),
            axis_x,
            axis_y,
            100,
            80,
        )
        self.assertEqual(int(px[0]), LEFT_SHIFT)
        self.assertEqual(int(py[0]), LEFT_SHIFT)
        self.assertIn(int(px[1]), (100 - RIGHT_SHIFT, 100 - RIGHT_SHIFT - 1))
        self.assertIn(int(py[1]), (80 - RIGHT_SHIFT, 80 - RIGHT_SHIFT - 1))

    def test_interior_points_scale_linearly(self) -> None:
        axis = calculate_axis(3.0, 1.0, 100)
        px, py = map_to_pixels(np.asarray([0.0, 2.0, 0.2]), np.asarray([4.0, 2.0, 1.9]), axis, axis.rotate(), 100, 100)
        self.assertEqual(px.tolist(), [10, 53, 14])
        self.assertEqual(py.tolist(), [96, 53, 51])

    def test_round_half_away_from_zero(self) -> None:
        self.assertEqual(round_half_away(2.5), 3)
        self.assertEqual(round_half_away(-2.5), -3)
        self.assertEqual(round_half_away(0.49), 0)
        self.assertEqual(round_half_away(-0.2), 0)

    def test_padded_range_widens_flat_dimension(self) -> None:
        self.assertEqual(padded_range(1.0, 2.0), (1.0, 2.0))
        self.assertEqual(padded_range(5.0, 5.0), (4.0, 6.0))
        lo, hi = padded_range(-100.0, -100.0)
        self.assertEqual((lo, hi), (-105.0, -95.0))


if __name__ == "__main__":
    unittest.main()
