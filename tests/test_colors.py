"""Tinting toward white and color resolution."""
import unittest

import numpy as np

from ifc_plots import InvalidColor, InvalidFactor, lookup, tint, to_hex, to_rgb255


def _channels(hex_color):
    return tuple(int(hex_color[i:i + 2], 16) for i in (1, 3, 5))


class TestToRgb(unittest.TestCase):

    def test_hex_string(self):
        self.assertEqual(to_rgb255("#A4123F"), (164, 18, 63))
        self.assertEqual(to_rgb255("#a4123f"), (164, 18, 63))

    def test_palette_name_position_and_entry(self):
        self.assertEqual(to_rgb255("red"), (164, 18, 63))
        self.assertEqual(to_rgb255(6), (164, 18, 63))
        self.assertEqual(to_rgb255(lookup("red")), (164, 18, 63))

    def test_matplotlib_names_and_tuples(self):
        self.assertEqual(to_rgb255("white"), (255, 255, 255))
        self.assertEqual(to_rgb255((0.0, 0.0, 1.0)), (0, 0, 255))

    def test_unparseable(self):
        for bad in ("not-a-color", "#12345", 99, None):
            with self.assertRaises(InvalidColor):
                to_rgb255(bad)

    def test_to_hex_is_uppercase(self):
        self.assertEqual(to_hex("#00ade4"), "#00ADE4")


class TestTint(unittest.TestCase):

    def test_factor_one_returns_color(self):
        """tint(c, 1) is the normalised input."""
        self.assertEqual(tint("#a4123f", 1), ["#A4123F"])
        self.assertEqual(tint("blue", 1), ["#485CC7"])

    def test_factor_zero_returns_white(self):
        for color in ("red", "#002345", "black"):
            self.assertEqual(tint(color, 0), ["#FFFFFF"])

    def test_known_tints(self):
        self.assertEqual(
            tint("red", [0.2, 0.4, 0.6, 0.8]),
            ["#EDD0D9", "#DBA0B2", "#C8718C", "#B64165"],
        )

    def test_monotonic_per_channel(self):
        """Raising the factor moves every channel from 255 toward the original."""
        factors = np.linspace(0, 1, 21)
        tints = [_channels(h) for h in tint("dark blue", factors)]
        for earlier, later in zip(tints, tints[1:]):
            for a, b in zip(earlier, later):
                self.assertLessEqual(b, a)
        self.assertEqual(tints[0], (255, 255, 255))
        self.assertEqual(tints[-1], (0, 35, 69))

    def test_one_factor_many_colors(self):
        self.assertEqual(
            tint(["red", "blue", "#FFFFFF"], 1),
            ["#A4123F", "#485CC7", "#FFFFFF"],
        )

    def test_parallel_colors_and_factors(self):
        self.assertEqual(tint(["red", "blue"], [1, 0]), ["#A4123F", "#FFFFFF"])

    def test_palette_positions_are_many_colors(self):
        self.assertEqual(len(tint((4, 5, 9), 0.5)), 3)

    def test_numpy_integer_is_one_palette_position(self):
        self.assertEqual(tint(np.int64(6), 1), ["#A4123F"])
        self.assertEqual(tint(np.int64(6), [1, 0]), ["#A4123F", "#FFFFFF"])

    def test_mixed_int_float_tuple_is_one_color(self):
        """A tuple with any fractional channel is RGB, as to_rgb255 reads it."""
        self.assertEqual(to_rgb255((1, 0.5, 0)), (255, 128, 0))
        self.assertEqual(tint((1, 0.5, 0), 1), ["#FF8000"])
        self.assertEqual(tint((1, 0.5, 0, 1), 0), ["#FFFFFF"])

    def test_mismatched_lengths(self):
        with self.assertRaises(InvalidFactor):
            tint(["red", "blue", "green"], [0.2, 0.4])

    def test_factor_out_of_range_is_rejected(self):
        for bad in (-0.1, 1.5, [0.5, 2], float("nan")):
            with self.assertRaises(InvalidFactor):
                tint("red", bad)

    def test_non_numeric_factor(self):
        with self.assertRaises(InvalidFactor):
            tint("red", "half")

    def test_bad_color_in_sequence(self):
        with self.assertRaises(InvalidColor):
            tint(["red", "mauve-ish"], 0.5)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            tint("red", 3)


if __name__ == "__main__":
    unittest.main()
