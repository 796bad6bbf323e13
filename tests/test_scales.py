"""Discrete and continuous IFC scales."""
import unittest

import matplotlib.colors as mcolors

from ifc_plots import (
    DEFAULT_SEQUENCE,
    InsufficientValues,
    InvalidColorName,
    InvalidIndex,
    InvalidType,
    scale_color_continuous,
    scale_color_discrete,
    scale_colour_continuous,
    scale_fill,
    scale_fill_continuous,
    tint,
)
from ifc_plots.scales import gradient_colours

BRAND_ORDER = ["#006446", "#87189D", "#C69214", "#A4123F", "#BCD19B", "#485CC7"]
GREEN, PURPLE = BRAND_ORDER[:2]


def _saturation(hex_color):
    r, g, b = mcolors.to_rgb(hex_color)
    return max(r, g, b) - min(r, g, b)


class TestDiscreteScales(unittest.TestCase):

    def test_default_sequence(self):
        self.assertEqual(DEFAULT_SEQUENCE, (4, 5, 9, 6, 7, 8))
        self.assertEqual(list(scale_fill().values), BRAND_ORDER)
        self.assertEqual(list(scale_color_discrete().values), BRAND_ORDER)

    def test_aesthetic(self):
        self.assertEqual(scale_fill().aesthetic, "fill")
        self.assertEqual(scale_color_discrete().aesthetic, "color")

    def test_custom_sequence(self):
        scale = scale_fill(sequence=[3, 1])
        self.assertEqual(scale.values, ("#002345", "#00ADE4"))

    def test_out_of_range_position(self):
        for bad in ([4, 10], [0], [4, 5, -2]):
            with self.assertRaises(InvalidIndex):
                scale_fill(sequence=bad)

    def test_options_pass_through(self):
        scale = scale_color_discrete(name="Region", guide="legend")
        self.assertEqual(scale.name, "Region")
        self.assertEqual(scale.options["guide"], "legend")
        with self.assertRaises(TypeError):
            scale.options["name"] = "other"

    def test_palette_pairs_levels_in_order(self):
        self.assertEqual(
            scale_fill().palette(["a", "b"]), {"a": GREEN, "b": PURPLE}
        )

    def test_palette_uses_breaks(self):
        scale = scale_fill(breaks=["x", "y"])
        self.assertEqual(scale.palette(), {"x": GREEN, "y": PURPLE})

    def test_too_many_levels(self):
        with self.assertRaises(InsufficientValues):
            scale_fill().palette(range(7))

    def test_map_first_appearance_and_missing(self):
        colors = scale_fill().map(["b", "a", "b", None])
        self.assertEqual(colors, [GREEN, PURPLE, GREEN, "#7F7F7F"])

    def test_map_custom_na_value(self):
        colors = scale_fill(breaks=["a"], na_value="#000000").map(["a", "z"])
        self.assertEqual(colors, [GREEN, "#000000"])

    def test_matplotlib_objects(self):
        scale = scale_fill()
        self.assertIsInstance(scale.cmap, mcolors.ListedColormap)
        self.assertEqual(scale.cmap.N, 6)
        self.assertEqual(scale.cycler.by_key()["color"], BRAND_ORDER)


class TestContinuousScales(unittest.TestCase):

    def test_sequential_red(self):
        scale = scale_color_continuous("sequential", first_col="red")
        self.assertEqual(
            list(scale.colours),
            ["#EDD0D9", "#DBA0B2", "#C8718C", "#B64165", "#A4123F"],
        )
        self.assertEqual(list(scale.colours), tint("red", [0.2, 0.4, 0.6, 0.8, 1.0]))

    def test_sequential_increasing_saturation(self):
        sats = [_saturation(c) for c in scale_color_continuous().colours]
        self.assertEqual(sats, sorted(sats))
        self.assertEqual(len(set(sats)), 5)

    def test_diverging_red_blue(self):
        colours = list(scale_color_continuous("diverging", "red", "blue").colours)
        self.assertEqual(
            colours,
            ["#A4123F", "#B64165", "#C8718C", "#919DDD", "#6D7DD2", "#485CC7"],
        )

    def test_diverging_is_palest_in_the_middle(self):
        sats = [_saturation(c) for c in gradient_colours("diverging")]
        middle = min(sats[2], sats[3])
        self.assertEqual(middle, min(sats))
        self.assertEqual(sats[0], max(sats[:3]))
        self.assertEqual(sats[-1], max(sats[3:]))

    def test_type_prefix(self):
        self.assertEqual(gradient_colours("div"), gradient_colours("diverging"))
        self.assertEqual(gradient_colours("s"), gradient_colours("sequential"))

    def test_bad_type(self):
        for bad in ("sequential2", "", "qualitative", None):
            with self.assertRaises(InvalidType):
                scale_color_continuous(bad)

    def test_bad_color_name(self):
        with self.assertRaises(InvalidColorName):
            scale_color_continuous(first_col="orange")
        with self.assertRaises(InvalidColorName):
            scale_color_continuous("diverging", second_col="teal")

    def test_second_col_ignored_when_sequential(self):
        scale = scale_color_continuous("sequential", second_col="teal")
        self.assertEqual(len(scale.colours), 5)

    def test_positions_accepted_as_endpoints(self):
        self.assertEqual(
            gradient_colours("diverging", 6, 9),
            gradient_colours("diverging", "red", "brown"),
        )

    def test_aliases_and_fill(self):
        self.assertEqual(scale_colour_continuous().colours, scale_color_continuous().colours)
        self.assertEqual(scale_fill_continuous().aesthetic, "fill")

    def test_map_endpoints_and_missing(self):
        scale = scale_color_continuous()
        self.assertEqual(
            scale.map([0.0, 10.0, float("nan")]),
            ["#EDD0D9", "#A4123F", "#7F7F7F"],
        )

    def test_limits_censor_out_of_range(self):
        scale = scale_color_continuous(limits=(0, 10))
        self.assertEqual(scale.map([-1, 0, 10, 11]), ["#7F7F7F", "#EDD0D9", "#A4123F", "#7F7F7F"])

    def test_constant_data_maps_to_gradient_middle(self):
        scale = scale_color_continuous()
        middle = scale.map([0, 5, 10])[1]
        self.assertEqual(scale.map([3, 3, 3]), [middle] * 3)
        norm = scale.norm([3, 3])
        self.assertEqual(norm(3), 0.5)

    def test_mpl_kwargs(self):
        kwargs = scale_color_continuous().mpl_kwargs([2, 4, 6])
        self.assertIsInstance(kwargs["cmap"], mcolors.LinearSegmentedColormap)
        self.assertEqual((kwargs["norm"].vmin, kwargs["norm"].vmax), (2, 6))


if __name__ == "__main__":
    unittest.main()
