"""
Unit tests for descriptive color names and the Color value type.
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestColorName(unittest.TestCase):

    def test_mid_saturation_and_lightness_is_unqualified(self):
        """s=50, l=50 hits none of the qualifier thresholds."""
        from colorgen.color import color_name

        self.assertEqual(color_name(0, 50, 50), "red")

    def test_neutral_and_extreme_rules_win_first(self):
        from colorgen.color import color_name

        self.assertEqual(color_name(0, 5, 95), "white")
        self.assertEqual(color_name(0, 5, 5), "black")
        self.assertEqual(color_name(200, 50, 15), "very dark")
        self.assertEqual(color_name(200, 50, 95), "very light")
        self.assertEqual(color_name(200, 10, 95), "very light")

    def test_qualifier_order(self):
        from colorgen.color import color_name

        self.assertEqual(color_name(0, 20, 30), "pale red")
        self.assertEqual(color_name(0, 90, 30), "vivid red")
        self.assertEqual(color_name(0, 50, 30), "dark red")
        self.assertEqual(color_name(0, 50, 80), "light red")

    def test_qualifier_boundaries_are_strict(self):
        from colorgen.color import color_name

        self.assertEqual(color_name(0, 30, 50), "red")
        self.assertEqual(color_name(0, 80, 50), "red")
        self.assertEqual(color_name(0, 50, 40), "red")
        self.assertEqual(color_name(0, 50, 70), "red")
        self.assertEqual(color_name(0, 50, 20), "dark red")

    def test_hue_snaps_to_nearest_band(self):
        from colorgen.color import hue_family

        self.assertEqual(hue_family(7), "red")
        self.assertEqual(hue_family(8), "red-orange")
        self.assertEqual(hue_family(120), "green-blue")
        self.assertEqual(hue_family(225), "pink")
        self.assertEqual(hue_family(355), "red")

    def test_table_covers_every_band(self):
        from colorgen.color import HUE_NAMES

        self.assertEqual(sorted(HUE_NAMES), list(range(0, 360, 15)))

    def test_deterministic(self):
        from colorgen.color import color_name

        self.assertEqual(
            [color_name(h, 60, 55) for h in range(0, 360, 5)],
            [color_name(h, 60, 55) for h in range(0, 360, 5)],
        )


class TestColor(unittest.TestCase):

    def test_derived_fields(self):
        from colorgen.color import Color

        c = Color(0, 100, 50)
        self.assertEqual(c.hex, "#ff0000")
        self.assertEqual(c.rgb, (255, 0, 0))
        self.assertEqual(c.name, "vivid red")
        self.assertEqual(c.hsl, "hsl(0, 100%, 50%)")
        self.assertEqual(c.rgb_string, "rgb(255, 0, 0)")

    def test_same_hex_is_case_insensitive(self):
        from colorgen.color import Color

        c = Color(0, 100, 50)
        self.assertTrue(c.same_hex("#FF0000"))
        self.assertTrue(c.same_hex(Color(0, 100, 50)))
        self.assertFalse(c.same_hex("#fe0000"))

    def test_from_rgb_and_hex(self):
        from colorgen.color import Color

        self.assertEqual(Color.from_rgb(255, 0, 0), Color(0, 100, 50))
        self.assertEqual(Color.from_hex("#00F"), Color(240, 100, 50))
        self.assertEqual(Color.from_hex("#0000ff").hex, "#0000ff")

    def test_dict_round_trip(self):
        from colorgen.color import Color

        c = Color(210, 64, 47)
        d = c.to_dict()
        self.assertEqual(d["hue"], 210)
        self.assertEqual(d["hex"], c.hex)
        self.assertEqual(Color.from_dict(d), c)

    def test_from_dict_falls_back_to_hex(self):
        from colorgen.color import Color

        self.assertEqual(Color.from_dict({"hex": "#ff0000"}), Color(0, 100, 50))
        with self.assertRaises(ValueError):
            Color.from_dict({"name": "red"})


if __name__ == "__main__":
    unittest.main()
