import unittest

from printshop.easing import CubicBezier


class TestCubicBezier(unittest.TestCase):

    def test_endpoints(self):
        curve = CubicBezier(0.7, 0.1, 0.9, 0.3)
        self.assertEqual(curve(0), 0.0)
        self.assertEqual(curve(1), 1.0)

    def test_linear_curve_is_identity(self):
        curve = CubicBezier(0.3, 0.3, 0.6, 0.6)
        self.assertTrue(curve.is_linear)
        for x in (0.1, 0.25, 0.5, 0.9):
            self.assertEqual(curve(x), x)

    def test_css_ease_midpoint(self):
        ease = CubicBezier(0.25, 0.1, 0.25, 1.0)
        self.assertAlmostEqual(ease(0.5), 0.8024, places=3)

    def test_monotonic_for_shadow_curves(self):
        for curve in (CubicBezier(0.1, 0.5, 0.9, 0.5), CubicBezier(0.7, 0.1, 0.9, 0.3)):
            values = [curve(i / 50) for i in range(51)]
            self.assertEqual(values, sorted(values))

    def test_rejects_out_of_range_x(self):
        with self.assertRaises(ValueError):
            CubicBezier(1.2, 0, 0.5, 1)
        with self.assertRaises(ValueError):
            CubicBezier(0.5, 0, -0.1, 1)


if __name__ == "__main__":
    unittest.main()
