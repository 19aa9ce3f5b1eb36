import math
import unittest

from printshop.config import ShadowOptions
from printshop.shadows import box_shadows, to_css


class TestBoxShadows(unittest.TestCase):

    def test_layer_count_and_bounds(self):
        options = ShadowOptions(angle=40, length=150, final_blur=300, spread=2, final_transparency=0.2)
        for n in (1, 3, 7, 12):
            with self.subTest(n=n):
                layers = box_shadows(n, options)
                self.assertEqual(len(layers), n)
                for layer in layers:
                    self.assertGreaterEqual(layer.alpha, 0)
                    self.assertLessEqual(layer.alpha, options.final_transparency + 1e-9)
                    self.assertGreaterEqual(layer.blur, 0)
                    self.assertLessEqual(layer.blur, options.final_blur + 1e-9)
                    magnitude = math.hypot(layer.x_offset, layer.y_offset)
                    self.assertLessEqual(magnitude, options.length + 1e-9)
                    self.assertEqual(layer.spread, 2)

    def test_last_layer_reaches_maxima(self):
        options = ShadowOptions()
        last = box_shadows(7, options)[-1]
        self.assertAlmostEqual(last.alpha, 0.2)
        self.assertAlmostEqual(last.blur, 100)
        self.assertAlmostEqual(last.x_offset, math.sin(math.radians(40)) * 150)
        self.assertAlmostEqual(last.y_offset, math.cos(math.radians(40)) * 150)

    def test_layers_grow_outward(self):
        layers = box_shadows(7)
        offsets = [math.hypot(l.x_offset, l.y_offset) for l in layers]
        self.assertEqual(offsets, sorted(offsets))

    def test_zero_layers_rejected(self):
        with self.assertRaises(ValueError):
            box_shadows(0)

    def test_css_output(self):
        css = to_css(box_shadows(3))
        self.assertEqual(len(css.split(",\n")), 3)
        self.assertIn("rgba(0, 0, 0,", css)


if __name__ == "__main__":
    unittest.main()
