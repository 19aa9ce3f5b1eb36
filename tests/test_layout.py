import unittest

from printshop.layout import fit_artwork, pixels_per_inch, resolve_origin


class TestFitArtwork(unittest.TestCase):

    def test_never_exceeds_80_percent_and_keeps_aspect(self):
        canvas = (2048, 1536)
        for img_size in [(100, 100), (4000, 1000), (1000, 4000), (3000, 2000), (17, 4999)]:
            with self.subTest(img_size=img_size):
                w, h = fit_artwork(img_size, canvas)
                self.assertLessEqual(w, canvas[0] * 0.8 + 1e-9)
                self.assertLessEqual(h, canvas[1] * 0.8 + 1e-9)
                self.assertAlmostEqual(w / h, img_size[0] / img_size[1], places=6)

    def test_fills_box_on_limiting_axis(self):
        w, h = fit_artwork((4000, 1000), (2000, 2000))
        self.assertAlmostEqual(w, 1600)
        self.assertAlmostEqual(h, 400)

    def test_physical_size_with_ppi(self):
        ppi = pixels_per_inch(2048, 144)
        w, h = fit_artwork((1000, 1000), (2048, 2048), ppi=ppi, physical_size=(30, 31))
        # Square pixels contained in a 30x31 inch box.
        self.assertAlmostEqual(w, 30 * ppi)
        self.assertAlmostEqual(h, 30 * ppi)

    def test_physical_size_clamped_to_canvas_fraction(self):
        ppi = pixels_per_inch(2048, 48)
        w, h = fit_artwork((900, 630), (2048, 2048), ppi=ppi, physical_size=(90, 63))
        self.assertLessEqual(w, 2048 * 0.8 + 1e-9)
        self.assertLessEqual(h, 2048 * 0.8 + 1e-9)
        self.assertAlmostEqual(w / h, 900 / 630, places=6)

    def test_invalid_sizes(self):
        with self.assertRaises(ValueError):
            fit_artwork((0, 10), (100, 100))
        with self.assertRaises(ValueError):
            pixels_per_inch(2048, 0)


class TestResolveOrigin(unittest.TestCase):

    def test_center(self):
        self.assertEqual(resolve_origin((1000, 800), (200, 100)), (400, 350))

    def test_offsets_are_added(self):
        self.assertEqual(resolve_origin((1000, 800), (200, 100), "center", 15, -20), (415, 330))

    def test_corner_anchor(self):
        self.assertEqual(resolve_origin((1000, 800), (200, 100), "bottom-right"), (800, 700))

    def test_unknown_anchor_falls_back_to_top_left(self):
        with self.assertLogs("printshop.layout", level="WARNING"):
            origin = resolve_origin((1000, 800), (200, 100), "somewhere", 5, 5)
        self.assertEqual(origin, (5, 5))


if __name__ == "__main__":
    unittest.main()
