"""
Test cases for pixel geometry.
"""

import unittest

from pdf_rasterizer.geometry import POINTS_PER_INCH, compute_pixels, measure_page


class TestComputePixels(unittest.TestCase):
    """Test cases for compute_pixels."""

    def test_reference_dpi_is_identity(self):
        """Test 72 DPI truncates point sizes."""
        self.assertEqual(compute_pixels(612, 792, 72), (612, 792))
        self.assertEqual(compute_pixels(595.28, 841.89, 72), (595, 841))

    def test_double_dpi_doubles(self):
        self.assertEqual(compute_pixels(612, 792, 144), (1224, 1584))
        self.assertEqual(compute_pixels(100.5, 50.25, 144), (201, 100))

    def test_truncates_instead_of_rounding(self):
        # 10 * 100 / 72 = 13.89
        self.assertEqual(compute_pixels(10, 10, 100), (13, 13))

    def test_degenerate_page_yields_zero(self):
        self.assertEqual(compute_pixels(0, 0.1, 150), (0, 0))

    def test_returns_ints(self):
        width, height = compute_pixels(595.28, 841.89, 300)
        self.assertIsInstance(width, int)
        self.assertIsInstance(height, int)

    def test_measure_page(self):
        geometry = measure_page(612, 792, 150)
        self.assertEqual(geometry.width_pixels, 1275)
        self.assertEqual(geometry.height_pixels, 1650)
        self.assertEqual(geometry.dpi, 150)
        self.assertEqual(geometry.width_points, 612)

    def test_points_per_inch(self):
        self.assertEqual(POINTS_PER_INCH, 72.0)


if __name__ == '__main__':
    unittest.main()
