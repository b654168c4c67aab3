import unittest
import pygame
from light_source import Extent, Light, compute_extent


class TestLight(unittest.TestCase):
    def setUp(self):
        self.light = Light(10, 20, 8, (100, 50, 25), 0.5)

    def test_constructor_sets_fields(self):
        """Test all five attributes are stored as given."""
        self.assertEqual(self.light.x, 10.0)
        self.assertEqual(self.light.y, 20.0)
        self.assertEqual(self.light.radius, 8.0)
        self.assertEqual(self.light.color, pygame.Color(100, 50, 25))
        self.assertEqual(self.light.brightness, 0.5)

    def test_constructor_sets_extent(self):
        self.assertEqual(self.light.extent, Extent(6.0, 16.0, 4.0, 4.0))

    def test_x_setter_updates_extent(self):
        self.light.x = 30
        self.assertEqual(self.light.extent, compute_extent(30, 20, 8))

    def test_y_setter_updates_extent(self):
        self.light.y = 2.5
        self.assertEqual(self.light.extent, compute_extent(10, 2.5, 8))

    def test_radius_setter_updates_extent(self):
        self.light.radius = 2
        self.assertEqual(self.light.extent, Extent(9.0, 19.0, 1.0, 1.0))

    def test_move_to_updates_extent(self):
        self.light.move_to(0, 0)
        self.assertEqual((self.light.x, self.light.y), (0.0, 0.0))
        self.assertEqual(self.light.extent, compute_extent(0, 0, 8))

    def test_colour_and_brightness_keep_extent(self):
        """Test setters that do not move the light leave the extent alone."""
        before = self.light.extent
        self.light.color = (1, 2, 3)
        self.light.brightness = 0.0

        self.assertIs(self.light.extent, before)
        self.assertEqual(self.light.color, pygame.Color(1, 2, 3))
        self.assertEqual(self.light.brightness, 0.0)

    def test_str(self):
        light = Light(5, 5, 4, (100, 50, 25), 0)
        self.assertEqual(str(light), "x: 5.0, y: 5.0, r: 4.0, color: (100, 50, 25)")


class TestExtent(unittest.TestCase):
    def test_contains_centre_of_box(self):
        """Test the extent box is anchored at (x - r/2, y - r/2), not centred on the light."""
        extent = compute_extent(10, 10, 8)
        self.assertEqual(extent.center, (8.0, 8.0))
        self.assertTrue(extent.contains(8, 8))
        self.assertFalse(extent.contains(10, 10))

    def test_empty_extent_contains_nothing(self):
        self.assertFalse(compute_extent(5, 5, 0).contains(5, 5))


if __name__ == '__main__':
    unittest.main(verbosity=2)
