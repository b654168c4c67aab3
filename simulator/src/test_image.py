import os
import tempfile
import unittest
import numpy as np
import pygame
from image import copy_image, image_size, load_image, pack_rgb, pixel_view, save_image, unpack_rgb


class TestPixelView(unittest.TestCase):
    def test_array_view_is_the_array(self):
        image = np.zeros((4, 6, 3), dtype=np.uint8)
        self.assertIs(pixel_view(image), image)

    def test_surface_view_writes_through(self):
        """Test the surface view is indexed [y, x] and writes into the surface."""
        surface = pygame.Surface((6, 4), 0, 32)
        view = pixel_view(surface)
        self.assertEqual(view.shape[:2], (4, 6))

        view[1, 3] = (10, 20, 30)
        del view
        self.assertEqual(tuple(surface.get_at((3, 1)))[:3], (10, 20, 30))

    def test_image_size(self):
        self.assertEqual(image_size(np.zeros((4, 6, 3))), (6, 4))
        self.assertEqual(image_size(pygame.Surface((6, 4))), (6, 4))

    def test_copy_image_is_independent(self):
        image = np.zeros((2, 2, 3), dtype=np.uint8)
        copy = copy_image(image)
        copy[0, 0] = (1, 1, 1)
        self.assertEqual(image[0, 0, 0], 0)


class TestImageFiles(unittest.TestCase):
    def test_save_then_load_png(self):
        image = np.zeros((4, 6, 3), dtype=np.uint8)
        image[1, 2] = (255, 128, 7)

        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "frame.png")
            save_image(image, path)
            loaded = load_image(path)

        self.assertEqual(loaded.shape, (4, 6, 3))
        np.testing.assert_array_equal(loaded, image)


class TestPackedColours(unittest.TestCase):
    def test_pack_rgb(self):
        self.assertEqual(pack_rgb(0x12, 0x34, 0x56), 0xFF123456)

    def test_unpack_rgb_ignores_alpha(self):
        self.assertEqual(unpack_rgb(0xFF123456), (0x12, 0x34, 0x56))
        self.assertEqual(unpack_rgb(0x00123456), (0x12, 0x34, 0x56))


if __name__ == '__main__':
    unittest.main(verbosity=2)
