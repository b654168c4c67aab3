import numpy as np
import pygame


def pixel_view(image) -> np.ndarray:
    """
    Returns a writable (height, width, channels) view of image, indexed [y, x].
    Writes to the view land in the image itself.
    pygame surfaces stay locked while the view is alive, so drop it when done.
    """
    if isinstance(image, pygame.Surface):
        # surfarray is indexed [x, y]
        return pygame.surfarray.pixels3d(image).transpose(1, 0, 2)

    assert isinstance(image, np.ndarray), "Image must be a numpy array or a pygame.Surface"
    assert image.ndim == 3 and image.shape[2] in (3, 4), "Image must have shape (height, width, 3|4)"
    return image


def copy_image(image):
    if isinstance(image, pygame.Surface):
        return image.copy()
    return np.copy(image)


def image_size(image):
    """(width, height) of an array or surface."""
    if isinstance(image, pygame.Surface):
        return image.get_size()
    return (image.shape[1], image.shape[0])


def load_image(path) -> np.ndarray:
    surface = pygame.image.load(path)
    return np.ascontiguousarray(pygame.surfarray.array3d(surface).transpose(1, 0, 2))


def save_image(image, path):
    if isinstance(image, pygame.Surface):
        pygame.image.save(image, path)
        return
    rgb = np.asarray(image)[:, :, :3].astype(np.uint8)
    surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
    pygame.image.save(surface, path)


def pack_rgb(r: int, g: int, b: int) -> int:
    # Opaque 0xAARRGGBB
    return (0xFF << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack_rgb(value: int):
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
