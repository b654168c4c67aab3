"""
Per-pixel light accumulation.

Every light adds its colour to the pixels within its radius, scaled by a
falloff modifier that forms a cone: it grows while the scan moves towards the
centre above the light and shrinks again below it. The modifier is a running
value carried from pixel to pixel in scan order (x columns ascending, y rows
ascending inside each column), so the result depends on that order and not
only on each pixel's position.

Lights are applied one after the other; later lights build on the pixels
earlier lights already changed.
"""
import logging
import math

from geometry import get_light_distance
from image import copy_image, pixel_view

logger = logging.getLogger(__name__)

MIN_CHANNEL = 0.0
MAX_CHANNEL = 255.0


class ScanState:
    """Falloff state carried through one light's scan."""

    def __init__(self, old_dist=0.0, new_dist=0.0, modifier=1.0):
        self.old_dist = old_dist
        self.new_dist = new_dist
        self.modifier = modifier

    def __repr__(self):
        return f"ScanState(old_dist={self.old_dist}, new_dist={self.new_dist}, modifier={self.modifier})"


def scan_pixel(state: ScanState, light, y: int, dist: float) -> float:
    """
    Advances state past one in-range pixel at row y and distance dist from the
    light centre. Returns the modifier to use for that pixel.
    """
    state.new_dist = dist

    if y < light.y:
        if state.new_dist < state.old_dist:
            state.modifier += light.brightness
        else:
            state.modifier = 1.0
    elif state.old_dist <= state.new_dist:
        state.modifier -= light.brightness

    modifier = state.modifier

    if y <= light.y:
        state.old_dist = dist
    else:
        state.new_dist = dist

    return modifier


def blend_channel(value: float) -> int:
    value = min(max(value, MIN_CHANNEL), MAX_CHANNEL)
    # round half up
    return int(math.floor(value + 0.5))


def blend_pixel(pixel, color, modifier: float):
    """(pixel + color) * modifier per channel, clamped to [0, 255] and rounded."""
    return (
        blend_channel((int(pixel[0]) + color[0]) * modifier),
        blend_channel((int(pixel[1]) + color[1]) * modifier),
        blend_channel((int(pixel[2]) + color[2]) * modifier),
    )


def scan_bounds(light):
    """Half-open x and y ranges scanned for light, 2 * radius wide."""
    x, y, r = int(light.x), int(light.y), int(light.radius)
    return range(x - r, x + r), range(y - r, y + r)


def apply_light(pixels, light) -> int:
    """
    Applies a single light to a (height, width, channels) pixel array indexed
    [y, x]. The falloff state runs over the whole scan box, pixels outside the
    array are skipped without being touched. Returns the number of pixels written.
    """
    height, width = pixels.shape[0], pixels.shape[1]
    color = (light.color.r, light.color.g, light.color.b)
    state = ScanState()
    xs, ys = scan_bounds(light)
    written = 0

    for x in xs:
        for y in ys:
            dist = get_light_distance(x, y, light)
            if dist > light.radius:
                continue

            modifier = scan_pixel(state, light, y, dist)

            if 0 <= x < width and 0 <= y < height:
                pixels[y, x, :3] = blend_pixel(pixels[y, x], color, modifier)
                written += 1

    return written


def apply_lights(image, lights):
    """
    Lights image in place with every light in lights, in order, and returns it.
    image is a numpy array (height, width, 3|4) or a pygame.Surface.
    """
    pixels = pixel_view(image)
    try:
        for light in lights:
            written = apply_light(pixels, light)
            logger.debug("Applied light (%s): %d pixels written", light, written)
    finally:
        # Releases the surface lock for pygame images
        del pixels
    return image


def apply_lights_copy(image, lights):
    """Like apply_lights, but leaves image untouched and returns a lit copy."""
    return apply_lights(copy_image(image), lights)
