import numpy as np


def get_light_distance(px: float, py: float, light) -> float:
    """Euclidean distance from the point (px, py) to the centre of light."""
    return float(np.hypot(px - light.x, py - light.y))
