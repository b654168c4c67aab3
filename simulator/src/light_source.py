import pygame


class Extent:
    """Axis-aligned bounding box of the ellipse a light covers."""

    def __init__(self, left: float, top: float, width: float, height: float):
        self.left = left
        self.top = top
        self.width = width
        self.height = height

    @property
    def center(self):
        return (self.left + self.width / 2, self.top + self.height / 2)

    def contains(self, px: float, py: float) -> bool:
        if self.width <= 0 or self.height <= 0:
            return False
        cx, cy = self.center
        nx = (px - cx) / (self.width / 2)
        ny = (py - cy) / (self.height / 2)
        return nx * nx + ny * ny <= 1.0

    def __eq__(self, other):
        if not isinstance(other, Extent):
            return NotImplemented
        return (self.left, self.top, self.width, self.height) == (
            other.left, other.top, other.width, other.height
        )

    def __repr__(self):
        return f"Extent({self.left}, {self.top}, {self.width}, {self.height})"


def compute_extent(x: float, y: float, r: float) -> Extent:
    return Extent(x - r / 2, y - r / 2, r / 2, r / 2)


class Light:
    def __init__(self, x: float, y: float, radius: float, color, brightness: float):
        """
        x, y: centre of the light in pixels.
        radius: how far the light reaches, also the half-size of the scanned box.
        color: RGB added to every lit pixel (tuple or pygame.Color).
        brightness: how much the falloff modifier changes per lit pixel.
        """
        self._x = float(x)
        self._y = float(y)
        self._radius = float(radius)
        self._color = pygame.Color(color)
        self._brightness = float(brightness)
        self._update_extent()

    @property
    def x(self):
        return self._x

    @x.setter
    def x(self, value):
        self._x = float(value)
        self._update_extent()

    @property
    def y(self):
        return self._y

    @y.setter
    def y(self, value):
        self._y = float(value)
        self._update_extent()

    @property
    def radius(self):
        return self._radius

    @radius.setter
    def radius(self, value):
        self._radius = float(value)
        self._update_extent()

    @property
    def color(self):
        return self._color

    @color.setter
    def color(self, value):
        self._color = pygame.Color(value)

    @property
    def brightness(self):
        return self._brightness

    @brightness.setter
    def brightness(self, value):
        self._brightness = float(value)

    @property
    def extent(self) -> Extent:
        # Not used by the lighting engine, which scans a 2r box of its own
        return self._extent

    def move_to(self, x, y):
        self._x = float(x)
        self._y = float(y)
        self._update_extent()

    def _update_extent(self):
        self._extent = compute_extent(self._x, self._y, self._radius)

    def __str__(self):
        return f"x: {self._x}, y: {self._y}, r: {self._radius}, color: {tuple(self._color)[:3]}"

    def __repr__(self):
        return (
            f"Light(x={self._x}, y={self._y}, radius={self._radius}, "
            f"color={tuple(self._color)[:3]}, brightness={self._brightness})"
        )


LIGHT_SOURCES : list[Light] = [
    #Light(x=200, y=150, radius=80, color=(255, 200, 100), brightness=0.002),
    #Light(x=600, y=400, radius=120, color=(80, 120, 255), brightness=0.001),
]
