from math import isfinite
from collections import namedtuple


class Rectangle(namedtuple('Rectangle', ('x', 'y', 'width', 'height'))):
    '''
    Axis-aligned rectangle anchored at its corner (x, y).

    Rectangles are values: they are never modified in place, an update
    replaces the stored rectangle with a new one.
    '''
    __slots__ = ()

    def __new__(cls, x, y, width, height):
        values = (x, y, width, height)
        if not all(map(isfinite, values)):
            raise ValueError(F'Rectangle coordinates must be finite, got {values}')
        if width <= 0 or height <= 0:
            raise ValueError(F'Rectangle size must be positive, got {width}x{height}')

        return super().__new__(cls, x, y, width, height)


    @classmethod
    def from_json(cls, obj):
        if isinstance(obj, dict):
            return cls(obj['x'], obj['y'], obj['width'], obj['height'])

        x, y, width, height = obj
        return cls(x, y, width, height)


    def contains(self, px, py):
        # closed on all four edges
        return self.x <= px <= self.x + self.width \
                and self.y <= py <= self.y + self.height


    def overlaps(self, other):
        return not (self.x + self.width < other.x
                or self.x > other.x + other.width
                or self.y + self.height < other.y
                or self.y > other.y + other.height)


    def __str__(self):
        return F'Rectangle at ({self.x:.2f}, {self.y:.2f}): {self.width:.2f}x{self.height:.2f}'
