"""
Copyright 2026 ray-casting-clock authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from typing import Dict, Iterator, Optional
from shapely.geometry import Point as ShapelyPoint


class InvalidGeometry(ValueError):
    """
    Raised when a geometric primitive cannot be built from the given values,
    e.g. a ray with a zero-length direction.
    """


class Point:
    """
    A point (or vector) in 2D space.
    Can be converted to/from Shapely Point objects.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}

    def copy(self) -> 'Point':
        return Point(self.x, self.y)

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> 'Point':
        return Point(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Length of the point treated as a vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: 'Point') -> float:
        return Geometry.distance(self, other)

    def normalized(self) -> 'Point':
        """
        Unit vector with the same direction.

        Raises:
            InvalidGeometry: If the vector has zero length.
        """
        return Geometry.normalize_vec(self)

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


class Geometry:
    """
    Basic geometric operations on points/vectors, plus the ray vs. segment
    intersection primitive used by every ray cast.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        """
        Create a point.

        Args:
            x: The x-coordinate of the point.
            y: The y-coordinate of the point.

        Returns:
            Point object
        """
        return Point(x, y)

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        """
        Calculate the distance between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Distance between points
        """
        return math.sqrt(Geometry.distance_squared(p1, p2))

    @staticmethod
    def distance_squared(p1: Point, p2: Point) -> float:
        """
        Calculate the squared distance between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Squared distance between points
        """
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def midpoint(p1: Point, p2: Point) -> Point:
        """Midpoint between two points."""
        return Geometry.point((p1.x + p2.x) * 0.5, (p1.y + p2.y) * 0.5)

    @staticmethod
    def normalize_vec(p1: Point) -> Point:
        """
        Normalize the given point as if it were a vector.

        Args:
            p1: Point (as vector)

        Returns:
            Normalized vector

        Raises:
            InvalidGeometry: If the vector has zero length.
        """
        len_val = Geometry.distance(Geometry.point(0, 0), p1)
        if len_val == 0:
            raise InvalidGeometry(f"Cannot normalize a zero-length vector {p1}")
        return Geometry.point(p1.x / len_val, p1.y / len_val)

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> Point:
        """
        Vector of the given length pointing at `angle` radians from the +x axis.
        """
        return Geometry.point(length * math.cos(angle), length * math.sin(angle))

    @staticmethod
    def ray_segment_intersection(
        origin: Point,
        direction: Point,
        a: Point,
        b: Point
    ) -> Optional[Point]:
        """
        Intersect a ray with a finite segment.

        The ray is the half line starting at `origin` along `direction`
        (direction need not be unit length). The segment runs from `a` to `b`.

        With (x1, y1)-(x2, y2) the segment and (x3, y3)-(x4, y4) two points of
        the ray line, t is the position along the segment and u the position
        along the ray. A hit needs 0 < t < 1 and u > 0, both strict: grazing a
        segment endpoint or starting exactly on the segment is not a hit.

        Parallel and collinear configurations give den == 0 and no hit. The
        comparison is exact, so nearly parallel lines can still produce very
        distant hits.

        Args:
            origin: Ray start
            direction: Ray direction (non-zero)
            a: First segment endpoint
            b: Second segment endpoint

        Returns:
            Intersection point, or None
        """
        x1, y1 = a.x, a.y
        x2, y2 = b.x, b.y
        x3, y3 = origin.x, origin.y
        x4 = origin.x + direction.x
        y4 = origin.y + direction.y

        den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        if den == 0:
            return None

        t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
        u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
        if 0 < t < 1 and u > 0:
            return Geometry.point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))
        return None


# Create a singleton instance for convenience
geometry = Geometry()


# Example usage and testing
if __name__ == "__main__":
    origin = geometry.point(5, 5)
    direction = geometry.point(0, -1)
    a = geometry.point(0, 0)
    b = geometry.point(10, 0)

    hit = geometry.ray_segment_intersection(origin, direction, a, b)
    print(f"Ray from {origin} along {direction} hits {a}-{b} at {hit}")

    miss = geometry.ray_segment_intersection(geometry.point(0, 0), geometry.point(1, 0), a, b)
    print(f"Collinear ray: {miss}")

    print(f"Normalized (3, 4): {geometry.normalize_vec(geometry.point(3, 4))}")
