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

from typing import Any, Dict, Tuple
from shapely.geometry import LineString

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from ray_casting_clock.core.geometry import geometry, Point, InvalidGeometry
else:
    from .geometry import geometry, Point, InvalidGeometry


class Segment:
    """
    A wall: a finite line segment obstacle.

    Segments are immutable once built. The endpoints are stored as a tuple;
    `a` and `b` hand out fresh Points, so mutating them never moves the wall.

    Attributes:
        a (Point): First endpoint (a copy)
        b (Point): Second endpoint (a copy)
        visible (bool): Presentation flag for the host renderer. The geometry
            never reads it; invisible walls still block rays.

    Notes:
        - Zero-length segments are accepted and never produce an
          intersection. Use `Segment.checked()` or `validate()` to reject
          them at construction time instead.
    """

    __slots__ = ('_coords', 'visible')

    def __init__(self, x1: float, y1: float, x2: float, y2: float, visible: bool = True) -> None:
        object.__setattr__(self, '_coords', ((x1, y1), (x2, y2)))
        object.__setattr__(self, 'visible', bool(visible))

    @classmethod
    def from_points(cls, a: Point, b: Point, visible: bool = True) -> 'Segment':
        """Build a segment from two Points (the points are copied)."""
        return cls(a.x, a.y, b.x, b.y, visible)

    @classmethod
    def checked(cls, x1: float, y1: float, x2: float, y2: float, visible: bool = True) -> 'Segment':
        """
        Build a segment and reject it if it is degenerate.

        Raises:
            InvalidGeometry: If both endpoints coincide.
        """
        segment = cls(x1, y1, x2, y2, visible)
        segment.validate()
        return segment

    def validate(self) -> None:
        """
        Raises:
            InvalidGeometry: If the segment has zero length.
        """
        if self.is_degenerate:
            raise InvalidGeometry(f"Zero-length segment at ({self.a.x}, {self.a.y})")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Segment is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Segment is immutable, cannot delete '{name}'")

    @property
    def a(self) -> Point:
        return Point(*self._coords[0])

    @property
    def b(self) -> Point:
        return Point(*self._coords[1])

    @property
    def is_degenerate(self) -> bool:
        return self._coords[0] == self._coords[1]

    @property
    def length(self) -> float:
        return geometry.distance(self.a, self.b)

    @property
    def midpoint(self) -> Point:
        return geometry.midpoint(self.a, self.b)

    @property
    def coords(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Endpoints as ((x1, y1), (x2, y2))."""
        return self._coords

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString(self.coords)

    def to_dict(self) -> Dict[str, Any]:
        return {'a': self.a.to_dict(), 'b': self.b.to_dict(), 'visible': self.visible}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self._coords == other._coords and self.visible == other.visible

    def __hash__(self) -> int:
        return hash((self._coords, self.visible))

    def __repr__(self) -> str:
        hidden = "" if self.visible else ", visible=False"
        (x1, y1), (x2, y2) = self._coords
        return f"Segment(({x1}, {y1}) -> ({x2}, {y2}){hidden})"


# Example usage and testing
if __name__ == "__main__":
    wall = Segment(0, 0, 10, 0)
    print(f"{wall}: length={wall.length}, midpoint={wall.midpoint}")
    print(f"Shapely: {wall.to_shapely()}")

    try:
        Segment.checked(1, 1, 1, 1)
    except InvalidGeometry as e:
        print(f"Rejected: {e}")
