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
from typing import Optional

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from ray_casting_clock.core.geometry import geometry, Point, InvalidGeometry
    from ray_casting_clock.core.segment import Segment
else:
    from .geometry import geometry, Point, InvalidGeometry
    from .segment import Segment


class Ray:
    """
    A half line used to probe walls.

    A ray is defined by an origin and a direction. The direction must be
    non-zero but does not have to be unit length; `look_at()` and
    `from_angle()` both produce unit directions.

    Origin and direction are updated in place so an emitter can move its
    whole fan every frame without allocating new rays.

    Attributes:
        origin (Point): Starting point
        direction (Point): Direction vector
    """

    def __init__(self, origin: Point, direction: Point) -> None:
        """
        Initialize a ray.

        Both points are copied, so later in-place updates never touch the
        caller's objects.

        Args:
            origin (Point): Starting point
            direction (Point): Direction vector (non-zero)

        Raises:
            InvalidGeometry: If the direction is the zero vector.
        """
        if direction.x == 0 and direction.y == 0:
            raise InvalidGeometry("Ray direction must be non-zero")
        self.origin: Point = origin.copy()
        self.direction: Point = direction.copy()

    @classmethod
    def from_angle(cls, origin: Point, angle: float) -> 'Ray':
        """
        Create a ray with a unit direction at `angle` radians from the +x axis.
        """
        return cls(origin, geometry.from_angle(angle))

    @property
    def angle(self) -> float:
        """Direction angle in radians, in (-pi, pi]."""
        return math.atan2(self.direction.y, self.direction.x)

    def set_origin(self, x: float, y: float) -> None:
        """Move the ray without changing its direction."""
        self.origin.x = x
        self.origin.y = y

    def look_at(self, x: float, y: float) -> None:
        """
        Aim the ray at (x, y). The new direction is normalized.

        Raises:
            InvalidGeometry: If (x, y) is the ray origin.
        """
        target = geometry.point(x - self.origin.x, y - self.origin.y)
        if target.x == 0 and target.y == 0:
            raise InvalidGeometry(f"Cannot aim a ray at its own origin ({x}, {y})")
        unit = geometry.normalize_vec(target)
        self.direction.x = unit.x
        self.direction.y = unit.y

    def point_at(self, distance: float) -> Point:
        """Point at `distance` along the ray, measured in direction lengths."""
        return geometry.point(
            self.origin.x + self.direction.x * distance,
            self.origin.y + self.direction.y * distance
        )

    def cast(self, wall: Segment) -> Optional[Point]:
        """
        Intersect the ray with a wall.

        Args:
            wall (Segment): The wall to test

        Returns:
            The intersection point, or None if the ray misses the wall, is
            parallel to it, or only touches an endpoint.
        """
        return geometry.ray_segment_intersection(self.origin, self.direction, wall.a, wall.b)

    def copy(self) -> 'Ray':
        """
        Create a copy of this ray that shares no state with the original.
        """
        return Ray(self.origin, self.direction)

    def __repr__(self) -> str:
        return (f"Ray(origin=({self.origin.x}, {self.origin.y}), "
                f"direction=({self.direction.x:.6f}, {self.direction.y:.6f}))")


# Example usage and testing
if __name__ == "__main__":
    print("Testing Ray class...\n")

    wall = Segment(0, 0, 10, 0)
    ray = Ray(geometry.point(5, 5), geometry.point(0, -1))
    print(f"  {ray}")
    print(f"  Hit on {wall}: {ray.cast(wall)}")

    ray.look_at(20, 5)
    print(f"  After look_at(20, 5): {ray}")
    print(f"  Hit on {wall}: {ray.cast(wall)}")
