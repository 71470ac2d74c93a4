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
from typing import List, Optional, Sequence, Tuple

import numpy as np

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from ray_casting_clock.core.geometry import geometry, Point
    from ray_casting_clock.core.ray import Ray
    from ray_casting_clock.core.segment import Segment
    from ray_casting_clock.core.constants import DEFAULT_ANGULAR_RESOLUTION, FULL_TURN_DEGREES
else:
    from .geometry import geometry, Point
    from .ray import Ray
    from .segment import Segment
    from .constants import DEFAULT_ANGULAR_RESOLUTION, FULL_TURN_DEGREES


class Emitter:
    """
    A moving point that casts a fixed fan of rays in every direction.

    The fan holds one ray every `angular_resolution` degrees, starting at 0
    and covering [0, 360). The ray directions are chosen at construction and
    never change: `update()` only moves the emitter and the ray origins.

    Each frame the caller moves the emitter and asks for the nearest wall hit
    of every ray:

        emitter.update(x, y)
        hits = emitter.resolve(walls)

    Attributes:
        position (Point): Current emitter position
        rays (list): The fan, in angular order
        verbose (int): Verbosity level
            0 = silent (no debug output)
            1 = one summary line per resolve
            2 = one line per ray
    """

    def __init__(
        self,
        x: float,
        y: float,
        angular_resolution: float = DEFAULT_ANGULAR_RESOLUTION,
        ray_count: Optional[int] = None,
        verbose: int = 0
    ) -> None:
        """
        Initialize an emitter.

        Args:
            x (float): Starting x position
            y (float): Starting y position
            angular_resolution (float): Degrees between neighbouring rays
                (default: 0.5, i.e. 720 rays)
            ray_count (int or None): If given, overrides `angular_resolution`
                with an evenly spaced fan of this many rays. 0 gives an empty fan.
            verbose (int): Verbosity level (default: 0)

        Raises:
            ValueError: If the resolution is not a number in (0, 360] or
                ray_count is not a non-negative integer.
        """
        self.position: Point = geometry.point(x, y)
        self.verbose: int = verbose

        if ray_count is not None:
            if not isinstance(ray_count, int) or isinstance(ray_count, bool) or ray_count < 0:
                raise ValueError(f"ray_count must be a non-negative integer, got {ray_count!r}")
            self._angular_resolution = FULL_TURN_DEGREES / ray_count if ray_count else FULL_TURN_DEGREES
            count = ray_count
        else:
            self._angular_resolution = self._validate_resolution(angular_resolution)
            # Same sampling as stepping a from 0 while a < 360
            count = math.ceil(FULL_TURN_DEGREES / self._angular_resolution - 1e-9)

        self._angles: Tuple[float, ...] = tuple(i * self._angular_resolution for i in range(count))
        self.rays: List[Ray] = [
            Ray.from_angle(geometry.point(x, y), math.radians(a)) for a in self._angles
        ]
        # Direction arrays for resolve_array()
        self._dir_x = np.array([ray.direction.x for ray in self.rays], dtype=float)
        self._dir_y = np.array([ray.direction.y for ray in self.rays], dtype=float)

    @staticmethod
    def _validate_resolution(value: float) -> float:
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value) or value <= 0 or value > FULL_TURN_DEGREES:
            raise ValueError(
                f"angular_resolution must be a number in (0, {FULL_TURN_DEGREES}], got {value}"
            )
        return float(value)

    @property
    def angular_resolution(self) -> float:
        """Degrees between neighbouring rays. Fixed for the emitter's lifetime."""
        return self._angular_resolution

    @property
    def ray_count(self) -> int:
        return len(self.rays)

    @property
    def angles(self) -> Tuple[float, ...]:
        """Ray angles in degrees, in fan order."""
        return self._angles

    @property
    def directions(self) -> Tuple[Tuple[float, float], ...]:
        """Ray directions as (dx, dy) pairs, in fan order."""
        return tuple((ray.direction.x, ray.direction.y) for ray in self.rays)

    def update(self, x: float, y: float) -> None:
        """
        Move the emitter and every ray origin to (x, y). Directions are unchanged.
        """
        self.position.x = x
        self.position.y = y
        for ray in self.rays:
            ray.set_origin(x, y)

    def _nearest_hit(self, ray: Ray, walls: Sequence[Segment]) -> Tuple[Optional[Point], float]:
        closest: Optional[Point] = None
        record = math.inf
        for wall in walls:
            pt = ray.cast(wall)
            if pt is not None:
                d = geometry.distance_squared(self.position, pt)
                if d < record:
                    record = d
                    closest = pt
        return closest, record

    def resolve(self, walls: Sequence[Segment]) -> List[Optional[Point]]:
        """
        Find the nearest wall hit of every ray.

        Every ray is tested against every wall; the hit closest to the
        emitter position wins. On an exact tie the wall listed first wins.

        Args:
            walls: The wall set. Read only.

        Returns:
            list: One entry per ray, in fan order. Each entry is the nearest
            intersection Point, or None when the ray hits nothing.
        """
        hits: List[Optional[Point]] = []
        for i, ray in enumerate(self.rays):
            closest, record = self._nearest_hit(ray, walls)
            hits.append(closest)
            if self.verbose >= 2:
                if closest is None:
                    print(f"  ray {i} ({self._angles[i]:.2f} deg): no hit")
                else:
                    print(f"  ray {i} ({self._angles[i]:.2f} deg): hit ({closest.x:.4f}, {closest.y:.4f}) "
                          f"at distance {math.sqrt(record):.4f}")

        if self.verbose >= 1:
            hit_count = sum(1 for h in hits if h is not None)
            print(f"Emitter at ({self.position.x:.4f}, {self.position.y:.4f}): resolved "
                  f"{len(self.rays)} rays against {len(walls)} walls, {hit_count} hits")
        return hits

    def resolve_distances(self, walls: Sequence[Segment]) -> List[Optional[float]]:
        """
        Distance from the emitter to the nearest hit of every ray (None for misses).
        """
        distances: List[Optional[float]] = []
        for ray in self.rays:
            closest, record = self._nearest_hit(ray, walls)
            distances.append(None if closest is None else math.sqrt(record))
        return distances

    def resolve_array(self, walls: Sequence[Segment]) -> np.ndarray:
        """
        Vectorized version of `resolve()`.

        Evaluates the ray/segment formula over every (ray, wall) pair at once
        with numpy broadcasting. Results agree with `resolve()`.

        Args:
            walls: The wall set. Read only.

        Returns:
            np.ndarray: Array of shape (ray_count, 2) holding the nearest hit
            of each ray, with NaN rows for rays that hit nothing.
        """
        n = len(self.rays)
        result = np.full((n, 2), np.nan)
        if n == 0 or len(walls) == 0:
            if self.verbose >= 1:
                print(f"Emitter: resolve_array over {n} rays and {len(walls)} walls, 0 hits")
            return result

        seg = np.array([w.coords[0] + w.coords[1] for w in walls], dtype=float)
        x1 = seg[:, 0][np.newaxis, :]
        y1 = seg[:, 1][np.newaxis, :]
        x2 = seg[:, 2][np.newaxis, :]
        y2 = seg[:, 3][np.newaxis, :]

        x3 = self.position.x
        y3 = self.position.y
        x4 = (x3 + self._dir_x)[:, np.newaxis]
        y4 = (y3 + self._dir_y)[:, np.newaxis]

        den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        with np.errstate(divide='ignore', invalid='ignore'):
            t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
            u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
            valid = (den != 0) & (t > 0) & (t < 1) & (u > 0)

            px = x1 + t * (x2 - x1)
            py = y1 + t * (y2 - y1)
            dx = px - x3
            dy = py - y3
            d2 = np.where(valid, dx * dx + dy * dy, np.inf)

        # argmin returns the first minimum, matching the first-wall-wins rule of resolve()
        nearest = np.argmin(d2, axis=1)
        rows = np.arange(n)
        hit = np.isfinite(d2[rows, nearest])
        result[hit, 0] = px[rows, nearest][hit]
        result[hit, 1] = py[rows, nearest][hit]

        if self.verbose >= 1:
            print(f"Emitter at ({x3:.4f}, {y3:.4f}): resolve_array over {n} rays and "
                  f"{len(walls)} walls, {int(hit.sum())} hits")
        return result

    def __repr__(self) -> str:
        return (f"Emitter(position=({self.position.x}, {self.position.y}), "
                f"rays={len(self.rays)}, resolution={self._angular_resolution} deg)")


# "Particle" is the name the clock scene uses for its emitter
Particle = Emitter


# Example usage and testing
if __name__ == "__main__":
    walls = [
        Segment(-10, -10, 10, -10),
        Segment(10, -10, 10, 10),
        Segment(10, 10, -10, 10),
        Segment(-10, 10, -10, -10),
    ]
    emitter = Emitter(0, 0, angular_resolution=30, verbose=2)
    print(emitter)
    emitter.resolve(walls)

    emitter.update(5, 0)
    print(emitter.resolve_array(walls))
