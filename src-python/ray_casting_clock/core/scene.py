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
import random
from dataclasses import dataclass
from typing import List, Optional

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from ray_casting_clock.core.geometry import geometry, Point
    from ray_casting_clock.core.segment import Segment
    from ray_casting_clock.core.emitter import Emitter
    from ray_casting_clock.core import constants
else:
    from .geometry import geometry, Point
    from .segment import Segment
    from .emitter import Emitter
    from . import constants


@dataclass
class ClockHands:
    """
    Anchor points of the two clock hands.

    Attributes:
        hour: Point on the horizontal centre line, x proportional to the hour of day
        minute: Point on the vertical centre line, y proportional to the minute
    """
    hour: Point
    minute: Point


@dataclass
class Frame:
    """
    Geometry produced by one scene step.

    Attributes:
        elapsed_ms: Frame clock value the step was computed for
        position: Emitter position for this frame
        hits: Nearest hit per ray, in fan order (None for misses)
        hands: Clock hand anchors, if hour and minute were given
    """
    elapsed_ms: float
    position: Point
    hits: List[Optional[Point]]
    hands: Optional[ClockHands] = None

    @property
    def hit_count(self) -> int:
        return sum(1 for h in self.hits if h is not None)


class ClockScene:
    """
    Headless driver for the ray casting clock.

    Owns the wall layout and the emitter, and moves the emitter around the
    canvas centre as a function of an explicit frame clock. It never reads
    the wall clock and never draws: callers pass the elapsed time (and
    optionally the hour and minute) and get plain geometry back.

    Wall layout:
        - `hour_walls` vertical walls at x = i * width / hour_walls, centred
          on the horizontal middle line, each of random length in
          [HOUR_WALL_MIN_LENGTH, HOUR_WALL_MAX_LENGTH)
        - four boundary walls just outside the canvas. Top and left are
          visible; right and bottom are invisible but still block rays.

    Attributes:
        walls (list): Hour walls followed by the four boundary walls. Rebuilt
            whenever width, height or hour_walls is changed
        emitter (Emitter): The moving emitter
        seed: Seed of the layout random generator (None = nondeterministic)
        verbose (int): Verbosity level
            0 = silent (no debug output)
            1 = one line per step
            2 = also the emitter's per-ray output
    """

    def __init__(
        self,
        width: float = constants.DEFAULT_CANVAS_SIZE,
        height: float = constants.DEFAULT_CANVAS_SIZE,
        hour_walls: int = constants.DEFAULT_HOUR_WALLS,
        seed: Optional[int] = None,
        angular_resolution: float = constants.DEFAULT_ANGULAR_RESOLUTION,
        verbose: int = 0
    ) -> None:
        self._built = False
        self.width = width
        self.height = height
        self.hour_walls = hour_walls
        self._orbit_radius_fraction = constants.ORBIT_RADIUS_FRACTION
        self.seed = seed
        self.verbose: int = verbose
        self.walls: List[Segment] = []
        self._rebuild_walls()
        self._built = True
        center = self.center
        self.emitter = Emitter(center.x, center.y, angular_resolution, verbose=max(verbose - 1, 0))

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        if not isinstance(value, (int, float)) or not value > 0:
            raise ValueError(f"width must be a positive number, got {value}")
        self._width = value
        self._layout_changed()

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        if not isinstance(value, (int, float)) or not value > 0:
            raise ValueError(f"height must be a positive number, got {value}")
        self._height = value
        self._layout_changed()

    @property
    def hour_walls(self) -> int:
        return self._hour_walls

    @hour_walls.setter
    def hour_walls(self, value: int) -> None:
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"hour_walls must be a non-negative integer, got {value}")
        self._hour_walls = value
        self._layout_changed()

    @property
    def orbit_radius_fraction(self) -> float:
        """Orbit radius as a fraction of min(width, height)."""
        return self._orbit_radius_fraction

    @orbit_radius_fraction.setter
    def orbit_radius_fraction(self, value: float) -> None:
        if not isinstance(value, (int, float)) or not 0 < value <= 0.5:
            raise ValueError(f"orbit_radius_fraction must be in (0, 0.5], got {value}")
        self._orbit_radius_fraction = value

    @property
    def center(self) -> Point:
        return geometry.point(self.width / 2, self.height / 2)

    @property
    def orbit_radius(self) -> float:
        return min(self.width, self.height) * self._orbit_radius_fraction

    # =========================================================================
    # Layout
    # =========================================================================

    def _layout_changed(self) -> None:
        # Setters run before construction finishes; the constructor builds once at the end
        if self._built:
            self._rebuild_walls()

    def _rebuild_walls(self) -> None:
        """
        Reseed the layout generator and rebuild `walls` for the current size.

        A seeded scene that is resized gets the same layout as a scene built
        at that size with the same seed.
        """
        self._rng = random.Random(self.seed)
        self.walls = self.build_walls()
        if self.verbose >= 1:
            print(f"ClockScene: built {len(self.walls)} walls for a {self.width}x{self.height} canvas")

    def build_walls(self) -> List[Segment]:
        """
        Build the wall list: hour walls first, then the boundary.

        Hour wall lengths are drawn from the scene's random generator, so
        scenes with the same seed get the same layout.
        """
        walls: List[Segment] = []
        for i in range(self.hour_walls):
            size = self._rng.uniform(constants.HOUR_WALL_MIN_LENGTH, constants.HOUR_WALL_MAX_LENGTH)
            x = i * self.width / self.hour_walls
            walls.append(Segment(x, self.height / 2 - size / 2, x, self.height / 2 + size / 2))
        walls.extend(self.boundary_walls())
        return walls

    def boundary_walls(self) -> List[Segment]:
        """The four walls enclosing the canvas."""
        lo = constants.BOUNDARY_INSET
        w = self.width
        h = self.height
        return [
            Segment(lo, lo, w, lo, visible=True),     # top
            Segment(w, lo, w, h, visible=False),      # right
            Segment(w, h, lo, h, visible=False),      # bottom
            Segment(lo, h, lo, lo, visible=True),     # left
        ]

    @property
    def visible_walls(self) -> List[Segment]:
        return [w for w in self.walls if w.visible]

    # =========================================================================
    # Frame clock arithmetic
    # =========================================================================

    def orbit_position(self, elapsed_ms: float, speed: float = 1.0) -> Point:
        """
        Emitter position on its orbit around the canvas centre.

        One full turn every ORBIT_PERIOD_MS milliseconds at speed 1.

        Args:
            elapsed_ms: Frame clock in milliseconds
            speed: Turns per period

        Returns:
            Point on the orbit
        """
        angle = elapsed_ms / constants.ORBIT_PERIOD_MS * math.pi * 2.0 * speed
        center = self.center
        radius = self.orbit_radius
        return geometry.point(center.x + math.cos(angle) * radius, center.y + math.sin(angle) * radius)

    def clock_hands(self, hour: float, minute: float) -> ClockHands:
        """
        Map a time of day onto the two hand anchors.

        Args:
            hour: Hour of day in [0, 24)
            minute: Minute in [0, 60)

        Raises:
            ValueError: If hour or minute is out of range.
        """
        if not 0 <= hour < constants.HOURS_PER_DAY:
            raise ValueError(f"hour must be in [0, {constants.HOURS_PER_DAY}), got {hour}")
        if not 0 <= minute < constants.MINUTES_PER_HOUR:
            raise ValueError(f"minute must be in [0, {constants.MINUTES_PER_HOUR}), got {minute}")
        return ClockHands(
            hour=geometry.point(hour / constants.HOURS_PER_DAY * self.width, self.height / 2),
            minute=geometry.point(self.width / 2, minute / constants.MINUTES_PER_HOUR * self.height),
        )

    def step(
        self,
        elapsed_ms: float,
        hour: Optional[float] = None,
        minute: Optional[float] = None,
        speed: float = 1.0
    ) -> Frame:
        """
        Advance the scene to `elapsed_ms` and cast the emitter's fan.

        Args:
            elapsed_ms: Frame clock in milliseconds
            hour: Optional hour of day for the hand anchors
            minute: Optional minute for the hand anchors
            speed: Orbit speed (turns per minute)

        Returns:
            Frame with the emitter position and its per-ray hits
        """
        position = self.orbit_position(elapsed_ms, speed)
        self.emitter.update(position.x, position.y)
        hits = self.emitter.resolve(self.walls)

        hands = None
        if hour is not None and minute is not None:
            hands = self.clock_hands(hour, minute)

        frame = Frame(elapsed_ms=elapsed_ms, position=position, hits=hits, hands=hands)
        if self.verbose >= 1:
            print(f"ClockScene step t={elapsed_ms:.1f}ms: emitter at ({position.x:.2f}, {position.y:.2f}), "
                  f"{frame.hit_count}/{len(hits)} rays hit")
        return frame

    def __repr__(self) -> str:
        return (f"ClockScene(width={self.width}, height={self.height}, "
                f"walls={len(self.walls)}, rays={self.emitter.ray_count})")


# Example usage and testing
if __name__ == "__main__":
    scene = ClockScene(seed=7, verbose=1)
    print(scene)
    for t in (0.0, 15000.0, 30000.0):
        frame = scene.step(t, hour=14, minute=30)
        print(f"  hands: {frame.hands}")
