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

Ray Casting Clock
=================

A 2D ray casting engine: line segment walls, and an emitter that casts a
fan of rays in every direction and finds the nearest wall hit of each ray.

Main modules:
- core: Geometry, Segment, Ray, Emitter and the headless clock scene driver
- analysis: Frame statistics, wall enclosure checks (Shapely) and CSV export

Quick start:
    from ray_casting_clock import Emitter, Segment

    walls = [Segment(0, 0, 100, 0), Segment(100, 0, 100, 100)]
    emitter = Emitter(50, 50)
    emitter.update(40, 60)
    hits = emitter.resolve(walls)
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.geometry import Point, InvalidGeometry
from .core.segment import Segment
from .core.ray import Ray
from .core.emitter import Emitter, Particle
from .core.scene import ClockScene, Frame, ClockHands

__all__ = [
    'Point',
    'InvalidGeometry',
    'Segment',
    'Ray',
    'Emitter',
    'Particle',
    'ClockScene',
    'Frame',
    'ClockHands',
    '__version__',
]
