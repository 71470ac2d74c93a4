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

from .geometry import geometry, Point, Geometry, InvalidGeometry
from . import constants
from .segment import Segment
from .ray import Ray
from .emitter import Emitter, Particle
from .scene import ClockScene, Frame, ClockHands

__all__ = [
    'geometry', 'Point', 'Geometry', 'InvalidGeometry',
    'constants',
    'Segment',
    'Ray',
    'Emitter', 'Particle',
    'ClockScene', 'Frame', 'ClockHands',
]
