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

"""
Constants used by the ray casting engine and the clock scene.

Kept in one module so the emitter, the scene and the analysis helpers can
share them without circular imports.
"""

# Angular step between two neighbouring rays of an emitter fan, in degrees.
# 0.5 degree gives 720 rays per full turn.
DEFAULT_ANGULAR_RESOLUTION = 0.5
FULL_TURN_DEGREES = 360.0

# Clock scene layout
DEFAULT_CANVAS_SIZE = 512
DEFAULT_HOUR_WALLS = 24
HOUR_WALL_MIN_LENGTH = 100
HOUR_WALL_MAX_LENGTH = 200

# Boundary walls sit one unit outside the canvas so rays reach the edge pixels
BOUNDARY_INSET = -1

# Emitter orbit: radius as a fraction of min(width, height), one turn per minute
ORBIT_RADIUS_FRACTION = 0.40
ORBIT_PERIOD_MS = 60000.0

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
