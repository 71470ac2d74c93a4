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

Analysis utilities for resolved frames:

- Hit/miss statistics of a fan (numpy)
- Closed regions formed by a wall set, and whether a point is enclosed (Shapely)
- CSV export of per-ray hits
"""

from .frame_stats import (
    FrameStatistics,
    frame_statistics,
    hit_distances,
    hits_to_array,
    enclosed_regions,
    walls_enclose,
)
from .saving import (
    save_hits_csv,
    save_frame_csv,
)

__all__ = [
    'FrameStatistics',
    'frame_statistics',
    'hit_distances',
    'hits_to_array',
    'enclosed_regions',
    'walls_enclose',
    'save_hits_csv',
    'save_frame_csv',
]
