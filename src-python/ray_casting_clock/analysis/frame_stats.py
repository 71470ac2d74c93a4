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

Frame analysis helpers:
- Hit/miss statistics of one resolved fan
- Enclosure test: does a wall set close around a point?

The enclosure test uses Shapely to node the walls and rebuild the closed
regions they bound.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np
from shapely.geometry import Polygon
from shapely.ops import polygonize, unary_union

from ..core.geometry import Point
from ..core.segment import Segment


HitsLike = Union[Sequence[Optional[Point]], np.ndarray]


def hits_to_array(hits: HitsLike) -> np.ndarray:
    """
    Convert resolved hits to an (N, 2) float array with NaN rows for misses.

    Accepts either the list returned by `Emitter.resolve()` or the array
    returned by `Emitter.resolve_array()`.
    """
    if isinstance(hits, np.ndarray):
        return hits.reshape(-1, 2).astype(float)
    arr = np.full((len(hits), 2), np.nan)
    for i, hit in enumerate(hits):
        if hit is not None:
            arr[i, 0] = hit.x
            arr[i, 1] = hit.y
    return arr


@dataclass
class FrameStatistics:
    """
    Summary of one resolved fan.

    Attributes:
        ray_count: Number of rays in the fan
        hit_count: Rays that hit a wall
        miss_count: Rays that hit nothing
        coverage: hit_count / ray_count (0.0 for an empty fan)
        min_distance: Shortest hit distance, None if nothing was hit
        max_distance: Longest hit distance, None if nothing was hit
        mean_distance: Mean hit distance, None if nothing was hit
    """
    ray_count: int
    hit_count: int
    miss_count: int
    coverage: float
    min_distance: Optional[float] = None
    max_distance: Optional[float] = None
    mean_distance: Optional[float] = None

    @property
    def fully_covered(self) -> bool:
        """True when every ray hit a wall (and there is at least one ray)."""
        return self.ray_count > 0 and self.miss_count == 0


def hit_distances(position: Point, hits: HitsLike) -> np.ndarray:
    """
    Distance from `position` to each hit, NaN for misses.
    """
    arr = hits_to_array(hits)
    return np.hypot(arr[:, 0] - position.x, arr[:, 1] - position.y)


def frame_statistics(position: Point, hits: HitsLike) -> FrameStatistics:
    """
    Compute hit statistics for one resolved fan.

    Args:
        position: Emitter position the fan was cast from
        hits: Output of `Emitter.resolve()` or `Emitter.resolve_array()`

    Returns:
        FrameStatistics
    """
    distances = hit_distances(position, hits)
    ray_count = int(distances.shape[0])
    hit_mask = ~np.isnan(distances)
    hit_count = int(hit_mask.sum())

    stats = FrameStatistics(
        ray_count=ray_count,
        hit_count=hit_count,
        miss_count=ray_count - hit_count,
        coverage=hit_count / ray_count if ray_count else 0.0,
    )
    if hit_count:
        hit_d = distances[hit_mask]
        stats.min_distance = float(hit_d.min())
        stats.max_distance = float(hit_d.max())
        stats.mean_distance = float(hit_d.mean())
    return stats


def enclosed_regions(walls: Sequence[Segment]) -> List[Polygon]:
    """
    Closed regions bounded by the walls.

    Walls are noded against each other first, so regions formed by walls
    that cross (rather than meet end to end) are found too. Zero-length
    walls are ignored.
    """
    lines = [w.to_shapely() for w in walls if not w.is_degenerate]
    if not lines:
        return []
    noded = unary_union(lines)
    return list(polygonize(noded))


def walls_enclose(walls: Sequence[Segment], x: float, y: float) -> bool:
    """
    True if (x, y) lies strictly inside a closed region bounded by the walls.

    For an emitter at such a point every ray must hit some wall, apart from
    rays that pass exactly through a wall endpoint.
    """
    probe = Point(x, y).to_shapely()
    return any(region.contains(probe) for region in enclosed_regions(walls))
