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

Export of resolved frames to CSV, one row per ray.
"""

import csv
import math
from pathlib import Path
from typing import Optional, Sequence, Union

from ..core.geometry import Point
from ..core.scene import Frame


def save_hits_csv(
    position: Point,
    hits: Sequence[Optional[Point]],
    output_path: Union[str, Path],
    filename: str = "hits.csv",
    angles: Optional[Sequence[float]] = None,
    precision_coords: int = 4,
) -> Path:
    """
    Export the per-ray hits of one frame to a CSV file.

    Columns: ray_index, angle_deg, hit, x, y, distance. Misses have empty
    x, y and distance cells.

    Args:
        position: Emitter position the fan was cast from.
        hits: Output of `Emitter.resolve()`.
        output_path: Directory where the CSV file will be saved.
        filename: Name of the output CSV file (default: "hits.csv").
        angles: Ray angles in degrees (e.g. `Emitter.angles`). If omitted
            the column is left empty.
        precision_coords: Decimal places for coordinates and distances.

    Returns:
        Path: Full path to the created CSV file.

    Raises:
        ValueError: If `angles` does not have one entry per hit.
        OSError: If the output directory cannot be created or the file cannot be written.

    Example:
        >>> emitter.update(100, 100)
        >>> hits = emitter.resolve(walls)
        >>> save_hits_csv(emitter.position, hits, "./output", angles=emitter.angles)
    """
    if angles is not None and len(angles) != len(hits):
        raise ValueError(f"Got {len(angles)} angles for {len(hits)} hits")

    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / filename

    coord_fmt = f"{{:.{precision_coords}f}}"

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['ray_index', 'angle_deg', 'hit', 'x', 'y', 'distance'])

        for i, hit in enumerate(hits):
            angle = '' if angles is None else angles[i]
            if hit is None:
                writer.writerow([i, angle, False, '', '', ''])
                continue
            distance = math.hypot(hit.x - position.x, hit.y - position.y)
            writer.writerow([
                i,
                angle,
                True,
                coord_fmt.format(hit.x),
                coord_fmt.format(hit.y),
                coord_fmt.format(distance),
            ])

    return csv_file


def save_frame_csv(
    frame: Frame,
    output_path: Union[str, Path],
    filename: Optional[str] = None,
    angles: Optional[Sequence[float]] = None,
) -> Path:
    """
    Export a `ClockScene.step()` frame. The default filename carries the
    frame clock, e.g. "frame_15000ms.csv".
    """
    if filename is None:
        filename = f"frame_{int(frame.elapsed_ms)}ms.csv"
    return save_hits_csv(frame.position, frame.hits, output_path, filename=filename, angles=angles)
