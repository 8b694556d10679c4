"""Procedural island generation.

The island is a set of concentric bands around the map center: a wooded,
rocky core, a grass ring, a beach, and open water beyond. Each cell adds its
own random jitter to the band radii so the coastline is ragged.
"""

from __future__ import annotations

import math
import random

from fridays_lies.core.constants import (
    GRASS_RADIUS,
    RADIUS_JITTER,
    ROCK_CORE_RADIUS,
    ROCK_THRESHOLD,
    SAND_RADIUS,
    WRECKAGE_OFFSET_Y,
)
from fridays_lies.core.exceptions import MapGenerationError
from fridays_lies.core.logging import get_logger
from fridays_lies.models.enums import TileType
from fridays_lies.models.world import WorldGrid


logger = get_logger(__name__)


def classify_cell(distance: float, jitter: float, rng: random.Random) -> TileType:
    """Pick the terrain band for a cell at ``distance`` from the center.

    Args:
        distance: Euclidean distance from the map center.
        jitter: Random offset in [0, 5) added to every band radius.
        rng: Random source, drawn from only for core cells.

    Returns:
        The tile kind for the cell.
    """
    if distance < ROCK_CORE_RADIUS + jitter:
        return TileType.ROCK if rng.random() > ROCK_THRESHOLD else TileType.TREE
    if distance < GRASS_RADIUS + jitter:
        return TileType.GRASS
    if distance < SAND_RADIUS + jitter:
        return TileType.SAND
    return TileType.WATER


def generate_map(width: int, height: int, rng: random.Random | None = None) -> WorldGrid:
    """Generate an island grid.

    Args:
        width: Grid width in tiles.
        height: Grid height in tiles.
        rng: Random source. A fresh unseeded one is used when omitted.

    Returns:
        Row-major tuple grid of tiles with the wreckage landmark placed
        below the center when it fits.

    Raises:
        MapGenerationError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise MapGenerationError(
            "Map dimensions must be positive",
            width=width,
            height=height,
        )
    rng = rng or random.Random()

    center_x = width / 2
    center_y = height / 2
    rows: list[list[TileType]] = []
    for y in range(height):
        row: list[TileType] = []
        for x in range(width):
            distance = math.hypot(x - center_x, y - center_y)
            jitter = rng.random() * RADIUS_JITTER
            row.append(classify_cell(distance, jitter, rng))
        rows.append(row)

    wreck_x = width // 2
    wreck_y = height // 2 + WRECKAGE_OFFSET_Y
    if 0 <= wreck_y < height:
        rows[wreck_y][wreck_x] = TileType.WRECKAGE
    else:
        logger.debug("Wreckage does not fit on map", width=width, height=height)

    return tuple(tuple(row) for row in rows)


def count_tiles(grid: WorldGrid) -> dict[TileType, int]:
    """Count cells of every tile kind, including kinds that do not occur."""
    counts = {tile: 0 for tile in TileType}
    for row in grid:
        for tile in row:
            counts[tile] += 1
    return counts


__all__ = [
    "classify_cell",
    "generate_map",
    "count_tiles",
]
