"""Tests for spawn placement."""

from __future__ import annotations

import random
from uuid import UUID

import pytest

from fridays_lies.core.exceptions import NoValidSpawnError
from fridays_lies.engine.mapgen import generate_map
from fridays_lies.engine.spawning import (
    SPAWN_BLOCKERS,
    find_player_spawn,
    find_valid_spawn,
    new_id,
)
from fridays_lies.models import Coordinates, TileType


def _grid(width: int, height: int, fill: TileType, **cells: TileType):
    rows = [[fill] * width for _ in range(height)]
    for key, tile in cells.items():
        x, y = (int(part) for part in key.lstrip("c").split("_"))
        rows[y][x] = tile
    return tuple(tuple(row) for row in rows)


class TestFindValidSpawn:
    """Tests for creature and item spawns."""

    def test_never_on_blocking_tile(self, rng: random.Random) -> None:
        """Test spawns avoid water, trees and rocks."""
        grid = generate_map(50, 50, rng)

        for _ in range(200):
            pos = find_valid_spawn(grid, rng)
            assert grid[pos.y][pos.x] not in SPAWN_BLOCKERS

    def test_wreckage_is_accepted(self, rng: random.Random) -> None:
        """Test the wreckage counts as spawn ground."""
        grid = _grid(3, 3, TileType.WATER, c1_2=TileType.WRECKAGE)

        assert find_valid_spawn(grid, rng) == Coordinates(x=1, y=2)

    def test_exhaustion(self, rng: random.Random) -> None:
        """Test an all-water island fails after the attempt budget."""
        grid = _grid(4, 4, TileType.WATER)

        with pytest.raises(NoValidSpawnError) as exc_info:
            find_valid_spawn(grid, rng, max_attempts=25)

        assert exc_info.value.details["attempts"] == 25

    def test_empty_grid(self, rng: random.Random) -> None:
        """Test an empty grid fails immediately."""
        with pytest.raises(NoValidSpawnError):
            find_valid_spawn((), rng)


class TestFindPlayerSpawn:
    """Tests for the player spawn search."""

    def test_center_first(self, rng: random.Random) -> None:
        """Test a walkable center is chosen without searching."""
        grid = _grid(9, 9, TileType.GRASS)

        assert find_player_spawn(grid, rng) == Coordinates(x=4, y=4)

    def test_rock_center_is_accepted(self, rng: random.Random) -> None:
        """Test the player may start on rock."""
        grid = _grid(9, 9, TileType.WATER, c4_4=TileType.ROCK)

        assert find_player_spawn(grid, rng) == Coordinates(x=4, y=4)

    def test_moves_away_from_tree(self, scripted_rng) -> None:
        """Test the search widens when the center is a tree."""
        grid = _grid(9, 9, TileType.GRASS, c4_4=TileType.TREE)
        # radius 0 keeps the center, radius 1 with draws of 0.9 gives floor(0.4) = 0,
        # radius 2 gives floor(0.8) = 0, radius 3 gives floor(1.2) = 1.
        pos = find_player_spawn(grid, scripted_rng(values=[0.9]))

        assert pos == Coordinates(x=5, y=5)

    def test_clamped_to_border(self, scripted_rng) -> None:
        """Test far candidates are clamped onto the map."""
        grid = _grid(3, 3, TileType.TREE, c0_0=TileType.SAND)
        pos = find_player_spawn(grid, scripted_rng(values=[0.0]), max_attempts=50)

        assert pos == Coordinates(x=0, y=0)

    def test_all_water(self, rng: random.Random) -> None:
        """Test an island with no footing raises."""
        with pytest.raises(NoValidSpawnError):
            find_player_spawn(_grid(5, 5, TileType.WATER), rng, max_attempts=100)


class TestNewId:
    """Tests for seeded id generation."""

    def test_deterministic_uuid4(self) -> None:
        """Test ids are version 4 UUIDs reproducible from the seed."""
        first = new_id(random.Random(3))

        assert first == new_id(random.Random(3))
        assert UUID(first).version == 4

    def test_distinct(self, rng: random.Random) -> None:
        """Test consecutive ids differ."""
        assert new_id(rng) != new_id(rng)
