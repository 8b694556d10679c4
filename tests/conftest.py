"""Pytest configuration and shared fixtures.

This module provides common fixtures for the Friday's Lies test suite:
settings isolation, seeded and scripted random sources, and a builder for
small hand-made islands.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, Callable

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from fridays_lies.core.config import Settings
    from fridays_lies.models import WorldState


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from fridays_lies.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_log_context() -> Generator[None, None, None]:
    """Drop log context bound by sessions created during a test."""
    yield
    from fridays_lies.core.logging import clear_context

    clear_context()


@pytest.fixture
def settings() -> Settings:
    """Default settings with a fixed seed, independent of the environment.

    Returns:
        Settings instance.
    """
    from fridays_lies.core.config import Settings, SimulationSettings, WorldSettings

    return Settings(
        world=WorldSettings(
            map_width=50,
            map_height=50,
            crab_count=5,
            boar_count=3,
            coconut_count=10,
            max_spawn_attempts=10_000,
        ),
        simulation=SimulationSettings(ticks_per_second=60, seed=42),
    )


# =============================================================================
# Random Sources
# =============================================================================


class ScriptedRandom(random.Random):
    """Random source returning scripted values for ``random`` and ``randrange``.

    Once a script runs out its last value repeats.
    """

    def __init__(self, values: list[float] | None = None, ranges: list[int] | None = None) -> None:
        super().__init__(0)
        self._values = list(values or [0.0])
        self._ranges = list(ranges or [0])

    def random(self) -> float:
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]

    def randrange(self, *args: Any, **kwargs: Any) -> int:  # type: ignore[override]
        if len(self._ranges) > 1:
            return self._ranges.pop(0)
        return self._ranges[0]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for random sources with scripted draws."""
    return ScriptedRandom


# =============================================================================
# World Fixtures
# =============================================================================


@pytest.fixture
def make_state() -> Callable[..., WorldState]:
    """Factory building a small grass island for hand-crafted scenarios.

    Keyword Args:
        width: Grid width (default 7).
        height: Grid height (default 7).
        tiles: Mapping of (x, y) to TileType overriding the grass.
        player_pos: Player cell (default center).
        pill: Perception mode (default RED).
        real_stats: Player real stats.
        display_stats: Player display stats.
        inventory: Carried item kinds.
        **overrides: Any other WorldState field.

    Returns:
        Builder function.
    """
    from fridays_lies.models import (
        Coordinates,
        PillType,
        Player,
        Stats,
        TileType,
        WorldState,
    )

    def build(
        *,
        width: int = 7,
        height: int = 7,
        tiles: dict[tuple[int, int], TileType] | None = None,
        player_pos: tuple[int, int] | None = None,
        pill: PillType = PillType.RED,
        real_stats: Stats | None = None,
        display_stats: Stats | None = None,
        inventory: tuple = (),
        **overrides: Any,
    ) -> WorldState:
        rows = [[TileType.GRASS] * width for _ in range(height)]
        for (x, y), tile in (tiles or {}).items():
            rows[y][x] = tile
        px, py = player_pos if player_pos is not None else (width // 2, height // 2)
        player = Player(
            pos=Coordinates(x=px, y=py),
            real_stats=real_stats or Stats(health=100, hunger=80, thirst=80, stamina=100),
            display_stats=display_stats or Stats(),
            inventory=inventory,
        )
        fields: dict[str, Any] = {
            "pill": pill,
            "map": tuple(tuple(row) for row in rows),
            "width": width,
            "height": height,
            "player": player,
        }
        fields.update(overrides)
        return WorldState(**fields)

    return build


@pytest.fixture
def make_entity() -> Callable[..., Any]:
    """Factory building a creature with sensible defaults."""
    from fridays_lies.models import Coordinates, Entity, EntityType

    counter = iter(range(1_000_000))

    def build(
        x: int,
        y: int,
        *,
        kind: EntityType = EntityType.CRAB,
        **overrides: Any,
    ) -> Entity:
        fields: dict[str, Any] = {
            "id": f"entity-{next(counter)}",
            "type": kind,
            "pos": Coordinates(x=x, y=y),
            "hp": 20,
            "max_hp": 20,
            "damage": 5,
            "is_hostile": True,
            "visible_in_blue": True,
            "last_move": 0,
            "move_speed": 0,
        }
        fields.update(overrides)
        return Entity(**fields)

    return build
