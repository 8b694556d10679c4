"""Game rule constants for the Friday's Lies simulation core.

Tunables that a player or operator may reasonably change (map size, spawn
counts, seed) live in :mod:`fridays_lies.core.config`. The values here are the
rules of the island itself.
"""

from __future__ import annotations

# =============================================================================
# Map
# =============================================================================

DEFAULT_MAP_WIDTH = 50
DEFAULT_MAP_HEIGHT = 50

ROCK_CORE_RADIUS = 8
"""Cells closer than this (plus jitter) to the center form the rocky, wooded core."""

GRASS_RADIUS = 15
SAND_RADIUS = 20

RADIUS_JITTER = 5.0
"""Upper bound (exclusive) of the per-cell random jitter added to each band radius."""

ROCK_THRESHOLD = 0.8
"""A core cell becomes rock when the random draw exceeds this value (20%)."""

WRECKAGE_OFFSET_Y = 12
"""Rows below the map center where the wreckage landmark sits."""

DEFAULT_MAX_SPAWN_ATTEMPTS = 10_000

# =============================================================================
# Time
# =============================================================================

DEFAULT_TICKS_PER_SECOND = 60

DECAY_INTERVAL_TICKS = 60
"""Stat decay is applied on every tick divisible by this value."""

DAY_CYCLE_LENGTH = 2400
"""Period of the time-of-day counter."""

INITIAL_TIME_OF_DAY = 800
"""The island wakes up in the morning."""

INITIAL_DAY = 1

# =============================================================================
# Stats
# =============================================================================

STAT_MIN = 0.0
STAT_MAX = 100.0

HUNGER_DECAY = 0.05
THIRST_DECAY = 0.08
STAMINA_REGEN = 0.5

STARVATION_DAMAGE = 0.5
DEHYDRATION_DAMAGE = 1.0

REGEN_THRESHOLD = 20.0
"""Stamina only regenerates while both hunger and thirst are above this value."""

RED_PILL_START_HEALTH = 60.0
BLUE_PILL_START_HEALTH = 100.0
START_HUNGER = 80.0
START_THIRST = 80.0
START_STAMINA = 100.0

# =============================================================================
# Perception
# =============================================================================

BLUE_HEALTH_REVEAL_BELOW = 20.0
BLUE_HEALTH_REVEAL_BONUS = 20.0
BLUE_NEED_REVEAL_BELOW = 10.0
BLUE_NEED_REVEAL_VALUE = 30.0
BLUE_NEED_BASELINE = 90.0
BLUE_NEED_SWING = 5.0
BLUE_NEED_FREQUENCY = 0.05

# =============================================================================
# Creatures
# =============================================================================

CHASE_RANGE = 6.0
ATTACK_RANGE = 1.5

CRAB_HP = 20
CRAB_DAMAGE = 5
CRAB_MOVE_MS = 1000

BOAR_HP = 50
BOAR_DAMAGE = 15
BOAR_MOVE_MS = 800

ATTACK_COOLDOWN_MS = 500

BOAR_VISIBILITY_THRESHOLD = 0.5
"""A boar is visible under the Blue Pill when its random draw exceeds this value."""

# =============================================================================
# Messages
# =============================================================================

MAX_MESSAGES = 5

WELCOME_MESSAGE = "Welcome to the island."
RED_PILL_GREETING = "Survive."
BLUE_PILL_GREETING = "It's a beautiful day!"
DEATH_MESSAGE = "You succumbed to the island."
FAKE_PICKUP_MESSAGE = "You picked up... nothing?"


def ms_to_ticks(milliseconds: int, ticks_per_second: int = DEFAULT_TICKS_PER_SECOND) -> int:
    """Convert a wall-clock duration into whole simulation ticks."""
    return milliseconds * ticks_per_second // 1000


__all__ = [
    # Map
    "DEFAULT_MAP_WIDTH",
    "DEFAULT_MAP_HEIGHT",
    "ROCK_CORE_RADIUS",
    "GRASS_RADIUS",
    "SAND_RADIUS",
    "RADIUS_JITTER",
    "ROCK_THRESHOLD",
    "WRECKAGE_OFFSET_Y",
    "DEFAULT_MAX_SPAWN_ATTEMPTS",
    # Time
    "DEFAULT_TICKS_PER_SECOND",
    "DECAY_INTERVAL_TICKS",
    "DAY_CYCLE_LENGTH",
    "INITIAL_TIME_OF_DAY",
    "INITIAL_DAY",
    # Stats
    "STAT_MIN",
    "STAT_MAX",
    "HUNGER_DECAY",
    "THIRST_DECAY",
    "STAMINA_REGEN",
    "STARVATION_DAMAGE",
    "DEHYDRATION_DAMAGE",
    "REGEN_THRESHOLD",
    "RED_PILL_START_HEALTH",
    "BLUE_PILL_START_HEALTH",
    "START_HUNGER",
    "START_THIRST",
    "START_STAMINA",
    # Perception
    "BLUE_HEALTH_REVEAL_BELOW",
    "BLUE_HEALTH_REVEAL_BONUS",
    "BLUE_NEED_REVEAL_BELOW",
    "BLUE_NEED_REVEAL_VALUE",
    "BLUE_NEED_BASELINE",
    "BLUE_NEED_SWING",
    "BLUE_NEED_FREQUENCY",
    # Creatures
    "CHASE_RANGE",
    "ATTACK_RANGE",
    "CRAB_HP",
    "CRAB_DAMAGE",
    "CRAB_MOVE_MS",
    "BOAR_HP",
    "BOAR_DAMAGE",
    "BOAR_MOVE_MS",
    "ATTACK_COOLDOWN_MS",
    "BOAR_VISIBILITY_THRESHOLD",
    # Messages
    "MAX_MESSAGES",
    "WELCOME_MESSAGE",
    "RED_PILL_GREETING",
    "BLUE_PILL_GREETING",
    "DEATH_MESSAGE",
    "FAKE_PICKUP_MESSAGE",
    # Helpers
    "ms_to_ticks",
]
