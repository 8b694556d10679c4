"""Configuration management for Friday's Lies.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from fridays_lies.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.world.map_width
    50

Environment Variables:
    FRIDAYS_LIES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    FRIDAYS_LIES_WORLD_MAP_WIDTH: Island width in tiles
    FRIDAYS_LIES_WORLD_MAP_HEIGHT: Island height in tiles
    FRIDAYS_LIES_SIM_SEED: Seed for reproducible islands and creature behavior
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fridays_lies.core.constants import (
    DEFAULT_MAP_HEIGHT,
    DEFAULT_MAP_WIDTH,
    DEFAULT_MAX_SPAWN_ATTEMPTS,
    DEFAULT_TICKS_PER_SECOND,
    WRECKAGE_OFFSET_Y,
)
from fridays_lies.core.exceptions import ConfigurationError


class WorldSettings(BaseSettings):
    """Configuration for island generation and initial population.

    Attributes:
        map_width: Island width in tiles.
        map_height: Island height in tiles.
        crab_count: Number of crabs spawned at world creation.
        boar_count: Number of boars spawned at world creation.
        coconut_count: Number of coconuts scattered at world creation.
        max_spawn_attempts: Cells sampled before spawn placement gives up.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRIDAYS_LIES_WORLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    map_width: int = Field(
        default=DEFAULT_MAP_WIDTH,
        ge=1,
        le=500,
        description="Island width in tiles",
    )
    map_height: int = Field(
        default=DEFAULT_MAP_HEIGHT,
        ge=1,
        le=500,
        description="Island height in tiles",
    )
    crab_count: int = Field(default=5, ge=0, description="Crabs spawned at start")
    boar_count: int = Field(default=3, ge=0, description="Boars spawned at start")
    coconut_count: int = Field(default=10, ge=0, description="Coconuts spawned at start")
    max_spawn_attempts: int = Field(
        default=DEFAULT_MAX_SPAWN_ATTEMPTS,
        ge=1,
        description="Spawn sampling budget",
    )

    @model_validator(mode="after")
    def validate_wreckage_fits(self) -> "WorldSettings":
        """Ensure the wreckage landmark row lies inside the map.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the map is too short for the landmark.
        """
        if self.map_height // 2 + WRECKAGE_OFFSET_Y >= self.map_height:
            raise ConfigurationError(
                f"map_height ({self.map_height}) is too small to place the wreckage "
                f"{WRECKAGE_OFFSET_Y} rows below the center",
                config_key="map_height",
            )
        return self


class SimulationSettings(BaseSettings):
    """Configuration for the tick pipeline and randomness.

    Attributes:
        ticks_per_second: Logical tick rate used to express cooldowns in ticks.
        seed: Optional seed for the random source; None means unseeded.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRIDAYS_LIES_SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ticks_per_second: int = Field(
        default=DEFAULT_TICKS_PER_SECOND,
        ge=1,
        le=1000,
        description="Logical ticks per second",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducible sessions",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON log lines instead of console output.
        world: Island generation settings.
        simulation: Tick pipeline settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRIDAYS_LIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Friday's Lies", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    world: WorldSettings = Field(default_factory=WorldSettings)
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Mostly useful for tests or when environment variables have changed.
    """
    get_settings.cache_clear()


__all__ = [
    "WorldSettings",
    "SimulationSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
