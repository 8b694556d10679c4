"""Core module providing configuration, logging, constants and base exceptions.

Exports:
    Exceptions:
        FridaysLiesError: Base exception for all application errors.
        SimulationError: Base for world generation and action errors.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from fridays_lies.core.config import (
    Settings,
    SimulationSettings,
    WorldSettings,
    clear_settings_cache,
    get_settings,
)
from fridays_lies.core.exceptions import (
    ConfigurationError,
    FridaysLiesError,
    InvalidGameStateError,
    InvalidInventoryIndexError,
    MapGenerationError,
    NoValidSpawnError,
    SimulationError,
)
from fridays_lies.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "FridaysLiesError",
    # Simulation exceptions
    "SimulationError",
    "MapGenerationError",
    "NoValidSpawnError",
    "InvalidInventoryIndexError",
    "InvalidGameStateError",
    # Configuration exceptions
    "ConfigurationError",
    # Configuration
    "Settings",
    "WorldSettings",
    "SimulationSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
