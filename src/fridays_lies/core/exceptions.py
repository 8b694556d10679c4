"""Custom exception hierarchy for the Friday's Lies simulation core.

Every condition the core can report inherits from FridaysLiesError, so a
caller driving the game loop can catch a single type at its boundary while
still getting domain-specific context in ``details``.

Example:
    >>> from fridays_lies.core.exceptions import NoValidSpawnError
    >>> raise NoValidSpawnError("Island has no walkable tile", attempts=10000)
"""

from __future__ import annotations

from typing import Any


class FridaysLiesError(Exception):
    """Base exception for all Friday's Lies errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Simulation Domain Exceptions
# =============================================================================


class SimulationError(FridaysLiesError):
    """Base exception for all simulation errors.

    Raised when world generation, spawning, or a player action cannot
    produce a valid next world state.
    """


class MapGenerationError(SimulationError):
    """Raised when an island map cannot be generated.

    This occurs for degenerate dimensions (zero or negative width/height).
    """

    def __init__(
        self,
        message: str,
        *,
        width: int | None = None,
        height: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize map generation error with dimension context.

        Args:
            message: Human-readable error description.
            width: Requested map width.
            height: Requested map height.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if width is not None:
            combined_details["width"] = width
        if height is not None:
            combined_details["height"] = height
        super().__init__(message, details=combined_details)


class NoValidSpawnError(SimulationError):
    """Raised when no walkable spawn cell is found within the attempt budget.

    Rejection sampling on a map with no walkable tile would otherwise loop
    forever.
    """

    def __init__(
        self,
        message: str,
        *,
        attempts: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize spawn error with attempt context.

        Args:
            message: Human-readable error description.
            attempts: Number of cells sampled before giving up.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if attempts is not None:
            combined_details["attempts"] = attempts
        super().__init__(message, details=combined_details)


class InvalidInventoryIndexError(SimulationError):
    """Raised when consuming an inventory slot that does not exist."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        inventory_size: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize inventory error with slot context.

        Args:
            message: Human-readable error description.
            index: The requested inventory index.
            inventory_size: Number of items currently carried.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if index is not None:
            combined_details["index"] = index
        if inventory_size is not None:
            combined_details["inventory_size"] = inventory_size
        super().__init__(message, details=combined_details)


class InvalidGameStateError(SimulationError):
    """Raised when a world state violates a structural invariant.

    This typically occurs when a hand-built state places the player outside
    the map or hands over a grid that does not match its declared size.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current invalid state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(FridaysLiesError):
    """Raised when application configuration is invalid.

    This includes invalid values or incompatible configuration combinations,
    such as a map too small to hold the wreckage landmark.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


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
]
