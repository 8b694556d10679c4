"""Headless session driver.

The simulation core is a set of pure transitions. IslandSession is the thin
stateful shell a front end talks to: it owns the seeded random source, holds
the current snapshot, keeps a bounded history of earlier snapshots for undo
and replay, and notifies listeners after every transition. It owns no timer;
the caller decides when to tick.
"""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Callable
from typing import Any

from fridays_lies.core.config import Settings, get_settings
from fridays_lies.core.logging import bind_context, get_logger
from fridays_lies.engine.actions import consume_item, move_player
from fridays_lies.engine.factory import create_initial_state
from fridays_lies.engine.perception import narrate, visible_entities
from fridays_lies.engine.tick import advance_tick
from fridays_lies.models.enums import GameMode, PillType
from fridays_lies.models.world import Entity, WorldState


logger = get_logger(__name__)

Listener = Callable[[WorldState], None]

DEFAULT_HISTORY_SIZE = 256


class IslandSession:
    """One play session on the island.

    Attributes:
        pill: Perception mode of the session.
        state: The current world snapshot.
        history: Earlier snapshots, oldest first.

    Example:
        >>> session = IslandSession(PillType.RED, seed=7)
        >>> session.move(1, 0)
        >>> session.tick()
        >>> session.state.tick
        1
    """

    def __init__(
        self,
        pill: PillType,
        *,
        seed: int | None = None,
        settings: Settings | None = None,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        """Create the island and start the session.

        Args:
            pill: Perception mode chosen by the player.
            seed: Random seed; falls back to ``settings.simulation.seed``.
            settings: Application settings; the cached settings when omitted.
            history_size: Number of earlier snapshots kept for undo.
        """
        self._settings = settings or get_settings()
        self._seed = seed if seed is not None else self._settings.simulation.seed
        self._rng = random.Random(self._seed)
        self._state = create_initial_state(pill, self._rng, self._settings)
        # Each entry pairs a snapshot with the rng state its successor was drawn from.
        self._history: deque[tuple[WorldState, Any]] = deque(maxlen=history_size)
        self._listeners: list[Listener] = []

        bind_context(pill=str(pill), seed=self._seed)
        logger.info("IslandSession started", pill=pill, seed=self._seed)

    @property
    def pill(self) -> PillType:
        return self._state.pill

    @property
    def state(self) -> WorldState:
        return self._state

    @property
    def history(self) -> tuple[WorldState, ...]:
        return tuple(state for state, _ in self._history)

    @property
    def is_over(self) -> bool:
        return self._state.mode != GameMode.PLAYING

    @property
    def visible_entities(self) -> tuple[Entity, ...]:
        """Creatures the presentation layer should draw this frame."""
        return visible_entities(self._state)

    @property
    def log_lines(self) -> tuple[str, ...]:
        """Message log as the HUD narrates it."""
        return narrate(self._state)

    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked with every new snapshot.

        Args:
            listener: Function called after each transition that changed state.
        """
        self._listeners.append(listener)

    def _commit(self, new_state: WorldState, rng_state: Any) -> WorldState:
        if new_state is self._state:
            return new_state
        self._history.append((self._state, rng_state))
        previous_mode = self._state.mode
        self._state = new_state
        if new_state.mode != previous_mode:
            logger.info("Session mode changed", mode=new_state.mode, tick=new_state.tick)
        for listener in self._listeners:
            try:
                listener(new_state)
            except Exception:
                logger.exception("Session listener failed")
        return new_state

    def tick(self, now: int | None = None) -> WorldState:
        """Advance the world by one tick."""
        rng_state = self._rng.getstate()
        return self._commit(
            advance_tick(self._state, now, rng=self._rng, settings=self._settings),
            rng_state,
        )

    def run(self, ticks: int) -> WorldState:
        """Advance up to ``ticks`` ticks, stopping early once the game ends.

        Args:
            ticks: Maximum number of ticks to simulate.

        Returns:
            The snapshot after the last simulated tick.
        """
        for _ in range(ticks):
            if self.is_over:
                break
            self.tick()
        return self._state

    def move(self, dx: int, dy: int) -> WorldState:
        """Move the castaway one step."""
        return self._commit(move_player(self._state, dx, dy), self._rng.getstate())

    def consume(self, index: int) -> WorldState:
        """Consume an inventory item.

        Raises:
            InvalidInventoryIndexError: If ``index`` names no carried item.
        """
        return self._commit(consume_item(self._state, index), self._rng.getstate())

    def undo(self) -> WorldState | None:
        """Restore the previous snapshot and rewind the random source with it.

        Replaying the same inputs after an undo reproduces the same snapshots.

        Returns:
            The restored snapshot, or None if there is no history.
        """
        if not self._history:
            return None
        self._state, rng_state = self._history.pop()
        self._rng.setstate(rng_state)
        logger.debug("Session rewound", tick=self._state.tick)
        return self._state


__all__ = [
    "Listener",
    "DEFAULT_HISTORY_SIZE",
    "IslandSession",
]
