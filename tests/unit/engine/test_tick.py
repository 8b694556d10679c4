"""Tests for the tick updater."""

from __future__ import annotations

import random

import pytest

from fridays_lies.core.constants import DEATH_MESSAGE
from fridays_lies.engine.tick import advance_clock, advance_tick
from fridays_lies.models import GameMode, PillType, Stats


@pytest.fixture
def step(settings):
    """Advance a state by one tick with a fixed random source."""

    def run(state, now=None):
        return advance_tick(state, now, rng=random.Random(3), settings=settings)

    return run


class TestAdvanceClock:
    """Tests for the day clock."""

    def test_plain_step(self) -> None:
        """Test the counters move by one."""
        assert advance_clock(0, 800, 1) == (1, 801, 1)

    def test_new_day(self) -> None:
        """Test wrapping the clock starts a new day."""
        assert advance_clock(41, 2399, 3) == (42, 0, 4)


class TestAdvanceTick:
    """Tests for advance_tick."""

    def test_game_over_is_frozen(self, make_state, step) -> None:
        """Test finished sessions are returned untouched."""
        state = make_state(mode=GameMode.GAME_OVER)

        assert step(state) is state

    def test_clock_advances(self, make_state, step) -> None:
        """Test tick and time of day advance together."""
        state = step(make_state())

        assert (state.tick, state.time_of_day, state.day_count) == (1, 801, 1)

    def test_midnight(self, make_state, step) -> None:
        """Test the day count rises when the clock wraps."""
        state = step(make_state(time_of_day=2399))

        assert state.time_of_day == 0
        assert state.day_count == 2

    def test_decay_only_on_interval(self, make_state, step) -> None:
        """Test decay fires when the new tick is a multiple of 60."""
        quiet = step(make_state(tick=0))
        decayed = step(make_state(tick=59))

        assert quiet.player.real_stats.hunger == 80
        assert decayed.tick == 60
        assert decayed.player.real_stats.hunger == pytest.approx(79.95)
        assert decayed.player.real_stats.thirst == pytest.approx(79.92)

    def test_starvation_death(self, make_state, step) -> None:
        """Test running out of health ends the game."""
        state = make_state(tick=59, real_stats=Stats(health=0.5, hunger=0, thirst=0, stamina=50))

        result = step(state)

        assert result.mode == GameMode.GAME_OVER
        assert result.is_playing is False
        assert result.player.real_stats.health == 0
        assert result.messages[-1] == DEATH_MESSAGE

    def test_creature_bite(self, make_state, make_entity, step) -> None:
        """Test an adjacent crab hurts the player and rests."""
        state = make_state(entities=(make_entity(3, 4),))

        result = step(state)

        assert result.player.real_stats.health == 95
        assert result.messages[-1] == "The crab attacked you!"
        assert result.entities[0].last_move == 31
        assert result.mode == GameMode.PLAYING

    def test_bites_stack_to_death(self, make_state, make_entity, step) -> None:
        """Test several bites in one tick can kill."""
        state = make_state(
            real_stats=Stats(health=8, hunger=80, thirst=80, stamina=100),
            entities=(make_entity(3, 4), make_entity(4, 3)),
        )

        result = step(state)

        assert result.mode == GameMode.GAME_OVER
        assert result.player.real_stats.health == 0
        assert result.messages[-3:] == (
            "The crab attacked you!",
            "The crab attacked you!",
            DEATH_MESSAGE,
        )

    def test_now_drives_cooldowns(self, make_state, make_entity, step) -> None:
        """Test an explicit clock decides whether a creature is ready."""
        state = make_state(entities=(make_entity(3, 4, move_speed=60),))

        assert step(state).player.real_stats.health == 100
        assert step(state, now=60).player.real_stats.health == 95

    def test_dead_creature_removed(self, make_state, make_entity, step) -> None:
        """Test creatures without hit points leave the world."""
        alive = make_entity(0, 0, is_hostile=False)
        dead = make_entity(6, 6, is_hostile=False, hp=0)

        result = step(make_state(entities=(alive, dead)))

        assert [e.id for e in result.entities] == [alive.id]
        assert result.messages[-1] == "The crab is dead."

    def test_blue_display_refreshed(self, make_state, step) -> None:
        """Test the HUD follows the real stats every tick."""
        state = make_state(
            pill=PillType.BLUE,
            real_stats=Stats(health=10, hunger=50, thirst=50, stamina=50),
        )

        result = step(state)

        assert result.player.display_stats.health == 30
        assert result.player.display_stats.stamina == 100

    def test_red_display_matches_real(self, make_state, make_entity, step) -> None:
        """Test the Red Pill HUD is the truth after a bite."""
        result = step(make_state(entities=(make_entity(3, 4),)))

        assert result.player.display_stats == result.player.real_stats

    def test_message_log_trimmed(self, make_state, make_entity, step) -> None:
        """Test new lines push out the oldest ones."""
        state = make_state(
            messages=("a", "b", "c", "d", "e"),
            entities=(make_entity(3, 4),),
        )

        result = step(state)

        assert result.messages == ("b", "c", "d", "e", "The crab attacked you!")

    def test_injected_rng_is_reproducible(self, make_state, make_entity, settings) -> None:
        """Test equal random sources give equal successors."""
        state = make_state(entities=tuple(make_entity(x, 0, is_hostile=False) for x in range(7)))

        first = advance_tick(state, rng=random.Random(8), settings=settings)
        second = advance_tick(state, rng=random.Random(8), settings=settings)

        assert first == second

    def test_input_untouched(self, make_state, make_entity, step) -> None:
        """Test the previous snapshot survives the transition."""
        crab = make_entity(3, 4)
        state = make_state(entities=(crab,))

        step(state)

        assert state.tick == 0
        assert state.player.real_stats.health == 100
        assert state.entities == (crab,)
        assert state.messages == ()
