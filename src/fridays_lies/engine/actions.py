"""Player action handlers: moving and consuming.

Both handlers are pure. They return the input state unchanged when the game
is no longer playing or the action is a deliberate no-op (walking into a
tree, off the map).
"""

from __future__ import annotations

from collections.abc import Callable

from fridays_lies.core.constants import FAKE_PICKUP_MESSAGE, STAT_MAX, STAT_MIN
from fridays_lies.core.exceptions import InvalidInventoryIndexError
from fridays_lies.core.logging import get_logger
from fridays_lies.engine.perception import perceive_stats
from fridays_lies.models.enums import Facing, ItemType
from fridays_lies.models.world import Stats, WorldState, trim_messages


logger = get_logger(__name__)


def _facing_for(dx: int, current: Facing) -> Facing:
    if dx > 0:
        return Facing.RIGHT
    if dx < 0:
        return Facing.LEFT
    return current


def move_player(state: WorldState, dx: int, dy: int) -> WorldState:
    """Move the player one step and pick up whatever lies there.

    Args:
        state: Current world.
        dx: Horizontal step (-1, 0 or 1).
        dy: Vertical step (-1, 0 or 1).

    Returns:
        The next world state, or ``state`` itself when the move is blocked.
    """
    if not state.is_playing:
        return state

    target = state.player.pos.offset(dx, dy)
    if not state.in_bounds(target.x, target.y):
        return state
    if state.tile_at(target.x, target.y).is_solid:
        return state

    items = list(state.items)
    inventory = list(state.player.inventory)
    messages = list(state.messages)

    index = state.item_index_at(target)
    if index is not None:
        item = items.pop(index)
        if state.pill.is_deceptive and item.is_fake:
            messages.append(FAKE_PICKUP_MESSAGE)
        else:
            inventory.append(item.type)
            messages.append(f"Picked up {item.type}")

    player = state.player.model_copy(
        update={
            "pos": target,
            "inventory": tuple(inventory),
            "facing": _facing_for(dx, state.player.facing),
        }
    )
    return state.model_copy(
        update={
            "player": player,
            "items": tuple(items),
            "messages": trim_messages(messages),
        }
    )


# =============================================================================
# Consumption
# =============================================================================


def _cap(value: float) -> float:
    return min(STAT_MAX, value)


def _eat_coconut(stats: Stats) -> Stats:
    return stats.model_copy(
        update={"thirst": _cap(stats.thirst + 20), "hunger": _cap(stats.hunger + 5)}
    )


def _eat_meat(stats: Stats) -> Stats:
    # Raw meat hurts a bit.
    return stats.model_copy(
        update={"hunger": _cap(stats.hunger + 30), "health": max(STAT_MIN, stats.health - 5)}
    )


def _use_medkit(stats: Stats) -> Stats:
    return stats.model_copy(update={"health": _cap(stats.health + 50)})


def _no_effect(stats: Stats) -> Stats:
    return stats


CONSUME_EFFECTS: dict[ItemType, Callable[[Stats], Stats]] = {
    ItemType.COCONUT: _eat_coconut,
    ItemType.MEAT: _eat_meat,
    ItemType.MEDKIT: _use_medkit,
    ItemType.WOOD: _no_effect,
    ItemType.SPEAR: _no_effect,
    ItemType.FAKE_WATER: _no_effect,
}


def consume_item(state: WorldState, index: int) -> WorldState:
    """Consume the inventory item at ``index`` and apply its effect.

    Args:
        state: Current world.
        index: Zero-based inventory slot.

    Returns:
        The next world state, or ``state`` itself once the game is over.

    Raises:
        InvalidInventoryIndexError: If ``index`` does not name a carried item.
    """
    if not state.is_playing:
        return state

    inventory = list(state.player.inventory)
    if not 0 <= index < len(inventory):
        logger.debug("Rejected consume", index=index, inventory_size=len(inventory))
        raise InvalidInventoryIndexError(
            "No item in that inventory slot",
            index=index,
            inventory_size=len(inventory),
        )

    item_type = inventory.pop(index)
    real = CONSUME_EFFECTS[item_type](state.player.real_stats).clamped()
    display = perceive_stats(real, state.pill, state.tick)

    player = state.player.model_copy(
        update={
            "inventory": tuple(inventory),
            "real_stats": real,
            "display_stats": display,
        }
    )
    return state.model_copy(update={"player": player})


__all__ = [
    "CONSUME_EFFECTS",
    "move_player",
    "consume_item",
]
