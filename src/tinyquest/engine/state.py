"""Mutable per-player game state.

Each GameState owns a private copy of the world, so items taken or dropped
in one game are never seen by another.
"""

from dataclasses import dataclass, field

from .errors import UnknownStartRoom
from .world import Item, Room, World

# Starting room of the bundled world
START_LABEL = "YOUR_ROOM"


@dataclass
class GameState:
    """Everything that changes while a game is played."""

    world: World
    current_label: str
    inventory: list[Item] = field(default_factory=list)
    turns: int = 0

    @property
    def room(self) -> Room:
        return self.world.rooms[self.current_label]


def new_game_state(world: World, start_label: str | None = None) -> GameState:
    """Create a fresh game from a template world.

    The start room defaults to the world's own start label, then START_LABEL.
    """
    label = start_label or world.start_label or START_LABEL
    if label not in world.rooms:
        raise UnknownStartRoom(label)
    return GameState(world=world.copy(), current_label=label)
