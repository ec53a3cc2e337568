"""Data structures for the game world.

A World is built once from room definitions and then treated as a template:
every game gets its own copy so that picking things up in one game never
changes another.
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Egress:
    """A one-way exit from a room to another room."""

    dest_label: str
    description: str = ""
    travel_message: str = ""
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class Item:
    """Something lying in a room or carried by the player."""

    label: str
    name: str = ""
    description: str = ""
    aliases: tuple[str, ...] = ()


def find_item_by_alias(items: list[Item], alias: str) -> Item | None:
    """Return the first item answering to alias, or None."""
    for item in items:
        if alias in item.aliases:
            return item
    return None


@dataclass
class Room:
    """A location in the game world."""

    label: str
    name: str = ""
    description: str = ""
    exits: list[Egress] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)

    def find_egress_by_alias(self, alias: str) -> Egress | None:
        """Return the exit answering to alias, or None.

        Aliases are matched exactly; callers pass already upper-cased words.
        """
        for egress in self.exits:
            if alias in egress.aliases:
                return egress
        return None

    def find_item_by_alias(self, alias: str) -> Item | None:
        return find_item_by_alias(self.items, alias)

    def remove_item(self, label: str) -> None:
        """Remove the first item with the given label. Missing items are ignored."""
        for i, item in enumerate(self.items):
            if item.label == label:
                del self.items[i]
                return

    def copy(self) -> "Room":
        return replace(self, exits=list(self.exits), items=list(self.items))

    def __str__(self) -> str:
        lines = [f"ROOM {self.label} ({self.name})", "exits:"]
        for egress in self.exits:
            lines.append(f"  {'/'.join(egress.aliases)} -> {egress.dest_label}")
        lines.append("items:")
        for item in self.items:
            lines.append(f"  {item.label} ({'/'.join(item.aliases)})")
        if not self.items:
            lines.append("  (none)")
        return "\n".join(lines)


@dataclass
class World:
    """All rooms of a game, keyed by label."""

    rooms: dict[str, Room] = field(default_factory=dict)
    start_label: str | None = None

    def copy(self) -> "World":
        """Return a world whose rooms share no mutable state with this one."""
        return World(
            rooms={label: room.copy() for label, room in self.rooms.items()},
            start_label=self.start_label,
        )
