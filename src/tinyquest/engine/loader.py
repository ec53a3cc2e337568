"""Build and validate a World from room definitions or a JSON world file.

A world file is either a list of rooms or an object with a "start" label
and a "rooms" list:

    {"start": "YOUR_ROOM",
     "rooms": [{"label": "YOUR_ROOM", "name": "...", "description": "...",
                "exits": [{"dest": "HALLWAY", "description": "...",
                           "travel_message": "...", "aliases": ["SOUTH"]}],
                "items": [{"label": "LAMP", "name": "lamp",
                           "description": "...", "aliases": ["LAMP"]}]}]}
"""

import json
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Any

from .errors import (
    DuplicateEgressAlias,
    DuplicateItemLabel,
    DuplicateRoomLabel,
    UnknownDestination,
    UnknownStartRoom,
    WorldFormatError,
)
from .world import Egress, Item, Room, World

DEFAULT_WORLD_FILE = "world.json"


def _upper_aliases(aliases: Iterable[str]) -> tuple[str, ...]:
    # whitespace is collapsed the same way the parser joins recipient words
    return tuple(" ".join(alias.split()).upper() for alias in aliases)


def _normalize_room(room: Room) -> Room:
    """Copy a room definition with every alias normalized."""
    exits = [
        Egress(
            dest_label=egress.dest_label,
            description=egress.description,
            travel_message=egress.travel_message,
            aliases=_upper_aliases(egress.aliases),
        )
        for egress in room.exits
    ]
    items = [
        Item(
            label=item.label,
            name=item.name,
            description=item.description,
            aliases=_upper_aliases(item.aliases),
        )
        for item in room.items
    ]
    return Room(
        label=room.label,
        name=room.name,
        description=room.description,
        exits=exits,
        items=items,
    )


def _check_aliases(room: Room) -> None:
    for item in room.items:
        if "" in item.aliases:
            raise WorldFormatError(
                f'room "{room.label}": item "{item.label}" has a blank alias'
            )
    seen: set[str] = set()
    for egress in room.exits:
        for alias in egress.aliases:
            if not alias:
                raise WorldFormatError(
                    f'room "{room.label}": exit to "{egress.dest_label}" has a blank alias'
                )
            if alias in seen:
                raise DuplicateEgressAlias(room.label, alias)
            seen.add(alias)


def build_world(room_defs: Iterable[Room], start_label: str | None = None) -> World:
    """Validate room definitions and index them into a World.

    Raises a WorldError subclass for duplicate room labels, blank aliases,
    duplicate exit aliases within a room, exits to rooms that do not exist,
    duplicate item labels anywhere in the world, or an unknown start room.
    The definitions themselves are never modified.
    """
    world = World(start_label=start_label)
    item_labels: set[str] = set()

    for room_def in room_defs:
        if room_def.label in world.rooms:
            raise DuplicateRoomLabel(room_def.label)
        room = _normalize_room(room_def)
        _check_aliases(room)
        for item in room.items:
            if item.label in item_labels:
                raise DuplicateItemLabel(item.label)
            item_labels.add(item.label)
        world.rooms[room.label] = room

    for room in world.rooms.values():
        for egress in room.exits:
            if egress.dest_label not in world.rooms:
                raise UnknownDestination(room.label, egress.dest_label)

    if start_label is not None and start_label not in world.rooms:
        raise UnknownStartRoom(start_label)

    return world


def _require(record: dict, key: str, kind: type, where: str) -> Any:
    if key not in record:
        raise WorldFormatError(f'{where}: missing "{key}"')
    value = record[key]
    if not isinstance(value, kind):
        raise WorldFormatError(f'{where}: "{key}" must be a {kind.__name__}')
    return value


def _parse_aliases(record: dict, where: str) -> tuple[str, ...]:
    aliases = record.get("aliases", [])
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise WorldFormatError(f'{where}: "aliases" must be a list of strings')
    return tuple(aliases)


def _parse_egress(record: Any, where: str) -> Egress:
    if not isinstance(record, dict):
        raise WorldFormatError(f"{where}: exit must be an object")
    return Egress(
        dest_label=_require(record, "dest", str, where),
        description=record.get("description", ""),
        travel_message=record.get("travel_message", ""),
        aliases=_parse_aliases(record, where),
    )


def _parse_item(record: Any, where: str) -> Item:
    if not isinstance(record, dict):
        raise WorldFormatError(f"{where}: item must be an object")
    return Item(
        label=_require(record, "label", str, where),
        name=record.get("name", ""),
        description=record.get("description", ""),
        aliases=_parse_aliases(record, where),
    )


def _parse_room(record: Any, where: str) -> Room:
    if not isinstance(record, dict):
        raise WorldFormatError(f"{where}: room must be an object")
    label = _require(record, "label", str, where)
    where = f"{where} ({label})"
    exits = record.get("exits", [])
    items = record.get("items", [])
    if not isinstance(exits, list):
        raise WorldFormatError(f'{where}: "exits" must be a list')
    if not isinstance(items, list):
        raise WorldFormatError(f'{where}: "items" must be a list')
    return Room(
        label=label,
        name=record.get("name", ""),
        description=_require(record, "description", str, where),
        exits=[_parse_egress(e, f"{where} exit {i}") for i, e in enumerate(exits)],
        items=[_parse_item(it, f"{where} item {i}") for i, it in enumerate(items)],
    )


def parse_world(data: Any, source: str = "<world>") -> World:
    """Turn decoded JSON into a validated World."""
    start_label = None
    if isinstance(data, dict):
        start_label = data.get("start")
        if start_label is not None and not isinstance(start_label, str):
            raise WorldFormatError(f'{source}: "start" must be a string')
        data = _require(data, "rooms", list, source)
    if not isinstance(data, list):
        raise WorldFormatError(f"{source}: expected a list of rooms")

    rooms = [_parse_room(r, f"{source} room {i}") for i, r in enumerate(data)]
    return build_world(rooms, start_label=start_label)


def load_world(path: Path) -> World:
    """Read a JSON world file and return a validated World."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as e:
        raise WorldFormatError(f"{path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise WorldFormatError(f"{path}: invalid JSON: {e}") from e
    return parse_world(data, source=str(path))


def default_world_path() -> Path:
    """Locate the bundled world file via importlib.resources."""
    return resources.files("tinyquest.data").joinpath(DEFAULT_WORLD_FILE)


def default_world() -> World:
    return load_world(default_world_path())
