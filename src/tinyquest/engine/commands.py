"""Apply parsed commands to the game state.

advance(state, command) -> str is the main entry point. Each verb has a
handler that checks its preconditions first and only then mutates the
state, so a command either fully succeeds or leaves the state untouched.
Failures are raised as CommandError subclasses.
"""

from collections.abc import Callable

from .errors import (
    MissingRecipient,
    NoSuchExit,
    NoSuchItem,
    NotQuittable,
    UnexpectedInstrument,
    UnknownDebugTarget,
    UnknownVerb,
    UnsupportedTarget,
)
from .parser import Command
from .state import GameState
from .world import find_item_by_alias

HELP_TEXT = "\n".join(
    [
        "Here are the commands you can use (WIP commands do not yet work fully):",
        "HELP          - show this help",
        "DEBUG ROOM    - print info on the current room",
        "DROP/PUT      - put down an object you are carrying",
        "EXITS         - show the names of all exits from the room",
        "GO/MOVE       - go to another room via one of the exits",
        "INVENTORY/INV - list what you are carrying",
        "LOOK          - show the description of the room",
        "QUIT/EXIT     - end the game",
        "TAKE/GET      - pick up an object in the room",
        "TALK/SPEAK    - talk to someone/something in the room [WIP]",
        "USE           - use an object in your inventory [WIP]",
    ]
)


def _cmd_quit(state: GameState, cmd: Command) -> str:
    raise NotQuittable()


def _cmd_go(state: GameState, cmd: Command) -> str:
    egress = state.room.find_egress_by_alias(cmd.recipient)
    if egress is None:
        raise NoSuchExit(cmd.recipient)
    state.current_label = egress.dest_label
    return egress.travel_message


def _cmd_exits(state: GameState, cmd: Command) -> str:
    lines = [
        f"{'/'.join(egress.aliases)} -> {egress.description}"
        for egress in state.room.exits
    ]
    return "\n".join(lines) or "There is no way out of here."


def _cmd_look(state: GameState, cmd: Command) -> str:
    if cmd.recipient:
        raise UnsupportedTarget("LOOK", cmd.recipient)
    return state.room.description


def _cmd_debug(state: GameState, cmd: Command) -> str:
    if cmd.recipient != "ROOM":
        raise UnknownDebugTarget(cmd.recipient)
    return str(state.room)


def _cmd_help(state: GameState, cmd: Command) -> str:
    return HELP_TEXT


def _cmd_take(state: GameState, cmd: Command) -> str:
    if not cmd.recipient:
        raise MissingRecipient("TAKE")
    if cmd.instrument:
        # no picking things up with tools yet
        raise UnexpectedInstrument("TAKE", cmd.instrument)
    item = state.room.find_item_by_alias(cmd.recipient)
    if item is None:
        raise NoSuchItem(cmd.recipient, "here")
    state.room.remove_item(item.label)
    state.inventory.append(item)
    return f"You take the {item.name or item.label.lower()}."


def _cmd_drop(state: GameState, cmd: Command) -> str:
    if not cmd.recipient:
        raise MissingRecipient("DROP")
    item = find_item_by_alias(state.inventory, cmd.recipient)
    if item is None:
        raise NoSuchItem(cmd.recipient, "in your inventory")
    state.inventory.remove(item)
    state.room.items.append(item)
    return f"You drop the {item.name or item.label.lower()}."


def _cmd_inventory(state: GameState, cmd: Command) -> str:
    if not state.inventory:
        return "You aren't carrying anything."
    lines = ["You are carrying:"]
    lines.extend(f"  {item.name or item.label.lower()}" for item in state.inventory)
    return "\n".join(lines)


_VERB_DISPATCH: dict[str, Callable[[GameState, Command], str]] = {
    "QUIT": _cmd_quit,
    "GO": _cmd_go,
    "EXITS": _cmd_exits,
    "LOOK": _cmd_look,
    "DEBUG": _cmd_debug,
    "HELP": _cmd_help,
    "TAKE": _cmd_take,
    "DROP": _cmd_drop,
    "INVENTORY": _cmd_inventory,
}


def advance(state: GameState, cmd: Command) -> str:
    """Carry out cmd against state and return the narration.

    QUIT is always refused: ending the game is up to whatever is driving
    the session. The returned text has no trailing blank line; drivers add
    one when they print it.
    """
    handler = _VERB_DISPATCH.get(cmd.verb)
    if handler is None:
        raise UnknownVerb(cmd.verb)
    narration = handler(state, cmd)
    state.turns += 1
    return narration
