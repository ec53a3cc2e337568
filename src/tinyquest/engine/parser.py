"""Turn one line of player input into a Command.

The parser only knows grammar. Whether an exit or item actually exists is
decided later, when the command is applied to the game state.
"""

from dataclasses import dataclass

from .errors import MissingInstrument, UnexpectedInstrument, UnknownVerb

# Surface word -> canonical verb
VERB_SYNONYMS = {
    "GO": "GO",
    "MOVE": "GO",
    "WALK": "GO",
    "LOOK": "LOOK",
    "L": "LOOK",
    "EXITS": "EXITS",
    "HELP": "HELP",
    "QUIT": "QUIT",
    "EXIT": "QUIT",
    "DEBUG": "DEBUG",
    "TAKE": "TAKE",
    "GET": "TAKE",
    "DROP": "DROP",
    "PUT": "DROP",
    "INVENTORY": "INVENTORY",
    "INV": "INVENTORY",
    "I": "INVENTORY",
    "TALK": "TALK",
    "SPEAK": "TALK",
    "USE": "USE",
}

DIRECTIONS = {"NORTH", "SOUTH", "EAST", "WEST", "UP", "DOWN", "IN", "OUT"}

DIRECTION_ABBREVIATIONS = {
    "N": "NORTH",
    "S": "SOUTH",
    "E": "EAST",
    "W": "WEST",
    "U": "UP",
    "D": "DOWN",
}

# Verbs that take a second object after WITH
INSTRUMENT_VERBS = {"TAKE", "USE"}

INSTRUMENT_MARKER = "WITH"

FILLER_WORDS = {"TO", "AT"}


@dataclass(frozen=True)
class Command:
    """A parsed command.

    verb is the canonical verb ("GO" for "MOVE", "WALK" or a bare direction).
    recipient is what the verb acts on: an exit alias for GO, an item alias
    for TAKE and DROP. instrument is the object after WITH, as in
    "GET WATER WITH CUP". An empty verb means the input was blank.
    """

    verb: str = ""
    recipient: str = ""
    instrument: str = ""


def _expand_direction(word: str) -> str:
    return DIRECTION_ABBREVIATIONS.get(word, word)


def _split_instrument(verb: str, words: list[str]) -> tuple[str, str]:
    if INSTRUMENT_MARKER not in words:
        return " ".join(words), ""
    at = words.index(INSTRUMENT_MARKER)
    instrument = words[at + 1:]
    if verb not in INSTRUMENT_VERBS:
        raise UnexpectedInstrument(verb, " ".join(instrument))
    if not instrument:
        raise MissingInstrument(verb)
    return " ".join(words[:at]), " ".join(instrument)


def parse_command(text: str) -> Command:
    """Parse a line of input.

    Blank input returns an empty Command. Raises UnknownVerb when the first
    word is not a known verb or direction.
    """
    tokens = text.upper().split()
    if not tokens:
        return Command()

    first = _expand_direction(tokens[0])
    rest = tokens[1:]

    if first in DIRECTIONS:
        if not rest:
            return Command(verb="GO", recipient=first)
        verb = "GO"
    elif first in VERB_SYNONYMS:
        verb = VERB_SYNONYMS[first]
    else:
        raise UnknownVerb(tokens[0])

    if rest and rest[0] in FILLER_WORDS:
        rest = rest[1:]

    recipient, instrument = _split_instrument(verb, rest)
    if verb == "GO":
        recipient = _expand_direction(recipient)
    return Command(verb=verb, recipient=recipient, instrument=instrument)
