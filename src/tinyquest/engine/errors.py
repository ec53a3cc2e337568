"""Exceptions raised by the game engine.

WorldError subclasses mean the world definition is malformed and the game
cannot start. CommandError subclasses are recoverable: the player is told
what went wrong and the game state is left untouched.
"""


class QuestError(Exception):
    """Base class for all engine errors."""


class WorldError(QuestError):
    """The world definition is invalid."""


class DuplicateRoomLabel(WorldError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f'duplicate room label "{label}"')


class DuplicateEgressAlias(WorldError):
    def __init__(self, room_label: str, alias: str):
        self.room_label = room_label
        self.alias = alias
        super().__init__(
            f'room "{room_label}" uses exit alias "{alias}" more than once'
        )


class UnknownDestination(WorldError):
    def __init__(self, room_label: str, dest_label: str):
        self.room_label = room_label
        self.dest_label = dest_label
        super().__init__(
            f'room "{room_label}" has an exit to unknown room "{dest_label}"'
        )


class DuplicateItemLabel(WorldError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f'duplicate item label "{label}"')


class UnknownStartRoom(WorldError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f'start room "{label}" does not exist')


class WorldFormatError(WorldError):
    """A world file could not be read or does not have the expected shape."""


class CommandError(QuestError):
    """A command could not be parsed or carried out."""


class UnknownVerb(CommandError):
    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f'I don\'t know how to "{verb}"')


class UnexpectedInstrument(CommandError):
    def __init__(self, verb: str, instrument: str):
        self.verb = verb
        self.instrument = instrument
        super().__init__(f'I can\'t {verb} anything WITH "{instrument}"')


class MissingInstrument(CommandError):
    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"{verb} it WITH what?")


class NoSuchExit(CommandError):
    def __init__(self, recipient: str):
        self.recipient = recipient
        if recipient:
            message = f'"{recipient}" isn\'t a place you can go from here'
        else:
            message = "GO where? Try EXITS to see the ways out"
        super().__init__(message)


class UnsupportedTarget(CommandError):
    def __init__(self, verb: str, target: str):
        self.verb = verb
        self.target = target
        super().__init__(
            f'I can\'t {verb} at particular things like "{target}" yet'
        )


class UnknownDebugTarget(CommandError):
    def __init__(self, target: str):
        self.target = target
        super().__init__(f'I don\'t know how to debug "{target}"')


class NotQuittable(CommandError):
    def __init__(self):
        super().__init__("I can't QUIT; I'm not being executed by a quitable engine")


class MissingRecipient(CommandError):
    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"{verb} what?")


class NoSuchItem(CommandError):
    def __init__(self, alias: str, where: str):
        self.alias = alias
        self.where = where
        super().__init__(f'There is no "{alias}" {where}')


class TransportError(QuestError):
    """Reading from or writing to the player failed."""
