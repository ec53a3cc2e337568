"""Session layer between the game engine and whatever is driving it."""

from collections import OrderedDict

from .engine.commands import advance
from .engine.errors import CommandError
from .engine.parser import parse_command
from .engine.state import GameState, new_game_state
from .engine.world import World
from .logging import get_logger

logger = get_logger(__name__)

FAREWELL = "Goodbye!"

DEFAULT_MAX_SESSIONS = 1000


class GameSession:
    """One player's live game, built from a template world."""

    def __init__(self, world: World, start_label: str | None = None):
        self.world = world
        self.start_label = start_label
        self.state: GameState = new_game_state(world, start_label)
        self.finished = False

    def process_command(self, raw_input: str) -> str:
        """Run one line of input and return the text to show the player.

        Blank input returns an empty string. QUIT marks the session finished
        instead of being passed to the engine, which refuses it. Command
        errors are turned into their message; the state is unchanged.
        """
        try:
            cmd = parse_command(raw_input)
            if not cmd.verb:
                return ""
            if cmd.verb == "QUIT":
                self.finished = True
                logger.debug("session_quit", turns=self.state.turns)
                return FAREWELL
            narration = advance(self.state, cmd)
        except CommandError as e:
            logger.debug(
                "command_rejected",
                input=raw_input,
                error=type(e).__name__,
                room=self.state.current_label,
            )
            return str(e)

        logger.debug(
            "command_applied",
            verb=cmd.verb,
            room=self.state.current_label,
            turns=self.state.turns,
        )
        return narration

    def reset(self) -> None:
        """Start over from a fresh copy of the template world."""
        self.state = new_game_state(self.world, self.start_label)
        self.finished = False
        logger.info("session_reset")


class SessionStore:
    """In-memory sessions keyed by player, each with its own world copy.

    At most max_sessions are kept; the least recently used one is dropped
    to make room for a new player.
    """

    def __init__(
        self,
        world: World,
        start_label: str | None = None,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.world = world
        self.start_label = start_label
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, GameSession] = OrderedDict()

    def get_or_create(self, fingerprint: str) -> GameSession:
        session = self._sessions.get(fingerprint)
        if session is not None:
            self._sessions.move_to_end(fingerprint)
            return session

        while len(self._sessions) >= self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("session_evicted", fingerprint=evicted)
        session = GameSession(self.world, self.start_label)
        self._sessions[fingerprint] = session
        logger.info("session_created", fingerprint=fingerprint)
        return session

    def __contains__(self, fingerprint: str) -> bool:
        return fingerprint in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
