"""Play tinyquest in a terminal.

run_until_quit() drives one GameSession over a pair of text streams, and
main() is the process entry point behind the `tinyquest` command.
"""

import argparse
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .config import Config
from .engine.errors import QuestError, TransportError, WorldError
from .engine.loader import default_world, load_world
from .logging import configure_logging, get_logger
from .session import GameSession

logger = get_logger(__name__)

PROMPT = "Enter command\n"

EXIT_SUCCESS = 0
EXIT_GAME_ERROR = 1
EXIT_INIT_ERROR = 2


def _write(ostream: TextIO, text: str) -> None:
    try:
        ostream.write(text)
        ostream.flush()
    except OSError as e:
        raise TransportError(f"could not write output: {e}") from e


def run_until_quit(session: GameSession, istream: TextIO, ostream: TextIO) -> None:
    """Prompt, read and answer commands until the player quits.

    End of input ends the game the same way QUIT does. Failures to read or
    write raise TransportError.
    """
    while not session.finished:
        _write(ostream, PROMPT)
        try:
            line = istream.readline()
        except OSError as e:
            raise TransportError(f"could not get input: {e}") from e
        if not line:
            logger.debug("input_closed")
            return

        output = session.process_command(line)
        if output:
            _write(ostream, output + "\n\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyquest", description="A small text adventure."
    )
    parser.add_argument(
        "--version", action="store_true", help="print the version and exit"
    )
    parser.add_argument(
        "-w",
        "--world",
        type=Path,
        help="JSON file that contains the definition of the world",
    )
    parser.add_argument("--start", help="label of the room to start in")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the console game. Returns the process exit code."""
    args = _build_parser().parse_args(argv)
    if args.version:
        print(f"tinyquest {__version__}")
        return EXIT_SUCCESS

    config = Config.from_env()
    configure_logging(
        log_level=args.log_level or config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hash_fingerprints=config.hash_fingerprints,
    )

    world_file = args.world or config.world_file
    try:
        world = load_world(world_file) if world_file else default_world()
        session = GameSession(world, args.start or config.start_room)
    except WorldError as e:
        logger.error("init_failed", error=str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INIT_ERROR

    logger.info("game_started", rooms=len(world.rooms), start=session.state.current_label)
    try:
        run_until_quit(session, sys.stdin, sys.stdout)
    except QuestError as e:
        logger.error("game_failed", error=str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_GAME_ERROR

    return EXIT_SUCCESS
