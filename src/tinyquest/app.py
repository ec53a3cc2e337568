"""Xitzin application factory for playing tinyquest over Gemini."""

from pathlib import Path

from xitzin import Xitzin

from . import __version__
from .config import Config
from .engine.loader import default_world, load_world
from .logging import get_logger
from .session import SessionStore

logger = get_logger(__name__)


def create_app(config: Config | None = None) -> Xitzin:
    """Create and configure the Xitzin application.

    The world is loaded eagerly so that a broken world file stops the
    server before it accepts any connection.
    """
    config = config or Config.from_env()

    templates_dir = Path(__file__).parent / "templates"

    app = Xitzin(
        title="tinyquest",
        version=__version__,
        templates_dir=templates_dir,
    )

    world = load_world(config.world_file) if config.world_file else default_world()
    app.state.config = config
    app.state.sessions = SessionStore(
        world, config.start_room, max_sessions=config.max_sessions
    )
    logger.info(
        "world_loaded",
        rooms=len(world.rooms),
        items=sum(len(room.items) for room in world.rooms.values()),
    )

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app
