"""Gameplay routes.

Each client certificate gets its own GameSession, held in memory for the
lifetime of the server.
"""

from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..session import GameSession

GAME_OVER = "You have left the game. Start a new one to play again."


def _game_session(request: Request) -> GameSession:
    identity = get_identity(request)
    return request.app.state.sessions.get_or_create(identity.fingerprint)


def _render_play(app: Xitzin, game: GameSession, message: str = ""):
    """Render the main play view."""
    room = game.state.room
    return app.template(
        "play.gmi",
        room_name=room.name,
        description=room.description,
        items=[item.name or item.label.lower() for item in room.items],
        exits=[
            (egress.aliases[0], egress.description)
            for egress in room.exits
            if egress.aliases
        ],
        message=message,
        turns=game.state.turns,
        is_finished=game.finished,
    )


def _play_command(app: Xitzin, request: Request, raw_input: str):
    game = _game_session(request)
    if game.finished:
        return _render_play(app, game, message=GAME_OVER)
    return _render_play(app, game, message=game.process_command(raw_input))


def _register_action_routes(app: Xitzin) -> None:
    """Register command and movement routes."""

    @app.gemini("/play", name="play")
    @require_certificate
    def play(request: Request):
        """Main game view."""
        return _render_play(app, _game_session(request))

    @app.gemini("/go/{alias}", name="go")
    @require_certificate
    def go(request: Request, alias: str):
        """Movement via clickable link."""
        return _play_command(app, request, f"GO {alias}")

    @app.input("/cmd", prompt="What do you want to do?", name="cmd")
    @require_certificate
    def cmd(request: Request, query: str):
        """Freeform command entry."""
        return _play_command(app, request, query)

    @app.gemini("/look", name="look")
    @require_certificate
    def look(request: Request):
        return _play_command(app, request, "LOOK")

    @app.gemini("/exits", name="exits")
    @require_certificate
    def exits(request: Request):
        return _play_command(app, request, "EXITS")

    @app.gemini("/inventory", name="inventory")
    @require_certificate
    def inventory(request: Request):
        return _play_command(app, request, "INVENTORY")


def _register_game_routes(app: Xitzin) -> None:
    """Register game management routes."""

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    @require_certificate
    def new_game(request: Request, query: str):
        """Reset game with confirmation."""
        game = _game_session(request)
        if query.strip().upper() == "YES":
            game.reset()
            return _render_play(app, game, message="A new day begins!")
        return Redirect("/play")


def register_routes(app: Xitzin) -> None:
    """Register gameplay routes."""
    _register_action_routes(app)
    _register_game_routes(app)
