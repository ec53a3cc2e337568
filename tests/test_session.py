"""Tests for the session layer."""

import pytest

from tinyquest.engine.world import World
from tinyquest.session import FAREWELL, GameSession, SessionStore


def test_process_command(two_room_world: World):
    """Commands are parsed and applied to the session state."""
    session = GameSession(two_room_world)
    assert session.process_command("go east") == "You walk east into room B."
    assert session.state.current_label == "B"


def test_blank_input(two_room_world: World):
    session = GameSession(two_room_world)
    assert session.process_command("   ") == ""
    assert session.state.turns == 0


def test_errors_become_messages(two_room_world: World):
    """Command errors come back as text and change nothing."""
    session = GameSession(two_room_world)
    assert session.process_command("dance") == 'I don\'t know how to "DANCE"'
    assert session.process_command("go north") == (
        "\"NORTH\" isn't a place you can go from here"
    )
    assert session.state.current_label == "A"
    assert not session.finished


def test_quit_finishes_session(two_room_world: World):
    """QUIT is handled by the session, not the engine."""
    session = GameSession(two_room_world)
    assert session.process_command("quit") == FAREWELL
    assert session.finished


def test_reset(two_room_world: World):
    """Reset starts over from the template world."""
    session = GameSession(two_room_world)
    session.process_command("take cup")
    session.process_command("east")
    session.process_command("quit")

    session.reset()

    assert not session.finished
    assert session.state.current_label == "A"
    assert session.state.inventory == []
    assert session.state.room.find_item_by_alias("CUP") is not None


def test_start_label(world: World):
    session = GameSession(world, "BATHROOM")
    assert session.process_command("look").startswith("You are in the bathroom")


def test_store_isolates_players(two_room_world: World):
    """Each player gets a separate copy of the world."""
    store = SessionStore(two_room_world)
    alice = store.get_or_create("alice")
    bob = store.get_or_create("bob")

    alice.process_command("take cup")

    assert store.get_or_create("alice") is alice
    assert len(store) == 2
    assert bob.state.room.find_item_by_alias("CUP") is not None
    assert bob.process_command("inventory") == "You aren't carrying anything."


def test_store_evicts_least_recently_used(two_room_world: World):
    """A full store drops the player who has been idle longest."""
    store = SessionStore(two_room_world, max_sessions=2)
    alice = store.get_or_create("alice")
    store.get_or_create("bob")
    assert store.get_or_create("alice") is alice

    store.get_or_create("carol")

    assert len(store) == 2
    assert "alice" in store
    assert "bob" not in store
    assert "carol" in store


def test_store_rejects_zero_capacity(two_room_world: World):
    with pytest.raises(ValueError):
        SessionStore(two_room_world, max_sessions=0)
