"""Shared test fixtures for tinyquest."""

import pytest
import structlog

from tinyquest.app import create_app
from tinyquest.config import Config
from tinyquest.engine.loader import build_world, default_world
from tinyquest.engine.world import Egress, Item, Room, World


@pytest.fixture(autouse=True)
def _reset_logging():
    """Keep logger configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def world() -> World:
    return default_world()


@pytest.fixture
def two_room_world() -> World:
    return build_world(
        [
            Room(
                label="A",
                name="room A",
                description="You are in room A.",
                exits=[
                    Egress(
                        dest_label="B",
                        description="a door to room B",
                        travel_message="You walk east into room B.",
                        aliases=("EAST", "DOOR"),
                    )
                ],
                items=[
                    Item(
                        label="CUP",
                        name="tin cup",
                        description="A dented tin cup.",
                        aliases=("CUP", "TIN"),
                    )
                ],
            ),
            Room(
                label="B",
                name="room B",
                description="You are in room B.",
                exits=[
                    Egress(
                        dest_label="A",
                        description="a door to room A",
                        travel_message="You walk west into room A.",
                        aliases=("WEST",),
                    )
                ],
            ),
        ],
        start_label="A",
    )


@pytest.fixture
def test_config() -> Config:
    return Config()


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
