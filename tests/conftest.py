"""Shared fixtures for all tests."""

import pytest
import structlog

from waymark.config import get_settings
from waymark.map import RoomGraph, build_map

FOUR_ROOMS = (
    "Map1/First Room|n:north:Second Room|e:east:Fourth Room"
    "/Second Room|s:south:First Room|e:east:Third Room"
    "/Third Room|w:west:Second Room|s:south:Fourth Room"
    "/Fourth Room|n:north:Third Room|w:west:First Room"
)


# Settings are cached, so make sure no WAYMARK_ variables from the developer's
# environment leak into the geometry the tests expect
@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Reset cached settings around every test."""
    for name in (
        "WAYMARK_ROOM_SPACING",
        "WAYMARK_PASSAGE_GAP_RATIO",
        "WAYMARK_PASSAGE_WIDTH",
        "WAYMARK_ROOM_SIZE",
        "WAYMARK_MAPS_DIR",
        "WAYMARK_LOG_LEVEL",
        "WAYMARK_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# configure_logging() points structlog at the stderr captured for one test,
# which pytest closes afterwards
@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog's default configuration after every test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def four_rooms_description() -> str:
    """The four-room square map description."""
    return FOUR_ROOMS


@pytest.fixture
def four_rooms() -> RoomGraph:
    """The four-room square map with nothing visited."""
    return build_map(FOUR_ROOMS)


@pytest.fixture
def explored_four_rooms(four_rooms: RoomGraph) -> RoomGraph:
    """The four-room square map with every room visited."""
    for room in four_rooms:
        room.mark_visited()
    return four_rooms
