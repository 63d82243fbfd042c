"""
Layout engine for Waymark.

Works out where each visited room and each passage between rooms should sit in
3-D space so a rendering layer can draw a schematic map. Nothing here knows
about meshes or scene objects: the result is plain positions, rotations and
lengths.

Axis convention: +y is north, +x is east, and z runs away from the viewer, so
"u" (up) is drawn nearer (-z) and "d" (down) farther (+z).
"""

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

import structlog

from waymark.config import Settings, get_settings

from .errors import InvalidDrawToken
from .graph import RoomGraph
from .room import Room

logger = structlog.get_logger(__name__)

DRAW_TOKEN_PATTERN = re.compile(r"([0-9]*)([a-z]+)")


@dataclass(frozen=True)
class Vector3:
    """A point or offset in layout space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def midpoint(self, other: "Vector3") -> "Vector3":
        return (self + other).scaled(0.5)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


ORIGIN = Vector3()


class DrawDirection(Enum):
    """Direction codes allowed in draw tokens."""

    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "w"
    UP = "u"
    DOWN = "d"
    NORTHEAST = "ne"
    SOUTHEAST = "se"
    SOUTHWEST = "sw"
    NORTHWEST = "nw"

    @property
    def offset(self) -> Vector3:
        """Unit offset toward a neighbour in this direction."""
        return DIRECTION_OFFSETS[self]

    @property
    def rotation(self) -> Vector3:
        """Euler rotation, in degrees, that turns a north-south bar to lie along this direction."""
        return DIRECTION_ROTATIONS[self]

    @property
    def is_diagonal(self) -> bool:
        return self in DIAGONALS


DIRECTION_OFFSETS = {
    DrawDirection.NORTH: Vector3(0, 1, 0),
    DrawDirection.SOUTH: Vector3(0, -1, 0),
    DrawDirection.EAST: Vector3(1, 0, 0),
    DrawDirection.WEST: Vector3(-1, 0, 0),
    DrawDirection.UP: Vector3(0, 0, -1),
    DrawDirection.DOWN: Vector3(0, 0, 1),
    DrawDirection.NORTHEAST: Vector3(1, 1, 0),
    DrawDirection.SOUTHEAST: Vector3(1, -1, 0),
    DrawDirection.SOUTHWEST: Vector3(-1, -1, 0),
    DrawDirection.NORTHWEST: Vector3(-1, 1, 0),
}

# Passages are modelled as bars lying north-south, rotated into place
DIRECTION_ROTATIONS = {
    DrawDirection.NORTH: Vector3(0, 0, 0),
    DrawDirection.SOUTH: Vector3(0, 0, -180),
    DrawDirection.EAST: Vector3(0, 0, -90),
    DrawDirection.WEST: Vector3(0, 0, -270),
    DrawDirection.UP: Vector3(270, 0, 0),
    DrawDirection.DOWN: Vector3(90, 0, 0),
    DrawDirection.NORTHEAST: Vector3(0, 0, -45),
    DrawDirection.SOUTHEAST: Vector3(0, 0, -135),
    DrawDirection.SOUTHWEST: Vector3(0, 0, -225),
    DrawDirection.NORTHWEST: Vector3(0, 0, -315),
}

DIAGONALS = frozenset(
    {
        DrawDirection.NORTHEAST,
        DrawDirection.SOUTHEAST,
        DrawDirection.SOUTHWEST,
        DrawDirection.NORTHWEST,
    }
)


@dataclass(frozen=True)
class DrawToken:
    """A parsed draw token such as "2ne": a distance and a direction."""

    token: str
    distance: int
    direction: DrawDirection


def parse_draw_token(token: str, room_name: str | None = None) -> DrawToken:
    """
    Split a draw token into its distance and direction.

    The token is an optional decimal distance followed by a direction code
    ("n", "2ne", "10s"). A missing distance means 1.

    Args:
        token: The draw token as written in the description
        room_name: Room the token belongs to, for error messages

    Returns:
        The parsed DrawToken

    Raises:
        InvalidDrawToken: If the token is not digits-then-code, the code is
            unknown, or the distance is zero
    """
    match = DRAW_TOKEN_PATTERN.fullmatch(token)
    if not match:
        raise InvalidDrawToken(token, room_name)

    digits, code = match.groups()
    try:
        direction = DrawDirection(code)
    except ValueError:
        raise InvalidDrawToken(token, room_name) from None

    distance = int(digits) if digits else 1
    if distance < 1:
        raise InvalidDrawToken(token, room_name)

    return DrawToken(token=token, distance=distance, direction=direction)


def passage_id(source: str, target: str) -> str:
    """Identifier of the passage from one room to another."""
    return f"{source}_{target}"


@dataclass(frozen=True)
class PlacedRoom:
    """A room and where it sits."""

    name: str
    position: Vector3


@dataclass(frozen=True)
class PlacedPassage:
    """
    A passage between two rooms, drawn as a thin bar.

    Attributes:
        source: Room whose connection produced this passage
        target: Room at the other end
        draw_token: The draw token the passage was derived from
        direction: Direction of the passage from source to target
        position: Midpoint between the two rooms
        rotation: Euler rotation in degrees for a north-south bar
        length: Length of the bar along its axis
        width: Width and depth of the bar
        explored: False when the target room has not been visited yet
    """

    source: str
    target: str
    draw_token: str
    direction: DrawDirection
    position: Vector3
    rotation: Vector3
    length: float
    width: float
    explored: bool = True

    @property
    def id(self) -> str:
        return passage_id(self.source, self.target)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box around the placed rooms."""

    minimum: Vector3
    maximum: Vector3

    @classmethod
    def from_points(cls, points: list[Vector3]) -> "BoundingBox":
        if not points:
            return cls(ORIGIN, ORIGIN)

        return cls(
            minimum=Vector3(
                min(p.x for p in points), min(p.y for p in points), min(p.z for p in points)
            ),
            maximum=Vector3(
                max(p.x for p in points), max(p.y for p in points), max(p.z for p in points)
            ),
        )

    @property
    def centre(self) -> Vector3:
        return self.minimum.midpoint(self.maximum)

    @property
    def size(self) -> Vector3:
        return self.maximum - self.minimum


@dataclass
class Layout:
    """
    Positions for everything that should be drawn on the map.

    Attributes:
        start: Room the layout was computed from
        rooms: Placed rooms keyed by room name
        passages: Placed passages keyed by (source, target)
        bounds: Bounding box of the room positions
        placement_order: Rooms and passage ids in the order they were placed
        room_size: Edge length of the cube drawn for each room
    """

    start: str
    rooms: dict[str, PlacedRoom] = field(default_factory=dict)
    passages: dict[tuple[str, str], PlacedPassage] = field(default_factory=dict)
    bounds: BoundingBox = field(default_factory=lambda: BoundingBox(ORIGIN, ORIGIN))
    placement_order: list[str] = field(default_factory=list)
    room_size: float = 1.0

    def room_position(self, room_name: str) -> Vector3 | None:
        placed = self.rooms.get(room_name)
        return placed.position if placed else None

    def passage_between(self, a: str, b: str) -> PlacedPassage | None:
        """Get the passage joining two rooms, whichever room it was drawn from."""
        return self.passages.get((a, b)) or self.passages.get((b, a))

    def recentred(self) -> "Layout":
        """
        Return a copy moved so the centre of the bounding box is the origin.

        The map can then be rotated or scaled about its middle.
        """
        shift = self.bounds.centre
        return Layout(
            start=self.start,
            rooms={
                name: replace(room, position=room.position - shift)
                for name, room in self.rooms.items()
            },
            passages={
                key: replace(passage, position=passage.position - shift)
                for key, passage in self.passages.items()
            },
            bounds=BoundingBox(self.bounds.minimum - shift, self.bounds.maximum - shift),
            placement_order=list(self.placement_order),
            room_size=self.room_size,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data for JSON output."""
        return {
            "start": self.start,
            "room_size": self.room_size,
            "rooms": {name: room.position.as_tuple() for name, room in self.rooms.items()},
            "passages": [
                {
                    "id": passage.id,
                    "source": passage.source,
                    "target": passage.target,
                    "direction": passage.direction.value,
                    "position": passage.position.as_tuple(),
                    "rotation": passage.rotation.as_tuple(),
                    "length": passage.length,
                    "width": passage.width,
                    "explored": passage.explored,
                }
                for passage in self.passages.values()
            ],
            "bounds": {
                "min": self.bounds.minimum.as_tuple(),
                "max": self.bounds.maximum.as_tuple(),
                "centre": self.bounds.centre.as_tuple(),
            },
        }


def compute_layout(
    graph: RoomGraph,
    start_room_name: str,
    *,
    settings: Settings | None = None,
    include_unexplored: bool = False,
) -> Layout:
    """
    Place the visited part of the map, starting from one room at the origin.

    Rooms are placed depth first, following each room's draw exits in the
    order they were defined, so the result is the same on every call. A room
    reachable along two routes keeps the position of the route explored first.
    Rooms that have not been visited are left out, and so is any passage
    leading to them unless include_unexplored is set, in which case those
    passages are kept and flagged as unexplored.

    Args:
        graph: The map to lay out
        start_room_name: Room placed at the origin
        settings: Geometry settings, defaults to the application settings
        include_unexplored: Also place passages leading to unvisited rooms

    Returns:
        The computed Layout

    Raises:
        UnknownRoom: If the start room is not in the map
        InvalidDrawToken: If a placed room has a malformed draw token
    """
    settings = settings or get_settings()
    start_room = graph.get_room(start_room_name)

    layout = Layout(start=start_room.name, room_size=settings.room_size)
    completed: set[str] = set()

    def place_room(room: Room, position: Vector3) -> Iterator[tuple[str, str]]:
        completed.add(room.name)
        layout.placement_order.append(room.name)
        layout.rooms[room.name] = PlacedRoom(name=room.name, position=position)
        return iter(room.draw_exits.items())

    # Each frame is a placed room and the draw exits still to follow from it
    stack = [(start_room, ORIGIN, place_room(start_room, ORIGIN))]

    while stack:
        room, position, exits = stack[-1]
        entry = next(exits, None)
        if entry is None:
            stack.pop()
            continue

        token, neighbour_name = entry
        neighbour = graph.rooms[neighbour_name]
        draw = parse_draw_token(token, room.name)

        interval = settings.room_spacing * draw.distance
        neighbour_position = position + draw.direction.offset.scaled(interval)

        already_drawn = (
            passage_id(room.name, neighbour.name) in completed
            or passage_id(neighbour.name, room.name) in completed
        )
        if not already_drawn and (neighbour.visited or include_unexplored):
            span = math.sqrt(2) * interval if draw.direction.is_diagonal else interval
            passage = PlacedPassage(
                source=room.name,
                target=neighbour.name,
                draw_token=token,
                direction=draw.direction,
                position=position.midpoint(neighbour_position),
                rotation=draw.direction.rotation,
                length=span * settings.passage_gap_ratio,
                width=settings.passage_width,
                explored=neighbour.visited,
            )
            completed.add(passage.id)
            layout.placement_order.append(passage.id)
            layout.passages[(room.name, neighbour.name)] = passage

        if neighbour.name not in completed and neighbour.visited:
            stack.append((neighbour, neighbour_position, place_room(neighbour, neighbour_position)))

    layout.bounds = BoundingBox.from_points([room.position for room in layout.rooms.values()])

    logger.info(
        "layout_computed",
        map=graph.name,
        start=start_room.name,
        rooms=len(layout.rooms),
        passages=len(layout.passages),
    )
    return layout
