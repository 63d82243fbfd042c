"""
Room graph for Waymark.

Builds the graph of rooms from a parsed description and answers membership
and visited-state queries about it.
"""

from collections.abc import Iterator

import structlog

from .errors import DuplicateRoom, MalformedDescription, UnknownRoom, UnknownRoomReference
from .grammar import ConnectionSpec, ParsedMap, RoomEntry, format_description, parse_description
from .room import Room

logger = structlog.get_logger(__name__)


class RoomGraph:
    """
    A map: a name plus every room it contains, indexed by room name.

    The topology is fixed once built. Only the rooms' visited flags change
    afterwards.
    """

    def __init__(self, name: str, rooms: dict[str, Room]) -> None:
        self.name = name
        self.rooms = rooms

    @classmethod
    def from_description(cls, description: str) -> "RoomGraph":
        """Build a graph from description text."""
        return build_map(description)

    def __contains__(self, room_name: object) -> bool:
        return room_name in self.rooms

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms.values())

    def __len__(self) -> int:
        return len(self.rooms)

    def contains_room(self, room_name: str) -> bool:
        """Check whether a room with this name is part of the map."""
        return room_name in self.rooms

    def get_room(self, room_name: str) -> Room:
        """
        Get a room by name.

        Raises:
            UnknownRoom: If the map has no such room
        """
        try:
            return self.rooms[room_name]
        except KeyError:
            raise UnknownRoom(room_name) from None

    def mark_visited(self, room_name: str) -> None:
        """
        Flag a room as visited by the player.

        Raises:
            UnknownRoom: If the map has no such room
        """
        self.get_room(room_name).mark_visited()
        logger.debug("room_visited", map=self.name, room=room_name)

    def visited_rooms(self) -> list[str]:
        """Get the names of all visited rooms, in map order."""
        return [room.name for room in self.rooms.values() if room.visited]

    def connection_warnings(self) -> list[str]:
        """
        Find one-way connections.

        A connection from A to B is one-way when B has no connection at all
        back to A. These are legal, but usually an authoring slip.

        Returns:
            List of warning messages (non-critical issues)
        """
        warnings: list[str] = []

        for room in self.rooms.values():
            for draw_token, true_direction, target_name in room.connections():
                target = self.rooms[target_name]
                if room.name not in target.true_exits.values():
                    warnings.append(
                        f"One-way connection: '{room.name}' -> '{true_direction}' "
                        f"({draw_token}) -> '{target_name}', "
                        f"but '{target_name}' has no connection back"
                    )

        return warnings

    def to_parsed(self) -> ParsedMap:
        """Convert the graph back into its parsed form."""
        return ParsedMap(
            name=self.name,
            rooms=tuple(
                RoomEntry(
                    name=room.name,
                    connections=tuple(
                        ConnectionSpec(draw_token=d, true_direction=t, target=target)
                        for d, t, target in room.connections()
                    ),
                )
                for room in self.rooms.values()
            ),
        )

    def to_description(self) -> str:
        """Render the graph as description text."""
        return format_description(self.to_parsed())


def build_map(description: str) -> RoomGraph:
    """
    Parse a description and build its room graph.

    Rooms are created first, then wired together, so a connection may refer to
    a room defined later in the description. Connections are not mirrored: a
    way back must be written out in the target room's entry.

    Args:
        description: The description string

    Returns:
        The built RoomGraph

    Raises:
        MalformedDescription: If the description violates the grammar, or a
            room reuses a direction
        DuplicateRoom: If a room name is defined twice
        UnknownRoomReference: If a connection targets an undefined room
    """
    parsed = parse_description(description)
    graph = build_graph(parsed)

    for warning in graph.connection_warnings():
        logger.warning("one_way_connection", map=graph.name, detail=warning)

    logger.info("map_built", map=graph.name, rooms=len(graph.rooms))
    return graph


def build_graph(parsed: ParsedMap) -> RoomGraph:
    """Build a RoomGraph from an already parsed description."""
    rooms: dict[str, Room] = {}

    for entry in parsed.rooms:
        if entry.name in rooms:
            raise DuplicateRoom(entry.name)
        rooms[entry.name] = Room(name=entry.name)

    for entry in parsed.rooms:
        room = rooms[entry.name]
        for connection in entry.connections:
            if connection.target not in rooms:
                raise UnknownRoomReference(entry.name, connection.target)

            try:
                room.connect(connection.draw_token, connection.true_direction, connection.target)
            except ValueError as e:
                raise MalformedDescription(
                    f"Room '{entry.name}' has a conflicting connection: {e}",
                    fragment=entry.name,
                ) from e

    return RoomGraph(name=parsed.name, rooms=rooms)
