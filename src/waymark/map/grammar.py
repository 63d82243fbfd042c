"""Parser for the compact map description grammar.

A description looks like::

    Map1/First Room|n:north:Second Room/Second Room|s:south:First Room

The map name runs up to the first '/'. Each room entry after it is split on
'|' into the room name and its connections, and each connection is split on
':' into draw direction, true direction and target room name.
"""

from dataclasses import dataclass, field

from .errors import MalformedDescription

MAP_SEPARATOR = "/"
CONNECTION_SEPARATOR = "|"
FIELD_SEPARATOR = ":"


@dataclass(frozen=True)
class ConnectionSpec:
    """One parsed connection out of a room."""

    draw_token: str
    true_direction: str
    target: str


@dataclass(frozen=True)
class RoomEntry:
    """One parsed room entry: a room name and its outgoing connections."""

    name: str
    connections: tuple[ConnectionSpec, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ParsedMap:
    """A parsed description, with room entries kept in the order they were written."""

    name: str
    rooms: tuple[RoomEntry, ...]

    @property
    def room_names(self) -> list[str]:
        return [entry.name for entry in self.rooms]


def parse_connection(text: str) -> ConnectionSpec:
    """
    Parse a single "draw:true:room" connection.

    Raises:
        MalformedDescription: If the text does not have exactly three fields
    """
    fields = text.split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise MalformedDescription(
            f"Connection '{text}' must have 3 ':'-separated fields, found {len(fields)}",
            fragment=text,
        )

    draw_token, true_direction, target = fields
    return ConnectionSpec(draw_token=draw_token, true_direction=true_direction, target=target)


def parse_room_entry(text: str) -> RoomEntry:
    """
    Parse a room entry of the form "name|conn|conn...".

    Raises:
        MalformedDescription: If the room name is empty or a connection is malformed
    """
    name, *connections = text.split(CONNECTION_SEPARATOR)
    if not name:
        raise MalformedDescription(f"Room entry '{text}' has an empty room name", fragment=text)

    return RoomEntry(
        name=name,
        connections=tuple(parse_connection(connection) for connection in connections),
    )


def parse_description(description: str) -> ParsedMap:
    """
    Parse a full map description.

    No whitespace is trimmed: names and directions are taken exactly as written.

    Args:
        description: The description string

    Returns:
        ParsedMap holding the map name and the room entries in input order

    Raises:
        MalformedDescription: If the description violates the grammar
    """
    if MAP_SEPARATOR not in description:
        raise MalformedDescription("Map description contains no '/' separator")

    name, rooms_text = description.split(MAP_SEPARATOR, 1)
    rooms = tuple(parse_room_entry(entry) for entry in rooms_text.split(MAP_SEPARATOR))

    return ParsedMap(name=name, rooms=rooms)


def format_description(parsed: ParsedMap) -> str:
    """Render a ParsedMap back into description text."""
    entries = []
    for room in parsed.rooms:
        fields = [room.name]
        fields.extend(
            FIELD_SEPARATOR.join((c.draw_token, c.true_direction, c.target))
            for c in room.connections
        )
        entries.append(CONNECTION_SEPARATOR.join(fields))

    return MAP_SEPARATOR.join([parsed.name, *entries])
