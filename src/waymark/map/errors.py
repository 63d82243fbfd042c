"""
Error types for Waymark maps.

Every failure raised while parsing, building, querying or laying out a map is a
subclass of MapError, so callers can refuse a bad map without catching
unrelated exceptions.
"""


class MapError(Exception):
    """Base class for all map errors."""

    pass


class MalformedDescription(MapError):
    """Raised when a map description does not follow the grammar."""

    def __init__(self, message: str, fragment: str | None = None) -> None:
        super().__init__(message)
        self.fragment = fragment


class DuplicateRoom(MapError):
    """Raised when the same room name is defined twice in one description."""

    def __init__(self, room_name: str) -> None:
        super().__init__(f"Duplicate room '{room_name}'")
        self.room_name = room_name


class UnknownRoomReference(MapError):
    """Raised when a connection points at a room the description never defines."""

    def __init__(self, room_name: str, target_name: str) -> None:
        super().__init__(f"Room '{room_name}' connects to non-existent room '{target_name}'")
        self.room_name = room_name
        self.target_name = target_name


class UnknownRoom(MapError):
    """Raised when a query names a room that is not in the map."""

    def __init__(self, room_name: str) -> None:
        super().__init__(f"Unknown room '{room_name}'")
        self.room_name = room_name


class InvalidDrawToken(MapError):
    """Raised when a draw-direction token cannot be turned into a distance and direction."""

    def __init__(self, token: str, room_name: str | None = None) -> None:
        where = f" in room '{room_name}'" if room_name else ""
        super().__init__(f"Invalid draw direction '{token}'{where}")
        self.token = token
        self.room_name = room_name


class MapLoadError(MapError):
    """Raised when a map file cannot be read."""

    def __init__(self, message: str, path: object = None) -> None:
        super().__init__(message)
        self.path = path
