"""Maps - description parsing, room graphs, route finding and layout."""

from .errors import (
    DuplicateRoom,
    InvalidDrawToken,
    MalformedDescription,
    MapError,
    MapLoadError,
    UnknownRoom,
    UnknownRoomReference,
)
from .grammar import (
    ConnectionSpec,
    ParsedMap,
    RoomEntry,
    format_description,
    parse_description,
)
from .graph import RoomGraph, build_graph, build_map
from .layout import (
    BoundingBox,
    DrawDirection,
    DrawToken,
    Layout,
    PlacedPassage,
    PlacedRoom,
    Vector3,
    compute_layout,
    parse_draw_token,
)
from .loader import load_map
from .pathfinding import PathResult, PathStatus, find_path, find_path_directions
from .room import Room

__all__ = [
    "Room",
    "RoomGraph",
    "build_map",
    "build_graph",
    "load_map",
    # Parsing
    "ParsedMap",
    "RoomEntry",
    "ConnectionSpec",
    "parse_description",
    "format_description",
    # Routes
    "find_path",
    "find_path_directions",
    "PathResult",
    "PathStatus",
    # Layout
    "compute_layout",
    "parse_draw_token",
    "Layout",
    "PlacedRoom",
    "PlacedPassage",
    "BoundingBox",
    "DrawDirection",
    "DrawToken",
    "Vector3",
    # Errors
    "MapError",
    "MalformedDescription",
    "DuplicateRoom",
    "UnknownRoomReference",
    "UnknownRoom",
    "InvalidDrawToken",
    "MapLoadError",
]
