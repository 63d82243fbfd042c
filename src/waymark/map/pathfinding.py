"""Route finding over the rooms a player has already visited."""

from collections import deque
from dataclasses import dataclass
from enum import Enum

import structlog

from .graph import RoomGraph

logger = structlog.get_logger(__name__)


class PathStatus(Enum):
    """Outcome of a route search."""

    ALREADY_THERE = "already_there"
    FOUND = "found"
    NO_PATH = "no_path"


@dataclass(frozen=True)
class PathResult:
    """
    Result of a route search.

    Attributes:
        status: Whether a route was found, was unnecessary, or does not exist
        directions: True-direction labels to follow, empty unless status is FOUND
    """

    status: PathStatus
    directions: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND

    def __len__(self) -> int:
        return len(self.directions)


def find_path(graph: RoomGraph, start: str, destination: str) -> PathResult:
    """
    Find the shortest route between two rooms using breadth-first search.

    Only connections leading out of visited rooms are followed, so the route
    never relies on parts of the map the player has not explored. Routes are
    shortest in number of moves. Among routes of equal length the one whose
    directions come first in each room's definition order wins.

    Args:
        graph: The map to search
        start: Name of the room to start from
        destination: Name of the room to reach. An unknown name simply
            cannot be reached.

    Returns:
        PathResult with the true directions to follow

    Raises:
        UnknownRoom: If the start room is not in the map
    """
    start_room = graph.get_room(start)

    if start == destination:
        return PathResult(PathStatus.ALREADY_THERE)

    queue: deque[tuple[str, tuple[str, ...]]] = deque([(start_room.name, ())])
    expanded: set[str] = set()

    while queue:
        room_name, directions = queue.popleft()

        if room_name == destination:
            logger.debug(
                "path_found",
                start=start,
                destination=destination,
                steps=len(directions),
            )
            return PathResult(PathStatus.FOUND, directions)

        if room_name in expanded:
            continue
        expanded.add(room_name)

        room = graph.rooms[room_name]
        if not room.visited:
            continue

        for direction, target_name in room.true_exits.items():
            if target_name not in expanded:
                queue.append((target_name, directions + (direction,)))

    logger.debug("path_not_found", start=start, destination=destination)
    return PathResult(PathStatus.NO_PATH)


def find_path_directions(graph: RoomGraph, start: str, destination: str) -> list[str]:
    """
    Find a route and return just the directions.

    An empty list means either "already there" or "no route". Use find_path()
    to tell the two apart.
    """
    return list(find_path(graph, start, destination).directions)
