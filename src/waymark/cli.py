"""Command line interface for Waymark."""

import argparse
import json
import sys

import structlog

from waymark.config import get_settings
from waymark.log import configure_logging
from waymark.map import (
    MapError,
    PathStatus,
    RoomGraph,
    build_map,
    compute_layout,
    find_path,
    load_map,
)

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the waymark command."""
    argparser = argparse.ArgumentParser(
        prog="waymark", description="Route finding and layout for text adventure maps"
    )

    source = argparser.add_mutually_exclusive_group(required=True)
    source.add_argument("--map", "-m", dest="map_path", help="Map file (text or YAML)")
    source.add_argument("--description", "-D", help="Map description string")

    argparser.add_argument(
        "--visit", "-V", action="append", default=[], metavar="ROOM", help="Mark a room visited"
    )
    argparser.add_argument("--visit-all", action="store_true", help="Mark every room visited")

    commands = argparser.add_subparsers(dest="command", required=True)

    commands.add_parser("rooms", help="List the rooms of the map")

    path_cmd = commands.add_parser("path", help="Find a route between two rooms")
    path_cmd.add_argument("start", help="Room to start from")
    path_cmd.add_argument("destination", help="Room to reach")

    layout_cmd = commands.add_parser("layout", help="Compute map positions as JSON")
    layout_cmd.add_argument("start", help="Room placed at the origin")
    layout_cmd.add_argument(
        "--recentre", action="store_true", help="Move the bounding box centre to the origin"
    )
    layout_cmd.add_argument(
        "--include-unexplored",
        action="store_true",
        help="Also place passages leading to unvisited rooms",
    )

    return argparser


def load_graph(args: argparse.Namespace) -> RoomGraph:
    """Build the map named on the command line and apply visited flags."""
    settings = get_settings()

    if args.map_path:
        graph = load_map(args.map_path, maps_dir=settings.maps_dir)
    else:
        graph = build_map(args.description)

    if args.visit_all:
        for room in graph:
            room.mark_visited()
    for room_name in args.visit:
        graph.mark_visited(room_name)

    return graph


def show_rooms(graph: RoomGraph) -> None:
    print(f"{graph.name} ({len(graph)} rooms)")
    for room in graph:
        marker = "*" if room.visited else " "
        exits = ", ".join(room.get_true_directions()) or "none"
        print(f" {marker} {room.name}  [Exits: {exits}]")


def show_path(graph: RoomGraph, start: str, destination: str) -> None:
    result = find_path(graph, start, destination)

    if result.status is PathStatus.ALREADY_THERE:
        print(f"Already at {destination}.")
    elif result.status is PathStatus.NO_PATH:
        print(f"No known route from {start} to {destination}.")
    else:
        print(" ".join(result.directions))


def show_layout(
    graph: RoomGraph, start: str, recentre: bool = False, include_unexplored: bool = False
) -> None:
    layout = compute_layout(graph, start, include_unexplored=include_unexplored)
    if recentre:
        layout = layout.recentred()
    print(json.dumps(layout.to_dict(), indent=2))


def main(argv: list[str] | None = None) -> int:
    """
    Run the waymark command.

    Returns:
        Process exit status: 0 on success, 1 when the map or a query is invalid
    """
    args = build_parser().parse_args(argv)
    configure_logging(get_settings())

    try:
        graph = load_graph(args)

        if args.command == "rooms":
            show_rooms(graph)
        elif args.command == "path":
            show_path(graph, args.start, args.destination)
        elif args.command == "layout":
            show_layout(graph, args.start, args.recentre, args.include_unexplored)
    except MapError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
