"""
Map loader module for Waymark.

Handles loading map descriptions from text and YAML files.
"""

from pathlib import Path
from typing import Any

import structlog
import yaml

from .errors import MapLoadError
from .graph import RoomGraph, build_map

logger = structlog.get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Load a YAML file containing a map definition.

    The file holds a mapping with a 'description' string and an optional
    'visited' list of room names.

    Args:
        file_path: Path to the YAML file

    Returns:
        The map dictionary

    Raises:
        MapLoadError: If the file cannot be loaded or is missing required keys
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MapLoadError(f"YAML parsing error in {file_path}: {e}", path=file_path) from e
    except OSError as e:
        raise MapLoadError(f"Error loading {file_path}: {e}", path=file_path) from e

    if not data:
        raise MapLoadError(f"Empty YAML file: {file_path}", path=file_path)

    if not isinstance(data, dict) or "description" not in data:
        raise MapLoadError(f"Missing 'description' key in {file_path}", path=file_path)

    if not isinstance(data["description"], str):
        raise MapLoadError(f"'description' must be a string in {file_path}", path=file_path)

    visited = data.get("visited", [])
    if not isinstance(visited, list):
        raise MapLoadError(f"'visited' must be a list in {file_path}", path=file_path)

    return data


def load_text_file(file_path: Path) -> str:
    """
    Load a description from a plain text file.

    Leading and trailing whitespace (such as a final newline) is dropped.

    Raises:
        MapLoadError: If the file cannot be read or is empty
    """
    try:
        description = file_path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise MapLoadError(f"Error loading {file_path}: {e}", path=file_path) from e

    if not description:
        raise MapLoadError(f"Empty map file: {file_path}", path=file_path)

    return description


def resolve_map_path(path: Path, maps_dir: Path | None = None) -> Path:
    """
    Find a map file, looking in maps_dir when a relative path does not exist.

    Args:
        path: Path given by the caller
        maps_dir: Directory of known maps

    Returns:
        The path to use
    """
    if path.exists() or path.is_absolute() or maps_dir is None:
        return path

    candidate = maps_dir / path
    return candidate if candidate.exists() else path


def load_map(path: Path | str, maps_dir: Path | None = None) -> RoomGraph:
    """
    Load and build a map from a file.

    YAML files (.yaml, .yml) may list rooms that are already visited. Any
    other file is read as a bare description.

    Args:
        path: Path to the map file
        maps_dir: Directory searched for relative paths that do not exist

    Returns:
        The built RoomGraph, with listed rooms marked visited

    Raises:
        MapLoadError: If the file cannot be read
        MapError: Any parse or construction error from the description
    """
    file_path = resolve_map_path(Path(path), maps_dir)

    if file_path.suffix.lower() in YAML_SUFFIXES:
        data = load_yaml_file(file_path)
        graph = build_map(data["description"])
        for room_name in data.get("visited", []):
            graph.mark_visited(str(room_name))
    else:
        graph = build_map(load_text_file(file_path))

    logger.info(
        "map_loaded",
        path=str(file_path),
        map=graph.name,
        rooms=len(graph.rooms),
        visited=len(graph.visited_rooms()),
    )
    return graph
