"""
Room module for Waymark.

Defines the Room class representing a location in a map.
"""

from pydantic import BaseModel, Field


class Room(BaseModel):
    """
    Represents a room (location) in a map.

    A room keeps two views of the same set of connections. The draw exits are
    keyed by draw-direction token ("n", "2ne", "3u") and drive the layout. The
    true exits are keyed by the direction label the game itself uses ("north",
    "in", "climb ladder") and drive navigation.

    Attributes:
        name: Unique name of the room, fixed once created
        visited: Whether the player has entered this room
        draw_exits: Maps draw-direction token to the neighbouring room's name
        true_exits: Maps true-direction label to the neighbouring room's name
    """

    name: str = Field(..., frozen=True, description="Unique room name")
    visited: bool = Field(default=False, description="Whether the player has been here")
    draw_exits: dict[str, str] = Field(
        default_factory=dict, description="Maps draw token (e.g., '2ne') to room name"
    )
    true_exits: dict[str, str] = Field(
        default_factory=dict, description="Maps true direction (e.g., 'north') to room name"
    )

    def connect(self, draw_token: str, true_direction: str, target_name: str) -> None:
        """
        Record a connection from this room to another.

        Args:
            draw_token: Draw-direction token, stored exactly as written
            true_direction: Direction label used for navigation
            target_name: Name of the room the connection leads to

        Raises:
            ValueError: If either direction is already used by this room
        """
        if draw_token in self.draw_exits:
            raise ValueError(f"draw direction '{draw_token}' is already used")
        if true_direction in self.true_exits:
            raise ValueError(f"true direction '{true_direction}' is already used")

        self.draw_exits[draw_token] = target_name
        self.true_exits[true_direction] = target_name

    def mark_visited(self) -> None:
        """Flag this room as visited."""
        self.visited = True

    def get_room_for_drawing(self, draw_token: str) -> str | None:
        """Get the room name that lies along a draw-direction token."""
        return self.draw_exits.get(draw_token)

    def get_room_for_traversing(self, true_direction: str) -> str | None:
        """Get the room name reached by following a true direction."""
        return self.true_exits.get(true_direction)

    def get_draw_directions(self) -> list[str]:
        """Get the draw tokens of this room in the order they were defined."""
        return list(self.draw_exits)

    def get_true_directions(self) -> list[str]:
        """Get the true directions of this room in the order they were defined."""
        return list(self.true_exits)

    def connections(self) -> list[tuple[str, str, str]]:
        """
        Get this room's connections as (draw token, true direction, room name).

        Both exit tables are filled together by connect(), so zipping them in
        insertion order pairs each draw token with its true direction.
        """
        return [
            (draw_token, true_direction, target)
            for (draw_token, target), true_direction in zip(
                self.draw_exits.items(), self.true_exits, strict=True
            )
        ]
