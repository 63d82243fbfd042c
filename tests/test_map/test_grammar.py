"""Tests for the map description parser."""

import pytest

from waymark.map.errors import MalformedDescription
from waymark.map.grammar import (
    ConnectionSpec,
    format_description,
    parse_connection,
    parse_description,
    parse_room_entry,
)


class TestParseConnection:
    """Test parsing of single connections."""

    def test_three_fields(self):
        """A connection splits into draw token, true direction and room."""
        spec = parse_connection("2ne:northeast:Rocks")
        assert spec == ConnectionSpec(draw_token="2ne", true_direction="northeast", target="Rocks")

    def test_true_direction_is_free_form(self):
        """Any text is accepted as a true direction."""
        spec = parse_connection("u:climb the ladder:Loft")
        assert spec.true_direction == "climb the ladder"

    def test_too_few_fields(self):
        """A two-field connection is rejected."""
        with pytest.raises(MalformedDescription):
            parse_connection("n:Second Room")

    def test_too_many_fields(self):
        """A four-field connection is rejected."""
        with pytest.raises(MalformedDescription) as exc_info:
            parse_connection("n:north:Hall:extra")
        assert exc_info.value.fragment == "n:north:Hall:extra"


class TestParseRoomEntry:
    """Test parsing of room entries."""

    def test_room_without_connections(self):
        """A bare name is a room with no connections."""
        entry = parse_room_entry("Cellar")
        assert entry.name == "Cellar"
        assert entry.connections == ()

    def test_connections_keep_order(self):
        """Connections are returned in the order written."""
        entry = parse_room_entry("Hall|n:north:Attic|e:east:Study|s:south:Porch")
        assert [c.target for c in entry.connections] == ["Attic", "Study", "Porch"]

    def test_empty_name(self):
        """An entry with no room name is rejected."""
        with pytest.raises(MalformedDescription):
            parse_room_entry("|n:north:Attic")


class TestParseDescription:
    """Test parsing of whole descriptions."""

    def test_map_name_and_rooms(self, four_rooms_description):
        """The map name comes first, followed by the rooms in order."""
        parsed = parse_description(four_rooms_description)

        assert parsed.name == "Map1"
        assert parsed.room_names == ["First Room", "Second Room", "Third Room", "Fourth Room"]
        assert parsed.rooms[0].connections[1] == ConnectionSpec("e", "east", "Fourth Room")

    def test_no_separator(self):
        """A description without '/' is rejected."""
        with pytest.raises(MalformedDescription):
            parse_description("Just a map name")

    def test_trailing_separator(self):
        """A trailing '/' leaves an empty room entry, which is rejected."""
        with pytest.raises(MalformedDescription):
            parse_description("Map/Room/")

    def test_whitespace_is_kept(self):
        """Names are taken exactly as written."""
        parsed = parse_description("Map/ Hall |n:north: Hall ")
        assert parsed.rooms[0].name == " Hall "
        assert parsed.rooms[0].connections[0].target == " Hall "

    def test_bad_connection_anywhere(self):
        """A malformed connection in a later room fails the whole parse."""
        with pytest.raises(MalformedDescription):
            parse_description("Map/A|n:north:B/B|s-south-A")

    def test_format_description_reproduces_text(self, four_rooms_description):
        """Formatting a parsed description gives back the original text."""
        parsed = parse_description(four_rooms_description)
        assert format_description(parsed) == four_rooms_description
