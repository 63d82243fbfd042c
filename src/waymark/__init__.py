"""
Waymark - maps for text adventures.

Parses compact map descriptions into room graphs, finds routes through the
rooms a player has visited, and lays the explored map out in 3-D.
"""

__version__ = "0.1.0"
