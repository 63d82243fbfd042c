"""CLI entry point for Waymark."""

from waymark.cli import run

if __name__ == "__main__":
    run()
