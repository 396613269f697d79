"""Building blocks for a tile-based puzzle game: XPM images, colour names,
character, string, byte, output, linked-list and line-reading helpers."""

__version__ = "0.1.0"