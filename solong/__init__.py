"""A tile-based puzzle game: collect every item, then reach the exit.

Map loading and checks, game rules, pygame drawing, a command-line entry
point and small string, byte, list and line-reading helpers.
"""

__version__ = "0.1.0"