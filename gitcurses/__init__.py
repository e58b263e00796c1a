"""A curses terminal front end for everyday git commands."""

__version__ = "0.1.0"