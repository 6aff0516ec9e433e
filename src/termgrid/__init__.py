"""termgrid - ANSI table and text styling for the terminal."""

__version__ = "0.1.0"
