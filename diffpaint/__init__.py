"""Style strings, diff metadata parsing and ANSI painting for colourised git diffs."""

__version__ = "0.1.0"