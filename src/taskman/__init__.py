"""taskman - menu-driven local task manager backed by a pipe-delimited text file."""

__version__ = "1.0.0"
