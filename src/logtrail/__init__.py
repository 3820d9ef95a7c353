"""Tail, browse and filter structured log files in the terminal."""

__version__ = "0.1.0"
