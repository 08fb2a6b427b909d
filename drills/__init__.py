"""Small worked programming drills, each usable on its own."""

__version__ = "0.1.0"