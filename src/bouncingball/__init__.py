"""A single ball bouncing in a resizable box."""

__version__ = "0.1.0"
