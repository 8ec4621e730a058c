"""ka - find processes by pattern, pick which to signal, and signal them."""

__version__ = "0.1.0"
