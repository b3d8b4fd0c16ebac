"""Music Tab - search, status filter and sound muting for the music list."""

__version__ = "0.1.0"
