"""A desktop music player that downloads a list of tracks and plays them with pygame."""

__version__ = "0.1.0"