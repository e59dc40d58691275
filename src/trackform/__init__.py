"""Trackform: view and edit audio file tags through ffmpeg."""

__version__ = "0.1.0"
