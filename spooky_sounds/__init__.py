"""Plays a random spooky sound now and then, never the same one twice in a row."""

__version__ = "0.1.0"
