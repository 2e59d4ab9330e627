"""rigbuilder: client for the desktop-builder backend."""

__version__ = "0.1.0"
