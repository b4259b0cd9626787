"""A threaded HTTP server that serves static files from a directory."""

__version__ = "0.1.0"