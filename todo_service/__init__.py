"""An HTTP service for managing to-do items kept in a JSON file."""

__version__ = "0.1.0"