"""Create Obsidian book notes from Goodreads pages."""

__version__ = "0.1.0"
