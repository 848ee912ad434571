"""Project board column-repository link service."""

__version__ = "1.0.0"
