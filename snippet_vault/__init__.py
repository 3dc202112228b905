"""Personal code-snippet manager API."""

__version__ = "0.1.0"
