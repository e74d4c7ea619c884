"""onionctl — onion architecture configuration model and consistency engine."""

__version__ = "0.1.0"
