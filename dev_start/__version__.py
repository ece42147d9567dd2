"""Version information for dev-start."""

__version__ = "0.1.0"
