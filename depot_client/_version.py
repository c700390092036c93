"""Version information for depot-client."""

__version__ = "0.1.0"
