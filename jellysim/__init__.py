"""Mass-spring soft-body simulation with a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["vector", "body", "physics", "world", "app"]