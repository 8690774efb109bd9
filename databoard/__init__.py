"""A hierarchical, thread-safe in-memory key-value store with remapping between boards."""

__version__ = "0.1.1"

__all__ = ["board", "database", "entry", "errors", "remappings"]