"""
Exception hierarchy for figvex.

Only the load boundary raises. Once a VariableGraph exists, resolution
and export degrade to inline markers instead of raising.
"""


class FigvexError(Exception):
    """Base class for all figvex errors."""
    pass


class SnapshotError(FigvexError):
    """Raised when a variable snapshot is malformed."""
    pass


class ConfigError(FigvexError):
    """Raised when an export options file cannot be used."""
    pass
