"""Exceptions raised by the tilt maze core."""


class TiltMazeError(Exception):
    """Base exception for tilt maze errors."""
    pass


class ConfigurationError(TiltMazeError, ValueError):
    """Raised when maze dimensions or game tunables are invalid."""
    pass
