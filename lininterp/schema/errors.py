"""Exceptions raised by the interpolation engine."""


class InvalidTableError(ValueError):
    """Raised when a point table cannot be interpolated."""
