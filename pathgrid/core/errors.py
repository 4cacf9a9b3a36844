# pathgrid/core/errors.py
#!/usr/bin/env python3
"""Exceptions raised by the search core (and reused by the app layer)."""


class PathgridError(Exception):
    """Base class for every error raised by pathgrid."""


class InvalidShape(PathgridError, ValueError):
    """Grid has zero rows, zero columns or rows of different lengths."""


class OutOfBounds(PathgridError, IndexError):
    """A start or goal position lies outside the grid."""


class NoPathFound(PathgridError, LookupError):
    """The open set ran dry before the goal was expanded."""


class SearchBudgetExceeded(PathgridError, RuntimeError):
    """The engine spent its expansion budget without reaching the goal."""
