"""Exception types raised by :mod:`dense_sssp`."""

from __future__ import annotations


class DenseSSSPError(Exception):
    """Base class for all package-specific errors."""


class InvalidGraphError(DenseSSSPError, ValueError):
    """Raised when a cost matrix is not a square numeric grid."""


class OutOfRangeError(DenseSSSPError, IndexError):
    """Raised when a source vertex is outside ``[0, n_vertices)``."""


class PluginStateError(DenseSSSPError, RuntimeError):
    """Raised when a plugin is run before a graph has been loaded."""


__all__ = [
    "DenseSSSPError",
    "InvalidGraphError",
    "OutOfRangeError",
    "PluginStateError",
]
