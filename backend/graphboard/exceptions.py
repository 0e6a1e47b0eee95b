"""Internal error types. Driver-facing failures are result strings, not these."""

from __future__ import annotations


class GraphboardError(Exception):
    """Base class for GraphBoard errors."""


class DuplicateEntityError(GraphboardError):
    """A registry key was registered twice without a clear in between."""


class SurfaceDisposedError(GraphboardError):
    """A drawing surface was used after it was released."""
