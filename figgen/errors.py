"""Exceptions raised by figgen."""
from __future__ import annotations

from typing import Optional


class FigureError(Exception):
    """Base class for every error raised by figgen."""


class InvalidGeometryError(FigureError, ValueError):
    """Shape parameters that cannot produce a well-formed mesh."""


class MalformedInputError(FigureError, ValueError):
    """A patch file or mesh file whose contents do not follow the format."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MeshIOError(FigureError, OSError):
    """A mesh or patch file could not be opened, read or written."""
