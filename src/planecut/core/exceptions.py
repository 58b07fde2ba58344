"""
Custom exceptions for planecut.

All planecut exceptions inherit from PlanecutError for easy catching.
"""

from typing import Any


class PlanecutError(Exception):
    """Base exception for all planecut errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(PlanecutError):
    """Raised when configuration is invalid or missing."""

    pass


class GeometryError(PlanecutError):
    """Raised when geometry cannot be loaded, saved or converted."""

    pass


class MeshFormatError(GeometryError):
    """Raised when a mesh file contains a malformed vertex or face record."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path
        self.line_number = line_number


class PlaneDescriptorError(GeometryError):
    """Raised when a plane descriptor is malformed."""

    pass


class CutError(PlanecutError):
    """Raised when a cut is invoked with arguments it cannot interpret."""

    pass
