"""
Plane descriptor parsing.

A plane descriptor is a JSON document holding the cutting plane::

    {
        "origin": [0.0, 0.0, 0.5],
        "normal": [0.0, 0.0, 1.0]
    }

Any other keys are ignored.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from planecut.core.exceptions import GeometryError, PlaneDescriptorError
from planecut.core.mesh import Plane

logger = logging.getLogger(__name__)


class PlaneDescriptor(BaseModel):
    """Validated plane descriptor document."""

    model_config = ConfigDict(extra="ignore")

    origin: tuple[float, float, float]
    normal: tuple[float, float, float]

    @field_validator("normal")
    @classmethod
    def _check_normal(cls, value: tuple[float, float, float]) -> tuple[float, float, float]:
        if value == (0.0, 0.0, 0.0):
            raise ValueError("normal must not be the zero vector")
        return value

    def to_plane(self) -> Plane:
        return Plane(origin=self.origin, normal=self.normal)


def parse_plane(text: str | bytes) -> Plane:
    """
    Parse a JSON plane descriptor.

    Raises:
        PlaneDescriptorError: If the document is not valid JSON or lacks
            a three-component origin or normal
    """
    try:
        descriptor = PlaneDescriptor.model_validate_json(text)
    except ValidationError as e:
        raise PlaneDescriptorError(
            "Invalid plane descriptor",
            details={
                "errors": [
                    f"{'.'.join(str(p) for p in err['loc']) or '<document>'}: {err['msg']}"
                    for err in e.errors()
                ]
            },
        ) from e
    return descriptor.to_plane()


def read_plane(path: str | Path) -> Plane:
    """
    Read a plane descriptor file.

    Raises:
        GeometryError: If the file cannot be opened
        PlaneDescriptorError: If its content is invalid or not UTF-8 text
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GeometryError(f"Could not read file {path}", details={"error": str(e)}) from e
    except UnicodeDecodeError as e:
        raise PlaneDescriptorError(f"File {path} is not UTF-8 text", details={"error": str(e)}) from e

    plane = parse_plane(text)
    logger.info("Loaded plane from %s: origin=%s normal=%s", path, plane.origin, plane.normal)
    return plane
