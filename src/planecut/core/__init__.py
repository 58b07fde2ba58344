"""
Core module - Mesh types, configuration, logging and geometry utilities.
"""

from planecut.core.mesh import Mesh, Plane, Point3, Triangle, Vector3
from planecut.core.config import (
    ConfigManager,
    CuttingSettings,
    LoggingSettings,
    OutputSettings,
    PlanecutConfig,
    load_config,
)
from planecut.core.exceptions import (
    PlanecutError,
    ConfigurationError,
    GeometryError,
    MeshFormatError,
    PlaneDescriptorError,
    CutError,
)
from planecut.core.geometry import (
    BoundingBox,
    GeometryConverter,
    GeometryLoader,
    straddling_triangles,
)

__all__ = [
    # Mesh
    "Mesh",
    "Plane",
    "Point3",
    "Triangle",
    "Vector3",
    # Config
    "ConfigManager",
    "CuttingSettings",
    "LoggingSettings",
    "OutputSettings",
    "PlanecutConfig",
    "load_config",
    # Exceptions
    "PlanecutError",
    "ConfigurationError",
    "GeometryError",
    "MeshFormatError",
    "PlaneDescriptorError",
    "CutError",
    # Geometry
    "BoundingBox",
    "GeometryConverter",
    "GeometryLoader",
    "straddling_triangles",
]
