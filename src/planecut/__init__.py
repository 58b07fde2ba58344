"""
planecut - Plane/mesh intersection for triangulated surfaces.

Inserts a vertex wherever a mesh edge crosses a cutting plane and
re-triangulates the affected faces, so that no triangle straddles the plane.
"""

__version__ = "0.1.0"
__author__ = "planecut Contributors"

from planecut.core.mesh import Mesh, Plane
from planecut.cutting.plane_cutter import CutResult, PlaneCutter, cut

__all__ = [
    "__version__",
    "Mesh",
    "Plane",
    "CutResult",
    "PlaneCutter",
    "cut",
]
