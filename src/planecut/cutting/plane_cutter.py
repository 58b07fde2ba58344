"""
Plane cutting driver.

Scans the triangle list with an index cursor. A triangle that splits is
replaced in place and its second half is appended to the end of the list;
the cursor stays on the same index, because the rewritten triangle may still
cross the plane along another edge. The cursor only advances once the
triangle at its position no longer splits, and the scan ends when it reaches
the end of the (growing) list. Appended triangles are visited when the
cursor gets to them.

Termination is guaranteed for planar triangles: each has at most two
crossing edges, so each index is split at most twice.
"""

import time
from dataclasses import dataclass
from typing import Optional

from planecut.core.config import DEFAULT_TOLERANCE, CuttingSettings
from planecut.core.exceptions import CutError
from planecut.core.logging import get_logger
from planecut.core.mesh import Mesh, Plane
from planecut.cutting.intersection import IntersectionCache
from planecut.cutting.splitter import split_triangle

logger = get_logger(__name__)


@dataclass
class CutResult:
    """Counts before and after a cut."""

    vertices_before: int
    triangles_before: int
    vertices_after: int
    triangles_after: int
    splits: int = 0
    cache_hits: int = 0
    skipped: bool = False
    duration_s: float = 0.0

    @property
    def vertices_added(self) -> int:
        return self.vertices_after - self.vertices_before

    @property
    def triangles_added(self) -> int:
        return self.triangles_after - self.triangles_before

    @property
    def changed(self) -> bool:
        return self.splits > 0


class PlaneCutter:
    """
    Inserts plane crossings into a mesh so no triangle straddles the plane.

    The mesh is modified in place and only ever grows: vertices and triangles
    are appended, and a split triangle is overwritten at its own index.
    """

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        zero_origin_means_unset: bool = True,
    ):
        """
        Args:
            tolerance: Crossings closer than this (as a fraction of the edge)
                to an endpoint are ignored
            zero_origin_means_unset: Treat a plane with origin (0, 0, 0) as
                "no plane" and skip the cut
        """
        self.tolerance = tolerance
        self.zero_origin_means_unset = zero_origin_means_unset

    @classmethod
    def from_settings(cls, settings: CuttingSettings) -> "PlaneCutter":
        return cls(
            tolerance=settings.tolerance,
            zero_origin_means_unset=settings.zero_origin_means_unset,
        )

    def _is_unset(self, plane: Optional[Plane]) -> bool:
        if plane is None:
            return True
        if not isinstance(plane, Plane):
            raise CutError(
                f"Expected a Plane or None, got {type(plane).__name__}"
            )
        return self.zero_origin_means_unset and plane.has_zero_origin

    def cut(self, mesh: Mesh, plane: Optional[Plane]) -> CutResult:
        """
        Cut a mesh by a plane, in place.

        Args:
            mesh: Mesh to refine; triangle indices must be in range
            plane: Cutting plane, or None for no cut

        Returns:
            CutResult with the counts before and after
        """
        result = CutResult(
            vertices_before=mesh.vertex_count,
            triangles_before=mesh.triangle_count,
            vertices_after=mesh.vertex_count,
            triangles_after=mesh.triangle_count,
        )

        if self._is_unset(plane):
            result.skipped = True
            logger.debug("cut_skipped", reason="no plane")
            return result

        start = time.perf_counter()
        cache = IntersectionCache(mesh, plane, self.tolerance)
        triangles = mesh.triangles

        t = 0
        while t < len(triangles):
            split = split_triangle(triangles[t], cache)
            if split is None:
                t += 1
                continue
            rewritten, appended = split
            triangles[t] = rewritten
            triangles.append(appended)
            result.splits += 1

        result.vertices_after = mesh.vertex_count
        result.triangles_after = mesh.triangle_count
        result.cache_hits = cache.hits
        result.duration_s = time.perf_counter() - start

        logger.info(
            "cut_complete",
            vertices_before=result.vertices_before,
            vertices_after=result.vertices_after,
            triangles_before=result.triangles_before,
            triangles_after=result.triangles_after,
            splits=result.splits,
            cache_hits=result.cache_hits,
            duration_s=round(result.duration_s, 4),
        )
        return result


def cut(
    mesh: Mesh,
    plane: Optional[Plane],
    tolerance: float = DEFAULT_TOLERANCE,
    zero_origin_means_unset: bool = True,
) -> CutResult:
    """Cut ``mesh`` by ``plane`` in place. See PlaneCutter.cut."""
    cutter = PlaneCutter(tolerance=tolerance, zero_origin_means_unset=zero_origin_means_unset)
    return cutter.cut(mesh, plane)
