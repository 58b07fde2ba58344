"""
Segment/plane crossings and the per-cut cache of split edges.

The crossing parameter ``lam`` of a segment [p, q] is defined so that
``lam * p + (1 - lam) * q`` lies on the plane::

    lam = ((origin - q) . normal) / ((p - q) . normal)

Only crossings strictly inside the segment, at least ``tolerance`` away from
both endpoints, are reported. A crossing closer to an endpoint would create a
vertex on top of an existing one.
"""

from typing import Optional

from planecut.core.config import DEFAULT_TOLERANCE
from planecut.core.mesh import Mesh, Plane, Point3

EdgeKey = tuple[int, int]

# Denominators below this fraction of the coordinate scale count as zero
ZERO_RELATIVE = 1e-12


def locate_crossing(
    plane: Plane,
    p: Point3,
    q: Point3,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Optional[float]:
    """
    Locate where segment [p, q] crosses the plane.

    Args:
        plane: Cutting plane
        p: First endpoint (lam = 1)
        q: Second endpoint (lam = 0)
        tolerance: Crossings with lam within this distance of 0 or 1 are rejected

    Returns:
        The crossing parameter in (tolerance, 1 - tolerance), or None when the
        segment does not cross, only touches the plane near an endpoint, is
        parallel to the plane or lies in it.
    """
    ox, oy, oz = plane.origin
    nx, ny, nz = plane.normal

    num = (ox - q[0]) * nx + (oy - q[1]) * ny + (oz - q[2]) * nz
    den = (p[0] - q[0]) * nx + (p[1] - q[1]) * ny + (p[2] - q[2]) * nz

    # Parallel, or contained in the plane up to rounding (two crossing
    # vertices joined by an edge only lie on the plane to within a few ulps).
    # den only depends on the segment, so the origin stays out of the scale.
    scale = (abs(nx) + abs(ny) + abs(nz)) * max(abs(c) for c in (*p, *q))
    if abs(den) <= ZERO_RELATIVE * scale:
        return None

    lam = num / den
    if not (tolerance < lam < 1.0 - tolerance):
        return None
    return lam


def interpolate(p: Point3, q: Point3, lam: float) -> Point3:
    """Return lam * p + (1 - lam) * q."""
    mu = 1.0 - lam
    return (
        lam * p[0] + mu * q[0],
        lam * p[1] + mu * q[1],
        lam * p[2] + mu * q[2],
    )


def edge_key(i: int, j: int) -> EdgeKey:
    """Canonical key of the undirected edge (i, j)."""
    return (i, j) if i < j else (j, i)


class IntersectionCache:
    """
    Crossing vertices of the edges split during one cut.

    Each undirected edge is split at most once: triangles sharing an edge get
    the same crossing vertex, which keeps the seam connected.
    """

    def __init__(self, mesh: Mesh, plane: Plane, tolerance: float = DEFAULT_TOLERANCE):
        self.mesh = mesh
        self.plane = plane
        self.tolerance = tolerance
        self._crossings: dict[EdgeKey, int] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._crossings)

    def __contains__(self, key: EdgeKey) -> bool:
        """Inspection helper: whether edge ``key`` has been split."""
        return edge_key(*key) in self._crossings

    def get(self, i: int, j: int) -> Optional[int]:
        """Inspection helper: cached crossing vertex of edge (i, j), never computed here."""
        return self._crossings.get(edge_key(i, j))

    def resolve(self, i: int, j: int) -> Optional[int]:
        """
        Return the index of the vertex where edge (i, j) crosses the plane.

        The vertex is appended to the mesh the first time the edge is found
        to cross. Returns None, leaving the mesh and the cache untouched,
        when the edge does not cross.
        """
        key = edge_key(i, j)

        cached = self._crossings.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        p = self.mesh.vertices[key[0]]
        q = self.mesh.vertices[key[1]]
        lam = locate_crossing(self.plane, p, q, self.tolerance)
        if lam is None:
            return None

        m = self.mesh.add_vertex(interpolate(p, q, lam))
        self._crossings[key] = m
        self.misses += 1
        return m
