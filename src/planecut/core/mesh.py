"""
Mesh store and cutting plane value types.

A Mesh is two append-only sequences: vertex positions and triangles holding
0-based indices into the vertex sequence. Indices stay valid while the
sequences grow, so the cutter only ever holds indices across appends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np
from compas.geometry import Plane as CompasPlane

Point3 = tuple[float, float, float]
Vector3 = tuple[float, float, float]
Triangle = tuple[int, int, int]


def _point(values: Sequence[float]) -> Point3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _triangle(values: Sequence[int]) -> Triangle:
    a, b, c = values
    return (int(a), int(b), int(c))


@dataclass
class Mesh:
    """Ordered vertex positions and ordered triangles."""

    vertices: list[Point3] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vertices = [_point(v) for v in self.vertices]
        self.triangles = [_triangle(t) for t in self.triangles]

    @classmethod
    def from_arrays(cls, vertices: Iterable[Sequence[float]], triangles: Iterable[Sequence[int]]) -> Mesh:
        """Build a mesh from any (N, 3) vertex and (M, 3) face arrays."""
        return cls(
            vertices=[_point(v) for v in np.asarray(vertices, dtype=np.float64).reshape(-1, 3)],
            triangles=[_triangle(t) for t in np.asarray(triangles, dtype=np.int64).reshape(-1, 3)],
        )

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def add_vertex(self, position: Sequence[float]) -> int:
        """Append a vertex and return its index."""
        self.vertices.append(_point(position))
        return len(self.vertices) - 1

    def add_triangle(self, triangle: Sequence[int]) -> int:
        """Append a triangle and return its index."""
        self.triangles.append(_triangle(triangle))
        return len(self.triangles) - 1

    def vertex_array(self) -> np.ndarray:
        """Vertex positions as an (N, 3) float array."""
        return np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3)

    def triangle_array(self) -> np.ndarray:
        """Triangles as an (M, 3) integer array."""
        return np.asarray(self.triangles, dtype=np.int64).reshape(-1, 3)

    def copy(self) -> Mesh:
        return Mesh(vertices=list(self.vertices), triangles=list(self.triangles))


@dataclass(frozen=True)
class Plane:
    """
    Infinite cutting plane through ``origin`` with normal ``normal``.

    The normal does not need to be unit length.
    """

    origin: Point3
    normal: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", _point(self.origin))
        object.__setattr__(self, "normal", _point(self.normal))

    @property
    def has_zero_origin(self) -> bool:
        return self.origin == (0.0, 0.0, 0.0)

    def signed_distance(self, point: Sequence[float]) -> float:
        """(point - origin) . normal, unscaled by the normal's length."""
        ox, oy, oz = self.origin
        nx, ny, nz = self.normal
        return (point[0] - ox) * nx + (point[1] - oy) * ny + (point[2] - oz) * nz

    @classmethod
    def from_compas(cls, plane: CompasPlane) -> Plane:
        """Build a plane from a COMPAS plane."""
        return cls(origin=tuple(plane.point), normal=tuple(plane.normal))

    def to_compas(self) -> CompasPlane:
        """Convert to a COMPAS plane (COMPAS stores a unit normal)."""
        return CompasPlane(list(self.origin), list(self.normal))
