"""
Geometry handling for planecut using trimesh and COMPAS.

Provides loading and saving of meshes in several file formats, conversion
between the planecut Mesh store and trimesh/COMPAS meshes, and bounding-box
reporting.
"""

from pathlib import Path
from typing import Any

import numpy as np
import trimesh
from compas.datastructures import Mesh as CompasMesh
from compas.geometry import Box, Frame, Point, Vector

from planecut.core.exceptions import GeometryError
from planecut.core.mesh import Mesh
from planecut.io.obj import read_obj, write_obj


class GeometryConverter:
    """
    Converter between the planecut Mesh store and other representations.

    Vertex order and face order are preserved in both directions.
    """

    @staticmethod
    def mesh_to_trimesh(mesh: Mesh) -> trimesh.Trimesh:
        """
        Convert a Mesh to a trimesh mesh without merging or reordering vertices.

        Raises:
            GeometryError: If conversion fails
        """
        try:
            return trimesh.Trimesh(
                vertices=mesh.vertex_array(),
                faces=mesh.triangle_array(),
                process=False,
            )
        except Exception as e:
            raise GeometryError(f"Failed to convert Mesh to Trimesh: {e}") from e

    @staticmethod
    def trimesh_to_mesh(tmesh: trimesh.Trimesh) -> Mesh:
        """
        Convert a trimesh mesh to a Mesh.

        Raises:
            GeometryError: If conversion fails
        """
        try:
            return Mesh.from_arrays(tmesh.vertices, tmesh.faces)
        except Exception as e:
            raise GeometryError(f"Failed to convert Trimesh to Mesh: {e}") from e

    @staticmethod
    def mesh_to_compas(mesh: Mesh) -> CompasMesh:
        """
        Convert a Mesh to a COMPAS mesh.

        Raises:
            GeometryError: If conversion fails
        """
        try:
            vertices = [list(v) for v in mesh.vertices]
            faces = [list(t) for t in mesh.triangles]
            return CompasMesh.from_vertices_and_faces(vertices, faces)
        except Exception as e:
            raise GeometryError(f"Failed to convert Mesh to COMPAS: {e}") from e

    @staticmethod
    def compas_to_mesh(cmesh: CompasMesh) -> Mesh:
        """
        Convert a triangulated COMPAS mesh to a Mesh.

        Raises:
            GeometryError: If the mesh has non-triangular faces or conversion fails
        """
        try:
            keys = list(cmesh.vertices())
            index = {key: i for i, key in enumerate(keys)}
            vertices = [cmesh.vertex_coordinates(key) for key in keys]
            faces = [cmesh.face_vertices(f) for f in cmesh.faces()]
        except Exception as e:
            raise GeometryError(f"Failed to convert COMPAS to Mesh: {e}") from e

        polygons = [f for f in faces if len(f) != 3]
        if polygons:
            raise GeometryError(
                "COMPAS mesh is not triangulated",
                details={"non_triangular_faces": len(polygons)},
            )
        return Mesh(vertices=vertices, triangles=[[index[k] for k in f] for f in faces])


class GeometryLoader:
    """
    Loads and saves meshes.

    OBJ goes through the planecut reader/writer so that vertex order and
    indices are kept exactly; the other formats go through trimesh.
    """

    SUPPORTED_FORMATS = {".obj", ".stl", ".ply", ".off"}

    @classmethod
    def _check_format(cls, path: Path) -> str:
        suffix = path.suffix.lower()
        if suffix not in cls.SUPPORTED_FORMATS:
            raise GeometryError(
                f"Unsupported format: {path.suffix}. "
                f"Supported formats: {sorted(cls.SUPPORTED_FORMATS)}"
            )
        return suffix

    @classmethod
    def load(cls, file_path: str | Path, **kwargs: Any) -> Mesh:
        """
        Load geometry from file.

        Args:
            file_path: Path to geometry file
            **kwargs: Additional arguments passed to trimesh.load

        Returns:
            Mesh

        Raises:
            GeometryError: If file format is unsupported or loading fails
        """
        path = Path(file_path)

        if not path.exists():
            raise GeometryError(f"File not found: {path}")

        if cls._check_format(path) == ".obj":
            return read_obj(path)

        try:
            loaded = trimesh.load(str(path), process=False, **kwargs)

            if isinstance(loaded, trimesh.Scene):
                tmesh = trimesh.util.concatenate(
                    [geom for geom in loaded.geometry.values()
                     if isinstance(geom, trimesh.Trimesh)]
                )
            elif isinstance(loaded, trimesh.Trimesh):
                tmesh = loaded
            else:
                raise GeometryError(f"Unexpected geometry type: {type(loaded)}")

            return GeometryConverter.trimesh_to_mesh(tmesh)

        except GeometryError:
            raise
        except Exception as e:
            raise GeometryError(f"Failed to load geometry from {path}: {e}") from e

    @classmethod
    def save(cls, mesh: Mesh, file_path: str | Path, precision: int = 9, **kwargs: Any) -> Path:
        """
        Save a mesh to file.

        Args:
            mesh: Mesh to save
            file_path: Output file path
            precision: Significant digits for OBJ coordinates
            **kwargs: Additional arguments passed to trimesh.export

        Raises:
            GeometryError: If format is unsupported or saving fails
        """
        path = Path(file_path)

        if cls._check_format(path) == ".obj":
            return write_obj(mesh, path, precision=precision)

        try:
            GeometryConverter.mesh_to_trimesh(mesh).export(str(path), **kwargs)
        except GeometryError:
            raise
        except Exception as e:
            raise GeometryError(f"Failed to save geometry to {path}: {e}") from e
        return path


class BoundingBox:
    """Axis-aligned bounding box utilities."""

    @staticmethod
    def from_mesh(mesh: Mesh) -> Box:
        """
        Compute the axis-aligned bounding box of a mesh.

        Raises:
            GeometryError: If the mesh has no vertices
        """
        if not mesh.vertices:
            raise GeometryError("Cannot compute bounding box of an empty mesh")

        points = mesh.vertex_array()
        min_pt = points.min(axis=0)
        max_pt = points.max(axis=0)
        xsize, ysize, zsize = (max_pt - min_pt).tolist()
        center = Point(*((min_pt + max_pt) / 2).tolist())

        frame = Frame(center, Vector(1, 0, 0), Vector(0, 1, 0))
        return Box(xsize=xsize, ysize=ysize, zsize=zsize, frame=frame)

    @staticmethod
    def get_dimensions(box: Box) -> tuple[float, float, float]:
        """Return (x_size, y_size, z_size)."""
        return (box.xsize, box.ysize, box.zsize)

    @staticmethod
    def get_center(box: Box) -> Point:
        """Return the box center."""
        return box.frame.point


def straddling_triangles(mesh: Mesh, plane_origin: Any, plane_normal: Any, tolerance: float = 1e-9) -> np.ndarray:
    """
    Indices of triangles with corners strictly on both sides of a plane.

    Distances are measured along the unit normal; corners within
    ``tolerance`` of the plane count as on it.
    """
    if not mesh.triangles:
        return np.zeros(0, dtype=np.int64)
    normal = np.asarray(plane_normal, dtype=np.float64)
    normal = normal / np.linalg.norm(normal)
    distances = (mesh.vertex_array() - np.asarray(plane_origin, dtype=np.float64)) @ normal
    corners = distances[mesh.triangle_array()]
    above = (corners > tolerance).any(axis=1)
    below = (corners < -tolerance).any(axis=1)
    return np.flatnonzero(above & below)
