"""
Minimal Wavefront OBJ reader and writer.

Only ``v`` (vertex) and ``f`` (face) records are interpreted. Every other
record is ignored. Face indices are 1-based in the file and 0-based in the
returned Mesh; only the first three indices of a face are used.
"""

import logging
from pathlib import Path
from typing import Iterable

from planecut.core.exceptions import GeometryError, MeshFormatError
from planecut.core.mesh import Mesh

logger = logging.getLogger(__name__)


def _parse_face_index(token: str, vertex_count: int) -> int:
    # "7", "7/1", "7//3" and "7/1/3" all reference vertex 7
    index = int(token.split("/", 1)[0])
    if index == 0:
        raise ValueError("OBJ indices start at 1")
    if index < 0:
        index += vertex_count
        if index < 0:
            raise ValueError("Relative index reaches before the first vertex")
        return index
    return index - 1


def parse_obj(lines: Iterable[str], source: str = "<string>") -> Mesh:
    """
    Parse OBJ text into a Mesh.

    Args:
        lines: OBJ text, one record per item.
        source: Name used in error messages.

    Returns:
        Mesh with 0-based triangle indices.

    Raises:
        MeshFormatError: If a vertex or face record is malformed, or a face
            references a vertex the file does not define.
    """
    mesh = Mesh()
    face_lines: list[tuple[int, str]] = []

    for line_number, line in enumerate(lines, start=1):
        fields = line.split()
        if not fields:
            continue
        prefix = fields[0]

        if prefix == "v":
            try:
                x, y, z = (float(value) for value in fields[1:4])
            except ValueError as e:
                raise MeshFormatError(
                    f"Malformed vertex record in {source}:{line_number}",
                    path=source,
                    line_number=line_number,
                    details={"line": line.rstrip()},
                ) from e
            mesh.add_vertex((x, y, z))

        elif prefix == "f":
            try:
                a, b, c = (_parse_face_index(token, mesh.vertex_count) for token in fields[1:4])
            except ValueError as e:
                raise MeshFormatError(
                    f"Malformed face record in {source}:{line_number}",
                    path=source,
                    line_number=line_number,
                    details={"line": line.rstrip()},
                ) from e
            mesh.add_triangle((a, b, c))
            face_lines.append((line_number, line.rstrip()))

    # Faces may precede their vertices, so bounds are checked once all are read
    for triangle, (line_number, line) in zip(mesh.triangles, face_lines):
        if max(triangle) >= mesh.vertex_count:
            raise MeshFormatError(
                f"Face references a missing vertex in {source}:{line_number}",
                path=source,
                line_number=line_number,
                details={"line": line, "vertex_count": mesh.vertex_count},
            )

    return mesh


def read_obj(path: str | Path) -> Mesh:
    """
    Read an OBJ file.

    Raises:
        GeometryError: If the file cannot be opened
        MeshFormatError: If a record is malformed or the file is not UTF-8 text
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            mesh = parse_obj(f, source=str(path))
    except OSError as e:
        raise GeometryError(f"Could not read file {path}", details={"error": str(e)}) from e
    except UnicodeDecodeError as e:
        raise MeshFormatError(
            f"File {path} is not UTF-8 text",
            path=str(path),
            details={"error": str(e)},
        ) from e

    logger.info(
        "Loaded %s: %d vertices, %d triangles",
        path, mesh.vertex_count, mesh.triangle_count,
    )
    return mesh


def format_obj(mesh: Mesh, precision: int = 9) -> str:
    """Serialize a mesh as OBJ text with 1-based face indices."""
    lines = [
        f"v {x:.{precision}g} {y:.{precision}g} {z:.{precision}g}"
        for x, y, z in mesh.vertices
    ]
    lines.extend(f"f {a + 1} {b + 1} {c + 1}" for a, b, c in mesh.triangles)
    return "\n".join(lines) + "\n"


def write_obj(mesh: Mesh, path: str | Path, precision: int = 9) -> Path:
    """
    Write a mesh to an OBJ file.

    Raises:
        GeometryError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_text(format_obj(mesh, precision=precision), encoding="utf-8")
    except OSError as e:
        raise GeometryError(f"Could not write file {path}", details={"error": str(e)}) from e

    logger.info(
        "Wrote %s: %d vertices, %d triangles",
        path, mesh.vertex_count, mesh.triangle_count,
    )
    return path
