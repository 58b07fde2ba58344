"""
Single-triangle split step.

The triangle's corners are tried as apex in the fixed order 0, 1, 2. For apex
``i`` with opposite edge ``(j, k)``, if the edge crosses the plane at vertex
``m``, the triangle ``(i, j, k)`` becomes ``(i, m, k)`` and ``(i, j, m)`` is
added. Only the first crossing edge found is split; which of two crossing
edges goes first therefore depends on the corner order of the input.
"""

from typing import Optional

from planecut.core.mesh import Triangle
from planecut.cutting.intersection import IntersectionCache


def split_triangle(
    triangle: Triangle,
    cache: IntersectionCache,
) -> Optional[tuple[Triangle, Triangle]]:
    """
    Split a triangle at its first edge crossing the plane.

    Args:
        triangle: Corner indices
        cache: Crossing cache of the current cut; a new crossing vertex is
            appended to its mesh on a cache miss

    Returns:
        ``(rewritten, appended)`` where ``rewritten`` replaces the input
        triangle and ``appended`` is the new triangle, or None when no edge
        crosses the plane.
    """
    for n in range(3):
        i = triangle[n]
        j = triangle[(n + 1) % 3]
        k = triangle[(n + 2) % 3]

        m = cache.resolve(j, k)
        if m is not None:
            return (i, m, k), (i, j, m)

    return None
