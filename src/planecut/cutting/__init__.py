"""
Cutting module - Plane crossings, triangle splitting and the cut driver.
"""

from planecut.cutting.intersection import (
    IntersectionCache,
    edge_key,
    interpolate,
    locate_crossing,
)
from planecut.cutting.splitter import split_triangle
from planecut.cutting.plane_cutter import CutResult, PlaneCutter, cut

__all__ = [
    "IntersectionCache",
    "edge_key",
    "interpolate",
    "locate_crossing",
    "split_triangle",
    "CutResult",
    "PlaneCutter",
    "cut",
]
