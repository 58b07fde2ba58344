"""
I/O module - OBJ meshes and JSON plane descriptors.
"""

from planecut.io.obj import format_obj, parse_obj, read_obj, write_obj
from planecut.io.plane_descriptor import PlaneDescriptor, parse_plane, read_plane

__all__ = [
    "format_obj",
    "parse_obj",
    "read_obj",
    "write_obj",
    "PlaneDescriptor",
    "parse_plane",
    "read_plane",
]
