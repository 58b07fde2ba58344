"""
Tests for the Mesh store and Plane value.
"""

import numpy as np
import pytest
from compas.geometry import Plane as CompasPlane

from planecut.core.mesh import Mesh, Plane


@pytest.mark.unit
class TestMesh:
    """Tests for Mesh."""

    def test_empty(self):
        """Test an empty mesh has no elements."""
        mesh = Mesh()
        assert mesh.vertex_count == 0
        assert mesh.triangle_count == 0

    def test_values_normalized(self):
        """Test vertices become float tuples and triangles int tuples."""
        mesh = Mesh(vertices=[[0, 1, 2]], triangles=[[0, 0, 0]])
        assert mesh.vertices == [(0.0, 1.0, 2.0)]
        assert isinstance(mesh.vertices[0][0], float)
        assert mesh.triangles == [(0, 0, 0)]

    def test_add_vertex_returns_index(self, single_triangle):
        """Test appended vertices get the next index."""
        assert single_triangle.add_vertex((2, 2, 2)) == 3
        assert single_triangle.add_vertex((3, 3, 3)) == 4
        assert single_triangle.vertices[3] == (2.0, 2.0, 2.0)

    def test_add_triangle_returns_index(self, single_triangle):
        """Test appended triangles get the next index."""
        assert single_triangle.add_triangle((2, 1, 0)) == 1
        assert single_triangle.triangle_count == 2

    def test_from_arrays(self):
        """Test construction from numpy arrays."""
        vertices = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]])
        faces = np.array([[0, 1, 2]])
        mesh = Mesh.from_arrays(vertices, faces)

        assert mesh.vertex_count == 3
        assert mesh.triangles == [(0, 1, 2)]
        assert isinstance(mesh.triangles[0][0], int)

    def test_arrays(self, unit_square):
        """Test array views have the expected shapes."""
        assert unit_square.vertex_array().shape == (4, 3)
        assert unit_square.triangle_array().shape == (2, 3)
        assert Mesh().vertex_array().shape == (0, 3)

    def test_copy_is_independent(self, unit_square):
        """Test copies do not share their sequences."""
        copied = unit_square.copy()
        copied.add_vertex((5, 5, 5))
        copied.triangles[0] = (2, 1, 0)

        assert unit_square.vertex_count == 4
        assert unit_square.triangles[0] == (0, 1, 2)


@pytest.mark.unit
class TestPlane:
    """Tests for Plane."""

    def test_values_normalized(self):
        """Test origin and normal become float tuples."""
        plane = Plane(origin=[0, 0, 1], normal=[0, 0, 2])
        assert plane.origin == (0.0, 0.0, 1.0)
        assert plane.normal == (0.0, 0.0, 2.0)

    def test_immutable(self, half_plane):
        """Test a plane cannot be modified."""
        with pytest.raises(AttributeError):
            half_plane.origin = (1.0, 1.0, 1.0)

    def test_has_zero_origin(self, half_plane):
        """Test detection of the all-zero origin."""
        assert Plane(origin=(0, 0, 0), normal=(1, 0, 0)).has_zero_origin
        assert not half_plane.has_zero_origin

    def test_signed_distance(self, half_plane):
        """Test signed distance along the normal."""
        assert half_plane.signed_distance((0, 0, 1)) == pytest.approx(0.5)
        assert half_plane.signed_distance((3, 4, 0)) == pytest.approx(-0.5)
        assert half_plane.signed_distance((3, 4, 0.5)) == 0.0

    def test_compas_roundtrip(self):
        """Test conversion to and from a COMPAS plane."""
        compas_plane = CompasPlane([1.0, 2.0, 0.5], [0.0, 0.0, 1.0])
        plane = Plane.from_compas(compas_plane)

        assert plane.origin == (1.0, 2.0, 0.5)
        assert plane.normal == pytest.approx((0.0, 0.0, 1.0))

        back = plane.to_compas()
        assert list(back.point) == pytest.approx([1.0, 2.0, 0.5])
        assert list(back.normal) == pytest.approx([0.0, 0.0, 1.0])
