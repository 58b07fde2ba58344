"""
Tests for plane descriptor parsing.
"""

import pytest

from planecut.core.exceptions import GeometryError, PlaneDescriptorError
from planecut.core.mesh import Plane
from planecut.io.plane_descriptor import PlaneDescriptor, parse_plane, read_plane


@pytest.mark.unit
@pytest.mark.io
class TestParsePlane:

    def test_parse(self):
        plane = parse_plane('{"origin": [0, 0, 0.5], "normal": [0, 0, 1]}')
        assert plane == Plane(origin=(0.0, 0.0, 0.5), normal=(0.0, 0.0, 1.0))

    def test_key_order_and_extra_keys(self):
        """Test keys may come in any order and unknown keys are ignored."""
        plane = parse_plane('{"name": "cut", "normal": [1, 0, 0], "origin": [2, 3, 4]}')
        assert plane.origin == (2.0, 3.0, 4.0)
        assert plane.normal == (1.0, 0.0, 0.0)

    def test_invalid_json(self):
        with pytest.raises(PlaneDescriptorError) as exc_info:
            parse_plane('{"origin": [0, 0, 1], ')
        assert exc_info.value.details["errors"]

    def test_missing_normal(self):
        with pytest.raises(PlaneDescriptorError) as exc_info:
            parse_plane('{"origin": [0, 0, 1]}')
        assert any("normal" in err for err in exc_info.value.details["errors"])

    @pytest.mark.parametrize("origin", ["[0, 0]", "[0, 0, 1, 2]", '"0 0 1"'])
    def test_wrong_origin_shape(self, origin):
        with pytest.raises(PlaneDescriptorError):
            parse_plane(f'{{"origin": {origin}, "normal": [0, 0, 1]}}')

    def test_zero_normal(self):
        with pytest.raises(PlaneDescriptorError):
            parse_plane('{"origin": [0, 0, 1], "normal": [0, 0, 0]}')

    def test_descriptor_error_is_geometry_error(self):
        with pytest.raises(GeometryError):
            parse_plane("[]")

    def test_model(self):
        descriptor = PlaneDescriptor(origin=(1, 2, 3), normal=(0, 1, 0))
        assert descriptor.to_plane().origin == (1.0, 2.0, 3.0)


@pytest.mark.unit
@pytest.mark.io
class TestReadPlane:

    def test_read(self, sample_plane_file, half_plane):
        assert read_plane(sample_plane_file) == half_plane

    def test_read_missing(self, temp_dir):
        with pytest.raises(GeometryError, match="Could not read file"):
            read_plane(temp_dir / "missing.json")

    def test_read_not_utf8(self, temp_dir):
        path = temp_dir / "latin1.json"
        path.write_bytes(b'{"origin": [0, 0, 1], "normal": [0, 0, 1], "name": "caf\xe9"}')

        with pytest.raises(PlaneDescriptorError, match="not UTF-8"):
            read_plane(path)
