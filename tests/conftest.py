"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from planecut.core.mesh import Mesh, Plane


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def single_triangle():
    """Right triangle in the XZ plane: A=(0,0,0), B=(1,0,0), C=(0,0,1)."""
    return Mesh(
        vertices=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)],
        triangles=[(0, 1, 2)],
    )


@pytest.fixture
def unit_square():
    """Unit square in the XZ plane split along its B-C diagonal."""
    return Mesh(
        vertices=[
            (0.0, 0.0, 0.0),  # A
            (1.0, 0.0, 0.0),  # B
            (0.0, 0.0, 1.0),  # C
            (1.0, 0.0, 1.0),  # D
        ],
        triangles=[(0, 1, 2), (1, 3, 2)],
    )


@pytest.fixture
def half_plane():
    """Horizontal plane at z = 0.5."""
    return Plane(origin=(0.0, 0.0, 0.5), normal=(0.0, 0.0, 1.0))


@pytest.fixture
def sample_obj_file(temp_dir):
    """OBJ file holding the unit square plus records the reader ignores."""
    content = """# unit square
o square
v 0 0 0
v 1 0 0
v 0 0 1
v 1 0 1
vn 0 -1 0
vt 0 0
f 1 2 3
f 2/1/1 4/1/1 3/1/1
"""
    path = temp_dir / "square.obj"
    path.write_text(content)
    return path


@pytest.fixture
def sample_plane_file(temp_dir):
    """Plane descriptor at z = 0.5."""
    path = temp_dir / "plane.json"
    path.write_text('{\n  "origin": [0.0, 0.0, 0.5],\n  "normal": [0.0, 0.0, 1.0]\n}\n')
    return path


@pytest.fixture
def sample_config_file(temp_dir):
    """Create a sample YAML configuration."""
    config = """
cutting:
  tolerance: 0.001
  zero_origin_means_unset: false

output:
  path: "cut.obj"
  precision: 12

logging:
  level: "debug"
  json_output: true
"""
    path = temp_dir / "planecut.yaml"
    path.write_text(config)
    return path
