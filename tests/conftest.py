"""
Pytest configuration and fixtures for geomalg tests.
"""

import math
import random

import pytest
import torch

from geomalg import (
    Direction2d,
    Direction3d,
    Frame2d,
    Frame3d,
    Point2d,
    Point3d,
    Vector3d,
)


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def dtype():
    """Default dtype for tensor tests."""
    return torch.float64


@pytest.fixture
def num_points():
    """Default number of points for tests."""
    return 100


@pytest.fixture
def rng():
    """Seeded random generator for reproducible scalar samples."""
    return random.Random(1234)


@pytest.fixture
def frame2d():
    """Right-handed 2D frame rotated by 30 degrees at (1, -2)."""
    return Frame2d.with_angle(math.radians(30.0), Point2d(1.0, -2.0))


@pytest.fixture
def left_handed_frame2d(frame2d):
    """The rotated 2D frame with its Y direction reversed."""
    return frame2d.reverse_y()


@pytest.fixture
def frame3d():
    """Right-handed 3D frame with a generic orientation at (1, 2, 3)."""
    return Frame3d.from_xy(
        Point3d(1.0, 2.0, 3.0),
        Vector3d(1.0, 1.0, 0.0),
        Vector3d(-1.0, 1.0, 1.0),
    )


@pytest.fixture
def tilted_frame3d():
    """Frame with a Z direction that is not aligned with any global axis."""
    return Frame3d.with_z_direction(
        Direction3d.from_components(1.0, -2.0, 2.0),
        Point3d(-1.0, 0.5, 4.0),
    )


@pytest.fixture
def random_points2d(rng, num_points):
    """Random 2D points in [-10, 10]^2."""
    return [Point2d(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(num_points)]


@pytest.fixture
def random_points3d(rng, num_points):
    """Random 3D points in [-10, 10]^3."""
    return [
        Point3d(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        for _ in range(num_points)
    ]


@pytest.fixture
def random_directions3d(rng):
    """Random unit directions in 3D."""
    directions = []
    while len(directions) < 20:
        v = Vector3d(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
        d = v.direction()
        if d is not None:
            directions.append(d)
    return directions


@pytest.fixture
def random_point_tensor(num_points, dtype):
    """Random points in [-1, 1]^3 as a tensor of shape (2, num_points, 3)."""
    generator = torch.Generator().manual_seed(0)
    return torch.rand(2, num_points, 3, generator=generator, dtype=dtype) * 2 - 1


@pytest.fixture
def diagonal_direction2d():
    """Unit direction at 45 degrees."""
    return Direction2d.from_components(1.0, 1.0)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "gpu: marks tests that require GPU"
    )


def pytest_collection_modifyitems(config, items):
    """Skip GPU tests if no GPU available."""
    if not torch.cuda.is_available():
        skip_gpu = pytest.mark.skip(reason="No GPU available")
        for item in items:
            if "gpu" in item.keywords:
                item.add_marker(skip_gpu)
