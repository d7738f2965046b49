"""
geomalg: Geometric algebra of immutable 2D/3D value types

A library of points, vectors, directions, axes, planes, coordinate frames
and axis-aligned bounding boxes, with pure functions for constructing,
querying and transforming them.

Key Features:
- Immutable, hashable value types (frozen dataclasses)
- Change of basis between coordinate frames (relative_to / place_in)
- Planar frames for lifting 2D geometry into 3D and projecting back
- Bounding-box hull / intersection / containment algebra
- Strict record encoding and decoding (JSON compatible)
- Bulk conversions over torch tensors

API Design:
- Every transformation returns a new value; nothing is mutated
- Angles are radians; see geomalg.utils.angles for unit helpers
- Fallible constructions raise geomalg.core.errors exceptions, while
  queries with no answer (disjoint intersection, degenerate projection)
  return None

Example:
    >>> from geomalg import Frame2d, Point2d, Direction2d
    >>> frame = Frame2d.with_x_direction(Direction2d.positive_y(), Point2d(1.0, 1.0))
    >>> local = Point2d(1.0, 3.0).relative_to(frame)
    >>> local
    Point2d(x=2.0, y=0.0)
    >>> local.place_in(frame)
    Point2d(x=1.0, y=3.0)
"""

__version__ = "0.1.0"
__author__ = "geomalg Contributors"

from . import core
from . import euclid
from . import ops
from . import utils

from .core.errors import (
    GeometryError,
    EmptyInputError,
    DegenerateGeometryError,
    NonOrthonormalBasisError,
    DecodeError,
)
from .euclid import (
    Vector2d,
    Vector3d,
    Direction2d,
    Direction3d,
    Point2d,
    Point3d,
    Axis2d,
    Axis3d,
    Plane3d,
    Frame2d,
    Frame3d,
    PlanarFrame3d,
    BoundingBox2d,
    BoundingBox3d,
)

__all__ = [
    # Subpackages
    "core",
    "euclid",
    "ops",
    "utils",
    # Errors
    "GeometryError",
    "EmptyInputError",
    "DegenerateGeometryError",
    "NonOrthonormalBasisError",
    "DecodeError",
    # Value types
    "Vector2d",
    "Vector3d",
    "Direction2d",
    "Direction3d",
    "Point2d",
    "Point3d",
    "Axis2d",
    "Axis3d",
    "Plane3d",
    "Frame2d",
    "Frame3d",
    "PlanarFrame3d",
    "BoundingBox2d",
    "BoundingBox3d",
]
