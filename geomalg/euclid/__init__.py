"""
Euclidean value types.

Immutable 2D/3D points, vectors, directions, axes, planes, coordinate frames
and axis-aligned bounding boxes, plus the functional transformation API.
"""

from .vectors import Vector2d, Vector3d
from .directions import Direction2d, Direction3d
from .points import Point2d, Point3d
from .axes import Axis2d, Axis3d
from .planes import Plane3d
from .frames import Frame2d, Frame3d, PlanarFrame3d
from .bounding_boxes import BoundingBox2d, BoundingBox3d

from .transforms import (
    relative_to,
    place_in,
    place_in_3d,
    project_into,
    translate_by,
    rotate_around,
    mirror_across,
    compose,
    pipe,
)

__all__ = [
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
    # Functional API
    "relative_to",
    "place_in",
    "place_in_3d",
    "project_into",
    "translate_by",
    "rotate_around",
    "mirror_across",
    "compose",
    "pipe",
]
