"""
Functional API over the value types.

Every value type implements its transformations as methods; this module
exposes the same operations as free functions taking the frame (or other
parameters) first, which reads naturally in pipelines:

    to_local = compose(partial(relative_to, frame_a), partial(place_in, frame_b))
    result = pipe(point, partial(translate_by, offset), to_local)

All functions raise ``TypeError`` for values that do not support the
operation.
"""

from __future__ import annotations
from functools import reduce
from typing import Any, Callable, Union

from ..core.types import Transformation
from .axes import Axis2d, Axis3d
from .directions import Direction2d, Direction3d
from .frames import Frame2d, Frame3d, PlanarFrame3d
from .planes import Plane3d
from .points import Point2d, Point3d
from .vectors import Vector2d, Vector3d

Frame = Union[Frame2d, Frame3d]

_FRAME_2D_VALUES = (Point2d, Vector2d, Direction2d, Axis2d, Frame2d)
_FRAME_3D_VALUES = (Point3d, Vector3d, Direction3d, Axis3d, Plane3d, Frame3d, PlanarFrame3d)


def _check_frame_value(frame: Frame, value: Any, operation: str) -> None:
    """Raise TypeError unless ``value`` can be converted through ``frame``."""
    if isinstance(frame, Frame2d):
        supported = _FRAME_2D_VALUES
    elif isinstance(frame, Frame3d):
        supported = _FRAME_3D_VALUES
    else:
        raise TypeError(f"{operation} expects a Frame2d or Frame3d, got {type(frame).__name__}")
    if not isinstance(value, supported):
        raise TypeError(
            f"{operation} does not support {type(value).__name__} with {type(frame).__name__}"
        )


def relative_to(frame: Frame, value):
    """
    Re-express a globally defined value in ``frame``'s local coordinates.

    Args:
        frame: Frame2d for 2D values, Frame3d for 3D values
        value: Point, Vector, Direction, Axis, Plane or Frame

    Returns:
        The same kind of value in local coordinates
    """
    _check_frame_value(frame, value, "relative_to")
    return value.relative_to(frame)


def place_in(frame: Frame, value):
    """
    Re-express a value given relative to ``frame`` in global coordinates.

    Inverse of ``relative_to``:
        place_in(f, relative_to(f, v)) == v  (up to rounding)
    """
    _check_frame_value(frame, value, "place_in")
    return value.place_in(frame)


def place_in_3d(planar_frame: PlanarFrame3d, value):
    """
    Lift a 2D value into 3D using a planar frame.

    Args:
        planar_frame: Planar frame the 2D value is expressed in
        value: Point2d, Vector2d, Direction2d, Axis2d or Frame2d

    Returns:
        The 3D counterpart (a Frame2d becomes a PlanarFrame3d)
    """
    return planar_frame.place_in_3d(value)


def project_into(planar_frame: PlanarFrame3d, value):
    """Project a 3D value into a planar frame's 2D coordinates."""
    return planar_frame.project_into(value)


def translate_by(vector: Union[Vector2d, Vector3d], value):
    """Translate a value by ``vector``."""
    if not hasattr(value, "translate_by"):
        raise TypeError(f"{type(value).__name__} cannot be translated")
    return value.translate_by(vector)


def rotate_around(center: Union[Point2d, Axis3d], angle: float, value):
    """
    Rotate a value by ``angle`` radians.

    In 2D ``center`` is a Point2d; in 3D it is the Axis3d to rotate around.
    2D vectors and directions ignore the center point.
    """
    if isinstance(value, (Vector2d, Direction2d)):
        return value.rotate_by(angle)
    if not hasattr(value, "rotate_around"):
        raise TypeError(f"{type(value).__name__} cannot be rotated")
    return value.rotate_around(center, angle)


def mirror_across(mirror: Union[Axis2d, Plane3d], value):
    """Mirror a value across an axis (2D) or plane (3D)."""
    if not hasattr(value, "mirror_across"):
        raise TypeError(f"{type(value).__name__} cannot be mirrored")
    return value.mirror_across(mirror)


def compose(*transformations: Transformation) -> Callable[[Any], Any]:
    """
    Compose single-argument transformations left to right.

    ``compose(f, g)(x) == g(f(x))``. Composing nothing gives the identity.
    """
    def composed(value):
        return reduce(lambda acc, fn: fn(acc), transformations, value)
    return composed


def pipe(value, *transformations: Transformation):
    """Apply transformations to ``value`` left to right."""
    return compose(*transformations)(value)
