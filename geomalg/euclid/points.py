"""
Affine points in 2D and 3D.

Points are positions, not displacements: subtracting two points gives a
Vector, and only vectors can be added to a point. Frame conversion of a
point therefore involves the frame origin:

    p_local  = ((p - o) . x_dir, (p - o) . y_dir [, (p - o) . z_dir])
    p_global = o + p_x * x_dir + p_y * y_dir [+ p_z * z_dir]

where o is the frame's origin point. The inverse of an orthonormal basis
matrix is its transpose, so both directions are plain dot products and
weighted sums.

As with vectors, ``project_onto_axis`` works in both dimensions while
``project_onto`` and ``mirror_across`` take an axis in 2D and a plane in 3D.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Union, TYPE_CHECKING
import math

import numpy as np

from ..core.errors import EmptyInputError
from .vectors import Vector2d, Vector3d

if TYPE_CHECKING:
    import numpy.typing as npt
    from .axes import Axis2d, Axis3d
    from .directions import Direction2d, Direction3d
    from .frames import Frame2d, Frame3d, PlanarFrame3d
    from .planes import Plane3d


@dataclass(frozen=True)
class Point2d:
    """A point in 2D space."""

    x: float
    y: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def origin(cls) -> Point2d:
        """The point (0, 0)."""
        return cls(0.0, 0.0)

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[float]) -> Point2d:
        """Build from an (x, y) iterable."""
        x, y = coordinates
        return cls(float(x), float(y))

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> Point2d:
        """Point at ``radius`` from the origin, ``angle`` radians counterclockwise from +X."""
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    @classmethod
    def along(cls, axis: Axis2d, distance: float) -> Point2d:
        """The point at a signed distance along an axis from its origin."""
        return axis.origin_point.translate_in(axis.direction, distance)

    @staticmethod
    def interpolate(start: Point2d, end: Point2d, t: float) -> Point2d:
        """
        Linear interpolation ``start + t * (end - start)``.

        ``t`` is not clamped: values outside [0, 1] extrapolate along the
        line through both points.
        """
        return Point2d(
            start.x + t * (end.x - start.x),
            start.y + t * (end.y - start.y),
        )

    @staticmethod
    def midpoint(p0: Point2d, p1: Point2d) -> Point2d:
        """Point halfway between ``p0`` and ``p1``."""
        return Point2d.interpolate(p0, p1, 0.5)

    @staticmethod
    def centroid(points: Iterable[Point2d]) -> Point2d:
        """
        Arithmetic mean of a collection of points.

        Args:
            points: Any iterable of points; consumed once

        Returns:
            The mean point

        Raises:
            EmptyInputError: If no points are given
        """
        count = 0
        sx = 0.0
        sy = 0.0
        for p in points:
            sx += p.x
            sy += p.y
            count += 1
        if count == 0:
            raise EmptyInputError("Cannot compute the centroid of no points")
        return Point2d(sx / count, sy / count)

    @staticmethod
    def circumcenter(p1: Point2d, p2: Point2d, p3: Point2d) -> Optional[Point2d]:
        """
        Center of the circle through three points.

        Args:
            p1, p2, p3: The three points on the circle

        Returns:
            The circle center, or None if the points are exactly collinear
        """
        ax, ay = p1.x, p1.y
        bx, by = p2.x - ax, p2.y - ay
        cx, cy = p3.x - ax, p3.y - ay
        d = 2.0 * (bx * cy - by * cx)
        if d == 0.0:
            return None
        b2 = bx * bx + by * by
        c2 = cx * cx + cy * cy
        ux = (cy * b2 - by * c2) / d
        uy = (bx * c2 - cx * b2) / d
        return Point2d(ax + ux, ay + uy)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def coordinates(self) -> tuple:
        """Coordinates as an (x, y) tuple."""
        return (self.x, self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Coordinates as a float64 numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    def polar_coordinates(self) -> tuple:
        """Return (radius, angle) with angle in (-pi, pi]."""
        return (math.hypot(self.x, self.y), math.atan2(self.y, self.x))

    # -------------------------------------------------------------------------
    # Displacement
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector2d) -> Point2d:
        # Point + Vector = Point (translation)
        if isinstance(other, Vector2d):
            return Point2d(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: Union[Point2d, Vector2d]) -> Union[Vector2d, Point2d]:
        # Point - Point = Vector, Point - Vector = Point
        if isinstance(other, Point2d):
            return Vector2d(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2d):
            return Point2d(self.x - other.x, self.y - other.y)
        return NotImplemented

    def vector_from(self, other: Point2d) -> Vector2d:
        """Displacement from ``other`` to this point."""
        return Vector2d(self.x - other.x, self.y - other.y)

    def vector_to(self, other: Point2d) -> Vector2d:
        """Displacement from this point to ``other``."""
        return other.vector_from(self)

    def translate_by(self, vector: Vector2d) -> Point2d:
        """Move by a displacement vector."""
        return Point2d(self.x + vector.x, self.y + vector.y)

    def translate_in(self, direction: Direction2d, distance: float) -> Point2d:
        """Move ``distance`` along ``direction``."""
        return Point2d(self.x + distance * direction.x, self.y + distance * direction.y)

    # -------------------------------------------------------------------------
    # Distances
    # -------------------------------------------------------------------------

    def squared_distance_from(self, other: Point2d) -> float:
        """Squared Euclidean distance."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_from(self, other: Point2d) -> float:
        """Euclidean distance."""
        return math.sqrt(self.squared_distance_from(other))

    def distance_along(self, axis: Axis2d) -> float:
        """Signed scalar projection onto the axis, measured from its origin."""
        return self.vector_from(axis.origin_point).component_in(axis.direction)

    def signed_distance_from(self, axis: Axis2d) -> float:
        """
        Perpendicular distance to an axis, positive to the left of its direction.

        Computed as cross(axis direction, displacement from axis origin).
        """
        d = axis.direction
        o = axis.origin_point
        return d.x * (self.y - o.y) - d.y * (self.x - o.x)

    def equal_within(self, tolerance: float, other: Point2d) -> bool:
        """True iff the squared distance is at most ``tolerance ** 2``."""
        if tolerance < 0:
            return False
        return self.squared_distance_from(other) <= tolerance * tolerance

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def scale_about(self, center: Point2d, scale: float) -> Point2d:
        """Scale the displacement from ``center`` by ``scale``."""
        return center.translate_by(self.vector_from(center) * scale)

    def rotate_around(self, center: Point2d, angle: float) -> Point2d:
        """Rotate counterclockwise around ``center`` by ``angle`` radians."""
        return center.translate_by(self.vector_from(center).rotate_by(angle))

    def mirror_across(self, axis: Axis2d) -> Point2d:
        """Reflect across the axis line."""
        o = axis.origin_point
        return o.translate_by(self.vector_from(o).mirror_across(axis))

    def project_onto_axis(self, axis: Axis2d) -> Point2d:
        """Closest point on the axis line."""
        return Point2d.along(axis, self.distance_along(axis))

    def project_onto(self, axis: Axis2d) -> Point2d:
        """Same as ``project_onto_axis``; in 2D the projection target is an axis."""
        return self.project_onto_axis(axis)

    def relative_to(self, frame: Frame2d) -> Point2d:
        """
        Express this global point in the frame's local coordinates.

        Args:
            frame: Target frame

        Returns:
            Coordinates of the displacement from the frame origin in its basis
        """
        v = self.vector_from(frame.origin_point).relative_to(frame)
        return Point2d(v.x, v.y)

    def place_in(self, frame: Frame2d) -> Point2d:
        """
        Interpret this point as local to ``frame`` and return it in global terms.

        Args:
            frame: Frame the coordinates are expressed in

        Returns:
            origin + x * x_dir + y * y_dir
        """
        return frame.origin_point.translate_by(Vector2d(self.x, self.y).place_in(frame))

    def place_on(self, planar_frame: PlanarFrame3d) -> Point3d:
        """Lift into 3D: origin plus the 2D coordinates applied to the planar basis."""
        return planar_frame.origin_point.translate_by(
            Vector2d(self.x, self.y).place_on(planar_frame)
        )


@dataclass(frozen=True)
class Point3d:
    """A point in 3D space."""

    x: float
    y: float
    z: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def origin(cls) -> Point3d:
        """The point (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[float]) -> Point3d:
        """Build from an (x, y, z) iterable."""
        x, y, z = coordinates
        return cls(float(x), float(y), float(z))

    @classmethod
    def along(cls, axis: Axis3d, distance: float) -> Point3d:
        """The point at a signed distance along an axis from its origin."""
        return axis.origin_point.translate_in(axis.direction, distance)

    @staticmethod
    def interpolate(start: Point3d, end: Point3d, t: float) -> Point3d:
        """Linear interpolation; ``t`` outside [0, 1] extrapolates."""
        return Point3d(
            start.x + t * (end.x - start.x),
            start.y + t * (end.y - start.y),
            start.z + t * (end.z - start.z),
        )

    @staticmethod
    def midpoint(p0: Point3d, p1: Point3d) -> Point3d:
        """Point halfway between ``p0`` and ``p1``."""
        return Point3d.interpolate(p0, p1, 0.5)

    @staticmethod
    def centroid(points: Iterable[Point3d]) -> Point3d:
        """
        Arithmetic mean of a collection of points.

        Raises:
            EmptyInputError: If no points are given
        """
        count = 0
        sx = 0.0
        sy = 0.0
        sz = 0.0
        for p in points:
            sx += p.x
            sy += p.y
            sz += p.z
            count += 1
        if count == 0:
            raise EmptyInputError("Cannot compute the centroid of no points")
        return Point3d(sx / count, sy / count, sz / count)

    @staticmethod
    def circumcenter(p1: Point3d, p2: Point3d, p3: Point3d) -> Optional[Point3d]:
        """
        Center of the circle through three points.

        The center lies in the plane of the three points.

        Args:
            p1, p2, p3: The three points on the circle

        Returns:
            The circle center, or None if the points are exactly collinear
        """
        a = p2.vector_from(p1)
        b = p3.vector_from(p1)
        n = a.cross(b)
        n2 = n.squared_length()
        if n2 == 0.0:
            return None
        # p1 + ((|a|^2 b - |b|^2 a) x n) / (2 |n|^2)
        w = (b * a.squared_length() - a * b.squared_length()).cross(n)
        return p1.translate_by(w / (2.0 * n2))

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def coordinates(self) -> tuple:
        """Coordinates as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Coordinates as a float64 numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Displacement
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector3d) -> Point3d:
        if isinstance(other, Vector3d):
            return Point3d(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: Union[Point3d, Vector3d]) -> Union[Vector3d, Point3d]:
        if isinstance(other, Point3d):
            return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3d):
            return Point3d(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def vector_from(self, other: Point3d) -> Vector3d:
        """Displacement from ``other`` to this point."""
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def vector_to(self, other: Point3d) -> Vector3d:
        """Displacement from this point to ``other``."""
        return other.vector_from(self)

    def translate_by(self, vector: Vector3d) -> Point3d:
        """Move by a displacement vector."""
        return Point3d(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def translate_in(self, direction: Direction3d, distance: float) -> Point3d:
        """Move ``distance`` along ``direction``."""
        return Point3d(
            self.x + distance * direction.x,
            self.y + distance * direction.y,
            self.z + distance * direction.z,
        )

    # -------------------------------------------------------------------------
    # Distances
    # -------------------------------------------------------------------------

    def squared_distance_from(self, other: Point3d) -> float:
        """Squared Euclidean distance."""
        return self.vector_from(other).squared_length()

    def distance_from(self, other: Point3d) -> float:
        """Euclidean distance."""
        return math.sqrt(self.squared_distance_from(other))

    def distance_along(self, axis: Axis3d) -> float:
        """Signed scalar projection onto the axis, measured from its origin."""
        return self.vector_from(axis.origin_point).component_in(axis.direction)

    def radial_distance_from(self, axis: Axis3d) -> float:
        """Perpendicular (unsigned) distance from the axis line."""
        displacement = self.vector_from(axis.origin_point)
        along = displacement.component_in(axis.direction)
        return math.sqrt(max(0.0, displacement.squared_length() - along * along))

    def signed_distance_from(self, plane: Plane3d) -> float:
        """Distance from a plane, positive on the side its normal points to."""
        return self.vector_from(plane.origin_point).component_in(plane.normal_direction)

    def equal_within(self, tolerance: float, other: Point3d) -> bool:
        """True iff the squared distance is at most ``tolerance ** 2``."""
        if tolerance < 0:
            return False
        return self.squared_distance_from(other) <= tolerance * tolerance

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def scale_about(self, center: Point3d, scale: float) -> Point3d:
        """Scale the displacement from ``center`` by ``scale``."""
        return center.translate_by(self.vector_from(center) * scale)

    def rotate_around(self, axis: Axis3d, angle: float) -> Point3d:
        """
        Rotate around an axis line.

        Args:
            axis: Rotation axis; its origin is a fixed point of the rotation
            angle: Rotation angle in radians (right-hand rule)

        Returns:
            The rotated point
        """
        o = axis.origin_point
        return o.translate_by(self.vector_from(o).rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> Point3d:
        """Reflect across a plane."""
        d = self.signed_distance_from(plane)
        return self.translate_in(plane.normal_direction, -2.0 * d)

    def project_onto(self, plane: Plane3d) -> Point3d:
        """Closest point on the plane."""
        d = self.signed_distance_from(plane)
        return self.translate_in(plane.normal_direction, -d)

    def project_onto_axis(self, axis: Axis3d) -> Point3d:
        """Closest point on the axis line."""
        return Point3d.along(axis, self.distance_along(axis))

    def project_into(self, planar_frame: PlanarFrame3d) -> Point2d:
        """2D coordinates within a planar frame; the normal component is dropped."""
        v = self.vector_from(planar_frame.origin_point).project_into(planar_frame)
        return Point2d(v.x, v.y)

    def relative_to(self, frame: Frame3d) -> Point3d:
        """
        Express this global point in the frame's local coordinates.

        Args:
            frame: Target frame

        Returns:
            Coordinates of the displacement from the frame origin in its basis
        """
        v = self.vector_from(frame.origin_point).relative_to(frame)
        return Point3d(v.x, v.y, v.z)

    def place_in(self, frame: Frame3d) -> Point3d:
        """
        Interpret this point as local to ``frame`` and return it in global terms.

        Args:
            frame: Frame the coordinates are expressed in

        Returns:
            origin + x * x_dir + y * y_dir + z * z_dir
        """
        return frame.origin_point.translate_by(
            Vector3d(self.x, self.y, self.z).place_in(frame)
        )
