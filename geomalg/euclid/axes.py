"""
Axes: an origin point plus a unit direction, defining an oriented line.

Axes are used as mirror lines (2D), rotation axes (3D), and as the
reference for ``distance_along`` / ``signed_distance_from`` queries.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .directions import Direction2d, Direction3d
from .points import Point2d, Point3d
from .vectors import Vector2d, Vector3d

if TYPE_CHECKING:
    from .frames import Frame2d, Frame3d, PlanarFrame3d
    from .planes import Plane3d


@dataclass(frozen=True)
class Axis2d:
    """An oriented line in 2D."""

    origin_point: Point2d
    direction: Direction2d

    @classmethod
    def through(cls, point: Point2d, direction: Direction2d) -> Axis2d:
        """Axis through ``point`` along ``direction``."""
        return cls(point, direction)

    @classmethod
    def x_axis(cls) -> Axis2d:
        """The global X axis."""
        return cls(Point2d.origin(), Direction2d.positive_x())

    @classmethod
    def y_axis(cls) -> Axis2d:
        """The global Y axis."""
        return cls(Point2d.origin(), Direction2d.positive_y())

    def with_direction(self, direction: Direction2d) -> Axis2d:
        """Same origin, new direction."""
        return Axis2d(self.origin_point, direction)

    def reverse(self) -> Axis2d:
        """Same line, opposite orientation."""
        return Axis2d(self.origin_point, -self.direction)

    def move_to(self, point: Point2d) -> Axis2d:
        """Same direction, new origin point."""
        return Axis2d(point, self.direction)

    def translate_by(self, vector: Vector2d) -> Axis2d:
        """Shift the origin point; the direction is unchanged."""
        return Axis2d(self.origin_point.translate_by(vector), self.direction)

    def rotate_around(self, center: Point2d, angle: float) -> Axis2d:
        """Rotate origin point and direction together."""
        return Axis2d(
            self.origin_point.rotate_around(center, angle),
            self.direction.rotate_by(angle),
        )

    def mirror_across(self, axis: Axis2d) -> Axis2d:
        """Mirror origin point and direction together."""
        return Axis2d(
            self.origin_point.mirror_across(axis),
            self.direction.mirror_across(axis),
        )

    def relative_to(self, frame: Frame2d) -> Axis2d:
        """
        Express this global axis in the frame's local coordinates.

        Args:
            frame: Target frame

        Returns:
            Axis with its origin converted as a point and its direction as a direction
        """
        return Axis2d(
            self.origin_point.relative_to(frame),
            self.direction.relative_to(frame),
        )

    def place_in(self, frame: Frame2d) -> Axis2d:
        """Interpret this axis as local to ``frame`` and return it in global terms."""
        return Axis2d(
            self.origin_point.place_in(frame),
            self.direction.place_in(frame),
        )

    def place_on(self, planar_frame: PlanarFrame3d) -> Axis3d:
        """Lift into 3D through a planar frame."""
        return Axis3d(
            self.origin_point.place_on(planar_frame),
            self.direction.place_on(planar_frame),
        )


@dataclass(frozen=True)
class Axis3d:
    """An oriented line in 3D."""

    origin_point: Point3d
    direction: Direction3d

    @classmethod
    def through(cls, point: Point3d, direction: Direction3d) -> Axis3d:
        """Axis through ``point`` along ``direction``."""
        return cls(point, direction)

    @classmethod
    def x_axis(cls) -> Axis3d:
        """The global X axis."""
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def y_axis(cls) -> Axis3d:
        """The global Y axis."""
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def z_axis(cls) -> Axis3d:
        """The global Z axis."""
        return cls(Point3d.origin(), Direction3d.positive_z())

    def with_direction(self, direction: Direction3d) -> Axis3d:
        """Same origin, new direction."""
        return Axis3d(self.origin_point, direction)

    def reverse(self) -> Axis3d:
        """Same line, opposite orientation."""
        return Axis3d(self.origin_point, -self.direction)

    def move_to(self, point: Point3d) -> Axis3d:
        """Same direction, new origin point."""
        return Axis3d(point, self.direction)

    def translate_by(self, vector: Vector3d) -> Axis3d:
        """Shift the origin point; the direction is unchanged."""
        return Axis3d(self.origin_point.translate_by(vector), self.direction)

    def rotate_around(self, axis: Axis3d, angle: float) -> Axis3d:
        """Rotate origin point and direction together."""
        return Axis3d(
            self.origin_point.rotate_around(axis, angle),
            self.direction.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> Axis3d:
        """Mirror origin point and direction together."""
        return Axis3d(
            self.origin_point.mirror_across(plane),
            self.direction.mirror_across(plane),
        )

    def project_onto(self, plane: Plane3d) -> Optional[Axis3d]:
        """Project onto a plane; None if the axis is perpendicular to it."""
        direction = self.direction.project_onto(plane)
        if direction is None:
            return None
        return Axis3d(self.origin_point.project_onto(plane), direction)

    def project_into(self, planar_frame: PlanarFrame3d) -> Optional[Axis2d]:
        """Express in a planar frame's 2D coordinates; None if the axis is perpendicular to it."""
        direction = self.direction.project_into(planar_frame)
        if direction is None:
            return None
        return Axis2d(self.origin_point.project_into(planar_frame), direction)

    def relative_to(self, frame: Frame3d) -> Axis3d:
        """Express this global axis in the frame's local coordinates."""
        return Axis3d(
            self.origin_point.relative_to(frame),
            self.direction.relative_to(frame),
        )

    def place_in(self, frame: Frame3d) -> Axis3d:
        """Interpret this axis as local to ``frame`` and return it in global terms."""
        return Axis3d(
            self.origin_point.place_in(frame),
            self.direction.place_in(frame),
        )
