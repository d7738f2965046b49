"""
Planes in 3D: an origin point plus a unit normal direction.

A plane is the 3D mirror and projection target; its normal fixes which side
counts as positive for ``Point3d.signed_distance_from``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .axes import Axis3d
from .directions import Direction3d
from .points import Point3d
from .vectors import Vector3d

if TYPE_CHECKING:
    from .frames import Frame3d


@dataclass(frozen=True)
class Plane3d:
    """An oriented plane in 3D."""

    origin_point: Point3d
    normal_direction: Direction3d

    @classmethod
    def through(cls, point: Point3d, normal_direction: Direction3d) -> Plane3d:
        """Plane through ``point`` with the given unit normal."""
        return cls(point, normal_direction)

    @classmethod
    def xy(cls) -> Plane3d:
        """The XY plane, normal +Z."""
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def yz(cls) -> Plane3d:
        """The YZ plane, normal +X."""
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def zx(cls) -> Plane3d:
        """The ZX plane, normal +Y."""
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def through_points(
        cls,
        p1: Point3d,
        p2: Point3d,
        p3: Point3d
    ) -> Optional[Plane3d]:
        """
        Plane through three points, normal following the right-hand rule
        p1 -> p2 -> p3. None if the points are collinear.
        """
        normal = p2.vector_from(p1).cross(p3.vector_from(p1)).direction()
        if normal is None:
            return None
        return cls(p1, normal)

    def normal_axis(self) -> Axis3d:
        """Axis through the origin point along the normal."""
        return Axis3d(self.origin_point, self.normal_direction)

    def reverse_normal(self) -> Plane3d:
        """Same plane, opposite normal (swaps the positive side)."""
        return Plane3d(self.origin_point, -self.normal_direction)

    def offset_by(self, distance: float) -> Plane3d:
        """Shift the plane along its normal."""
        return Plane3d(
            self.origin_point.translate_in(self.normal_direction, distance),
            self.normal_direction,
        )

    def move_to(self, point: Point3d) -> Plane3d:
        """Same normal, new origin point."""
        return Plane3d(point, self.normal_direction)

    def translate_by(self, vector: Vector3d) -> Plane3d:
        """Shift the origin point; the normal is unchanged."""
        return Plane3d(self.origin_point.translate_by(vector), self.normal_direction)

    def rotate_around(self, axis: Axis3d, angle: float) -> Plane3d:
        """Rotate origin point and normal together."""
        return Plane3d(
            self.origin_point.rotate_around(axis, angle),
            self.normal_direction.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> Plane3d:
        """Mirror origin point and normal across another plane."""
        return Plane3d(
            self.origin_point.mirror_across(plane),
            self.normal_direction.mirror_across(plane),
        )

    def relative_to(self, frame: Frame3d) -> Plane3d:
        """Express this global plane in the frame's local coordinates."""
        return Plane3d(
            self.origin_point.relative_to(frame),
            self.normal_direction.relative_to(frame),
        )

    def place_in(self, frame: Frame3d) -> Plane3d:
        """Interpret this plane as local to ``frame`` and return it in global terms."""
        return Plane3d(
            self.origin_point.place_in(frame),
            self.normal_direction.place_in(frame),
        )
