"""
Axis-aligned bounding boxes in 2D and 3D.

A bounding box is one closed interval per axis. Boxes only consume point
coordinates; they are independent of the frame machinery.

Algebra:
    - ``hull`` is associative, commutative and idempotent, so ``hull_of``
      can reduce any collection in any order.
    - ``overlaps`` is inclusive: boxes that only share a boundary overlap.
    - ``intersection`` returns None exactly when ``overlaps`` is False.
    - ``is_contained_in`` is inclusive and therefore reflexive.

The dataclass constructor trusts the caller to supply ``min <= max`` on
every axis; ``from_extrema`` sorts each pair instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Optional, Tuple

from ..core.errors import EmptyInputError
from .points import Point2d, Point3d
from .vectors import Vector2d, Vector3d


@dataclass(frozen=True)
class BoundingBox2d:
    """Axis-aligned box {min_x, max_x, min_y, max_y}."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_extrema(cls, min_x: float, max_x: float, min_y: float, max_y: float) -> BoundingBox2d:
        """Construct from extrema, swapping any pair given in the wrong order."""
        return cls(
            min(min_x, max_x), max(min_x, max_x),
            min(min_y, max_y), max(min_y, max_y),
        )

    @classmethod
    def singleton(cls, point: Point2d) -> BoundingBox2d:
        """Zero-width box at a single point."""
        return cls(point.x, point.x, point.y, point.y)

    @classmethod
    def from_corners(cls, p1: Point2d, p2: Point2d) -> BoundingBox2d:
        """Box spanned by two opposite corners, in either order."""
        return cls.containing_points(p1, p2)

    @classmethod
    def containing_points(cls, first: Point2d, *rest: Point2d) -> BoundingBox2d:
        """Smallest box containing at least one point (two- and three-point forms included)."""
        min_x = max_x = first.x
        min_y = max_y = first.y
        for p in rest:
            min_x = min(min_x, p.x)
            max_x = max(max_x, p.x)
            min_y = min(min_y, p.y)
            max_y = max(max_y, p.y)
        return cls(min_x, max_x, min_y, max_y)

    @classmethod
    def containing(cls, points: Iterable[Point2d]) -> BoundingBox2d:
        """
        Smallest box containing every point in a collection.

        Args:
            points: Any iterable of points; consumed once

        Returns:
            The tightest box; touching points lie on its boundary

        Raises:
            EmptyInputError: If the collection is empty
        """
        iterator = iter(points)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyInputError("Cannot build a bounding box containing no points") from None
        return cls.containing_points(first, *iterator)

    @staticmethod
    def hull_of(boxes: Iterable[BoundingBox2d]) -> BoundingBox2d:
        """
        Hull of a collection of boxes.

        Raises:
            EmptyInputError: If the collection is empty
        """
        iterator = iter(boxes)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyInputError("Cannot take the hull of no bounding boxes") from None
        return reduce(BoundingBox2d.hull, iterator, first)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def extrema(self) -> Tuple[float, float, float, float]:
        """Extrema in field order."""
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def mid_x(self) -> float:
        """Midpoint of the X interval."""
        return self.min_x + 0.5 * (self.max_x - self.min_x)

    def mid_y(self) -> float:
        """Midpoint of the Y interval."""
        return self.min_y + 0.5 * (self.max_y - self.min_y)

    def centroid(self) -> Point2d:
        """Center point of the box."""
        return Point2d(self.mid_x(), self.mid_y())

    def dimensions(self) -> Tuple[float, float]:
        """Side lengths per axis."""
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    def corners(self) -> List[Point2d]:
        """Corners in counterclockwise order starting at (min_x, min_y)."""
        return [
            Point2d(self.min_x, self.min_y),
            Point2d(self.max_x, self.min_y),
            Point2d(self.max_x, self.max_y),
            Point2d(self.min_x, self.max_y),
        ]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def contains(self, point: Point2d) -> bool:
        """True if the point lies inside or on the boundary."""
        return (
            self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
        )

    def overlaps(self, other: BoundingBox2d) -> bool:
        """True if the boxes share at least one point; touching counts."""
        return (
            self.min_x <= other.max_x and other.min_x <= self.max_x
            and self.min_y <= other.max_y and other.min_y <= self.max_y
        )

    def is_contained_in(self, outer: BoundingBox2d) -> bool:
        """True if this box lies inside ``outer``; shared boundaries count."""
        return (
            outer.min_x <= self.min_x and self.max_x <= outer.max_x
            and outer.min_y <= self.min_y and self.max_y <= outer.max_y
        )

    # -------------------------------------------------------------------------
    # Combination
    # -------------------------------------------------------------------------

    def hull(self, other: BoundingBox2d) -> BoundingBox2d:
        """Smallest box containing both boxes."""
        return BoundingBox2d(
            min(self.min_x, other.min_x), max(self.max_x, other.max_x),
            min(self.min_y, other.min_y), max(self.max_y, other.max_y),
        )

    def intersection(self, other: BoundingBox2d) -> Optional[BoundingBox2d]:
        """
        Overlapping region of two boxes.

        Args:
            other: Box to intersect with

        Returns:
            The shared region (zero-width where the boxes only touch), or
            None exactly when ``overlaps`` is False
        """
        if not self.overlaps(other):
            return None
        return BoundingBox2d(
            max(self.min_x, other.min_x), min(self.max_x, other.max_x),
            max(self.min_y, other.min_y), min(self.max_y, other.max_y),
        )

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def translate_by(self, vector: Vector2d) -> BoundingBox2d:
        """Shift every interval by the vector."""
        return BoundingBox2d(
            self.min_x + vector.x, self.max_x + vector.x,
            self.min_y + vector.y, self.max_y + vector.y,
        )

    def scale_about(self, center: Point2d, scale: float) -> BoundingBox2d:
        """Scale the box about ``center``; negative scales are allowed."""
        # A negative scale flips each interval, hence from_extrema
        return BoundingBox2d.from_extrema(
            center.x + scale * (self.min_x - center.x),
            center.x + scale * (self.max_x - center.x),
            center.y + scale * (self.min_y - center.y),
            center.y + scale * (self.max_y - center.y),
        )

    def expand_by(self, amount: float) -> BoundingBox2d:
        """Grow every side outwards by ``abs(amount)``."""
        d = abs(amount)
        return BoundingBox2d(self.min_x - d, self.max_x + d, self.min_y - d, self.max_y + d)

    def offset_by(self, amount: float) -> Optional[BoundingBox2d]:
        """
        Grow (positive) or shrink (negative) every side by ``amount``.

        Returns None if shrinking would invert any axis.
        """
        min_x, max_x = self.min_x - amount, self.max_x + amount
        min_y, max_y = self.min_y - amount, self.max_y + amount
        if min_x > max_x or min_y > max_y:
            return None
        return BoundingBox2d(min_x, max_x, min_y, max_y)


@dataclass(frozen=True)
class BoundingBox3d:
    """Axis-aligned box {min_x, max_x, min_y, max_y, min_z, max_z}."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_extrema(
        cls,
        min_x: float, max_x: float,
        min_y: float, max_y: float,
        min_z: float, max_z: float
    ) -> BoundingBox3d:
        """Construct from extrema, swapping any pair given in the wrong order."""
        return cls(
            min(min_x, max_x), max(min_x, max_x),
            min(min_y, max_y), max(min_y, max_y),
            min(min_z, max_z), max(min_z, max_z),
        )

    @classmethod
    def singleton(cls, point: Point3d) -> BoundingBox3d:
        """Zero-width box at a single point."""
        return cls(point.x, point.x, point.y, point.y, point.z, point.z)

    @classmethod
    def from_corners(cls, p1: Point3d, p2: Point3d) -> BoundingBox3d:
        """Box spanned by two opposite corners, in either order."""
        return cls.containing_points(p1, p2)

    @classmethod
    def containing_points(cls, first: Point3d, *rest: Point3d) -> BoundingBox3d:
        """Smallest box containing at least one point."""
        min_x = max_x = first.x
        min_y = max_y = first.y
        min_z = max_z = first.z
        for p in rest:
            min_x = min(min_x, p.x)
            max_x = max(max_x, p.x)
            min_y = min(min_y, p.y)
            max_y = max(max_y, p.y)
            min_z = min(min_z, p.z)
            max_z = max(max_z, p.z)
        return cls(min_x, max_x, min_y, max_y, min_z, max_z)

    @classmethod
    def containing(cls, points: Iterable[Point3d]) -> BoundingBox3d:
        """
        Raises:
            EmptyInputError: If the collection is empty
        """
        iterator = iter(points)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyInputError("Cannot build a bounding box containing no points") from None
        return cls.containing_points(first, *iterator)

    @staticmethod
    def hull_of(boxes: Iterable[BoundingBox3d]) -> BoundingBox3d:
        """
        Raises:
            EmptyInputError: If the collection is empty
        """
        iterator = iter(boxes)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyInputError("Cannot take the hull of no bounding boxes") from None
        return reduce(BoundingBox3d.hull, iterator, first)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def extrema(self) -> Tuple[float, float, float, float, float, float]:
        """Extrema in field order."""
        return (self.min_x, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z)

    def mid_x(self) -> float:
        """Midpoint of the X interval."""
        return self.min_x + 0.5 * (self.max_x - self.min_x)

    def mid_y(self) -> float:
        """Midpoint of the Y interval."""
        return self.min_y + 0.5 * (self.max_y - self.min_y)

    def mid_z(self) -> float:
        """Midpoint of the Z interval."""
        return self.min_z + 0.5 * (self.max_z - self.min_z)

    def centroid(self) -> Point3d:
        """Center point of the box."""
        return Point3d(self.mid_x(), self.mid_y(), self.mid_z())

    def dimensions(self) -> Tuple[float, float, float]:
        """Side lengths per axis."""
        return (
            self.max_x - self.min_x,
            self.max_y - self.min_y,
            self.max_z - self.min_z,
        )

    def corners(self) -> List[Point3d]:
        """The eight corners, bottom face (min_z) first."""
        return [
            Point3d(x, y, z)
            for z in (self.min_z, self.max_z)
            for (x, y) in (
                (self.min_x, self.min_y),
                (self.max_x, self.min_y),
                (self.max_x, self.max_y),
                (self.min_x, self.max_y),
            )
        ]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def contains(self, point: Point3d) -> bool:
        """True if the point lies inside or on the boundary."""
        return (
            self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
            and self.min_z <= point.z <= self.max_z
        )

    def overlaps(self, other: BoundingBox3d) -> bool:
        """True if the boxes share at least one point; touching counts."""
        return (
            self.min_x <= other.max_x and other.min_x <= self.max_x
            and self.min_y <= other.max_y and other.min_y <= self.max_y
            and self.min_z <= other.max_z and other.min_z <= self.max_z
        )

    def is_contained_in(self, outer: BoundingBox3d) -> bool:
        """True if this box lies inside ``outer``; shared boundaries count."""
        return (
            outer.min_x <= self.min_x and self.max_x <= outer.max_x
            and outer.min_y <= self.min_y and self.max_y <= outer.max_y
            and outer.min_z <= self.min_z and self.max_z <= outer.max_z
        )

    # -------------------------------------------------------------------------
    # Combination
    # -------------------------------------------------------------------------

    def hull(self, other: BoundingBox3d) -> BoundingBox3d:
        """Smallest box containing both boxes."""
        return BoundingBox3d(
            min(self.min_x, other.min_x), max(self.max_x, other.max_x),
            min(self.min_y, other.min_y), max(self.max_y, other.max_y),
            min(self.min_z, other.min_z), max(self.max_z, other.max_z),
        )

    def intersection(self, other: BoundingBox3d) -> Optional[BoundingBox3d]:
        """Overlapping region, or None for disjoint boxes."""
        if not self.overlaps(other):
            return None
        return BoundingBox3d(
            max(self.min_x, other.min_x), min(self.max_x, other.max_x),
            max(self.min_y, other.min_y), min(self.max_y, other.max_y),
            max(self.min_z, other.min_z), min(self.max_z, other.max_z),
        )

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def translate_by(self, vector: Vector3d) -> BoundingBox3d:
        """Shift every interval by the vector."""
        return BoundingBox3d(
            self.min_x + vector.x, self.max_x + vector.x,
            self.min_y + vector.y, self.max_y + vector.y,
            self.min_z + vector.z, self.max_z + vector.z,
        )

    def scale_about(self, center: Point3d, scale: float) -> BoundingBox3d:
        """Scale the box about ``center``; negative scales are allowed."""
        return BoundingBox3d.from_extrema(
            center.x + scale * (self.min_x - center.x),
            center.x + scale * (self.max_x - center.x),
            center.y + scale * (self.min_y - center.y),
            center.y + scale * (self.max_y - center.y),
            center.z + scale * (self.min_z - center.z),
            center.z + scale * (self.max_z - center.z),
        )

    def expand_by(self, amount: float) -> BoundingBox3d:
        """Grow every side outwards by ``abs(amount)``."""
        d = abs(amount)
        return BoundingBox3d(
            self.min_x - d, self.max_x + d,
            self.min_y - d, self.max_y + d,
            self.min_z - d, self.max_z + d,
        )

    def offset_by(self, amount: float) -> Optional[BoundingBox3d]:
        """Grow or shrink every side; None if shrinking would invert an axis."""
        min_x, max_x = self.min_x - amount, self.max_x + amount
        min_y, max_y = self.min_y - amount, self.max_y + amount
        min_z, max_z = self.min_z - amount, self.max_z + amount
        if min_x > max_x or min_y > max_y or min_z > max_z:
            return None
        return BoundingBox3d(min_x, max_x, min_y, max_y, min_z, max_z)
