"""
Coordinate frames: the sole mechanism for converting between local and
global coordinate systems.

A frame is an origin point plus an orthonormal basis:

    Frame2d:        origin, x_direction, y_direction
    Frame3d:        origin, x_direction, y_direction, z_direction
    PlanarFrame3d:  3D origin, two orthonormal 3D directions spanning a plane

The dataclass constructors assemble raw data and never validate the basis.
Supplying a non-orthonormal basis does not raise; conversions through such a
frame are simply geometrically meaningless. Use ``checked(...)`` when the
basis comes from untrusted input, or one of the named constructors
(``with_x_direction``, ``with_z_direction``, ``from_xy``, ...) which build an
orthonormal basis by construction.

Converting one frame relative to (or placed in) another converts its origin
as a Point and each basis direction as a Direction. With an orthonormal
reference frame this is an isometry, so orthonormality and handedness of the
converted frame are preserved.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Union
import logging

import numpy as np

from ..core.constants import DEFAULT_TOLERANCE
from ..core.errors import NonOrthonormalBasisError
from .axes import Axis2d, Axis3d
from .directions import Direction2d, Direction3d
from .planes import Plane3d
from .points import Point2d, Point3d
from .vectors import Vector2d, Vector3d

logger = logging.getLogger(__name__)


def _is_unit(direction: Union[Direction2d, Direction3d], tolerance: float) -> bool:
    """True if the direction has unit length within ``tolerance``."""
    return abs(direction.to_vector().length() - 1.0) <= tolerance


def _are_orthonormal(
    directions: Iterable[Union[Direction2d, Direction3d]],
    tolerance: float
) -> bool:
    """True if all directions are unit length and pairwise perpendicular."""
    directions = list(directions)
    if not all(_is_unit(d, tolerance) for d in directions):
        return False
    for i, a in enumerate(directions):
        for b in directions[i + 1:]:
            if abs(a.component_in(b)) > tolerance:
                return False
    return True


# =============================================================================
# Frame2d
# =============================================================================

@dataclass(frozen=True)
class Frame2d:
    """A 2D coordinate frame. Precondition: orthonormal basis."""

    origin_point: Point2d
    x_direction: Direction2d
    y_direction: Direction2d

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def at_origin(cls) -> Frame2d:
        """Frame at the global origin with the global axes."""
        return cls(Point2d.origin(), Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def at_point(cls, point: Point2d) -> Frame2d:
        """Frame at ``point`` with global X and Y directions."""
        return cls(point, Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def with_x_direction(
        cls,
        x_direction: Direction2d,
        origin_point: Optional[Point2d] = None
    ) -> Frame2d:
        """Right-handed frame whose Y direction is X rotated counterclockwise."""
        if origin_point is None:
            origin_point = Point2d.origin()
        return cls(origin_point, x_direction, x_direction.rotate_counterclockwise())

    @classmethod
    def with_y_direction(
        cls,
        y_direction: Direction2d,
        origin_point: Optional[Point2d] = None
    ) -> Frame2d:
        """Right-handed frame whose X direction is Y rotated clockwise."""
        if origin_point is None:
            origin_point = Point2d.origin()
        return cls(origin_point, y_direction.rotate_clockwise(), y_direction)

    @classmethod
    def with_angle(cls, angle: float, origin_point: Optional[Point2d] = None) -> Frame2d:
        """Right-handed frame rotated counterclockwise from the global axes."""
        return cls.with_x_direction(Direction2d.from_angle(angle), origin_point)

    @classmethod
    def checked(
        cls,
        origin_point: Point2d,
        x_direction: Direction2d,
        y_direction: Direction2d,
        tolerance: float = DEFAULT_TOLERANCE
    ) -> Frame2d:
        """
        Validating constructor.

        Raises:
            NonOrthonormalBasisError: If the directions are not unit length
                or not perpendicular within ``tolerance``
        """
        frame = cls(origin_point, x_direction, y_direction)
        if not frame.is_orthonormal(tolerance):
            logger.debug("Rejected non-orthonormal 2D basis %s, %s", x_direction, y_direction)
            raise NonOrthonormalBasisError(
                f"Basis ({x_direction}, {y_direction}) is not orthonormal"
            )
        return frame

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def is_orthonormal(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if the basis is orthonormal within ``tolerance``."""
        return _are_orthonormal((self.x_direction, self.y_direction), tolerance)

    def is_right_handed(self) -> bool:
        """True if the basis follows the right-hand rule."""
        return self.x_direction.to_vector().cross(self.y_direction.to_vector()) > 0

    def x_axis(self) -> Axis2d:
        """Axis through the origin along the X direction."""
        return Axis2d(self.origin_point, self.x_direction)

    def y_axis(self) -> Axis2d:
        """Axis through the origin along the Y direction."""
        return Axis2d(self.origin_point, self.y_direction)

    def as_matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix mapping local coordinates to global ones."""
        m = np.eye(3)
        m[:2, 0] = self.x_direction.components
        m[:2, 1] = self.y_direction.components
        m[:2, 2] = self.origin_point.coordinates
        return m

    # -------------------------------------------------------------------------
    # Rigid transformations
    # -------------------------------------------------------------------------

    def reverse_x(self) -> Frame2d:
        """Flip the X direction; this swaps handedness."""
        return Frame2d(self.origin_point, -self.x_direction, self.y_direction)

    def reverse_y(self) -> Frame2d:
        """Flip the Y direction; this swaps handedness."""
        return Frame2d(self.origin_point, self.x_direction, -self.y_direction)

    def move_to(self, point: Point2d) -> Frame2d:
        """Same basis, new origin point."""
        return Frame2d(point, self.x_direction, self.y_direction)

    def translate_by(self, vector: Vector2d) -> Frame2d:
        """Shift the origin point; the basis is unchanged."""
        return self.move_to(self.origin_point.translate_by(vector))

    def translate_along(self, axis: Axis2d, distance: float) -> Frame2d:
        """Shift the origin ``distance`` along the axis direction."""
        return self.move_to(self.origin_point.translate_in(axis.direction, distance))

    def rotate_by(self, angle: float) -> Frame2d:
        """Rotate the basis about the frame's own origin."""
        return Frame2d(
            self.origin_point,
            self.x_direction.rotate_by(angle),
            self.y_direction.rotate_by(angle),
        )

    def rotate_around(self, center: Point2d, angle: float) -> Frame2d:
        """Rotate origin point and basis together."""
        return Frame2d(
            self.origin_point.rotate_around(center, angle),
            self.x_direction.rotate_by(angle),
            self.y_direction.rotate_by(angle),
        )

    def mirror_across(self, axis: Axis2d) -> Frame2d:
        """Mirror the frame; the result has the opposite handedness."""
        return Frame2d(
            self.origin_point.mirror_across(axis),
            self.x_direction.mirror_across(axis),
            self.y_direction.mirror_across(axis),
        )

    # -------------------------------------------------------------------------
    # Frame conversion
    # -------------------------------------------------------------------------

    def relative_to(self, frame: Frame2d) -> Frame2d:
        """
        Express this frame in the local coordinates of another.

        Args:
            frame: Reference frame

        Returns:
            This frame with its origin converted as a point and each basis
            direction as a direction; orthonormality and handedness are kept
        """
        return Frame2d(
            self.origin_point.relative_to(frame),
            self.x_direction.relative_to(frame),
            self.y_direction.relative_to(frame),
        )

    def place_in(self, frame: Frame2d) -> Frame2d:
        """
        Interpret this frame as local to ``frame`` and return it in global terms.

        Args:
            frame: Frame this one is defined in

        Returns:
            The same frame expressed globally; inverse of ``relative_to``
        """
        return Frame2d(
            self.origin_point.place_in(frame),
            self.x_direction.place_in(frame),
            self.y_direction.place_in(frame),
        )

    def place_on(self, planar_frame: PlanarFrame3d) -> PlanarFrame3d:
        """Embed this 2D frame in 3D through a planar frame."""
        return PlanarFrame3d(
            self.origin_point.place_on(planar_frame),
            self.x_direction.place_on(planar_frame),
            self.y_direction.place_on(planar_frame),
        )


# =============================================================================
# Frame3d
# =============================================================================

@dataclass(frozen=True)
class Frame3d:
    """A 3D coordinate frame. Precondition: orthonormal basis."""

    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def at_origin(cls) -> Frame3d:
        """Frame at the global origin with the global axes."""
        return cls.at_point(Point3d.origin())

    @classmethod
    def at_point(cls, point: Point3d) -> Frame3d:
        """Frame at ``point`` with the global axes."""
        return cls(
            point,
            Direction3d.positive_x(),
            Direction3d.positive_y(),
            Direction3d.positive_z(),
        )

    @classmethod
    def with_z_direction(
        cls,
        z_direction: Direction3d,
        origin_point: Optional[Point3d] = None
    ) -> Frame3d:
        """
        Right-handed frame with the given Z direction.

        X and Y are chosen by ``Direction3d.perpendicular_basis`` and are
        therefore arbitrary but deterministic.
        """
        if origin_point is None:
            origin_point = Point3d.origin()
        x_direction, y_direction = z_direction.perpendicular_basis()
        return cls(origin_point, x_direction, y_direction, z_direction)

    @classmethod
    def from_xy(
        cls,
        origin_point: Point3d,
        x_vector: Vector3d,
        y_vector: Vector3d
    ) -> Frame3d:
        """
        Right-handed frame with X along ``x_vector`` and Y in the plane of
        ``x_vector`` and ``y_vector``.

        Raises:
            DegenerateGeometryError: If the vectors are zero or parallel
        """
        x_direction, y_direction, z_direction = Direction3d.orthonormalize(
            x_vector, y_vector, x_vector.cross(y_vector)
        )
        return cls(origin_point, x_direction, y_direction, z_direction)

    @classmethod
    def checked(
        cls,
        origin_point: Point3d,
        x_direction: Direction3d,
        y_direction: Direction3d,
        z_direction: Direction3d,
        tolerance: float = DEFAULT_TOLERANCE
    ) -> Frame3d:
        """
        Validating constructor.

        Raises:
            NonOrthonormalBasisError: If the basis is not orthonormal
        """
        frame = cls(origin_point, x_direction, y_direction, z_direction)
        if not frame.is_orthonormal(tolerance):
            logger.debug(
                "Rejected non-orthonormal 3D basis %s, %s, %s",
                x_direction, y_direction, z_direction,
            )
            raise NonOrthonormalBasisError(
                f"Basis ({x_direction}, {y_direction}, {z_direction}) is not orthonormal"
            )
        return frame

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def is_orthonormal(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if the basis is orthonormal within ``tolerance``."""
        return _are_orthonormal(
            (self.x_direction, self.y_direction, self.z_direction), tolerance
        )

    def is_right_handed(self) -> bool:
        """True if the basis follows the right-hand rule."""
        return self.x_direction.cross(self.y_direction).component_in(self.z_direction) > 0

    def x_axis(self) -> Axis3d:
        """Axis through the origin along the X direction."""
        return Axis3d(self.origin_point, self.x_direction)

    def y_axis(self) -> Axis3d:
        """Axis through the origin along the Y direction."""
        return Axis3d(self.origin_point, self.y_direction)

    def z_axis(self) -> Axis3d:
        """Axis through the origin along the Z direction."""
        return Axis3d(self.origin_point, self.z_direction)

    def as_matrix(self) -> np.ndarray:
        """4x4 homogeneous matrix mapping local coordinates to global ones."""
        m = np.eye(4)
        m[:3, 0] = self.x_direction.components
        m[:3, 1] = self.y_direction.components
        m[:3, 2] = self.z_direction.components
        m[:3, 3] = self.origin_point.coordinates
        return m

    # Planes through the origin, named by the two in-plane axes; the normal
    # follows the right-hand rule (xy -> +Z, yx -> -Z, ...)

    def xy_plane(self) -> Plane3d:
        """Plane spanned by X and Y, normal +Z."""
        return Plane3d(self.origin_point, self.z_direction)

    def yx_plane(self) -> Plane3d:
        """Plane spanned by Y and X, normal -Z."""
        return Plane3d(self.origin_point, -self.z_direction)

    def yz_plane(self) -> Plane3d:
        """Plane spanned by Y and Z, normal +X."""
        return Plane3d(self.origin_point, self.x_direction)

    def zy_plane(self) -> Plane3d:
        """Plane spanned by Z and Y, normal -X."""
        return Plane3d(self.origin_point, -self.x_direction)

    def zx_plane(self) -> Plane3d:
        """Plane spanned by Z and X, normal +Y."""
        return Plane3d(self.origin_point, self.y_direction)

    def xz_plane(self) -> Plane3d:
        """Plane spanned by X and Z, normal -Y."""
        return Plane3d(self.origin_point, -self.y_direction)

    def xy_planar_frame(self) -> PlanarFrame3d:
        """Planar frame with this frame's X and Y directions."""
        return PlanarFrame3d(self.origin_point, self.x_direction, self.y_direction)

    def yx_planar_frame(self) -> PlanarFrame3d:
        """Planar frame with this frame's Y and X directions."""
        return PlanarFrame3d(self.origin_point, self.y_direction, self.x_direction)

    def yz_planar_frame(self) -> PlanarFrame3d:
        """Planar frame with this frame's Y and Z directions."""
        return PlanarFrame3d(self.origin_point, self.y_direction, self.z_direction)

    def zy_planar_frame(self) -> PlanarFrame3d:
        """Planar frame with this frame's Z and Y directions."""
        return PlanarFrame3d(self.origin_point, self.z_direction, self.y_direction)

    def zx_planar_frame(self) -> PlanarFrame3d:
        """Planar frame with this frame's Z and X directions."""
        return PlanarFrame3d(self.origin_point, self.z_direction, self.x_direction)

    def xz_planar_frame(self) -> PlanarFrame3d:
        """Planar frame with this frame's X and Z directions."""
        return PlanarFrame3d(self.origin_point, self.x_direction, self.z_direction)

    # -------------------------------------------------------------------------
    # Rigid transformations
    # -------------------------------------------------------------------------

    def reverse_x(self) -> Frame3d:
        """Flip the X direction; this swaps handedness."""
        return Frame3d(self.origin_point, -self.x_direction, self.y_direction, self.z_direction)

    def reverse_y(self) -> Frame3d:
        """Flip the Y direction; this swaps handedness."""
        return Frame3d(self.origin_point, self.x_direction, -self.y_direction, self.z_direction)

    def reverse_z(self) -> Frame3d:
        """Flip the Z direction; this swaps handedness."""
        return Frame3d(self.origin_point, self.x_direction, self.y_direction, -self.z_direction)

    def move_to(self, point: Point3d) -> Frame3d:
        """Same basis, new origin point."""
        return Frame3d(point, self.x_direction, self.y_direction, self.z_direction)

    def translate_by(self, vector: Vector3d) -> Frame3d:
        """Shift the origin point; the basis is unchanged."""
        return self.move_to(self.origin_point.translate_by(vector))

    def translate_along(self, axis: Axis3d, distance: float) -> Frame3d:
        """Shift the origin ``distance`` along the axis direction."""
        return self.move_to(self.origin_point.translate_in(axis.direction, distance))

    def rotate_around(self, axis: Axis3d, angle: float) -> Frame3d:
        """Rotate origin point and basis together."""
        return Frame3d(
            self.origin_point.rotate_around(axis, angle),
            self.x_direction.rotate_around(axis, angle),
            self.y_direction.rotate_around(axis, angle),
            self.z_direction.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> Frame3d:
        """Mirror the frame; the result has the opposite handedness."""
        return Frame3d(
            self.origin_point.mirror_across(plane),
            self.x_direction.mirror_across(plane),
            self.y_direction.mirror_across(plane),
            self.z_direction.mirror_across(plane),
        )

    # -------------------------------------------------------------------------
    # Frame conversion
    # -------------------------------------------------------------------------

    def relative_to(self, frame: Frame3d) -> Frame3d:
        """Express this frame in the local coordinates of another frame."""
        return Frame3d(
            self.origin_point.relative_to(frame),
            self.x_direction.relative_to(frame),
            self.y_direction.relative_to(frame),
            self.z_direction.relative_to(frame),
        )

    def place_in(self, frame: Frame3d) -> Frame3d:
        """Interpret this frame as local to ``frame`` and return it in global terms."""
        return Frame3d(
            self.origin_point.place_in(frame),
            self.x_direction.place_in(frame),
            self.y_direction.place_in(frame),
            self.z_direction.place_in(frame),
        )


# =============================================================================
# PlanarFrame3d
# =============================================================================

Value2d = Union[Point2d, Vector2d, Direction2d, Axis2d, Frame2d]
Value3d = Union[Point3d, Vector3d, Direction3d, Axis3d]


@dataclass(frozen=True)
class PlanarFrame3d:
    """
    A 2D coordinate frame embedded in 3D.

    Precondition: ``x_direction`` and ``y_direction`` are orthonormal. The
    normal direction is ``x_direction x y_direction``.
    """

    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def xy(cls) -> PlanarFrame3d:
        """Global XY planar frame."""
        return Frame3d.at_origin().xy_planar_frame()

    @classmethod
    def yx(cls) -> PlanarFrame3d:
        """Global YX planar frame (normal -Z)."""
        return Frame3d.at_origin().yx_planar_frame()

    @classmethod
    def yz(cls) -> PlanarFrame3d:
        """Global YZ planar frame."""
        return Frame3d.at_origin().yz_planar_frame()

    @classmethod
    def zy(cls) -> PlanarFrame3d:
        """Global ZY planar frame (normal -X)."""
        return Frame3d.at_origin().zy_planar_frame()

    @classmethod
    def zx(cls) -> PlanarFrame3d:
        """Global ZX planar frame."""
        return Frame3d.at_origin().zx_planar_frame()

    @classmethod
    def xz(cls) -> PlanarFrame3d:
        """Global XZ planar frame (normal -Y)."""
        return Frame3d.at_origin().xz_planar_frame()

    @classmethod
    def from_plane(cls, plane: Plane3d) -> PlanarFrame3d:
        """Planar frame on ``plane`` whose normal matches the plane normal."""
        x_direction, y_direction = plane.normal_direction.perpendicular_basis()
        return cls(plane.origin_point, x_direction, y_direction)

    @classmethod
    def on(cls, frame: Frame3d, frame_2d: Frame2d) -> PlanarFrame3d:
        """Embed a 2D frame, given in ``frame``'s XY plane, into 3D."""
        return frame_2d.place_on(frame.xy_planar_frame())

    @classmethod
    def checked(
        cls,
        origin_point: Point3d,
        x_direction: Direction3d,
        y_direction: Direction3d,
        tolerance: float = DEFAULT_TOLERANCE
    ) -> PlanarFrame3d:
        """
        Validating constructor.

        Raises:
            NonOrthonormalBasisError: If the two directions are not orthonormal
        """
        planar_frame = cls(origin_point, x_direction, y_direction)
        if not planar_frame.is_orthonormal(tolerance):
            logger.debug("Rejected non-orthonormal planar basis %s, %s", x_direction, y_direction)
            raise NonOrthonormalBasisError(
                f"Basis ({x_direction}, {y_direction}) is not orthonormal"
            )
        return planar_frame

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def is_orthonormal(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if the basis is orthonormal within ``tolerance``."""
        return _are_orthonormal((self.x_direction, self.y_direction), tolerance)

    def normal_direction(self) -> Direction3d:
        """The normal ``x_direction x y_direction``."""
        n = self.x_direction.cross(self.y_direction)
        return Direction3d(n.x, n.y, n.z)

    def normal_axis(self) -> Axis3d:
        """Axis through the origin along the normal."""
        return Axis3d(self.origin_point, self.normal_direction())

    def x_axis(self) -> Axis3d:
        """Axis through the origin along the X direction."""
        return Axis3d(self.origin_point, self.x_direction)

    def y_axis(self) -> Axis3d:
        """Axis through the origin along the Y direction."""
        return Axis3d(self.origin_point, self.y_direction)

    def plane(self) -> Plane3d:
        """The plane this frame spans, oriented by its normal."""
        return Plane3d(self.origin_point, self.normal_direction())

    def to_frame3d(self) -> Frame3d:
        """Complete to a right-handed 3D frame using the normal as Z."""
        return Frame3d(
            self.origin_point,
            self.x_direction,
            self.y_direction,
            self.normal_direction(),
        )

    # -------------------------------------------------------------------------
    # Rigid transformations
    # -------------------------------------------------------------------------

    def reverse_x(self) -> PlanarFrame3d:
        """Flip the X direction; this swaps handedness."""
        return PlanarFrame3d(self.origin_point, -self.x_direction, self.y_direction)

    def reverse_y(self) -> PlanarFrame3d:
        """Flip the Y direction; this swaps handedness."""
        return PlanarFrame3d(self.origin_point, self.x_direction, -self.y_direction)

    def move_to(self, point: Point3d) -> PlanarFrame3d:
        """Same basis, new origin point."""
        return PlanarFrame3d(point, self.x_direction, self.y_direction)

    def translate_by(self, vector: Vector3d) -> PlanarFrame3d:
        """Shift the origin point; the basis is unchanged."""
        return self.move_to(self.origin_point.translate_by(vector))

    def translate_along(self, axis: Axis3d, distance: float) -> PlanarFrame3d:
        """Shift the origin ``distance`` along the axis direction."""
        return self.move_to(self.origin_point.translate_in(axis.direction, distance))

    def offset_by(self, distance: float) -> PlanarFrame3d:
        """Shift along the normal direction."""
        return self.move_to(
            self.origin_point.translate_in(self.normal_direction(), distance)
        )

    def rotate_around(self, axis: Axis3d, angle: float) -> PlanarFrame3d:
        """Rotate origin point and basis together."""
        return PlanarFrame3d(
            self.origin_point.rotate_around(axis, angle),
            self.x_direction.rotate_around(axis, angle),
            self.y_direction.rotate_around(axis, angle),
        )

    def mirror_across(self, plane: Plane3d) -> PlanarFrame3d:
        """Mirror origin point and basis; the result has the opposite handedness."""
        return PlanarFrame3d(
            self.origin_point.mirror_across(plane),
            self.x_direction.mirror_across(plane),
            self.y_direction.mirror_across(plane),
        )

    # -------------------------------------------------------------------------
    # Frame conversion
    # -------------------------------------------------------------------------

    def relative_to(self, frame: Frame3d) -> PlanarFrame3d:
        """Express this frame in the local coordinates of another frame."""
        return PlanarFrame3d(
            self.origin_point.relative_to(frame),
            self.x_direction.relative_to(frame),
            self.y_direction.relative_to(frame),
        )

    def place_in(self, frame: Frame3d) -> PlanarFrame3d:
        """Interpret this frame as local to ``frame`` and return it in global terms."""
        return PlanarFrame3d(
            self.origin_point.place_in(frame),
            self.x_direction.place_in(frame),
            self.y_direction.place_in(frame),
        )

    def place_in_3d(self, value: Value2d):
        """
        Lift a 2D value given in this planar frame into 3D.

        Points pick up the origin; vectors and directions only use the basis.
        A Frame2d becomes a PlanarFrame3d.

        Raises:
            TypeError: For values that have no 3D counterpart
        """
        if isinstance(value, (Point2d, Vector2d, Direction2d, Axis2d, Frame2d)):
            return value.place_on(self)
        raise TypeError(f"Cannot place {type(value).__name__} on a planar frame")

    def project_into(self, value: Value3d):
        """
        Express a 3D value in this planar frame's 2D coordinates.

        The normal component is dropped. Directions and axes perpendicular to
        the plane have no projection and yield None.

        Raises:
            TypeError: For values that cannot be projected
        """
        if isinstance(value, (Point3d, Vector3d, Direction3d, Axis3d)):
            return value.project_into(self)
        raise TypeError(f"Cannot project {type(value).__name__} into a planar frame")
