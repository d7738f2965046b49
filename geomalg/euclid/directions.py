"""
Unit-length directions in 2D and 3D.

A direction is a vector known to have unit length. The dataclass
constructor is raw data assembly and does NOT check the norm: callers using
``Direction2d(x, y)`` directly must supply unit components. Use
``from_components`` / ``from_vector`` to normalize arbitrary input; these
raise ``DegenerateGeometryError`` for zero-length input rather than picking
an arbitrary default direction.

Every operation defined here maps unit directions to unit directions
(rotations, reflections, change of orthonormal basis), so the invariant is
preserved without renormalizing.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING
import math

import numpy as np

from ..core.constants import DEFAULT_ANGULAR_TOLERANCE, DEFAULT_EPS_NORM
from ..core.errors import DegenerateGeometryError
from .vectors import Vector2d, Vector3d

if TYPE_CHECKING:
    import numpy.typing as npt
    from .axes import Axis2d, Axis3d
    from .frames import Frame2d, Frame3d, PlanarFrame3d
    from .planes import Plane3d


@dataclass(frozen=True)
class Direction2d:
    """A 2D unit direction. Precondition: x**2 + y**2 == 1."""

    x: float
    y: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_components(cls, x: float, y: float) -> Direction2d:
        """
        Normalize arbitrary components into a direction.

        Raises:
            DegenerateGeometryError: If (x, y) has zero length
        """
        return cls.from_vector(Vector2d(x, y))

    @classmethod
    def from_vector(cls, vector: Vector2d) -> Direction2d:
        """Normalize a vector into a direction; raises DegenerateGeometryError for zero length."""
        direction = vector.direction()
        if direction is None:
            raise DegenerateGeometryError(
                f"Cannot construct a direction from zero-length vector {vector}"
            )
        return direction

    @classmethod
    def from_angle(cls, angle: float) -> Direction2d:
        """Direction at the given counterclockwise angle from +X."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def positive_x(cls) -> Direction2d:
        """The +X direction."""
        return cls(1.0, 0.0)

    @classmethod
    def positive_y(cls) -> Direction2d:
        """The +Y direction."""
        return cls(0.0, 1.0)

    @classmethod
    def negative_x(cls) -> Direction2d:
        """The -X direction."""
        return cls(-1.0, 0.0)

    @classmethod
    def negative_y(cls) -> Direction2d:
        """The -Y direction."""
        return cls(0.0, -1.0)

    @staticmethod
    def orthonormalize(
        x_vector: Vector2d,
        y_vector: Vector2d
    ) -> Tuple[Direction2d, Direction2d]:
        """
        Build an orthonormal pair from two vectors (Gram-Schmidt).

        The first direction is ``x_vector`` normalized; the second is the
        perpendicular direction on the same side as ``y_vector``, so the
        handedness of the input pair is preserved.

        Args:
            x_vector: Defines the first direction exactly (up to length)
            y_vector: Selects which side the second direction lies on

        Returns:
            (x_direction, y_direction) orthonormal pair

        Raises:
            DegenerateGeometryError: If either vector is zero or they are parallel
        """
        x_direction = Direction2d.from_vector(x_vector)
        perpendicular = x_direction.rotate_counterclockwise()
        side = perpendicular.x * y_vector.x + perpendicular.y * y_vector.y
        if abs(side) <= DEFAULT_EPS_NORM * max(1.0, y_vector.length()):
            raise DegenerateGeometryError("Cannot orthonormalize parallel vectors")
        if side > 0:
            return (x_direction, perpendicular)
        return (x_direction, -perpendicular)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def components(self) -> tuple:
        """Components as a tuple."""
        return (self.x, self.y)

    def to_vector(self) -> Vector2d:
        """The direction as a unit Vector."""
        return Vector2d(self.x, self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Components as a float64 numpy array."""
        return np.array([self.x, self.y], dtype=np.float64)

    def to_angle(self) -> float:
        """Counterclockwise angle from +X, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def angle_from(self, other: Direction2d) -> float:
        """Signed angle from ``other`` to this direction, in (-pi, pi]."""
        cross = other.x * self.y - other.y * self.x
        dot = other.x * self.x + other.y * self.y
        return math.atan2(cross, dot)

    def component_in(self, other: Direction2d) -> float:
        """Cosine of the angle between the two directions."""
        return self.x * other.x + self.y * other.y

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def __neg__(self) -> Direction2d:
        return Direction2d(-self.x, -self.y)

    def reverse(self) -> Direction2d:
        """The opposite direction."""
        return -self

    def rotate_counterclockwise(self) -> Direction2d:
        """Rotate 90 degrees counterclockwise."""
        return Direction2d(-self.y, self.x)

    def rotate_clockwise(self) -> Direction2d:
        """Rotate 90 degrees clockwise."""
        return Direction2d(self.y, -self.x)

    def perpendicular_to(self) -> Direction2d:
        """The direction rotated 90 degrees counterclockwise."""
        return self.rotate_counterclockwise()

    def rotate_by(self, angle: float) -> Direction2d:
        """Rotate counterclockwise by ``angle`` radians."""
        v = self.to_vector().rotate_by(angle)
        return Direction2d(v.x, v.y)

    def mirror_across(self, axis: Axis2d) -> Direction2d:
        """Reflect across the mirror; the result stays unit length."""
        v = self.to_vector().mirror_across(axis)
        return Direction2d(v.x, v.y)

    def relative_to(self, frame: Frame2d) -> Direction2d:
        """Express in the frame's local basis; orthonormal frames keep unit length."""
        v = self.to_vector().relative_to(frame)
        return Direction2d(v.x, v.y)

    def place_in(self, frame: Frame2d) -> Direction2d:
        """Interpret as local to ``frame`` and return the global direction."""
        v = self.to_vector().place_in(frame)
        return Direction2d(v.x, v.y)

    def place_on(self, planar_frame: PlanarFrame3d) -> Direction3d:
        """Lift into 3D using the planar frame's basis directions."""
        v = self.to_vector().place_on(planar_frame)
        return Direction3d(v.x, v.y, v.z)

    def equal_within(self, angle: float, other: Direction2d) -> bool:
        """True if the angle between the two directions is at most ``angle``."""
        if angle < 0:
            return False
        return abs(self.angle_from(other)) <= angle


@dataclass(frozen=True)
class Direction3d:
    """A 3D unit direction. Precondition: x**2 + y**2 + z**2 == 1."""

    x: float
    y: float
    z: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_components(cls, x: float, y: float, z: float) -> Direction3d:
        """
        Normalize arbitrary components into a direction.

        Raises:
            DegenerateGeometryError: If (x, y, z) has zero length
        """
        return cls.from_vector(Vector3d(x, y, z))

    @classmethod
    def from_vector(cls, vector: Vector3d) -> Direction3d:
        """Normalize a vector into a direction; raises DegenerateGeometryError for zero length."""
        direction = vector.direction()
        if direction is None:
            raise DegenerateGeometryError(
                f"Cannot construct a direction from zero-length vector {vector}"
            )
        return direction

    @classmethod
    def from_azimuth_and_elevation(cls, azimuth: float, elevation: float) -> Direction3d:
        """
        Construct from spherical angles.

        Azimuth is measured counterclockwise from +X in the XY plane,
        elevation upwards from the XY plane towards +Z.
        """
        cos_el = math.cos(elevation)
        return cls(
            cos_el * math.cos(azimuth),
            cos_el * math.sin(azimuth),
            math.sin(elevation),
        )

    @classmethod
    def positive_x(cls) -> Direction3d:
        """The +X direction."""
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def positive_y(cls) -> Direction3d:
        """The +Y direction."""
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def positive_z(cls) -> Direction3d:
        """The +Z direction."""
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def negative_x(cls) -> Direction3d:
        """The -X direction."""
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def negative_y(cls) -> Direction3d:
        """The -Y direction."""
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def negative_z(cls) -> Direction3d:
        """The -Z direction."""
        return cls(0.0, 0.0, -1.0)

    @staticmethod
    def orthonormalize(
        x_vector: Vector3d,
        y_vector: Vector3d,
        z_vector: Vector3d
    ) -> Tuple[Direction3d, Direction3d, Direction3d]:
        """
        Gram-Schmidt orthonormalization of three vectors.

        Args:
            x_vector: Defines the first direction exactly (up to length)
            y_vector: Only its part perpendicular to x_vector is kept
            z_vector: Only its part perpendicular to the first two is kept

        Returns:
            Three mutually perpendicular unit directions, in input order

        Raises:
            DegenerateGeometryError: If the vectors are linearly dependent
        """
        x_direction = Direction3d.from_vector(x_vector)
        y_residual = y_vector - y_vector.projection_in(x_direction)
        y_direction = Direction3d.from_vector(y_residual)
        z_residual = (
            z_vector
            - z_vector.projection_in(x_direction)
            - z_vector.projection_in(y_direction)
        )
        z_direction = Direction3d.from_vector(z_residual)
        return (x_direction, y_direction, z_direction)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def components(self) -> tuple:
        """Components as a tuple."""
        return (self.x, self.y, self.z)

    def to_vector(self) -> Vector3d:
        """The direction as a unit Vector."""
        return Vector3d(self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Components as a float64 numpy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def azimuth(self) -> float:
        """Angle of the XY projection, counterclockwise from +X, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def elevation(self) -> float:
        """Angle above the XY plane, in [-pi/2, pi/2]."""
        return math.asin(max(-1.0, min(1.0, self.z)))

    def angle_from(self, other: Direction3d) -> float:
        """Unsigned angle between the two directions, in [0, pi]."""
        cross = self.to_vector().cross(other.to_vector())
        return math.atan2(cross.length(), self.component_in(other))

    def component_in(self, other: Direction3d) -> float:
        """Cosine of the angle between the two directions."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Direction3d) -> Vector3d:
        """Cross product; unit length only for perpendicular inputs, hence a Vector."""
        return self.to_vector().cross(other.to_vector())

    # -------------------------------------------------------------------------
    # Perpendiculars
    # -------------------------------------------------------------------------

    def perpendicular_to(self) -> Direction3d:
        """An arbitrary but deterministic direction perpendicular to this one."""
        v = self.to_vector().perpendicular()
        length = v.length()
        return Direction3d(v.x / length, v.y / length, v.z / length)

    def perpendicular_basis(self) -> Tuple[Direction3d, Direction3d]:
        """
        Two directions (x, y) such that (x, y, self) is right-handed orthonormal.
        """
        x_direction = self.perpendicular_to()
        y = self.to_vector().cross(x_direction.to_vector())
        return (x_direction, Direction3d(y.x, y.y, y.z))

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def __neg__(self) -> Direction3d:
        return Direction3d(-self.x, -self.y, -self.z)

    def reverse(self) -> Direction3d:
        """The opposite direction."""
        return -self

    def rotate_around(self, axis: Axis3d, angle: float) -> Direction3d:
        """Rotate around the axis direction (Rodrigues); the result stays unit length."""
        v = self.to_vector().rotate_around(axis, angle)
        return Direction3d(v.x, v.y, v.z)

    def mirror_across(self, plane: Plane3d) -> Direction3d:
        """Reflect across the mirror; the result stays unit length."""
        v = self.to_vector().mirror_across(plane)
        return Direction3d(v.x, v.y, v.z)

    def project_onto(self, plane: Plane3d) -> Optional[Direction3d]:
        """Project onto a plane; None if this direction is the plane normal."""
        return self.to_vector().project_onto(plane).direction()

    def project_into(self, planar_frame: PlanarFrame3d) -> Optional[Direction2d]:
        """Express in the planar frame's 2D basis; None if perpendicular to it."""
        return self.to_vector().project_into(planar_frame).direction()

    def relative_to(self, frame: Frame3d) -> Direction3d:
        """Express in the frame's local basis; orthonormal frames keep unit length."""
        v = self.to_vector().relative_to(frame)
        return Direction3d(v.x, v.y, v.z)

    def place_in(self, frame: Frame3d) -> Direction3d:
        """Interpret as local to ``frame`` and return the global direction."""
        v = self.to_vector().place_in(frame)
        return Direction3d(v.x, v.y, v.z)

    def equal_within(self, angle: float, other: Direction3d) -> bool:
        """True if the angle between the two directions is at most ``angle``."""
        if angle < 0:
            return False
        return self.angle_from(other) <= angle

    def is_parallel_to(
        self,
        other: Direction3d,
        angle: float = DEFAULT_ANGULAR_TOLERANCE
    ) -> bool:
        """True if the directions are equal or opposite within ``angle``."""
        return self.equal_within(angle, other) or self.equal_within(angle, -other)
