"""
Free vectors in 2D and 3D.

A vector has magnitude and direction but no position, so every frame
conversion below re-expresses components in a new basis without touching
any origin point:

    v_local  = (v . x_dir, v . y_dir [, v . z_dir])     relative_to
    v_global = v_x * x_dir + v_y * y_dir [+ v_z * z_dir]  place_in

Projection naming:
    - ``project_onto_axis(axis)`` exists in both dimensions.
    - ``project_onto`` takes the natural mirror of the dimension: an axis
      in 2D (where it is an alias of ``project_onto_axis``) and a plane in
      3D. ``mirror_across`` follows the same split.

Squared lengths are preferred internally to avoid unnecessary square roots.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, TYPE_CHECKING
import math

import numpy as np

from ..core.constants import DEFAULT_EPS_NORM
from ..core.errors import DegenerateGeometryError

if TYPE_CHECKING:
    import numpy.typing as npt
    from .axes import Axis2d, Axis3d
    from .directions import Direction2d, Direction3d
    from .frames import Frame2d, Frame3d, PlanarFrame3d
    from .planes import Plane3d


@dataclass(frozen=True)
class Vector2d:
    """A 2D vector with components (x, y)."""

    x: float
    y: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Vector2d:
        """The zero vector."""
        return cls(0.0, 0.0)

    @classmethod
    def from_components(cls, components: Iterable[float]) -> Vector2d:
        """Build from an (x, y) iterable."""
        x, y = components
        return cls(float(x), float(y))

    @classmethod
    def from_polar(cls, length: float, angle: float) -> Vector2d:
        """Construct a vector from its length and counterclockwise angle from +X."""
        return cls(length * math.cos(angle), length * math.sin(angle))

    @staticmethod
    def sum(vectors: Iterable[Vector2d]) -> Vector2d:
        """Sum an iterable of vectors. The sum of nothing is the zero vector."""
        sx = 0.0
        sy = 0.0
        for v in vectors:
            sx += v.x
            sy += v.y
        return Vector2d(sx, sy)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def components(self) -> tuple:
        """Components as an (x, y) tuple."""
        return (self.x, self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Components as a float64 numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    def polar_coordinates(self) -> tuple:
        """Return (length, angle) with angle in (-pi, pi]."""
        return (self.length(), math.atan2(self.y, self.x))

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def squared_length(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector2d) -> Vector2d:
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2d:
        return Vector2d(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2d:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2d:
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide a vector by zero")
        return Vector2d(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2d:
        return Vector2d(-self.x, -self.y)

    def plus(self, other: Vector2d) -> Vector2d:
        """Vector sum, same as ``self + other``."""
        return self + other

    def minus(self, other: Vector2d) -> Vector2d:
        """Vector difference, same as ``self - other``."""
        return self - other

    def scale_by(self, scale: float) -> Vector2d:
        """Multiply every component by ``scale``."""
        return self * scale

    def reverse(self) -> Vector2d:
        """Vector pointing the opposite way."""
        return -self

    def dot(self, other: Vector2d) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2d) -> float:
        """2D cross product returning a scalar (z-component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------

    def direction(self) -> Optional[Direction2d]:
        """Return the direction of this vector, or None if it has zero length."""
        from .directions import Direction2d

        length = self.length()
        if length <= DEFAULT_EPS_NORM:
            return None
        return Direction2d(self.x / length, self.y / length)

    def normalize(self) -> Vector2d:
        """
        Return a unit-length vector in the same direction.

        Raises:
            DegenerateGeometryError: If the vector has zero length
        """
        length = self.length()
        if length <= DEFAULT_EPS_NORM:
            raise DegenerateGeometryError("Cannot normalize a zero-length vector")
        return Vector2d(self.x / length, self.y / length)

    def scale_to(self, length: float) -> Vector2d:
        """Rescale to the given length; the zero vector stays zero."""
        current = self.length()
        if current == 0.0:
            return self
        return self * (length / current)

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def component_in(self, direction: Direction2d) -> float:
        """Signed length of this vector along ``direction``."""
        return self.x * direction.x + self.y * direction.y

    def projection_in(self, direction: Direction2d) -> Vector2d:
        """The part of this vector parallel to ``direction``."""
        c = self.component_in(direction)
        return Vector2d(c * direction.x, c * direction.y)

    def project_onto_axis(self, axis: Axis2d) -> Vector2d:
        """Projection along the axis direction; the axis origin is irrelevant."""
        return self.projection_in(axis.direction)

    def project_onto(self, axis: Axis2d) -> Vector2d:
        """Same as ``project_onto_axis``; in 2D the projection target is an axis."""
        return self.project_onto_axis(axis)

    def perpendicular(self) -> Vector2d:
        """Rotate 90 degrees counterclockwise."""
        return Vector2d(-self.y, self.x)

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def rotate_by(self, angle: float) -> Vector2d:
        """Rotate counterclockwise by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector2d(c * self.x - s * self.y, s * self.x + c * self.y)

    def mirror_across(self, axis: Axis2d) -> Vector2d:
        """Reflect across the axis direction."""
        # Keep the component along the axis, flip the perpendicular one
        d = axis.direction
        a = 2.0 * (self.x * d.x + self.y * d.y)
        return Vector2d(a * d.x - self.x, a * d.y - self.y)

    def relative_to(self, frame: Frame2d) -> Vector2d:
        """
        Express this global vector in the frame's local basis.

        Args:
            frame: Frame whose basis directions define the local components

        Returns:
            Local components (v . x_dir, v . y_dir)
        """
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2d(
            self.x * xd.x + self.y * xd.y,
            self.x * yd.x + self.y * yd.y,
        )

    def place_in(self, frame: Frame2d) -> Vector2d:
        """
        Interpret this vector as local to ``frame`` and return it in global terms.

        Args:
            frame: Frame the components are expressed in

        Returns:
            Global vector x * x_dir + y * y_dir
        """
        xd = frame.x_direction
        yd = frame.y_direction
        return Vector2d(
            self.x * xd.x + self.y * yd.x,
            self.x * xd.y + self.y * yd.y,
        )

    def place_on(self, planar_frame: PlanarFrame3d) -> Vector3d:
        """Lift into 3D using the planar frame's basis directions."""
        xd = planar_frame.x_direction
        yd = planar_frame.y_direction
        return Vector3d(
            self.x * xd.x + self.y * yd.x,
            self.x * xd.y + self.y * yd.y,
            self.x * xd.z + self.y * yd.z,
        )

    def equal_within(self, tolerance: float, other: Vector2d) -> bool:
        """True if the difference is no longer than ``tolerance`` (never for negative tolerance)."""
        if tolerance < 0:
            return False
        return (self - other).squared_length() <= tolerance * tolerance


@dataclass(frozen=True)
class Vector3d:
    """A 3D vector with components (x, y, z)."""

    x: float
    y: float
    z: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Vector3d:
        """The zero vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_components(cls, components: Iterable[float]) -> Vector3d:
        """Build from an (x, y, z) iterable."""
        x, y, z = components
        return cls(float(x), float(y), float(z))

    @staticmethod
    def sum(vectors: Iterable[Vector3d]) -> Vector3d:
        """Sum an iterable of vectors. The sum of nothing is the zero vector."""
        sx = 0.0
        sy = 0.0
        sz = 0.0
        for v in vectors:
            sx += v.x
            sy += v.y
            sz += v.z
        return Vector3d(sx, sy, sz)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def components(self) -> tuple:
        """Components as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Components as a float64 numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3d:
        return Vector3d(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3d:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3d:
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide a vector by zero")
        return Vector3d(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3d:
        return Vector3d(-self.x, -self.y, -self.z)

    def plus(self, other: Vector3d) -> Vector3d:
        """Vector sum, same as ``self + other``."""
        return self + other

    def minus(self, other: Vector3d) -> Vector3d:
        """Vector difference, same as ``self - other``."""
        return self - other

    def scale_by(self, scale: float) -> Vector3d:
        """Multiply every component by ``scale``."""
        return self * scale

    def reverse(self) -> Vector3d:
        """Vector pointing the opposite way."""
        return -self

    def dot(self, other: Vector3d) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        """Right-handed cross product ``self x other``."""
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------

    def direction(self) -> Optional[Direction3d]:
        """Return the direction of this vector, or None if it has zero length."""
        from .directions import Direction3d

        length = self.length()
        if length <= DEFAULT_EPS_NORM:
            return None
        return Direction3d(self.x / length, self.y / length, self.z / length)

    def normalize(self) -> Vector3d:
        """
        Return a unit-length vector in the same direction.

        Raises:
            DegenerateGeometryError: If the vector has zero length
        """
        length = self.length()
        if length <= DEFAULT_EPS_NORM:
            raise DegenerateGeometryError("Cannot normalize a zero-length vector")
        return Vector3d(self.x / length, self.y / length, self.z / length)

    def scale_to(self, length: float) -> Vector3d:
        """Rescale to the given length; the zero vector stays zero."""
        current = self.length()
        if current == 0.0:
            return self
        return self * (length / current)

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def component_in(self, direction: Direction3d) -> float:
        """Signed length of this vector along ``direction``."""
        return self.x * direction.x + self.y * direction.y + self.z * direction.z

    def projection_in(self, direction: Direction3d) -> Vector3d:
        """The part of this vector parallel to ``direction``."""
        c = self.component_in(direction)
        return Vector3d(c * direction.x, c * direction.y, c * direction.z)

    def project_onto_axis(self, axis: Axis3d) -> Vector3d:
        """Projection along the axis direction; the axis origin is irrelevant."""
        return self.projection_in(axis.direction)

    def project_onto(self, plane: Plane3d) -> Vector3d:
        """Remove the component along the plane's normal."""
        return self - self.projection_in(plane.normal_direction)

    def project_into(self, planar_frame: PlanarFrame3d) -> Vector2d:
        """Express in the planar frame's 2D basis, dropping the normal component."""
        return Vector2d(
            self.component_in(planar_frame.x_direction),
            self.component_in(planar_frame.y_direction),
        )

    def perpendicular(self) -> Vector3d:
        """
        Return a vector perpendicular to this one.

        The zeroed component is always the one with the smallest absolute
        value, so the result is deterministic and only zero when this vector
        is zero. Its length is not normalized.
        """
        ax = abs(self.x)
        ay = abs(self.y)
        az = abs(self.z)
        if ax <= ay:
            if ax <= az:
                return Vector3d(0.0, -self.z, self.y)
            return Vector3d(-self.y, self.x, 0.0)
        if ay <= az:
            return Vector3d(self.z, 0.0, -self.x)
        return Vector3d(-self.y, self.x, 0.0)

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def rotate_around(self, axis: Axis3d, angle: float) -> Vector3d:
        """
        Rotate around an axis direction using Rodrigues' rotation formula.

            v' = v cos(a) + (k x v) sin(a) + k (k . v)(1 - cos(a))

        Only the axis direction matters; vectors have no position.

        Args:
            axis: Rotation axis; its direction k must be unit length
            angle: Rotation angle in radians, counterclockwise looking down -k

        Returns:
            Rotated vector with the same length
        """
        k = axis.direction
        c = math.cos(angle)
        s = math.sin(angle)
        kv = k.x * self.x + k.y * self.y + k.z * self.z
        cx = k.y * self.z - k.z * self.y
        cy = k.z * self.x - k.x * self.z
        cz = k.x * self.y - k.y * self.x
        t = kv * (1.0 - c)
        return Vector3d(
            self.x * c + cx * s + k.x * t,
            self.y * c + cy * s + k.y * t,
            self.z * c + cz * s + k.z * t,
        )

    def mirror_across(self, plane: Plane3d) -> Vector3d:
        """Reflect across the plane: flip the component along its normal."""
        n = plane.normal_direction
        a = 2.0 * (self.x * n.x + self.y * n.y + self.z * n.z)
        return Vector3d(self.x - a * n.x, self.y - a * n.y, self.z - a * n.z)

    def relative_to(self, frame: Frame3d) -> Vector3d:
        """
        Express this global vector in the frame's local basis.

        Args:
            frame: Frame whose basis directions define the local components

        Returns:
            Local components (v . x_dir, v . y_dir, v . z_dir)
        """
        return Vector3d(
            self.component_in(frame.x_direction),
            self.component_in(frame.y_direction),
            self.component_in(frame.z_direction),
        )

    def place_in(self, frame: Frame3d) -> Vector3d:
        """
        Interpret this vector as local to ``frame`` and return it in global terms.

        Args:
            frame: Frame the components are expressed in

        Returns:
            Global vector x * x_dir + y * y_dir + z * z_dir
        """
        xd = frame.x_direction
        yd = frame.y_direction
        zd = frame.z_direction
        return Vector3d(
            self.x * xd.x + self.y * yd.x + self.z * zd.x,
            self.x * xd.y + self.y * yd.y + self.z * zd.y,
            self.x * xd.z + self.y * yd.z + self.z * zd.z,
        )

    def equal_within(self, tolerance: float, other: Vector3d) -> bool:
        """True if the difference is no longer than ``tolerance`` (never for negative tolerance)."""
        if tolerance < 0:
            return False
        return (self - other).squared_length() <= tolerance * tolerance
