"""
Tests for Vector2d and Vector3d.

Vectors are free displacements: frame conversions touch only the basis,
never the origin.
"""

import math

import numpy as np
import pytest

from geomalg import (
    Axis2d,
    Axis3d,
    DegenerateGeometryError,
    Direction2d,
    Direction3d,
    Frame2d,
    Plane3d,
    PlanarFrame3d,
    Point2d,
    Vector2d,
    Vector3d,
)


# =============================================================================
# Vector2d
# =============================================================================

class TestVector2dArithmetic:
    """Basic vector algebra."""

    def test_add_sub(self):
        """Componentwise addition and subtraction."""
        assert Vector2d(1, 2) + Vector2d(3, -1) == Vector2d(4, 1)
        assert Vector2d(1, 2) - Vector2d(3, -1) == Vector2d(-2, 3)

    def test_scalar_multiplication_both_sides(self):
        """Scalar multiplication commutes."""
        assert Vector2d(1, -2) * 3 == Vector2d(3, -6)
        assert 3 * Vector2d(1, -2) == Vector2d(3, -6)

    def test_division_by_zero(self):
        """Dividing by zero raises instead of producing infinities."""
        with pytest.raises(ZeroDivisionError):
            Vector2d(1, 1) / 0

    def test_named_aliases_match_operators(self):
        """plus/minus/scale_by/reverse are the operator forms by name."""
        a = Vector2d(1.5, 2.0)
        b = Vector2d(-0.5, 4.0)
        assert a.plus(b) == a + b
        assert a.minus(b) == a - b
        assert a.scale_by(2.0) == a * 2.0
        assert a.reverse() == -a

    def test_sum(self):
        """Summing vectors; the empty sum is the zero vector."""
        assert Vector2d.sum([Vector2d(1, 2), Vector2d(3, 4), Vector2d(-1, 0)]) == Vector2d(3, 6)
        assert Vector2d.sum([]) == Vector2d.zero()

    def test_dot_and_cross(self):
        """Dot of perpendicular unit vectors is 0; the 2D cross is antisymmetric."""
        a = Vector2d(1, 0)
        b = Vector2d(0, 1)
        assert a.dot(b) == 0
        assert a.cross(b) == 1
        assert b.cross(a) == -1

    def test_length(self):
        """Euclidean length; the zero vector has no direction."""
        v = Vector2d(3, 4)
        assert v.length() == 5
        assert v.squared_length() == 25

    def test_values_are_immutable(self):
        """Frozen dataclass: attributes cannot be reassigned."""
        v = Vector2d(1, 2)
        with pytest.raises(AttributeError):
            v.x = 3

    def test_values_are_hashable(self):
        """Equal values hash equal and deduplicate in a set."""
        assert len({Vector2d(1, 2), Vector2d(1, 2), Vector2d(2, 1)}) == 2


class TestVector2dConstruction:

    def test_from_polar(self):
        """Length 2 at 90 degrees lands on +Y."""
        v = Vector2d.from_polar(2.0, math.pi / 2)
        assert v.equal_within(1e-12, Vector2d(0, 2))

    def test_polar_coordinates_roundtrip(self):
        """polar_coordinates reports length and atan2 angle."""
        length, angle = Vector2d(-1, 1).polar_coordinates()
        assert length == pytest.approx(math.sqrt(2))
        assert angle == pytest.approx(3 * math.pi / 4)

    def test_from_components_wrong_arity(self):
        """Unpacking the wrong number of components raises ValueError."""
        with pytest.raises(ValueError):
            Vector2d.from_components([1, 2, 3])

    def test_to_array(self):
        """to_array returns float64 numpy data."""
        arr = Vector2d(1, 2).to_array()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0])


class TestVector2dNormalization:

    def test_direction_of_zero_is_none(self):
        """The Optional direction of the zero vector is None."""
        assert Vector2d.zero().direction() is None

    def test_direction(self):
        """direction normalizes a non-zero vector."""
        d = Vector2d(0, -3).direction()
        assert d == Direction2d(0, -1)

    def test_normalize_zero_raises(self):
        """Normalizing a zero vector fails explicitly."""
        with pytest.raises(DegenerateGeometryError):
            Vector2d(0, 0).normalize()

    def test_normalize(self):
        """normalize returns a unit vector."""
        assert Vector2d(3, 4).normalize().length() == pytest.approx(1.0)

    def test_scale_to(self):
        """scale_to keeps direction; the zero vector stays zero."""
        assert Vector2d(3, 4).scale_to(10).equal_within(1e-12, Vector2d(6, 8))
        assert Vector2d.zero().scale_to(10) == Vector2d.zero()


class TestVector2dTransformations:

    def test_rotate_by_quarter_turn(self):
        """rotate_by is counterclockwise."""
        v = Vector2d(1, 0).rotate_by(math.pi / 2)
        assert v.equal_within(1e-12, Vector2d(0, 1))

    def test_perpendicular_is_counterclockwise(self):
        """The 2D perpendicular is +X rotated to +Y."""
        assert Vector2d(1, 0).perpendicular() == Vector2d(0, 1)

    def test_mirror_across_x_axis(self):
        """Mirroring across the X axis negates y."""
        v = Vector2d(2, 3).mirror_across(Axis2d.x_axis())
        assert v.equal_within(1e-12, Vector2d(2, -3))

    def test_mirror_across_diagonal_swaps(self, diagonal_direction2d):
        """Mirroring across y = x swaps components; the axis origin is ignored."""
        axis = Axis2d(Point2d(5, -5), diagonal_direction2d)
        assert Vector2d(2, 3).mirror_across(axis).equal_within(1e-12, Vector2d(3, 2))

    def test_projection(self, diagonal_direction2d):
        """Projecting (2, 0) onto the diagonal gives (1, 1)."""
        axis = Axis2d(Point2d.origin(), diagonal_direction2d)
        p = Vector2d(2, 0).project_onto(axis)
        assert p.equal_within(1e-12, Vector2d(1, 1))

    def test_project_onto_axis_matches_3d_name(self, diagonal_direction2d):
        """project_onto_axis is available in 2D and agrees with project_onto."""
        axis = Axis2d(Point2d(4, -7), diagonal_direction2d)
        v = Vector2d(2, 0)
        assert v.project_onto_axis(axis) == v.project_onto(axis)
        assert v.project_onto_axis(axis).equal_within(1e-12, Vector2d(1, 1))

    def test_relative_to_ignores_origin(self):
        """Vectors have no position, so the frame origin is irrelevant."""
        frame = Frame2d.at_point(Point2d(100, 100))
        assert Vector2d(1, 2).relative_to(frame) == Vector2d(1, 2)

    def test_relative_place_roundtrip(self, frame2d):
        """place_in undoes relative_to."""
        v = Vector2d(3.5, -1.25)
        assert v.relative_to(frame2d).place_in(frame2d).equal_within(1e-12, v)

    def test_relative_to_rotated_frame(self):
        """Global +Y is local +X in a frame whose X points up."""
        frame = Frame2d.with_x_direction(Direction2d.positive_y())
        assert Vector2d(0, 2).relative_to(frame).equal_within(1e-12, Vector2d(2, 0))

    def test_length_preserved(self, frame2d):
        """Conversion through an orthonormal frame keeps length."""
        v = Vector2d(3, 4)
        assert v.relative_to(frame2d).length() == pytest.approx(5.0)

    def test_place_on_planar_frame(self):
        """Lifting onto the YZ planar frame maps (x, y) to (0, x, y)."""
        v = Vector2d(1, 2).place_on(PlanarFrame3d.yz())
        assert v == Vector3d(0, 1, 2)


class TestVectorEqualWithin:

    def test_within_tolerance(self):
        """equal_within compares the length of the difference."""
        assert Vector2d(1, 1).equal_within(0.1, Vector2d(1.05, 1.0))
        assert not Vector2d(1, 1).equal_within(0.01, Vector2d(1.05, 1.0))

    def test_negative_tolerance_is_false(self):
        """A negative tolerance never matches, even for identical values."""
        assert not Vector2d(1, 1).equal_within(-1.0, Vector2d(1, 1))
        assert not Vector3d(1, 1, 1).equal_within(-1.0, Vector3d(1, 1, 1))

    def test_zero_tolerance_exact(self):
        """Zero tolerance still matches exact equality."""
        assert Vector3d(1, 2, 3).equal_within(0.0, Vector3d(1, 2, 3))


# =============================================================================
# Vector3d
# =============================================================================

class TestVector3dAlgebra:

    def test_cross_right_handed(self):
        """x cross y is +z, and swapping the operands flips the sign."""
        x = Vector3d(1, 0, 0)
        y = Vector3d(0, 1, 0)
        assert x.cross(y) == Vector3d(0, 0, 1)
        assert y.cross(x) == Vector3d(0, 0, -1)

    def test_cross_is_perpendicular(self):
        """The cross product is perpendicular to both inputs."""
        a = Vector3d(1, 2, 3)
        b = Vector3d(-2, 0.5, 4)
        c = a.cross(b)
        assert c.dot(a) == pytest.approx(0.0)
        assert c.dot(b) == pytest.approx(0.0)

    def test_length(self):
        """Length of a 3D vector."""
        assert Vector3d(2, 3, 6).length() == pytest.approx(7.0)

    def test_sum(self):
        """Summing vectors; the empty sum is the zero vector."""
        assert Vector3d.sum([Vector3d(1, 0, 0), Vector3d(0, 2, 0), Vector3d(0, 0, 3)]) == Vector3d(1, 2, 3)

    def test_normalize_zero_raises(self):
        """Normalizing a zero vector fails explicitly."""
        with pytest.raises(DegenerateGeometryError):
            Vector3d.zero().normalize()

    def test_direction_of_tiny_vector_is_none(self):
        """Vectors below the degeneracy threshold have no direction."""
        assert Vector3d(1e-15, 0, 0).direction() is None


class TestVector3dPerpendicular:
    """The perpendicular is deterministic and never zero for nonzero input."""

    @pytest.mark.parametrize("v", [
        Vector3d(1, 0, 0),
        Vector3d(0, 1, 0),
        Vector3d(0, 0, 1),
        Vector3d(1, 1, 1),
        Vector3d(-3, 0.1, 2),
        Vector3d(0.2, -5, 0.3),
        Vector3d(1e-3, 1e-3, 1),
    ])
    def test_perpendicular_nonzero_and_orthogonal(self, v):
        """Perpendicular of nonzero input is nonzero and orthogonal."""
        p = v.perpendicular()
        assert p.dot(v) == pytest.approx(0.0, abs=1e-12)
        assert p.length() > 0

    def test_zero_stays_zero(self):
        """The perpendicular of zero is zero."""
        assert Vector3d.zero().perpendicular().length() == 0

    def test_deterministic(self):
        """perpendicular returns the same vector every time."""
        v = Vector3d(-3, 0.1, 2)
        assert v.perpendicular() == v.perpendicular()


class TestVector3dTransformations:

    def test_rotate_around_z(self):
        """Rodrigues rotation about +Z leaves the z component alone."""
        v = Vector3d(1, 0, 5).rotate_around(Axis3d.z_axis(), math.pi / 2)
        assert v.equal_within(1e-12, Vector3d(0, 1, 5))

    def test_rotate_around_ignores_axis_position(self):
        """Only the axis direction affects a vector rotation."""
        axis = Axis3d.z_axis().translate_by(Vector3d(10, 10, 0))
        v = Vector3d(1, 0, 0).rotate_around(axis, math.pi)
        assert v.equal_within(1e-12, Vector3d(-1, 0, 0))

    def test_rotation_preserves_length(self, random_directions3d):
        """Rotations about arbitrary axes keep length."""
        v = Vector3d(1, -2, 3)
        for d in random_directions3d:
            axis = Axis3d(Axis3d.x_axis().origin_point, d)
            assert v.rotate_around(axis, 0.7).length() == pytest.approx(v.length())

    def test_mirror_across_plane(self):
        """Mirroring across XY flips z."""
        v = Vector3d(1, 2, 3).mirror_across(Plane3d.xy())
        assert v == Vector3d(1, 2, -3)

    def test_project_onto_plane(self):
        """Projecting onto ZX drops the y component."""
        assert Vector3d(1, 2, 3).project_onto(Plane3d.zx()) == Vector3d(1, 0, 3)

    def test_project_onto_axis(self):
        """Projecting onto the Y axis keeps only y."""
        assert Vector3d(1, 2, 3).project_onto_axis(Axis3d.y_axis()) == Vector3d(0, 2, 0)

    def test_project_into_planar_frame(self):
        """ZX planar frame coordinates are (z, x)."""
        v = Vector3d(1, 2, 3).project_into(PlanarFrame3d.zx())
        assert v == Vector2d(3, 1)

    def test_relative_place_roundtrip(self, frame3d):
        """place_in undoes relative_to."""
        v = Vector3d(0.5, -2, 7)
        assert v.relative_to(frame3d).place_in(frame3d).equal_within(1e-12, v)

    def test_relative_to_components(self, frame3d):
        """A vector along the frame's X direction has local components (len, 0, 0)."""
        v = frame3d.x_direction.to_vector() * 2.0
        local = v.relative_to(frame3d)
        assert local.equal_within(1e-12, Vector3d(2, 0, 0))

    def test_component_in(self):
        """component_in is the dot product with a direction."""
        assert Vector3d(1, 2, 3).component_in(Direction3d.positive_z()) == 3
