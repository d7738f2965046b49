"""
Tests for the functional transformation API.
"""

from dataclasses import astuple
from functools import partial
import math

import pytest

from geomalg import (
    Axis2d,
    Axis3d,
    BoundingBox2d,
    Direction2d,
    Frame2d,
    Frame3d,
    PlanarFrame3d,
    Plane3d,
    Point2d,
    Point3d,
    Vector2d,
    Vector3d,
)
from geomalg.euclid import transforms


def _flatten(value):
    """All float fields of a (possibly nested) value, in order."""
    def walk(item):
        if isinstance(item, tuple):
            for sub in item:
                yield from walk(sub)
        else:
            yield item
    return list(walk(astuple(value)))


class TestRelativeToPlaceIn:

    def test_matches_methods(self, frame2d, frame3d):
        """The functions agree with the value methods."""
        p2 = Point2d(3, 4)
        p3 = Point3d(3, 4, 5)
        assert transforms.relative_to(frame2d, p2) == p2.relative_to(frame2d)
        assert transforms.place_in(frame3d, p3) == p3.place_in(frame3d)

    @pytest.mark.parametrize("value", [
        Point2d(1, 2),
        Vector2d(-1, 0.5),
        Direction2d.from_angle(2.0),
        Axis2d(Point2d(0, 3), Direction2d.positive_y()),
        Frame2d.with_angle(0.3, Point2d(1, 1)),
    ])
    def test_roundtrip_2d(self, frame2d, value):
        """place_in undoes relative_to for every 2D kind and keeps the type."""
        back = transforms.place_in(frame2d, transforms.relative_to(frame2d, value))
        assert type(back) is type(value)
        assert _flatten(back) == pytest.approx(_flatten(value), abs=1e-9)

    def test_roundtrip_3d_values(self, tilted_frame3d):
        """place_in undoes relative_to for 3D points and vectors."""
        p = Point3d(1, -1, 2)
        v = Vector3d(0, 3, -4)
        back_p = transforms.place_in(tilted_frame3d, transforms.relative_to(tilted_frame3d, p))
        back_v = transforms.place_in(tilted_frame3d, transforms.relative_to(tilted_frame3d, v))
        assert back_p.equal_within(1e-9, p)
        assert back_v.equal_within(1e-9, v)

    def test_supports_planes_and_planar_frames(self, frame3d):
        """Planes and planar frames are supported too."""
        plane = Plane3d.xy()
        planar = PlanarFrame3d.yz()
        assert transforms.relative_to(frame3d, plane) == plane.relative_to(frame3d)
        assert transforms.place_in(frame3d, planar) == planar.place_in(frame3d)

    def test_dimension_mismatch_raises(self, frame2d, frame3d):
        """A frame only converts values of its own dimension."""
        with pytest.raises(TypeError):
            transforms.relative_to(frame2d, Point3d(1, 2, 3))
        with pytest.raises(TypeError):
            transforms.place_in(frame3d, Point2d(1, 2))

    def test_unsupported_value_raises(self, frame2d):
        """Boxes have no frame conversion."""
        with pytest.raises(TypeError):
            transforms.relative_to(frame2d, BoundingBox2d(0, 1, 0, 1))

    def test_non_frame_raises(self):
        """The first argument must be a frame."""
        with pytest.raises(TypeError):
            transforms.relative_to(Point2d(0, 0), Point2d(1, 1))


class TestRigidTransforms:

    def test_translate_by(self):
        """translate_by works on points and boxes."""
        assert transforms.translate_by(Vector2d(1, 1), Point2d(0, 0)) == Point2d(1, 1)
        assert transforms.translate_by(Vector2d(1, 1), BoundingBox2d(0, 1, 0, 1)) == BoundingBox2d(1, 2, 1, 2)

    def test_translate_unsupported(self):
        """Directions cannot be translated."""
        with pytest.raises(TypeError):
            transforms.translate_by(Vector2d(1, 1), Direction2d.positive_x())

    def test_rotate_around_2d(self):
        """Rotation of a point about a 2D center."""
        p = transforms.rotate_around(Point2d(2, 0), math.pi / 4, Point2d(3, 0))
        assert p.equal_within(1e-4, Point2d(2.7071, 0.7071))

    def test_rotate_vector_ignores_center(self):
        """Vectors rotate without regard to the center."""
        v = transforms.rotate_around(Point2d(100, 100), math.pi / 2, Vector2d(1, 0))
        assert v.equal_within(1e-12, Vector2d(0, 1))

    def test_rotate_around_3d(self):
        """Rotation of a point about a 3D axis."""
        p = transforms.rotate_around(Axis3d.z_axis(), math.pi, Point3d(1, 0, 2))
        assert p.equal_within(1e-12, Point3d(-1, 0, 2))

    def test_mirror_across(self):
        """Mirroring works on points and rejects boxes."""
        assert transforms.mirror_across(Plane3d.xy(), Point3d(1, 1, 1)) == Point3d(1, 1, -1)
        with pytest.raises(TypeError):
            transforms.mirror_across(Plane3d.xy(), BoundingBox2d(0, 1, 0, 1))

    def test_planar_helpers(self):
        """place_in_3d and project_into as functions."""
        planar = PlanarFrame3d.xy()
        assert transforms.place_in_3d(planar, Point2d(1, 2)) == Point3d(1, 2, 0)
        assert transforms.project_into(planar, Point3d(1, 2, 3)) == Point2d(1, 2)


class TestComposition:

    def test_compose_left_to_right(self):
        """compose applies the first function first."""
        shift = partial(transforms.translate_by, Vector2d(1, 0))
        turn = partial(transforms.rotate_around, Point2d.origin(), math.pi / 2)
        p = transforms.compose(shift, turn)(Point2d(0, 0))
        assert p.equal_within(1e-12, Point2d(0, 1))
        q = transforms.compose(turn, shift)(Point2d(0, 0))
        assert q.equal_within(1e-12, Point2d(1, 0))

    def test_compose_nothing_is_identity(self):
        """An empty composition returns its input."""
        p = Point2d(3, 4)
        assert transforms.compose()(p) is p

    def test_pipe(self, frame3d):
        """pipe threads a value through the functions in order."""
        to_local = partial(transforms.relative_to, frame3d)
        to_global = partial(transforms.place_in, frame3d)
        p = Point3d(2, 2, 2)
        assert transforms.pipe(p, to_local, to_global).equal_within(1e-9, p)

    def test_change_of_frame_pipeline(self, frame2d):
        """Composed conversions re-express a point from one frame in another."""
        other = Frame2d.with_angle(-0.7, Point2d(4, 4))
        reexpress = transforms.compose(
            partial(transforms.place_in, frame2d),
            partial(transforms.relative_to, other),
        )
        local_a = Point2d(1, 2)
        local_b = reexpress(local_a)
        assert local_b.place_in(other).equal_within(1e-9, local_a.place_in(frame2d))

    def test_frame3d_pipeline_keeps_handedness(self, frame3d):
        """A rigid pipeline keeps a frame right-handed."""
        frame = transforms.pipe(
            Frame3d.at_origin(),
            partial(transforms.rotate_around, Axis3d.x_axis(), 0.3),
            partial(transforms.place_in, frame3d),
        )
        assert frame.is_right_handed()
        assert frame.is_orthonormal(1e-9)
