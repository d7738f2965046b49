"""
Tests for record encoding and decoding.

Decoding is strict: malformed records raise DecodeError with the path of
the offending field, and nothing is renormalized on the way in.
"""

import json
import logging
import math

import pytest

from geomalg import (
    Axis2d,
    Axis3d,
    BoundingBox2d,
    BoundingBox3d,
    DecodeError,
    Direction2d,
    Direction3d,
    Frame2d,
    Frame3d,
    GeometryError,
    PlanarFrame3d,
    Plane3d,
    Point2d,
    Point3d,
    Vector2d,
    Vector3d,
)
from geomalg.utils import Config, decode, encode, from_json, to_json


class TestEncode:

    def test_point_and_vector_are_lists(self):
        """Points, vectors and directions encode as plain component lists."""
        assert encode(Point2d(1, 2)) == [1.0, 2.0]
        assert encode(Vector3d(1, 2, 3)) == [1.0, 2.0, 3.0]
        assert encode(Direction2d.positive_y()) == [0.0, 1.0]

    def test_frame2d_record(self):
        """A 2D frame encodes its origin and both directions."""
        frame = Frame2d.at_point(Point2d(1, 2))
        assert encode(frame) == {
            "originPoint": [1.0, 2.0],
            "xDirection": [1.0, 0.0],
            "yDirection": [0.0, 1.0],
        }

    def test_axis_and_plane_records(self):
        """Axis and plane records carry exactly their two fields."""
        assert set(encode(Axis3d.z_axis())) == {"originPoint", "direction"}
        assert set(encode(Plane3d.xy())) == {"originPoint", "normalDirection"}

    def test_frame3d_record(self):
        """A 3D frame record includes the z direction."""
        record = encode(Frame3d.at_origin())
        assert record["zDirection"] == [0.0, 0.0, 1.0]

    def test_box_records(self):
        """Boxes encode as min/max fields per dimension."""
        assert encode(BoundingBox2d(1, 4, 2, 3)) == {"minX": 1, "maxX": 4, "minY": 2, "maxY": 3}
        assert set(encode(BoundingBox3d(0, 1, 0, 1, 0, 1))) == {
            "minX", "maxX", "minY", "maxY", "minZ", "maxZ",
        }

    def test_unknown_type_raises(self):
        """Encoding an unsupported object is a TypeError."""
        with pytest.raises(TypeError):
            encode(object())

    def test_records_are_json_serializable(self, frame3d):
        """Encoded records go straight through json.dumps."""
        text = json.dumps(encode(frame3d))
        assert "xDirection" in text


class TestDecode:

    @pytest.mark.parametrize("value", [
        Vector2d(1.5, -2),
        Vector3d(0, 0, 7),
        Direction2d.from_angle(0.3),
        Direction3d.from_components(1, 2, 3),
        Point2d(-1, 4),
        Point3d(1, 2, 3),
        Axis2d(Point2d(1, 1), Direction2d.negative_y()),
        Axis3d(Point3d(1, 0, 0), Direction3d.from_components(0, 1, 1)),
        Plane3d(Point3d(0, 0, 5), Direction3d.negative_z()),
        Frame2d.with_angle(1.0, Point2d(3, 3)),
        Frame3d.with_z_direction(Direction3d.from_components(1, 1, 1)),
        PlanarFrame3d.zx(),
        BoundingBox2d(-1, 1, 0, 0),
        BoundingBox3d(0, 1, 2, 3, 4, 5),
    ])
    def test_decode_inverts_encode(self, value):
        """decode gives back the encoded value exactly."""
        assert decode(type(value), encode(value)) == value

    def test_integer_components_accepted(self):
        """Integer components decode to floats."""
        assert decode(Point2d, [1, 2]) == Point2d(1.0, 2.0)

    def test_tuple_components_accepted(self):
        """Tuples are accepted as component lists."""
        assert decode(Vector2d, (1.0, 2.0)) == Vector2d(1.0, 2.0)

    def test_unknown_target_raises(self):
        """Decoding into an unsupported type is a TypeError."""
        with pytest.raises(TypeError):
            decode(dict, {})


class TestDecodeRejections:

    def test_wrong_arity(self):
        """Component lists must have the right length."""
        with pytest.raises(DecodeError):
            decode(Point2d, [1.0, 2.0, 3.0])
        with pytest.raises(DecodeError):
            decode(Vector3d, [1.0, 2.0])

    def test_wrong_container(self):
        """Lists and records are not interchangeable."""
        with pytest.raises(DecodeError):
            decode(Point2d, {"x": 1, "y": 2})
        with pytest.raises(DecodeError):
            decode(Frame2d, [[0, 0], [1, 0], [0, 1]])

    def test_non_numeric(self):
        """Strings are not components."""
        with pytest.raises(DecodeError):
            decode(Point2d, ["1", 2])

    def test_bool_is_not_a_number(self):
        """Booleans are rejected even though bool subclasses int."""
        with pytest.raises(DecodeError):
            decode(Point2d, [True, 2])

    def test_non_finite(self):
        """NaN and infinity are rejected."""
        with pytest.raises(DecodeError):
            decode(Point3d, [1.0, math.nan, 0.0])
        with pytest.raises(DecodeError):
            decode(Vector2d, [math.inf, 0.0])

    def test_missing_field(self):
        """A missing field is named in the error."""
        record = encode(Frame2d.at_origin())
        del record["yDirection"]
        with pytest.raises(DecodeError, match="yDirection"):
            decode(Frame2d, record)

    def test_non_unit_direction_is_not_normalized(self):
        """Directions must already be unit length."""
        with pytest.raises(DecodeError):
            decode(Direction2d, [3.0, 4.0])

    def test_non_orthonormal_frame(self):
        """Frame directions must be orthonormal."""
        record = {
            "originPoint": [0, 0],
            "xDirection": [1, 0],
            "yDirection": [math.sqrt(0.5), math.sqrt(0.5)],
        }
        with pytest.raises(DecodeError, match="orthonormal"):
            decode(Frame2d, record)

    def test_non_orthonormal_planar_frame(self):
        """Planar frame directions must be orthonormal."""
        record = encode(PlanarFrame3d.xy())
        record["yDirection"] = [1.0, 0.0, 0.0]
        with pytest.raises(DecodeError):
            decode(PlanarFrame3d, record)

    def test_inverted_box(self):
        """A box with min above max is rejected."""
        with pytest.raises(DecodeError, match="minX"):
            decode(BoundingBox2d, {"minX": 2, "maxX": 1, "minY": 0, "maxY": 1})

    def test_error_path_points_at_field(self):
        """The error path locates the bad component inside nested fields."""
        record = encode(Frame3d.at_origin())
        record["xDirection"] = [1.0, "0", 0.0]
        with pytest.raises(DecodeError) as info:
            decode(Frame3d, record)
        assert info.value.path == "xDirection[1]"
        assert str(info.value).startswith("xDirection[1]:")

    def test_decode_error_is_geometry_error(self):
        """DecodeError is both a GeometryError and a ValueError."""
        with pytest.raises(GeometryError):
            decode(Point2d, None)
        with pytest.raises(ValueError):
            decode(Point2d, None)

    def test_tolerance(self):
        """A looser tolerance accepts a slightly off direction unchanged."""
        slightly_off = [1.0 + 1e-5, 0.0]
        with pytest.raises(DecodeError):
            decode(Direction2d, slightly_off)
        assert decode(Direction2d, slightly_off, tolerance=1e-3) == Direction2d(1.0 + 1e-5, 0.0)

    def test_rejection_is_logged(self, caplog):
        """Rejected records are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="geomalg"):
            with pytest.raises(DecodeError):
                decode(Point2d, [1.0])
        assert "Rejected Point2d record" in caplog.text


class TestJson:

    def test_roundtrip(self, frame2d):
        """from_json inverts to_json."""
        assert from_json(Frame2d, to_json(frame2d)) == frame2d

    def test_indent(self):
        """indent switches to multi-line output."""
        text = to_json(Point2d(1, 2), indent=2)
        assert "\n" in text
        assert "\n" not in to_json(Point2d(1, 2))

    def test_config_indent(self):
        """Config.json_indent is used when no indent is given."""
        text = to_json(BoundingBox2d(0, 1, 0, 1), config=Config(json_indent=4))
        assert '\n    "minX"' in text

    def test_config_tolerance(self):
        """Config.tolerance applies to from_json."""
        text = json.dumps([1.0 + 1e-5, 0.0])
        with pytest.raises(DecodeError):
            from_json(Direction2d, text)
        # Accepted within the looser tolerance, but never renormalized
        assert from_json(Direction2d, text, config=Config(tolerance=1e-3)).x == 1.0 + 1e-5

    def test_invalid_json(self):
        """Malformed JSON text raises DecodeError."""
        with pytest.raises(DecodeError, match="invalid JSON"):
            from_json(Point2d, "[1.0, 2.0")

    def test_non_finite_values_are_not_written(self):
        """to_json only emits standard JSON, so NaN and infinity are refused."""
        with pytest.raises(ValueError, match="non-finite Point2d"):
            to_json(Point2d(math.inf, 0.0))
        with pytest.raises(ValueError, match="non-finite BoundingBox2d"):
            to_json(BoundingBox2d(0.0, math.nan, 0.0, 1.0))
        assert encode(Point2d(math.inf, 0.0)) == [math.inf, 0.0]
