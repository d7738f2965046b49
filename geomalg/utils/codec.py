"""
Record encoding and decoding for geomalg values.

Records are JSON-compatible and follow the data model field by field:

    Point / Vector / Direction   [x, y] or [x, y, z]
    Axis2d / Axis3d              {"originPoint": [...], "direction": [...]}
    Plane3d                      {"originPoint": [...], "normalDirection": [...]}
    Frame2d                      {"originPoint", "xDirection", "yDirection"}
    Frame3d                      {"originPoint", "xDirection", "yDirection", "zDirection"}
    PlanarFrame3d                {"originPoint", "xDirection", "yDirection"}
    BoundingBox2d                {"minX", "maxX", "minY", "maxY"}
    BoundingBox3d                {"minX", "maxX", "minY", "maxY", "minZ", "maxZ"}

Decoding is strict: wrong container types, missing keys, wrong arity,
non-numeric or non-finite components, non-unit directions, non-orthonormal
bases and inverted box extrema all raise ``DecodeError``. Nothing is
renormalized or reordered on the way in.

Usage:
    record = encode(frame)
    frame = decode(Frame2d, record)

    text = to_json(box)
    box = from_json(BoundingBox2d, text)
"""

import json
import logging
import math
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from ..core.constants import (
    DEFAULT_TOLERANCE,
    KEY_ORIGIN_POINT,
    KEY_DIRECTION,
    KEY_NORMAL_DIRECTION,
    KEY_X_DIRECTION,
    KEY_Y_DIRECTION,
    KEY_Z_DIRECTION,
    KEY_MIN_X,
    KEY_MAX_X,
    KEY_MIN_Y,
    KEY_MAX_Y,
    KEY_MIN_Z,
    KEY_MAX_Z,
)
from ..core.errors import DecodeError
from ..core.types import Record
from ..euclid import (
    Vector2d,
    Vector3d,
    Direction2d,
    Direction3d,
    Point2d,
    Point3d,
    Axis2d,
    Axis3d,
    Plane3d,
    Frame2d,
    Frame3d,
    PlanarFrame3d,
    BoundingBox2d,
    BoundingBox3d,
)
from .config import Config

logger = logging.getLogger(__name__)

V = TypeVar("V")


# =============================================================================
# Encoding
# =============================================================================

def _encode_components(value) -> List[float]:
    """Vector or direction components as a list of floats."""
    return [float(c) for c in value.components]


def _encode_coordinates(value) -> List[float]:
    """Point coordinates as a list of floats."""
    return [float(c) for c in value.coordinates]


def _encode_axis(axis) -> Dict[str, Any]:
    """Encode an Axis2d or Axis3d."""
    return {
        KEY_ORIGIN_POINT: _encode_coordinates(axis.origin_point),
        KEY_DIRECTION: _encode_components(axis.direction),
    }


def _encode_plane(plane: Plane3d) -> Dict[str, Any]:
    """Encode a Plane3d."""
    return {
        KEY_ORIGIN_POINT: _encode_coordinates(plane.origin_point),
        KEY_NORMAL_DIRECTION: _encode_components(plane.normal_direction),
    }


def _encode_planar(frame) -> Dict[str, Any]:
    """Encode origin and x/y directions (Frame2d, PlanarFrame3d)."""
    return {
        KEY_ORIGIN_POINT: _encode_coordinates(frame.origin_point),
        KEY_X_DIRECTION: _encode_components(frame.x_direction),
        KEY_Y_DIRECTION: _encode_components(frame.y_direction),
    }


def _encode_frame3d(frame: Frame3d) -> Dict[str, Any]:
    """Encode a Frame3d: the planar record plus zDirection."""
    record = _encode_planar(frame)
    record[KEY_Z_DIRECTION] = _encode_components(frame.z_direction)
    return record


def _encode_box2d(box: BoundingBox2d) -> Dict[str, Any]:
    """Encode box extrema under camelCase keys."""
    return {
        KEY_MIN_X: box.min_x,
        KEY_MAX_X: box.max_x,
        KEY_MIN_Y: box.min_y,
        KEY_MAX_Y: box.max_y,
    }


def _encode_box3d(box: BoundingBox3d) -> Dict[str, Any]:
    """Encode a BoundingBox3d: the 2D record plus the Z extrema."""
    record = _encode_box2d(box)
    record[KEY_MIN_Z] = box.min_z
    record[KEY_MAX_Z] = box.max_z
    return record


_ENCODERS: Dict[type, Callable[[Any], Record]] = {
    Vector2d: _encode_components,
    Vector3d: _encode_components,
    Direction2d: _encode_components,
    Direction3d: _encode_components,
    Point2d: _encode_coordinates,
    Point3d: _encode_coordinates,
    Axis2d: _encode_axis,
    Axis3d: _encode_axis,
    Plane3d: _encode_plane,
    Frame2d: _encode_planar,
    Frame3d: _encode_frame3d,
    PlanarFrame3d: _encode_planar,
    BoundingBox2d: _encode_box2d,
    BoundingBox3d: _encode_box3d,
}


def encode(value) -> Record:
    """
    Encode a value as a JSON-compatible record.

    Raises:
        TypeError: If the value is not a geomalg value type
    """
    encoder = _ENCODERS.get(type(value))
    if encoder is None:
        raise TypeError(f"Cannot encode {type(value).__name__}")
    return encoder(value)


# =============================================================================
# Decoding helpers
# =============================================================================

def _join(path: str, key) -> str:
    """Extend a field path: list indices as '[i]', keys dotted."""
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


def _number(value: Any, path: str) -> float:
    """
    Validate a single numeric component.

    Args:
        value: Raw component from the record
        path: Field path used in error messages

    Returns:
        The component as a finite float

    Raises:
        DecodeError: If the value is a bool, not a number, or not finite
    """
    # bool is an int subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"expected a number, got {type(value).__name__}", path)
    value = float(value)
    if not math.isfinite(value):
        raise DecodeError(f"expected a finite number, got {value}", path)
    return value


def _components(record: Any, arity: int, path: str) -> List[float]:
    """
    Validate a positional record of exactly ``arity`` numbers.

    Args:
        record: Raw list or tuple
        arity: Expected number of components (2 or 3)
        path: Field path used in error messages

    Returns:
        The components as floats
    """
    if not isinstance(record, (list, tuple)):
        raise DecodeError(f"expected a list of {arity} numbers, got {type(record).__name__}", path)
    if len(record) != arity:
        raise DecodeError(f"expected {arity} components, got {len(record)}", path)
    return [_number(c, _join(path, i)) for i, c in enumerate(record)]


def _mapping(record: Any, keys: Sequence[str], path: str) -> Dict[str, Any]:
    """Check that ``record`` is a dict holding every key in ``keys``."""
    if not isinstance(record, dict):
        raise DecodeError(f"expected an object, got {type(record).__name__}", path)
    missing = [k for k in keys if k not in record]
    if missing:
        raise DecodeError(f"missing field(s): {', '.join(missing)}", path)
    return record


def _unit(components: List[float], path: str, tolerance: float) -> List[float]:
    """
    Check that components have unit length within ``tolerance``.

    The components are returned unchanged; nothing is renormalized.
    """
    norm = math.sqrt(sum(c * c for c in components))
    if abs(norm - 1.0) > tolerance:
        raise DecodeError(f"direction is not unit length (norm {norm})", path)
    return components


# Each decoder takes (record, path, tolerance) and returns the decoded value.

def _vector2d(record, path, tolerance) -> Vector2d:
    return Vector2d(*_components(record, 2, path))


def _vector3d(record, path, tolerance) -> Vector3d:
    return Vector3d(*_components(record, 3, path))


def _point2d(record, path, tolerance) -> Point2d:
    return Point2d(*_components(record, 2, path))


def _point3d(record, path, tolerance) -> Point3d:
    return Point3d(*_components(record, 3, path))


def _direction2d(record, path, tolerance) -> Direction2d:
    return Direction2d(*_unit(_components(record, 2, path), path, tolerance))


def _direction3d(record, path, tolerance) -> Direction3d:
    return Direction3d(*_unit(_components(record, 3, path), path, tolerance))


def _axis2d(record, path, tolerance) -> Axis2d:
    """Decode an Axis2d; the direction must be unit length."""
    record = _mapping(record, (KEY_ORIGIN_POINT, KEY_DIRECTION), path)
    return Axis2d(
        _point2d(record[KEY_ORIGIN_POINT], _join(path, KEY_ORIGIN_POINT), tolerance),
        _direction2d(record[KEY_DIRECTION], _join(path, KEY_DIRECTION), tolerance),
    )


def _axis3d(record, path, tolerance) -> Axis3d:
    """Decode an Axis3d; the direction must be unit length."""
    record = _mapping(record, (KEY_ORIGIN_POINT, KEY_DIRECTION), path)
    return Axis3d(
        _point3d(record[KEY_ORIGIN_POINT], _join(path, KEY_ORIGIN_POINT), tolerance),
        _direction3d(record[KEY_DIRECTION], _join(path, KEY_DIRECTION), tolerance),
    )


def _plane3d(record, path, tolerance) -> Plane3d:
    """Decode a Plane3d; the normal must be unit length."""
    record = _mapping(record, (KEY_ORIGIN_POINT, KEY_NORMAL_DIRECTION), path)
    return Plane3d(
        _point3d(record[KEY_ORIGIN_POINT], _join(path, KEY_ORIGIN_POINT), tolerance),
        _direction3d(record[KEY_NORMAL_DIRECTION], _join(path, KEY_NORMAL_DIRECTION), tolerance),
    )


def _frame2d(record, path, tolerance) -> Frame2d:
    """
    Decode a Frame2d and verify its basis.

    Args:
        record: Dict with originPoint, xDirection and yDirection
        path: Field path of the record
        tolerance: Tolerance for the unit-length and orthogonality checks

    Returns:
        The decoded frame, basis exactly as given

    Raises:
        DecodeError: If a field is malformed or the basis is not orthonormal
    """
    record = _mapping(record, (KEY_ORIGIN_POINT, KEY_X_DIRECTION, KEY_Y_DIRECTION), path)
    frame = Frame2d(
        _point2d(record[KEY_ORIGIN_POINT], _join(path, KEY_ORIGIN_POINT), tolerance),
        _direction2d(record[KEY_X_DIRECTION], _join(path, KEY_X_DIRECTION), tolerance),
        _direction2d(record[KEY_Y_DIRECTION], _join(path, KEY_Y_DIRECTION), tolerance),
    )
    if not frame.is_orthonormal(tolerance):
        raise DecodeError("frame basis is not orthonormal", path)
    return frame


def _frame3d(record, path, tolerance) -> Frame3d:
    """Decode a Frame3d; same checks as ``_frame2d`` plus zDirection."""
    keys = (KEY_ORIGIN_POINT, KEY_X_DIRECTION, KEY_Y_DIRECTION, KEY_Z_DIRECTION)
    record = _mapping(record, keys, path)
    frame = Frame3d(
        _point3d(record[KEY_ORIGIN_POINT], _join(path, KEY_ORIGIN_POINT), tolerance),
        _direction3d(record[KEY_X_DIRECTION], _join(path, KEY_X_DIRECTION), tolerance),
        _direction3d(record[KEY_Y_DIRECTION], _join(path, KEY_Y_DIRECTION), tolerance),
        _direction3d(record[KEY_Z_DIRECTION], _join(path, KEY_Z_DIRECTION), tolerance),
    )
    if not frame.is_orthonormal(tolerance):
        raise DecodeError("frame basis is not orthonormal", path)
    return frame


def _planar_frame3d(record, path, tolerance) -> PlanarFrame3d:
    """Decode a PlanarFrame3d; its two 3D directions must be orthonormal."""
    record = _mapping(record, (KEY_ORIGIN_POINT, KEY_X_DIRECTION, KEY_Y_DIRECTION), path)
    frame = PlanarFrame3d(
        _point3d(record[KEY_ORIGIN_POINT], _join(path, KEY_ORIGIN_POINT), tolerance),
        _direction3d(record[KEY_X_DIRECTION], _join(path, KEY_X_DIRECTION), tolerance),
        _direction3d(record[KEY_Y_DIRECTION], _join(path, KEY_Y_DIRECTION), tolerance),
    )
    if not frame.is_orthonormal(tolerance):
        raise DecodeError("planar frame basis is not orthonormal", path)
    return frame


def _interval(record, min_key: str, max_key: str, path: str):
    """
    Read one (min, max) pair of a box record.

    Raises:
        DecodeError: If either bound is invalid or min exceeds max
    """
    low = _number(record[min_key], _join(path, min_key))
    high = _number(record[max_key], _join(path, max_key))
    if low > high:
        raise DecodeError(f"{min_key} ({low}) is greater than {max_key} ({high})", path)
    return low, high


def _box2d(record, path, tolerance) -> BoundingBox2d:
    """Decode a BoundingBox2d; ``tolerance`` is unused."""
    record = _mapping(record, (KEY_MIN_X, KEY_MAX_X, KEY_MIN_Y, KEY_MAX_Y), path)
    min_x, max_x = _interval(record, KEY_MIN_X, KEY_MAX_X, path)
    min_y, max_y = _interval(record, KEY_MIN_Y, KEY_MAX_Y, path)
    return BoundingBox2d(min_x, max_x, min_y, max_y)


def _box3d(record, path, tolerance) -> BoundingBox3d:
    """Decode a BoundingBox3d; ``tolerance`` is unused."""
    keys = (KEY_MIN_X, KEY_MAX_X, KEY_MIN_Y, KEY_MAX_Y, KEY_MIN_Z, KEY_MAX_Z)
    record = _mapping(record, keys, path)
    min_x, max_x = _interval(record, KEY_MIN_X, KEY_MAX_X, path)
    min_y, max_y = _interval(record, KEY_MIN_Y, KEY_MAX_Y, path)
    min_z, max_z = _interval(record, KEY_MIN_Z, KEY_MAX_Z, path)
    return BoundingBox3d(min_x, max_x, min_y, max_y, min_z, max_z)


_DECODERS: Dict[type, Callable[[Any, str, float], Any]] = {
    Vector2d: _vector2d,
    Vector3d: _vector3d,
    Direction2d: _direction2d,
    Direction3d: _direction3d,
    Point2d: _point2d,
    Point3d: _point3d,
    Axis2d: _axis2d,
    Axis3d: _axis3d,
    Plane3d: _plane3d,
    Frame2d: _frame2d,
    Frame3d: _frame3d,
    PlanarFrame3d: _planar_frame3d,
    BoundingBox2d: _box2d,
    BoundingBox3d: _box3d,
}


# =============================================================================
# Public API
# =============================================================================

def decode(cls: Type[V], record: Any, tolerance: float = DEFAULT_TOLERANCE) -> V:
    """
    Decode a record into a value of type ``cls``.

    Args:
        cls: Target value type, e.g. ``Frame2d``
        record: Record as produced by ``encode`` (or parsed JSON)
        tolerance: Tolerance for unit-length and orthogonality checks

    Returns:
        The decoded value

    Raises:
        DecodeError: If the record is malformed
        TypeError: If ``cls`` is not a geomalg value type
    """
    decoder = _DECODERS.get(cls)
    if decoder is None:
        raise TypeError(f"Cannot decode into {getattr(cls, '__name__', cls)}")
    try:
        return decoder(record, "", tolerance)
    except DecodeError as exc:
        logger.debug("Rejected %s record: %s", cls.__name__, exc)
        raise


def to_json(value, indent: Optional[int] = None, config: Optional[Config] = None) -> str:
    """
    Encode a value as a standard JSON string.

    Args:
        value: Any geomalg value type
        indent: JSON indent; ``config.json_indent`` applies if not given
        config: Optional configuration

    Returns:
        JSON text accepted by ``from_json``

    Raises:
        ValueError: If a component is NaN or infinite (not valid JSON)
    """
    if indent is None and config is not None:
        indent = config.json_indent
    try:
        return json.dumps(encode(value), indent=indent, allow_nan=False)
    except ValueError as exc:
        raise ValueError(f"Cannot encode non-finite {type(value).__name__} as JSON") from exc


def from_json(cls: Type[V], text: str, config: Optional[Config] = None) -> V:
    """
    Decode a JSON string into a value of type ``cls``.

    Raises:
        DecodeError: If the text is not valid JSON or the record is malformed
    """
    tolerance = config.tolerance if config is not None else DEFAULT_TOLERANCE
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc.msg}") from exc
    return decode(cls, record, tolerance)
