"""
Type aliases for geomalg.

The value types themselves live in ``geomalg.euclid``; the aliases below
name the plain-Python shapes that flow in and out of them (coordinate
tuples, angles, serialized records) and the unions accepted by the
functional API.

Conventions:
    - Angles are plain floats in radians. Use ``geomalg.utils.angles`` to
      convert from degrees or turns.
    - Coordinates are ordered (x, y) or (x, y, z) tuples of floats.
    - Records are JSON-compatible: lists of numbers for positional values,
      dicts with camelCase keys for compound values.
"""

from typing import Any, Callable, Dict, List, Tuple, TypeVar, Union

# =============================================================================
# Basic Type Aliases
# =============================================================================

# Angle in radians
Angle = float

# Ordered coordinate tuples
Coordinates2d = Tuple[float, float]
Coordinates3d = Tuple[float, float, float]

# Serialized record (output of geomalg.utils.codec.encode)
Record = Union[Dict[str, Any], List[float]]


# =============================================================================
# Generic Type Variables
# =============================================================================

T = TypeVar("T")

# Single-argument transformation used by compose/pipe
Transformation = Callable[[Any], Any]
