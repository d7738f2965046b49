"""
Centralized constants for geomalg.

This module defines the default tolerances and record keys used throughout
the library. Using these constants ensures consistency and makes it easy to
adjust defaults globally.

Usage:
    from geomalg.core.constants import DEFAULT_TOLERANCE

    def my_check(value, tolerance: float = DEFAULT_TOLERANCE):
        ...
"""

import math

# =============================================================================
# Numeric Constants
# =============================================================================

# Length tolerance used when validating unit directions and orthonormal bases
DEFAULT_TOLERANCE: float = 1e-6

# Angular tolerance (radians) for direction comparisons
DEFAULT_ANGULAR_TOLERANCE: float = 1e-9

# Vectors shorter than this cannot be turned into directions
DEFAULT_EPS_NORM: float = 1e-12

# Pi constant (for rotation calculations)
PI: float = math.pi

HALF_PI: float = 0.5 * math.pi


# =============================================================================
# Record Keys
# =============================================================================

# Keys used by the record codec; they follow the camelCase field names of the
# published record format.

KEY_ORIGIN_POINT: str = "originPoint"
KEY_DIRECTION: str = "direction"
KEY_NORMAL_DIRECTION: str = "normalDirection"
KEY_X_DIRECTION: str = "xDirection"
KEY_Y_DIRECTION: str = "yDirection"
KEY_Z_DIRECTION: str = "zDirection"

KEY_MIN_X: str = "minX"
KEY_MAX_X: str = "maxX"
KEY_MIN_Y: str = "minY"
KEY_MAX_Y: str = "maxY"
KEY_MIN_Z: str = "minZ"
KEY_MAX_Z: str = "maxZ"
