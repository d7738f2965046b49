"""
Core module for geomalg.

Contains:
- Constants: Centralized tolerances and record keys
- Types: Type aliases for coordinates, angles and records
- Errors: The exception taxonomy shared by all modules
"""

from .constants import (
    # Numeric constants
    DEFAULT_TOLERANCE,
    DEFAULT_ANGULAR_TOLERANCE,
    DEFAULT_EPS_NORM,
    PI,
    HALF_PI,
)

from .types import (
    Angle,
    Coordinates2d,
    Coordinates3d,
    Record,
    Transformation,
)

from .errors import (
    GeometryError,
    EmptyInputError,
    DegenerateGeometryError,
    NonOrthonormalBasisError,
    DecodeError,
)

__all__ = [
    # Constants
    "DEFAULT_TOLERANCE",
    "DEFAULT_ANGULAR_TOLERANCE",
    "DEFAULT_EPS_NORM",
    "PI",
    "HALF_PI",
    # Types
    "Angle",
    "Coordinates2d",
    "Coordinates3d",
    "Record",
    "Transformation",
    # Errors
    "GeometryError",
    "EmptyInputError",
    "DegenerateGeometryError",
    "NonOrthonormalBasisError",
    "DecodeError",
]
