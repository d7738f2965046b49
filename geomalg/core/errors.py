"""
Exception taxonomy for geomalg.

Every error raised by the library derives from ``GeometryError``, which is
itself a ``ValueError`` so that callers treating bad input generically keep
working.

Disjoint bounding boxes are not an error: ``intersection`` returns ``None``.
"""


class GeometryError(ValueError):
    """Base class for all geomalg errors."""


class EmptyInputError(GeometryError):
    """Raised when a collection constructor is given no elements."""


class DegenerateGeometryError(GeometryError):
    """
    Raised when a value has no well-defined direction.

    Typical causes are normalizing a zero-length vector or orthonormalizing
    linearly dependent vectors.
    """


class NonOrthonormalBasisError(GeometryError):
    """Raised by validating constructors when a basis is not orthonormal."""


class DecodeError(GeometryError):
    """
    Raised when a serialized record is malformed.

    Attributes:
        path: Location of the offending field inside the record, e.g.
            ``"xDirection[1]"``. Empty for the record root.
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
