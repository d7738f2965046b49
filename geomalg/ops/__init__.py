"""
Bulk operations on torch tensors.

This module applies the frame conversions of ``geomalg.euclid`` to whole
tensors of points or vectors at once, and reduces point tensors to bounding
boxes.

Key functions:
    - points_relative_to / points_place_in: Change of basis for (..., D) points
    - vectors_relative_to / vectors_place_in: Same, without the origin
    - bounding_box_of: Min/max reduction to a BoundingBox2d/3d
"""

from .batched import (
    basis_matrix,
    origin_tensor,
    points_relative_to,
    points_place_in,
    vectors_relative_to,
    vectors_place_in,
    points_to_tensor,
    points_from_tensor,
    bounding_box_of,
)

__all__ = [
    "basis_matrix",
    "origin_tensor",
    "points_relative_to",
    "points_place_in",
    "vectors_relative_to",
    "vectors_place_in",
    "points_to_tensor",
    "points_from_tensor",
    "bounding_box_of",
]
