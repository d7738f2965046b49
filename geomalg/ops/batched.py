"""
Bulk frame conversions and bounding boxes over torch tensors.

The scalar value types convert one value at a time. When many points or
vectors share a frame, the same change of basis is a single matrix product:

    B = [x_dir | y_dir (| z_dir)]      basis directions as columns
    local  = (points - origin) @ B     relative_to
    global = local @ B.T + origin      place_in

All functions accept tensors of shape (..., D) with D = 2 for Frame2d and
D = 3 for Frame3d, and preserve the leading batch shape. The default dtype
is float64 so results agree with the scalar API to double precision.
"""

from typing import List, Optional, Sequence, Union
import logging

import torch

from ..core.errors import EmptyInputError
from ..euclid import (
    BoundingBox2d,
    BoundingBox3d,
    Frame2d,
    Frame3d,
    Point2d,
    Point3d,
)

logger = logging.getLogger(__name__)

Frame = Union[Frame2d, Frame3d]


def _dimension(frame: Frame) -> int:
    if isinstance(frame, Frame2d):
        return 2
    if isinstance(frame, Frame3d):
        return 3
    raise TypeError(f"Expected Frame2d or Frame3d, got {type(frame).__name__}")


def _check_shape(tensor: torch.Tensor, dim: int, name: str) -> None:
    if tensor.dim() == 0 or tensor.shape[-1] != dim:
        raise ValueError(f"{name} must have shape (..., {dim}), got {tuple(tensor.shape)}")


def basis_matrix(
    frame: Frame,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None
) -> torch.Tensor:
    """
    Basis directions of a frame as the columns of a (D, D) matrix.

    Args:
        frame: Frame2d or Frame3d
        dtype: Output dtype
        device: Output device

    Returns:
        Matrix of shape (2, 2) or (3, 3)
    """
    if _dimension(frame) == 2:
        columns = [frame.x_direction.components, frame.y_direction.components]
    else:
        columns = [
            frame.x_direction.components,
            frame.y_direction.components,
            frame.z_direction.components,
        ]
    return torch.tensor(columns, dtype=dtype, device=device).T


def origin_tensor(
    frame: Frame,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None
) -> torch.Tensor:
    """Origin point of a frame as a (D,) tensor."""
    return torch.tensor(frame.origin_point.coordinates, dtype=dtype, device=device)


def vectors_relative_to(frame: Frame, vectors: torch.Tensor) -> torch.Tensor:
    """
    Re-express global vectors in frame-local components.

    Args:
        frame: Reference frame
        vectors: Tensor of shape (..., D)

    Returns:
        Tensor of shape (..., D)
    """
    dim = _dimension(frame)
    _check_shape(vectors, dim, "vectors")
    basis = basis_matrix(frame, dtype=vectors.dtype, device=vectors.device)
    return vectors @ basis


def vectors_place_in(frame: Frame, vectors: torch.Tensor) -> torch.Tensor:
    """Inverse of ``vectors_relative_to``."""
    dim = _dimension(frame)
    _check_shape(vectors, dim, "vectors")
    basis = basis_matrix(frame, dtype=vectors.dtype, device=vectors.device)
    return vectors @ basis.T


def points_relative_to(frame: Frame, points: torch.Tensor) -> torch.Tensor:
    """
    Re-express global points in frame-local coordinates.

    Args:
        frame: Reference frame
        points: Tensor of shape (..., D)

    Returns:
        Tensor of shape (..., D)
    """
    dim = _dimension(frame)
    _check_shape(points, dim, "points")
    origin = origin_tensor(frame, dtype=points.dtype, device=points.device)
    return vectors_relative_to(frame, points - origin)


def points_place_in(frame: Frame, points: torch.Tensor) -> torch.Tensor:
    """Inverse of ``points_relative_to``."""
    dim = _dimension(frame)
    _check_shape(points, dim, "points")
    origin = origin_tensor(frame, dtype=points.dtype, device=points.device)
    return vectors_place_in(frame, points) + origin


def points_to_tensor(
    points: Sequence[Union[Point2d, Point3d]],
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None
) -> torch.Tensor:
    """
    Stack points into an (N, D) tensor.

    Raises:
        EmptyInputError: If no points are given (the dimension is unknown)
    """
    if len(points) == 0:
        raise EmptyInputError("Cannot stack an empty sequence of points")
    return torch.tensor([p.coordinates for p in points], dtype=dtype, device=device)


def points_from_tensor(points: torch.Tensor) -> List[Union[Point2d, Point3d]]:
    """Convert an (N, 2) or (N, 3) tensor into a list of points."""
    if points.dim() != 2 or points.shape[-1] not in (2, 3):
        raise ValueError(f"points must have shape (N, 2) or (N, 3), got {tuple(points.shape)}")
    point_type = Point2d if points.shape[-1] == 2 else Point3d
    return [point_type(*row) for row in points.detach().cpu().tolist()]


def bounding_box_of(points: torch.Tensor) -> Union[BoundingBox2d, BoundingBox3d]:
    """
    Bounding box of a tensor of points.

    Min and max are reductions over every leading dimension, so any
    batch layout is accepted.

    Args:
        points: Tensor of shape (..., 2) or (..., 3)

    Returns:
        BoundingBox2d or BoundingBox3d

    Raises:
        EmptyInputError: If the tensor holds no points
    """
    if points.dim() == 0 or points.shape[-1] not in (2, 3):
        raise ValueError(f"points must have shape (..., 2) or (..., 3), got {tuple(points.shape)}")
    dim = points.shape[-1]
    flat = points.reshape(-1, dim)
    if flat.shape[0] == 0:
        raise EmptyInputError("Cannot build a bounding box containing no points")

    logger.debug("Reducing %d points to a %dD bounding box", flat.shape[0], dim)
    lows = flat.min(dim=0).values.tolist()
    highs = flat.max(dim=0).values.tolist()

    if dim == 2:
        return BoundingBox2d(lows[0], highs[0], lows[1], highs[1])
    return BoundingBox3d(lows[0], highs[0], lows[1], highs[1], lows[2], highs[2])
