"""
Orientation handling.

The seam solver and locator only know how to find vertical (top to
bottom) seams. Horizontal seams are found by moving the field into
"vertical space" with a transpose, solving there, and reading the
resulting seam as one row index per column of the original image.
"""

from enum import Enum
from typing import Sequence, Union

import torch

from .errors import InvalidImageError


class Direction(str, Enum):
    """Seam orientation. A vertical seam removes one column."""

    VERTICAL = 'vertical'
    HORIZONTAL = 'horizontal'

    @classmethod
    def parse(cls, direction: Union['Direction', str]) -> 'Direction':
        try:
            return cls(direction)
        except ValueError:
            raise ValueError(f"Invalid direction: {direction}") from None


def as_field(values: Union[torch.Tensor, Sequence[Sequence[float]]]) -> torch.Tensor:
    """
    Convert a 2D field to a float64 tensor.

    Args:
        values: Tensor (H, W) or nested sequence of rows

    Returns:
        Field tensor (H, W), dtype float64
    """
    if not isinstance(values, torch.Tensor):
        rows = [list(row) for row in values]
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise InvalidImageError("Field must be a non-empty rectangle of rows")
        values = torch.tensor(rows, dtype=torch.float64)

    if values.dim() != 2:
        raise InvalidImageError(f"Field must be 2D, got shape {tuple(values.shape)}")
    if values.numel() == 0:
        raise InvalidImageError(f"Field must not be empty, got shape {tuple(values.shape)}")

    return values.to(torch.float64)


def transpose(field: torch.Tensor) -> torch.Tensor:
    """Swap rows and columns: (H, W) -> (W, H). Returns a new tensor."""
    field = as_field(field)
    return field.t().clone(memory_format=torch.contiguous_format)


def to_vertical_space(field: torch.Tensor,
                      direction: Union[Direction, str] = 'vertical') -> torch.Tensor:
    """
    Orient a field so that the requested seams run top to bottom.

    Args:
        field: Field (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        The field itself for vertical seams, its transpose (W, H) for
        horizontal seams
    """
    if Direction.parse(direction) is Direction.HORIZONTAL:
        return transpose(field)
    return as_field(field)
