"""
Seam computation algorithms.

A seam is found in two steps:
1. Dynamic programming: accumulate the cheapest cost of reaching every
   pixel from the top row.
2. Back-substitution: walk upward from the cheapest bottom pixel, always
   stepping to the cheapest of the (up to) three cells above.

Both steps work in vertical space only. Horizontal seams are found on the
transposed field (see orientation.py).
"""

import logging
from typing import Sequence, Union

import torch

from .energy import check_image
from .errors import InvalidImageError
from .orientation import Direction, as_field, to_vertical_space

logger = logging.getLogger(__name__)


def accumulated_cost(energy: torch.Tensor) -> torch.Tensor:
    """
    Minimum cumulative energy of any connected path from the top row.

    M[0] = E[0]
    M[i, j] = E[i, j] + min(M[i-1, j-1], M[i-1, j], M[i-1, j+1])

    Neighbours outside the field are left out of the minimum.

    Args:
        energy: Energy map (H, W)

    Returns:
        Accumulated cost map (H, W), float64
    """
    energy = as_field(energy)
    H, W = energy.shape

    M = torch.empty_like(energy)
    M[0] = energy[0]

    for i in range(1, H):
        M_prev = M[i - 1]
        # +inf padding never wins the minimum, which drops out-of-range columns
        M_left = torch.full((W,), float('inf'), dtype=energy.dtype)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), float('inf'), dtype=energy.dtype)
        M_right[:-1] = M_prev[1:]

        M[i] = energy[i] + torch.min(torch.min(M_left, M_prev), M_right)

    return M


def locate_seam(cost: torch.Tensor) -> torch.Tensor:
    """
    Backtrack an accumulated cost map to the cheapest vertical seam.

    Ties are broken towards the lowest column index.

    Args:
        cost: Accumulated cost map (H, W), as returned by accumulated_cost

    Returns:
        Seam indices (H,) with the column index per row, top to bottom
    """
    cost = as_field(cost)
    H, W = cost.shape

    col = torch.argmin(cost[-1]).item()
    seam = [col]

    for i in range(H - 2, -1, -1):
        left = max(0, col - 1)
        right = min(W - 1, col + 1)
        col = left + torch.argmin(cost[i, left:right + 1]).item()
        seam.append(col)

    seam.reverse()
    return torch.tensor(seam, dtype=torch.long)


def find_seam(energy: Union[torch.Tensor, Sequence[Sequence[float]]],
              direction: Union[Direction, str] = 'vertical') -> torch.Tensor:
    """
    Find the minimum-energy seam of an energy map.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    cost = accumulated_cost(to_vertical_space(energy, direction))
    seam = locate_seam(cost)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s seam with total cost %.3f",
                     Direction.parse(direction).value, cost[-1, seam[-1]].item())
    return seam


def _remove_vertical_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    C, H, W = image.shape

    if W < 2:
        raise InvalidImageError("Cannot remove a seam from an image one pixel across")
    if seam.shape != (H,):
        raise InvalidImageError(f"Seam must have {H} entries, got {tuple(seam.shape)}")
    if (seam < 0).any() or (seam >= W).any():
        raise InvalidImageError(f"Seam indices must lie in [0, {W - 1}]")

    keep = torch.ones(H, W, dtype=torch.bool)
    keep[torch.arange(H), seam] = False

    # Boolean indexing walks the mask in raster order, so row order and
    # left-to-right order of the surviving pixels are preserved
    return image[:, keep].reshape(C, H, W - 1)


def remove_seam(image: torch.Tensor, seam: Union[torch.Tensor, Sequence[int]],
                direction: Union[Direction, str] = 'vertical') -> torch.Tensor:
    """
    Remove a seam from an image.

    Args:
        image: Image tensor (3, H, W)
        seam: Seam indices, one per row (vertical) or per column (horizontal)
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image with one column (vertical) or row (horizontal) removed
    """
    check_image(image)
    direction = Direction.parse(direction)
    seam = torch.as_tensor(seam, dtype=torch.long)

    if direction is Direction.VERTICAL:
        return _remove_vertical_seam(image, seam)

    # Columns of the image are rows of its transpose
    carved = _remove_vertical_seam(image.transpose(1, 2), seam)
    return carved.transpose(1, 2).contiguous()
