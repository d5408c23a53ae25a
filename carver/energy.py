"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual-gradient energy: the squared colour difference between
the two horizontal neighbours plus the same between the two vertical
neighbours, square-rooted. Neighbours wrap around the image borders, so
pixel (y, 0) compares column W-1 with column 1.
"""

import logging

import torch

from .errors import InvalidImageError

logger = logging.getLogger(__name__)


def check_image(image: torch.Tensor) -> torch.Tensor:
    """
    Validate a pixel grid.

    Args:
        image: RGB image tensor (3, H, W)

    Returns:
        The same tensor, for chaining
    """
    if not isinstance(image, torch.Tensor):
        raise InvalidImageError(f"Expected a torch.Tensor, got {type(image).__name__}")
    if image.dim() != 3 or image.shape[0] != 3:
        raise InvalidImageError(
            f"Expected an RGB image of shape (3, H, W), got {tuple(image.shape)}")
    if image.shape[1] < 1 or image.shape[2] < 1:
        raise InvalidImageError(
            f"Image must be at least 1x1, got {image.shape[2]}x{image.shape[1]}")
    if image.dtype != torch.uint8:
        raise InvalidImageError(f"Expected 8-bit samples (torch.uint8), got {image.dtype}")
    return image


def dual_gradient_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute the dual-gradient energy of an RGB image.

    E(y, x) = sqrt(Δx²(y, x) + Δy²(y, x)), where Δx² is the sum over the
    three channels of (I(y, x-1) - I(y, x+1))² with column indices taken
    modulo W, and Δy² the same along rows modulo H.

    Args:
        image: RGB image tensor (3, H, W), uint8

    Returns:
        Energy map (H, W), float64
    """
    check_image(image)

    # Signed domain so that subtracting uint8 samples cannot wrap
    pixels = image.to(torch.int64)

    # roll(+1) brings the left/up neighbour into place, roll(-1) the right/down one
    dx = torch.roll(pixels, shifts=1, dims=2) - torch.roll(pixels, shifts=-1, dims=2)
    dy = torch.roll(pixels, shifts=1, dims=1) - torch.roll(pixels, shifts=-1, dims=1)

    gradient_sq = (dx * dx).sum(dim=0) + (dy * dy).sum(dim=0)
    energy = torch.sqrt(gradient_sq.to(torch.float64))

    logger.debug("Energy for %dx%d image, max %.3f",
                 image.shape[2], image.shape[1], energy.max().item())
    return energy


def normalize_energy(energy: torch.Tensor) -> torch.Tensor:
    """Remap energy to [0, 1] by dividing by its maximum.

    A flat field (maximum 0) maps to all zeros instead of dividing by zero.

    Args:
        energy: Energy map (H, W)

    Returns:
        Normalized energy map in [0, 1]
    """
    e_max = energy.max()
    if e_max <= 0:
        return torch.zeros_like(energy)
    return energy / e_max
