"""
Loading and saving pixel grids.

Images live in memory as (3, H, W) uint8 tensors; Pillow handles the
file formats and NumPy sits in between.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import torch
from PIL import Image

from .energy import check_image
from .errors import ImageIOError, InvalidImageError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def to_pixel_grid(img: Union[Image.Image, np.ndarray]) -> torch.Tensor:
    """
    Convert a PIL image or an (H, W, 3) uint8 array to a pixel grid.

    Args:
        img: PIL image (any mode) or NumPy array (H, W, 3)

    Returns:
        Image tensor (3, H, W), uint8
    """
    if isinstance(img, Image.Image):
        img = np.array(img.convert('RGB'), dtype=np.uint8)

    if img.ndim != 3 or img.shape[2] != 3:
        raise InvalidImageError(f"Expected an (H, W, 3) array, got {img.shape}")

    if img.dtype != np.uint8:
        raise InvalidImageError(f"Expected 8-bit samples (uint8), got {img.dtype}")

    return torch.from_numpy(np.ascontiguousarray(img)).permute(2, 0, 1).contiguous()


def load_image(path: PathLike) -> torch.Tensor:
    """Decode an image file into a (3, H, W) uint8 tensor."""
    try:
        with Image.open(path) as img:
            grid = to_pixel_grid(img)
    except (OSError, Image.DecompressionBombError) as e:
        raise ImageIOError(f"Cannot read image {path}: {e}") from e

    logger.debug("Loaded %s (%dx%d)", path, grid.shape[2], grid.shape[1])
    return grid


def save_image(image: torch.Tensor, path: PathLike):
    """Encode a (3, H, W) uint8 tensor as a PNG file."""
    check_image(image)
    img_array = np.ascontiguousarray(image.permute(1, 2, 0).to(torch.uint8).cpu().numpy())
    try:
        Image.fromarray(img_array).save(path, format='PNG')
    except OSError as e:
        raise ImageIOError(f"Cannot write image {path}: {e}") from e

    logger.debug("Wrote %s", path)
