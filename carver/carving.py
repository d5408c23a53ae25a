"""
High-level carving function: repeated energy / seam / removal passes.
"""

import logging
import numbers
from typing import Optional, Union

import torch

from .debug import DebugSink, PngDebugSink, render_energy_with_seam
from .energy import check_image, dual_gradient_energy
from .errors import InvalidImageError
from .orientation import Direction
from .seam import find_seam, remove_seam

logger = logging.getLogger(__name__)


def carve_image(image: torch.Tensor, n_passes: int,
                direction: Union[Direction, str] = 'vertical',
                debug: bool = False,
                sink: Optional[DebugSink] = None) -> torch.Tensor:
    """
    Seam carving: remove n_passes seams one at a time.

    Energy is recomputed on the shrunken image before every pass.

    Args:
        image: RGB image tensor (3, H, W), uint8
        n_passes: Number of seams to remove
        direction: 'vertical' (narrower image) or 'horizontal' (shorter image)
        debug: If True, hand each pass's energy map with its seam to sink
        sink: Callable sink(pass_index, visualization); defaults to
              PngDebugSink() when debug is set

    Returns:
        Carved image (3, H, W - n_passes) or (3, H - n_passes, W)
    """
    check_image(image)
    direction = Direction.parse(direction)

    if isinstance(n_passes, bool) or not isinstance(n_passes, numbers.Integral):
        raise InvalidImageError(f"Pass count must be an integer, got {n_passes!r}")
    if n_passes < 0:
        raise InvalidImageError(f"Pass count must be non-negative, got {n_passes}")

    n_passes = int(n_passes)
    _, H, W = image.shape
    extent = W if direction is Direction.VERTICAL else H
    if n_passes >= extent:
        raise InvalidImageError(
            f"Cannot remove {n_passes} {direction.value} seams from an image "
            f"{extent} pixels across")

    if debug and sink is None:
        sink = PngDebugSink()

    carved = image.clone()

    for i in range(n_passes):
        energy = dual_gradient_energy(carved)
        seam = find_seam(energy, direction=direction)

        if debug:
            sink(i, render_energy_with_seam(energy, seam, direction=direction))

        carved = remove_seam(carved, seam, direction=direction)
        logger.debug("Pass %d/%d: size now %dx%d",
                     i + 1, n_passes, carved.shape[2], carved.shape[1])

    return carved
