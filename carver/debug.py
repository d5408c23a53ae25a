"""
Diagnostic output: the energy map of each pass with its seam in red.
"""

import logging
from pathlib import Path
from typing import Callable, Union

import torch

from .energy import normalize_energy
from .errors import ImageIOError
from .image_io import PathLike, save_image
from .orientation import Direction, as_field

logger = logging.getLogger(__name__)

SEAM_COLOR = (255, 0, 0)

# sink(pass_index, visualization)
DebugSink = Callable[[int, torch.Tensor], None]


def render_energy_with_seam(energy: torch.Tensor, seam: torch.Tensor,
                            direction: Union[Direction, str] = 'vertical') -> torch.Tensor:
    """
    Render an energy map as grayscale with a seam painted over it.

    Gray levels are int(255 * e / max(e)); a flat map renders black.

    Args:
        energy: Energy map (H, W) in image orientation
        seam: Seam indices as returned by find_seam
        direction: 'vertical' or 'horizontal'

    Returns:
        RGB image tensor (3, H, W), uint8
    """
    energy = as_field(energy)
    direction = Direction.parse(direction)
    H, W = energy.shape

    gray = (255.0 * normalize_energy(energy)).to(torch.uint8)
    vis = gray.unsqueeze(0).expand(3, H, W).clone()

    seam = torch.as_tensor(seam, dtype=torch.long)
    color = torch.tensor(SEAM_COLOR, dtype=torch.uint8).unsqueeze(1)
    if direction is Direction.VERTICAL:
        vis[:, torch.arange(H), seam] = color
    else:
        vis[:, seam, torch.arange(W)] = color

    return vis


class PngDebugSink:
    """Writes each pass's visualization to <directory>/debug-<pass>.png."""

    def __init__(self, directory: PathLike = '.', pattern: str = 'debug-{}.png'):
        self.directory = Path(directory)
        self.pattern = pattern

    def path_for(self, pass_index: int) -> Path:
        return self.directory / self.pattern.format(pass_index)

    def __call__(self, pass_index: int, visualization: torch.Tensor):
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ImageIOError(f"Cannot create debug directory {self.directory}: {e}") from e
        path = self.path_for(pass_index)
        save_image(visualization, path)
        logger.debug("Pass %d: debug image written to %s", pass_index, path)
