"""
Content-aware image resizing by seam carving.

Each pass computes the dual-gradient energy of the image, finds the
cheapest connected seam with dynamic programming, and removes it.
"""

__version__ = "0.1.0"

from .errors import CarverError, InvalidImageError, ImageIOError
from .orientation import Direction, as_field, transpose, to_vertical_space
from .energy import dual_gradient_energy, normalize_energy
from .seam import accumulated_cost, locate_seam, find_seam, remove_seam
from .debug import PngDebugSink, render_energy_with_seam
from .image_io import load_image, save_image, to_pixel_grid
from .carving import carve_image

__all__ = [
    'CarverError',
    'InvalidImageError',
    'ImageIOError',
    'Direction',
    'as_field',
    'transpose',
    'to_vertical_space',
    'dual_gradient_energy',
    'normalize_energy',
    'accumulated_cost',
    'locate_seam',
    'find_seam',
    'remove_seam',
    'PngDebugSink',
    'render_energy_with_seam',
    'load_image',
    'save_image',
    'to_pixel_grid',
    'carve_image',
]
