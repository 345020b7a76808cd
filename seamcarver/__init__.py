"""
Content-aware image shrinking by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007, with the dual-gradient energy function.
"""

__version__ = "0.1.0"

from .errors import (
    SeamCarverError,
    MissingArgumentError,
    CoordinateOutOfRangeError,
    InvalidSeamError,
    DimensionExhaustedError,
)
from .picture import Picture, pack_rgb, unpack_rgb
from .pixels import PixelStore
from .energy import BORDER_ENERGY, dual_gradient_energy, energy_map
from .seam import find_seam, seam_energy, validate_seam, remove_seam
from .carver import SeamCarver

__all__ = [
    'SeamCarverError',
    'MissingArgumentError',
    'CoordinateOutOfRangeError',
    'InvalidSeamError',
    'DimensionExhaustedError',
    'Picture',
    'pack_rgb',
    'unpack_rgb',
    'PixelStore',
    'BORDER_ENERGY',
    'dual_gradient_energy',
    'energy_map',
    'find_seam',
    'seam_energy',
    'validate_seam',
    'remove_seam',
    'SeamCarver',
]
