"""
Energy function for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual-gradient energy: for an interior pixel (x, y)

    E(x, y) = sqrt(Δx² + Δy²)
    Δx² = Σ_c (R_c(x+1, y) - R_c(x-1, y))²
    Δy² = Σ_c (R_c(x, y+1) - R_c(x, y-1))²

summed over the red, green and blue channels. Border pixels get a fixed
energy of 1000 so seams never prefer to run along the image edge.
"""

import math
import torch

from .errors import CoordinateOutOfRangeError
from .picture import unpack_rgb
from .pixels import PixelStore

BORDER_ENERGY = 1000.0


def dual_gradient_energy(store: PixelStore, x: int, y: int) -> float:
    """
    Energy of a single pixel.

    Args:
        store: Pixel store to read from
        x: Column
        y: Row

    Returns:
        Energy >= 0; exactly BORDER_ENERGY on the border
    """
    W, H = store.width(), store.height()
    if not (0 <= x < W and 0 <= y < H):
        raise CoordinateOutOfRangeError(x, y, W, H)

    if x == 0 or y == 0 or x == W - 1 or y == H - 1:
        return BORDER_ENERGY

    left = unpack_rgb(store.get(x - 1, y))
    right = unpack_rgb(store.get(x + 1, y))
    top = unpack_rgb(store.get(x, y - 1))
    bottom = unpack_rgb(store.get(x, y + 1))

    dx2 = sum((r - l) ** 2 for r, l in zip(right, left))
    dy2 = sum((b - t) ** 2 for b, t in zip(bottom, top))
    return math.sqrt(dx2 + dy2)


def energy_map(store: PixelStore) -> torch.Tensor:
    """
    Energy of every pixel at once.

    Element-wise equal to dual_gradient_energy; computed fresh from the
    current store contents on every call.

    Returns:
        Energy map (H, W), float64
    """
    rgb = store.channels()
    _, H, W = rgb.shape

    energy = torch.full((H, W), BORDER_ENERGY, dtype=torch.float64,
                        device=rgb.device)
    if H < 3 or W < 3:
        return energy

    # Central differences on the interior only
    dx = rgb[:, 1:-1, 2:] - rgb[:, 1:-1, :-2]
    dy = rgb[:, 2:, 1:-1] - rgb[:, :-2, 1:-1]
    energy[1:-1, 1:-1] = torch.sqrt((dx ** 2).sum(dim=0) + (dy ** 2).sum(dim=0))

    return energy
