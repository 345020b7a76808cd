"""
Seam computation and removal.

The image is treated as a DAG: pixel (x, y) has edges to (x-1, y+1),
(x, y+1) and (x+1, y+1) when those exist, each weighted by the energy of
the target pixel. Rows only increase along an edge, so relaxing row by row
visits nodes in topological order and a single pass gives the shortest
top-to-bottom path.

Horizontal seams are found by running the same search on a transposed view
of the energy map; the pixel store is never transposed.
"""

import numbers
import torch
from typing import List

from .errors import DimensionExhaustedError, InvalidSeamError, MissingArgumentError
from .pixels import PixelStore


def _oriented(energy: torch.Tensor, direction: str) -> torch.Tensor:
    """Energy laid out so the seam always runs top to bottom."""
    if direction == 'vertical':
        return energy
    elif direction == 'horizontal':
        return energy.t()
    else:
        raise ValueError(f"Invalid direction: {direction}")


def find_seam(energy: torch.Tensor, direction: str = 'vertical') -> torch.Tensor:
    """
    Minimum total-energy seam via DAG shortest path.

    Ties are resolved towards lower indices: among equal predecessors the
    leftmost one wins, and among equal endpoints in the last row the
    leftmost one wins.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    grid = _oriented(energy, direction)
    H, W = grid.shape
    device = grid.device

    if H == 1 or W == 1:
        return torch.zeros(H, dtype=torch.long, device=device)

    inf = torch.tensor(float('inf'), dtype=grid.dtype, device=device)
    cols = torch.arange(W, device=device)

    # energy_to[i, j]: cheapest path from row 0 ending at (j, i)
    energy_to = torch.full((H, W), float('inf'), dtype=grid.dtype, device=device)
    energy_to[0] = grid[0]
    # Flat predecessor node index (row * W + col) for every node
    edge_to = torch.full((H * W,), -1, dtype=torch.long, device=device)

    for i in range(1, H):
        prev = energy_to[i - 1]
        # Candidate predecessors, in relaxation order: up-left, up, up-right
        candidates = torch.stack([
            torch.cat([inf.view(1), prev[:-1]]),
            prev,
            torch.cat([prev[1:], inf.view(1)]),
        ]) + grid[i]
        # argmin returns the first minimum, i.e. the first relaxed predecessor
        offset = torch.argmin(candidates, dim=0)
        energy_to[i] = candidates.gather(0, offset.unsqueeze(0)).squeeze(0)
        edge_to[i * W:(i + 1) * W] = (i - 1) * W + cols + offset - 1

    # Leftmost minimum of the last row
    end = torch.argmin(energy_to[-1]).item()

    seam = [0] * H
    seam[H - 1] = end
    preds = edge_to.tolist()
    node = (H - 1) * W + end
    for i in range(H - 1, 0, -1):
        node = preds[node]
        seam[i - 1] = node - (i - 1) * W

    return torch.tensor(seam, dtype=torch.long, device=device)


def seam_energy(energy: torch.Tensor, seam, direction: str = 'vertical') -> float:
    """Total energy of the pixels on a seam."""
    grid = _oriented(energy, direction)
    idx = torch.as_tensor(seam, dtype=torch.long, device=grid.device)
    if idx.shape != (grid.shape[0],):
        raise InvalidSeamError(
            f"{direction} seam has shape {tuple(idx.shape)}, expected ({grid.shape[0]},)")
    return grid[torch.arange(grid.shape[0], device=grid.device), idx].sum().item()


def _as_index_list(seam) -> List[int]:
    """Seam entries as a list of ints; anything that is not an integer is rejected."""
    if isinstance(seam, torch.Tensor):
        if seam.dim() != 1 or seam.dtype.is_floating_point or seam.dtype.is_complex \
                or seam.dtype == torch.bool:
            raise InvalidSeamError(
                f"Seam must be a 1-D integer tensor, got {seam.dtype} {tuple(seam.shape)}")
        return seam.tolist()

    if isinstance(seam, (str, bytes)):
        raise InvalidSeamError("Seam must be a sequence of integers, not a string")
    try:
        values = list(seam)
    except TypeError:
        raise InvalidSeamError(f"Seam must be a sequence of integers, got {type(seam).__name__}")

    for i, v in enumerate(values):
        if not isinstance(v, numbers.Integral) or isinstance(v, bool):
            raise InvalidSeamError(f"Seam entry {i} = {v!r} is not an integer")
    return [int(v) for v in values]


def validate_seam(store: PixelStore, seam, direction: str = 'vertical') -> List[int]:
    """
    Check that a seam can be removed from the store in its current state.

    Args:
        store: Pixel store the seam refers to
        seam: Sequence or tensor of indices
        direction: 'vertical' or 'horizontal'

    Returns:
        The seam as a list of ints
    """
    if seam is None:
        raise MissingArgumentError("seam must not be None")

    if direction == 'vertical':
        length, span = store.height(), store.width()
    elif direction == 'horizontal':
        length, span = store.width(), store.height()
    else:
        raise ValueError(f"Invalid direction: {direction}")

    values = _as_index_list(seam)

    if len(values) != length:
        raise InvalidSeamError(
            f"{direction} seam has length {len(values)}, expected {length}")
    if span <= 1:
        raise DimensionExhaustedError(
            f"Cannot remove a {direction} seam from a "
            f"{store.width()}x{store.height()} image")

    for i, v in enumerate(values):
        if not 0 <= v < span:
            raise InvalidSeamError(f"Seam entry {i} = {v} outside [0, {span})")
        if i > 0 and abs(v - values[i - 1]) > 1:
            raise InvalidSeamError(
                f"Seam entries {i - 1} and {i} differ by more than 1 "
                f"({values[i - 1]} -> {v})")

    return values


def remove_seam(store: PixelStore, seam, direction: str = 'vertical'):
    """
    Remove a seam from the store in place.

    The whole seam is validated before any pixel moves. Each row (vertical)
    or column (horizontal) is compacted at its own seam entry, then the
    width (vertical) or height (horizontal) shrinks by one.

    Args:
        store: Pixel store to carve
        seam: Seam indices
        direction: 'vertical' or 'horizontal'
    """
    values = validate_seam(store, seam, direction)

    if direction == 'vertical':
        for row, col in enumerate(values):
            store.collapse_column(row, col)
        store.shrink_width()
    else:
        for col, row in enumerate(values):
            store.collapse_row(col, row)
        store.shrink_height()
