"""
SeamCarver: content-aware shrinking of a single picture.

Typical use::

    carver = SeamCarver(Picture.open('input.png'))
    for _ in range(50):
        carver.remove_vertical_seam(carver.find_vertical_seam())
    carver.picture().save('output.png')

A carver owns its pixels exclusively. A seam is only valid for the state
the carver was in when it was found, so find-then-remove sequences must
not interleave with other mutations of the same carver.
"""

import torch

from .energy import dual_gradient_energy, energy_map
from .picture import Picture
from .pixels import PixelStore
from .seam import find_seam, remove_seam


class SeamCarver:

    def __init__(self, picture):
        """
        Args:
            picture: Picture (or any object with width(), height() and
                color_at(col, row)); copied, never modified
        """
        self._store = PixelStore.from_picture(picture)
        self.vertical_seams_removed = 0
        self.horizontal_seams_removed = 0

    def picture(self) -> Picture:
        """Current picture; also resets the removal counters."""
        self.vertical_seams_removed = 0
        self.horizontal_seams_removed = 0
        return self._store.to_picture()

    def width(self) -> int:
        return self._store.width()

    def height(self) -> int:
        return self._store.height()

    def energy(self, x: int, y: int) -> float:
        return dual_gradient_energy(self._store, x, y)

    def energy_map(self) -> torch.Tensor:
        return energy_map(self._store)

    def find_vertical_seam(self) -> torch.Tensor:
        """Column index for each row of the cheapest top-to-bottom seam."""
        return find_seam(energy_map(self._store), direction='vertical')

    def find_horizontal_seam(self) -> torch.Tensor:
        """Row index for each column of the cheapest left-to-right seam."""
        return find_seam(energy_map(self._store), direction='horizontal')

    def remove_vertical_seam(self, seam):
        remove_seam(self._store, seam, direction='vertical')
        self.vertical_seams_removed += 1

    def remove_horizontal_seam(self, seam):
        remove_seam(self._store, seam, direction='horizontal')
        self.horizontal_seams_removed += 1

    def carve(self, n_vertical: int = 0, n_horizontal: int = 0):
        """
        Remove seams one at a time, recomputing energy after each removal.

        Vertical seams are removed first, then horizontal ones.

        Args:
            n_vertical: Number of vertical seams (width shrinks by this much)
            n_horizontal: Number of horizontal seams (height shrinks by this much)
        """
        for _ in range(n_vertical):
            self.remove_vertical_seam(self.find_vertical_seam())
        for _ in range(n_horizontal):
            self.remove_horizontal_seam(self.find_horizontal_seam())
        return self
