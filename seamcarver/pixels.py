"""
Pixel store: the mutable color grid that seams are carved out of.

Colors are kept packed (0xRRGGBB) in an int64 tensor sized to the original
picture. Width and height are logical: removing a seam shifts pixels inside
the buffer and then shrinks the active region by one, so anything outside
[0, width) x [0, height) is never read again.

Accessors do not bounds-check; that is the caller's job.
"""

import torch

from .errors import MissingArgumentError
from .picture import Picture, pack_channels, pack_rgb, unpack_channels


class PixelStore:

    def __init__(self, packed: torch.Tensor):
        """
        Args:
            packed: int64 tensor (H, W) of 0xRRGGBB colors; taken as-is
        """
        self._pixels = packed
        self._height, self._width = packed.shape

    @classmethod
    def from_picture(cls, picture):
        """
        Copy a picture into a new store.

        Accepts a Picture or anything exposing width(), height() and
        color_at(col, row) returning an (r, g, b) triple.
        """
        if picture is None:
            raise MissingArgumentError("picture must not be None")

        if isinstance(picture, Picture):
            return cls(pack_channels(picture.to_tensor()))

        W, H = picture.width(), picture.height()
        packed = torch.zeros(H, W, dtype=torch.int64)
        for row in range(H):
            for col in range(W):
                packed[row, col] = pack_rgb(*picture.color_at(col, row))
        return cls(packed)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def get(self, x: int, y: int) -> int:
        return int(self._pixels[y, x])

    def set(self, x: int, y: int, rgb: int):
        self._pixels[y, x] = rgb

    def active(self) -> torch.Tensor:
        """View (height, width) of the live pixels."""
        return self._pixels[:self._height, :self._width]

    def channels(self) -> torch.Tensor:
        """Float64 tensor (3, height, width) with red, green, blue planes."""
        return unpack_channels(self.active()).to(torch.float64)

    def collapse_column(self, row: int, col: int):
        """Erase (col, row) by shifting the rest of the row left by one."""
        line = self._pixels[row]
        line[col:self._width - 1] = line[col + 1:self._width].clone()

    def collapse_row(self, col: int, row: int):
        """Erase (col, row) by shifting the rest of the column up by one."""
        line = self._pixels[:, col]
        line[row:self._height - 1] = line[row + 1:self._height].clone()

    def shrink_width(self):
        self._width -= 1

    def shrink_height(self):
        self._height -= 1

    def to_picture(self) -> Picture:
        return Picture.from_tensor(unpack_channels(self.active()))
