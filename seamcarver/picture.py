"""
Picture: the image I/O boundary of the seam carver.

A Picture is a plain RGB raster addressed by (col, row). It knows how to
read and write image files (via Pillow) and how to hand its pixels over as
a torch tensor; it knows nothing about seams.

Colors are exchanged either as (r, g, b) tuples or packed into a single
integer 0xRRGGBB.
"""

import numpy as np
import torch
from PIL import Image
from typing import Tuple

from .errors import CoordinateOutOfRangeError


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into 0xRRGGBB."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack_rgb(rgb: int) -> Tuple[int, int, int]:
    """Split 0xRRGGBB into (r, g, b)."""
    return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def pack_channels(channels: torch.Tensor) -> torch.Tensor:
    """
    Pack an RGB tensor into one integer per pixel.

    Args:
        channels: Tensor (3, H, W), any integer dtype with values in [0, 255]

    Returns:
        int64 tensor (H, W) of 0xRRGGBB values
    """
    c = channels.to(torch.int64)
    return (c[0] << 16) | (c[1] << 8) | c[2]


def unpack_channels(packed: torch.Tensor) -> torch.Tensor:
    """
    Inverse of pack_channels.

    Args:
        packed: int64 tensor (H, W)

    Returns:
        int64 tensor (3, H, W) with red, green, blue planes
    """
    return torch.stack([(packed >> 16) & 0xFF,
                        (packed >> 8) & 0xFF,
                        packed & 0xFF])


class Picture:
    """
    Mutable RGB picture backed by a (3, H, W) uint8 tensor.
    """

    def __init__(self, width: int, height: int, device='cpu'):
        if width < 1 or height < 1:
            raise ValueError(f"Invalid picture size: {width}x{height}")
        self._data = torch.zeros(3, height, width, dtype=torch.uint8, device=device)

    @classmethod
    def from_tensor(cls, tensor: torch.Tensor):
        """
        Wrap an RGB tensor.

        Args:
            tensor: (3, H, W) tensor with values in [0, 255]

        Returns:
            Picture holding a uint8 copy of the tensor
        """
        if tensor.dim() != 3 or tensor.shape[0] != 3:
            raise ValueError(f"Expected a (3, H, W) tensor, got {tuple(tensor.shape)}")
        pic = cls.__new__(cls)
        pic._data = tensor.to(torch.uint8).clone()
        return pic

    @classmethod
    def open(cls, path, device='cpu'):
        """Load an image file and convert it to RGB."""
        img = Image.open(path).convert('RGB')
        img_array = np.array(img, dtype=np.uint8)
        return cls.from_tensor(torch.from_numpy(img_array).permute(2, 0, 1).to(device))

    def save(self, path):
        """Save picture as an image file; format follows the extension."""
        img_array = self._data.permute(1, 2, 0).cpu().numpy()
        Image.fromarray(img_array).save(path)

    def to_tensor(self) -> torch.Tensor:
        return self._data.clone()

    def width(self) -> int:
        return self._data.shape[2]

    def height(self) -> int:
        return self._data.shape[1]

    def _check(self, col: int, row: int):
        if not (0 <= col < self.width() and 0 <= row < self.height()):
            raise CoordinateOutOfRangeError(col, row, self.width(), self.height())

    def color_at(self, col: int, row: int) -> Tuple[int, int, int]:
        self._check(col, row)
        r, g, b = self._data[:, row, col].tolist()
        return r, g, b

    def set_color_at(self, col: int, row: int, color: Tuple[int, int, int]):
        self._check(col, row)
        self._data[:, row, col] = torch.tensor(color, dtype=torch.uint8)

    def get_rgb(self, col: int, row: int) -> int:
        return pack_rgb(*self.color_at(col, row))

    def set_rgb(self, col: int, row: int, rgb: int):
        self.set_color_at(col, row, unpack_rgb(rgb))

    def __eq__(self, other):
        if not isinstance(other, Picture):
            return NotImplemented
        return (self._data.shape == other._data.shape
                and torch.equal(self._data.cpu(), other._data.cpu()))

    def __repr__(self):
        return f"Picture({self.width()}x{self.height()})"
