"""Shared test fixtures for the seam carver test suite."""

import itertools
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarver.picture import Picture


def make_picture(rows):
    """Picture from a nested list of (r, g, b) triples indexed rows[y][x]."""
    return Picture.from_tensor(torch.tensor(rows, dtype=torch.uint8).permute(2, 0, 1))


def make_random_picture(W, H, seed=0):
    """Picture with uniformly random colors."""
    gen = torch.Generator().manual_seed(seed)
    data = torch.randint(0, 256, (3, H, W), generator=gen)
    return Picture.from_tensor(data)


def make_coordinate_picture(W, H):
    """Each pixel stores its own coordinates: color (0, y, x)."""
    data = torch.zeros(3, H, W, dtype=torch.int64)
    data[1] = torch.arange(H).unsqueeze(1)
    data[2] = torch.arange(W).unsqueeze(0)
    return Picture.from_tensor(data)


def brute_force_min_energy(energy):
    """Minimum total energy over every connected top-to-bottom path."""
    H, W = energy.shape
    best = float('inf')
    for start in range(W):
        for steps in itertools.product((-1, 0, 1), repeat=H - 1):
            cols = [start]
            for s in steps:
                cols.append(cols[-1] + s)
            if any(c < 0 or c >= W for c in cols):
                continue
            total = sum(energy[i, c].item() for i, c in enumerate(cols))
            best = min(best, total)
    return best


@pytest.fixture
def picture_3x4():
    """3-wide, 4-tall picture with hand-checked energies."""
    return make_picture([
        [(255, 101, 51), (255, 101, 153), (255, 101, 255)],
        [(255, 153, 51), (255, 153, 153), (255, 153, 255)],
        [(255, 203, 51), (255, 204, 153), (255, 205, 255)],
        [(255, 255, 51), (255, 255, 153), (255, 255, 255)],
    ])


@pytest.fixture
def uniform_5x5():
    return Picture.from_tensor(torch.full((3, 5, 5), 128))
