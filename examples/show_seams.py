"""
Visualize an image, its energy map and its minimum seams.

Saves a three-panel figure: the original picture, the energy map, and the
picture with the vertical (red) and horizontal (blue) seams overlaid.
"""

import argparse
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import torch

from seamcarver import Picture, SeamCarver


def overlay_seams(image: torch.Tensor, vertical: torch.Tensor,
                  horizontal: torch.Tensor) -> torch.Tensor:
    """Paint seams onto a (3, H, W) uint8 image."""
    img_vis = image.clone()
    for i, col in enumerate(vertical.tolist()):
        img_vis[:, i, col] = torch.tensor([255, 0, 0], dtype=torch.uint8)
    for j, row in enumerate(horizontal.tolist()):
        img_vis[:, row, j] = torch.tensor([0, 0, 255], dtype=torch.uint8)
    return img_vis


def main():
    parser = argparse.ArgumentParser(description="Visualize seams")
    parser.add_argument('input', help='Input image path')
    parser.add_argument('--output', default='seams.png', help='Figure path')
    args = parser.parse_args()

    picture = Picture.open(args.input)
    carver = SeamCarver(picture)

    print("Computing energy and seams...")
    energy = carver.energy_map()
    vertical = carver.find_vertical_seam()
    horizontal = carver.find_horizontal_seam()

    image = picture.to_tensor()
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))

    axes[0].imshow(image.permute(1, 2, 0).numpy())
    axes[0].set_title('Original')

    # Border pixels sit at 1000 and would wash out the interior
    interior = energy.clone()
    if interior.shape[0] > 2 and interior.shape[1] > 2:
        interior[[0, -1], :] = interior[1:-1, 1:-1].max()
        interior[:, [0, -1]] = interior[1:-1, 1:-1].max()
    axes[1].imshow(interior.numpy(), cmap='gray')
    axes[1].set_title('Dual-gradient energy')

    axes[2].imshow(overlay_seams(image, vertical, horizontal).permute(1, 2, 0).numpy())
    axes[2].set_title('Minimum seams')

    for ax in axes:
        ax.axis('off')

    plt.tight_layout()
    plt.savefig(args.output, dpi=150, bbox_inches='tight')
    print(f"Saved: {args.output}")


if __name__ == '__main__':
    main()
