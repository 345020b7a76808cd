"""
Print the energy matrix with the minimum vertical and horizontal seams
marked by an asterisk, followed by each seam's total energy.
"""

import argparse
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from seamcarver import Picture, SeamCarver, seam_energy


def print_seam(carver, seam, direction):
    energy = carver.energy_map()
    seam = seam.tolist()
    for y in range(carver.height()):
        cells = []
        for x in range(carver.width()):
            on_seam = seam[y] == x if direction == 'vertical' else seam[x] == y
            marker = '*' if on_seam else ' '
            cells.append(f"{energy[y, x].item():7.2f}{marker}")
        print(" ".join(cells))
    print(f"Total energy = {seam_energy(energy, seam, direction):.2f}")
    print()


def main():
    parser = argparse.ArgumentParser(description="Print minimum seams")
    parser.add_argument('input', help='Input image path')
    args = parser.parse_args()

    picture = Picture.open(args.input)
    print(f"{args.input} ({picture.width()}-by-{picture.height()} image)")
    print()
    carver = SeamCarver(picture)

    seam = carver.find_vertical_seam()
    print(f"Vertical seam: {seam.tolist()}")
    print_seam(carver, seam, 'vertical')

    seam = carver.find_horizontal_seam()
    print(f"Horizontal seam: {seam.tolist()}")
    print_seam(carver, seam, 'horizontal')


if __name__ == '__main__':
    main()
