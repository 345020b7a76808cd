"""
Print the dual-gradient energy of every pixel in a (small) image.
"""

import argparse
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from seamcarver import Picture, SeamCarver


def main():
    parser = argparse.ArgumentParser(description="Print pixel energies")
    parser.add_argument('input', help='Input image path')
    args = parser.parse_args()

    picture = Picture.open(args.input)
    print(f"{args.input} ({picture.width()}-by-{picture.height()} image)")

    carver = SeamCarver(picture)
    print("Printing energy calculated for each pixel.")
    for y in range(carver.height()):
        print(" ".join(f"{carver.energy(x, y):9.2f}" for x in range(carver.width())))


if __name__ == '__main__':
    main()
