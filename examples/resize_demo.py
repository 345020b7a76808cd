"""
Shrink an image by removing vertical and horizontal seams.

Usage:
    python resize_demo.py input.png output.png --columns 50 --rows 20
"""

import argparse
import os
import sys
import time
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from seamcarver import Picture, SeamCarver


def main():
    parser = argparse.ArgumentParser(description="Content-aware image shrinking")
    parser.add_argument('input', help='Input image path')
    parser.add_argument('output', help='Output image path')
    parser.add_argument('--columns', type=int, default=0,
                        help='Number of vertical seams to remove')
    parser.add_argument('--rows', type=int, default=0,
                        help='Number of horizontal seams to remove')
    args = parser.parse_args()

    print(f"Loading {args.input}...")
    picture = Picture.open(args.input)
    print(f"Image is {picture.width()} columns by {picture.height()} rows")

    carver = SeamCarver(picture)
    start = time.perf_counter()

    for i in range(args.columns):
        carver.remove_vertical_seam(carver.find_vertical_seam())
        if (i + 1) % 20 == 0:
            print(f"  Removed {i + 1}/{args.columns} vertical seams")

    for i in range(args.rows):
        carver.remove_horizontal_seam(carver.find_horizontal_seam())
        if (i + 1) % 20 == 0:
            print(f"  Removed {i + 1}/{args.rows} horizontal seams")

    elapsed = time.perf_counter() - start
    result = carver.picture()
    print(f"New image size is {result.width()} columns by {result.height()} rows")
    print(f"Resizing time: {elapsed:.2f} seconds.")

    result.save(args.output)
    print(f"Saved: {args.output}")


if __name__ == '__main__':
    main()
