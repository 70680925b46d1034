"""Quick start example for ulam_spiral.

Run this script to print the start of the spiral and render a sample image.
"""

from itertools import islice
from pathlib import Path

from ulam_spiral import SpiralSequencer, to_coordinates
from ulam_spiral.visualization import render_spiral, save_image


def main():
    print("Ulam Spiral - Quick Start Demo")
    print("=" * 50)

    print("\n1. First 10 spiral elements:")
    for record, coord in islice(to_coordinates(SpiralSequencer()), 10):
        marker = "*" if record.is_prime else " "
        print(f"   {record.value:>3}{marker} at ({coord.row:>2}, {coord.col:>2})")

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    print("\n2. Rendering 301x301 spiral...")
    rgb = render_spiral(301)
    save_image(rgb, output_dir / "ulam_spiral.png")
    print(f"   Saved to {output_dir / 'ulam_spiral.png'}")


if __name__ == "__main__":
    main()
