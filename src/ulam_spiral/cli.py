"""Command-line interface for ulam_spiral."""

from __future__ import annotations

import argparse
import logging
import sys
from itertools import islice
from pathlib import Path

from ulam_spiral.errors import UlamSpiralError
from ulam_spiral.utils.log import LOGGER_NAME, setup_logger

logger = logging.getLogger(LOGGER_NAME)


def cmd_render(args: argparse.Namespace) -> int:
    """Render the spiral to an image file."""
    from ulam_spiral.config import RenderConfig
    from ulam_spiral.visualization.renderer import render_spiral, save_figure, save_image

    config = RenderConfig.load(args.config) if args.config else RenderConfig()
    config = config.with_overrides(
        dimension=args.matrix_dimension,
        output_path=str(args.output) if args.output else None,
    )

    output = Path(config.output_path or "ulam.png")
    logger.info(f"Generating Ulam spiral: dimension={config.dimension}")

    rgb = render_spiral(config.dimension, config)
    save_image(rgb, output)
    logger.info(f"Saved to {output}")

    if args.preview:
        preview = output.with_name(f"{output.stem}_preview.png")
        save_figure(rgb, preview, title=f"Ulam spiral {config.dimension}x{config.dimension}")
        logger.info(f"Saved preview to {preview}")

    return 0


def cmd_points(args: argparse.Namespace) -> int:
    """Print value, primality and coordinate for the first N elements."""
    from ulam_spiral.core.coordinates import to_coordinates
    from ulam_spiral.core.sequencer import SpiralSequencer

    if args.count < 0:
        logger.error(f"count must be >= 0, got {args.count}")
        return 1

    for record, coord in islice(to_coordinates(SpiralSequencer()), args.count):
        if args.primes_only and not record.is_prime:
            continue
        print(f"{record.value}\t{int(record.is_prime)}\t{coord.row}\t{coord.col}")

    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Cross-check a spiral prefix against an independent sieve and geometry."""
    from ulam_spiral.verify import verify_prefix

    if args.count < 1:
        logger.error(f"count must be >= 1, got {args.count}")
        return 1

    logger.info(f"Verifying first {args.count:,} spiral elements...")
    report = verify_prefix(args.count)

    logger.info(f"  Legs: {len(report.leg_lengths)}")
    logger.info(f"  Prime mismatches: {len(report.prime_mismatches)}")
    logger.info(f"  Coordinate breaks: {len(report.coordinate_breaks)}")
    logger.info(f"  Bad legs: {len(report.bad_legs)}, bad turns: {len(report.bad_turns)}")
    logger.info(f"  Duplicate coordinates: {report.duplicate_coordinates}")

    if report.passed:
        logger.info("PASSED")
        return 0

    logger.error("FAILED")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="ulam-spiral",
        description="Ulam spiral generation and rendering",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render spiral to an image")
    render_parser.add_argument("--matrix-dimension", "-m", type=int, default=None,
                               help="Odd side length of the square image")
    render_parser.add_argument("--output", "-o", type=Path, default=None, help="Output file")
    render_parser.add_argument("--config", type=Path, default=None, help="JSON render config")
    render_parser.add_argument("--preview", action="store_true",
                               help="Also save a titled matplotlib preview")

    points_parser = subparsers.add_parser("points", help="Print spiral elements")
    points_parser.add_argument("--count", "-n", type=int, default=25, help="Number of elements")
    points_parser.add_argument("--primes-only", action="store_true", help="Only print primes")

    verify_parser = subparsers.add_parser("verify", help="Verify a spiral prefix")
    verify_parser.add_argument("--count", "-n", type=int, default=10000, help="Number of elements")

    args = parser.parse_args(argv)
    setup_logger(verbose=args.verbose, log_path=args.log_file)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "render": cmd_render,
        "points": cmd_points,
        "verify": cmd_verify,
    }

    try:
        return commands[args.command](args)
    except UlamSpiralError as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
