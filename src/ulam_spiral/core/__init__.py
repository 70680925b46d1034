"""Spiral walk core: sequencing, coordinates and bounded prefixes."""

from ulam_spiral.core.direction import Direction
from ulam_spiral.core.sequencer import NumberRecord, SpiralSequencer, WalkState
from ulam_spiral.core.coordinates import Coordinate, CoordinateMapper, to_coordinates
from ulam_spiral.core.prefix import SpiralArrays, precompute_spiral, take_spiral

__all__ = [
    "Direction",
    "NumberRecord",
    "SpiralSequencer",
    "WalkState",
    "Coordinate",
    "CoordinateMapper",
    "to_coordinates",
    "SpiralArrays",
    "precompute_spiral",
    "take_spiral",
]
