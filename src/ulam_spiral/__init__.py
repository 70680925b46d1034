"""ulam_spiral - Ulam spiral generation with primality and grid coordinates."""

__version__ = "0.1.0"

from ulam_spiral.core.direction import Direction
from ulam_spiral.core.sequencer import NumberRecord, SpiralSequencer, WalkState
from ulam_spiral.core.coordinates import Coordinate, CoordinateMapper, to_coordinates
from ulam_spiral.core.prefix import SpiralArrays, precompute_spiral, take_spiral
from ulam_spiral.errors import (
    UlamSpiralError,
    SpiralOverflowError,
    InvalidDimensionError,
    CanvasBoundsError,
    ConfigError,
)

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
    "UlamSpiralError",
    "SpiralOverflowError",
    "InvalidDimensionError",
    "CanvasBoundsError",
    "ConfigError",
]
