"""Exceptions raised by ulam_spiral."""


class UlamSpiralError(Exception):
    """Base class for all package errors."""


class SpiralOverflowError(UlamSpiralError, OverflowError):
    """A value or coordinate grew past its representable range.

    Fatal for the sequence that raised it.
    """


class InvalidDimensionError(UlamSpiralError, ValueError):
    """Canvas dimension is not a positive odd integer."""

    def __init__(self, current: int):
        self.current = current
        super().__init__(f"Expected odd square matrix dimension. Got {current}.")


class CanvasBoundsError(UlamSpiralError, IndexError):
    """A spiral coordinate falls outside the canvas."""


class ConfigError(UlamSpiralError, ValueError):
    """Invalid render configuration."""
