"""Raster rendering of the Ulam spiral.

The spiral is drawn on an odd square canvas with 1 at the centre pixel.
Every pixel is coloured by a three-way rule: the centre, primes, and
everything else.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from ulam_spiral.config import RenderConfig
from ulam_spiral.core.prefix import precompute_spiral
from ulam_spiral.core.sequencer import NumberRecord
from ulam_spiral.errors import CanvasBoundsError, InvalidDimensionError

if TYPE_CHECKING:
    import matplotlib.figure

logger = logging.getLogger(__name__)


class SquareCanvas:
    """Odd-sided square pixel grid.

    Attributes:
        dimension: Width and height in pixels.
    """

    def __init__(self, dimension: int):
        """Initialize canvas.

        Raises:
            InvalidDimensionError: If dimension is not a positive odd integer.
        """
        if dimension < 1 or dimension % 2 == 0:
            raise InvalidDimensionError(dimension)
        self.dimension = dimension

    @property
    def rows(self) -> int:
        return self.dimension

    @property
    def columns(self) -> int:
        return self.dimension

    @property
    def elements(self) -> int:
        """Number of pixels, which is also the number of spiral elements drawn."""
        return self.dimension * self.dimension

    @property
    def center(self) -> int:
        """Row and column index of the pixel holding 1."""
        return self.dimension // 2


def pixel_color(record: NumberRecord, config: RenderConfig | None = None) -> tuple[int, int, int]:
    """Colour for a single spiral element.

    Value 1 takes center_color; otherwise primality picks prime_color or
    composite_color. render_spiral applies the same rule to whole arrays.
    """
    config = config or RenderConfig()
    if record.value == 1:
        return config.center_color
    if record.is_prime:
        return config.prime_color
    return config.composite_color


def render_spiral(dimension: int, config: RenderConfig | None = None) -> np.ndarray:
    """Render the spiral into an RGB array.

    Pixels are coloured by the pixel_color rule, vectorised over the prefix.

    Args:
        dimension: Odd canvas side length.
        config: Colour settings; defaults to RenderConfig().

    Returns:
        (dimension, dimension, 3) uint8 array indexed [row, col].

    Raises:
        InvalidDimensionError: If dimension is even or < 1.
        CanvasBoundsError: If a spiral element falls outside the canvas.
    """
    config = config or RenderConfig()
    canvas = SquareCanvas(dimension)

    logger.debug("Rendering %d spiral elements onto %dx%d canvas",
                 canvas.elements, canvas.rows, canvas.columns)

    spiral = precompute_spiral(canvas.elements)
    rows = spiral.rows + canvas.center
    cols = spiral.cols + canvas.center

    outside = (rows < 0) | (rows >= canvas.rows) | (cols < 0) | (cols >= canvas.columns)
    if outside.any():
        first = int(np.argmax(outside))
        raise CanvasBoundsError(
            f"Value {int(spiral.values[first])} maps to "
            f"({int(rows[first])}, {int(cols[first])}) outside {dimension}x{dimension} canvas"
        )

    rgb = np.empty((canvas.rows, canvas.columns, 3), dtype=np.uint8)
    rgb[rows, cols] = config.composite_color

    primes = spiral.is_prime
    rgb[rows[primes], cols[primes]] = config.prime_color

    centre = spiral.values == 1
    rgb[rows[centre], cols[centre]] = config.center_color

    return rgb


def save_image(rgb: np.ndarray, path: str | Path) -> Path:
    """Save an RGB array as an image; the format follows the file suffix.

    Args:
        rgb: (H, W, 3) uint8 array.
        path: Output file path.

    Returns:
        The path written.
    """
    from PIL import Image

    path = Path(path)
    if rgb.dtype != np.uint8:
        rgb = rgb.astype(np.uint8)

    Image.fromarray(rgb).save(path)
    logger.debug("Wrote %s", path)
    return path


def render_to_figure(
    rgb: np.ndarray,
    title: str | None = None,
    figsize: tuple[int, int] = (8, 8),
) -> "matplotlib.figure.Figure":
    """Render an RGB spiral array to a matplotlib figure for previewing.

    Args:
        rgb: (H, W, 3) uint8 array.
        title: Optional title for the figure.
        figsize: Figure size in inches (width, height).

    Returns:
        Matplotlib Figure object.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(rgb, interpolation="nearest")

    if title:
        ax.set_title(title)
    ax.axis("off")

    fig.tight_layout()
    return fig


def save_figure(rgb: np.ndarray, path: str | Path, title: str | None = None, dpi: int = 100) -> None:
    """Save a titled matplotlib preview of the spiral."""
    import matplotlib.pyplot as plt

    fig = render_to_figure(rgb, title=title)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", pad_inches=0.1)
    plt.close(fig)
