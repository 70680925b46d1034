"""Raster rendering for the Ulam spiral."""

from ulam_spiral.visualization.renderer import (
    SquareCanvas,
    pixel_color,
    render_spiral,
    render_to_figure,
    save_figure,
    save_image,
)

__all__ = [
    "SquareCanvas",
    "pixel_color",
    "render_spiral",
    "render_to_figure",
    "save_figure",
    "save_image",
]
