"""Tests for spiral rendering."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from PIL import Image

from ulam_spiral.config import COMPOSITE_COLOR, CENTER_COLOR, PRIME_COLOR, RenderConfig
from ulam_spiral.core.sequencer import NumberRecord
from ulam_spiral.core.sieve import prime_sieve_mask
from ulam_spiral.core.prefix import SpiralArrays, precompute_spiral, take_spiral
from ulam_spiral.errors import CanvasBoundsError, InvalidDimensionError
from ulam_spiral.visualization import renderer
from ulam_spiral.visualization.renderer import (
    SquareCanvas,
    pixel_color,
    render_spiral,
    render_to_figure,
    save_figure,
    save_image,
)


class TestSquareCanvas:
    """Tests for SquareCanvas."""

    def test_dimensions(self):
        """Test derived sizes."""
        canvas = SquareCanvas(7)
        assert canvas.rows == 7
        assert canvas.columns == 7
        assert canvas.elements == 49
        assert canvas.center == 3

    def test_size_1(self):
        """Test the smallest canvas."""
        canvas = SquareCanvas(1)
        assert canvas.elements == 1
        assert canvas.center == 0

    @pytest.mark.parametrize("dimension", [0, 2, 10, -3])
    def test_invalid_dimension(self, dimension):
        """Test that even or non-positive dimensions are rejected."""
        with pytest.raises(InvalidDimensionError) as exc_info:
            SquareCanvas(dimension)
        assert exc_info.value.current == dimension
        assert str(exc_info.value) == (
            f"Expected odd square matrix dimension. Got {dimension}."
        )


class TestPixelColor:
    """Tests for pixel_color."""

    def test_center(self):
        """Test that 1 gets the centre colour."""
        assert pixel_color(NumberRecord(1, False)) == CENTER_COLOR

    def test_prime(self):
        """Test that primes get the prime colour."""
        assert pixel_color(NumberRecord(7, True)) == PRIME_COLOR

    def test_composite(self):
        """Test that composites get the base colour."""
        assert pixel_color(NumberRecord(9, False)) == COMPOSITE_COLOR

    def test_custom_config(self):
        """Test colours taken from a config."""
        config = RenderConfig(prime_color=(255, 255, 255))
        assert pixel_color(NumberRecord(2, True), config) == (255, 255, 255)


class TestRenderSpiral:
    """Tests for render_spiral."""

    def test_shape_and_dtype(self):
        """Test output array shape."""
        rgb = render_spiral(11)
        assert rgb.shape == (11, 11, 3)
        assert rgb.dtype == np.uint8

    def test_three_by_three_layout(self):
        """Test every pixel of the 3x3 spiral.

        5 4 3
        6 1 2
        7 8 9
        """
        rgb = render_spiral(3)
        prime, comp = list(PRIME_COLOR), list(COMPOSITE_COLOR)
        expected = [
            [prime, comp, prime],
            [comp, list(CENTER_COLOR), prime],
            [prime, comp, comp],
        ]
        np.testing.assert_array_equal(rgb, np.array(expected, dtype=np.uint8))

    def test_size_1(self):
        """Test that a 1x1 canvas holds only the centre."""
        rgb = render_spiral(1)
        np.testing.assert_array_equal(rgb[0, 0], CENTER_COLOR)

    def test_prime_pixel_count(self):
        """Test the number of prime pixels matches the prime count."""
        rgb = render_spiral(31)
        prime_pixels = np.all(rgb == PRIME_COLOR, axis=-1).sum()
        assert prime_pixels == prime_sieve_mask(31 * 31 + 1).sum()

    def test_only_palette_colors(self):
        """Test that every pixel uses one of the three colours."""
        rgb = render_spiral(21).reshape(-1, 3)
        colors = {tuple(int(c) for c in px) for px in rgb}
        assert colors == {CENTER_COLOR, PRIME_COLOR, COMPOSITE_COLOR}

    def test_even_dimension(self):
        """Test that even dimensions are rejected."""
        with pytest.raises(InvalidDimensionError):
            render_spiral(4)

    def test_matches_pixel_color(self):
        """Test that every pixel follows the per-element colour rule."""
        config = RenderConfig(center_color=(9, 9, 9), prime_color=(1, 2, 3))
        rgb = render_spiral(9, config)
        for record, coord in take_spiral(81):
            pixel = tuple(int(c) for c in rgb[coord.row + 4, coord.col + 4])
            assert pixel == pixel_color(record, config), f"value {record.value}"

    def test_out_of_canvas(self, monkeypatch):
        """Test that an element outside the canvas raises."""
        real = precompute_spiral(9)
        rows = real.rows.copy()
        rows[8] = 5
        shifted = SpiralArrays(values=real.values, is_prime=real.is_prime,
                               rows=rows, cols=real.cols)
        monkeypatch.setattr(renderer, "precompute_spiral", lambda n: shifted)

        with pytest.raises(CanvasBoundsError, match="Value 9"):
            render_spiral(3)


class TestSaving:
    """Tests for image output."""

    def test_save_image(self, tmp_path):
        """Test saving and reading back a PNG."""
        rgb = render_spiral(5)
        path = save_image(rgb, tmp_path / "spiral.png")

        with Image.open(path) as img:
            assert img.size == (5, 5)
            assert img.mode == "RGB"
            assert img.getpixel((2, 2)) == CENTER_COLOR
            assert img.getpixel((3, 2)) == PRIME_COLOR

    def test_render_to_figure(self):
        """Test figure creation."""
        import matplotlib.pyplot as plt

        fig = render_to_figure(render_spiral(5), title="Ulam")
        assert fig.axes[0].get_title() == "Ulam"
        plt.close(fig)

    def test_save_figure(self, tmp_path):
        """Test saving a preview figure."""
        path = tmp_path / "preview.png"
        save_figure(render_spiral(5), path, title="Ulam")
        assert path.exists()
