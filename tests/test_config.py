"""Tests for RenderConfig."""

import json

import pytest

from ulam_spiral.config import PRIME_COLOR, RenderConfig
from ulam_spiral.errors import ConfigError


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self):
        """Test default values."""
        config = RenderConfig()
        assert config.dimension == 501
        assert config.output_path is None
        assert config.prime_color == PRIME_COLOR

    def test_colors_normalised_to_tuples(self):
        """Test list colours become tuples."""
        config = RenderConfig(center_color=[1, 2, 3])
        assert config.center_color == (1, 2, 3)

    @pytest.mark.parametrize("color", [(1, 2), (0, 0, 256), (-1, 0, 0), "red", None])
    def test_invalid_color(self, color):
        """Test that malformed colours are rejected."""
        with pytest.raises(ConfigError):
            RenderConfig(prime_color=color)

    def test_from_dict_ignores_unknown_keys(self):
        """Test that unknown keys are dropped."""
        config = RenderConfig.from_dict({"dimension": 7, "palette": "neon"})
        assert config.dimension == 7

    def test_save_and_load(self, tmp_path):
        """Test JSON persistence."""
        path = tmp_path / "config.json"
        RenderConfig(dimension=9, output_path="out.png", prime_color=(1, 1, 1)).save(path)

        assert json.loads(path.read_text())["prime_color"] == [1, 1, 1]

        loaded = RenderConfig.load(path)
        assert loaded.dimension == 9
        assert loaded.output_path == "out.png"
        assert loaded.prime_color == (1, 1, 1)

    def test_load_missing(self, tmp_path):
        """Test loading a missing file."""
        with pytest.raises(ConfigError):
            RenderConfig.load(tmp_path / "nope.json")

    def test_load_invalid_json(self, tmp_path):
        """Test loading malformed JSON."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            RenderConfig.load(path)

    def test_load_non_object(self, tmp_path):
        """Test loading a JSON array."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ConfigError):
            RenderConfig.load(path)

    def test_with_overrides(self):
        """Test that None overrides leave values alone."""
        config = RenderConfig(dimension=9, output_path="a.png")
        updated = config.with_overrides(dimension=None, output_path="b.png")
        assert updated.dimension == 9
        assert updated.output_path == "b.png"
        assert config.output_path == "a.png"

    @pytest.mark.parametrize("dimension", ["7", 5.0, None, True])
    def test_invalid_dimension_type(self, dimension):
        """Test that non-integer dimensions are rejected."""
        with pytest.raises(ConfigError):
            RenderConfig(dimension=dimension)

    def test_load_rejects_string_dimension(self, tmp_path):
        """Test that a quoted dimension in a file is rejected on load."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dimension": "7"}))
        with pytest.raises(ConfigError):
            RenderConfig.load(path)

    def test_invalid_output_path(self):
        """Test that a non-string output path is rejected."""
        with pytest.raises(ConfigError):
            RenderConfig(output_path=42)
