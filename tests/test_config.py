"""
Tests for configuration loading and validation.
"""

from pathlib import Path

import pytest
import yaml

import pondcatch
from pondcatch.catch_core.config_loader import load_config
from pondcatch.catch_core.scoring import color_for_value, portrait_tier


DEFAULT_CONFIG = Path(pondcatch.__file__).parent / "game_config.yaml"


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def raw_config():
    with open(DEFAULT_CONFIG, "r") as f:
        return yaml.safe_load(f)


def write_config(tmp_path, raw):
    path = tmp_path / "game_config.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(raw, f)
    return str(path)


class TestDefaultConfig:
    """Test the shipped configuration."""

    def test_tuning_constants(self, config):
        """Shipped values match the original game's tuning."""
        assert config.fish.size == 100
        assert config.fish.base_speed == 3.0
        assert config.fish.speed_increment == pytest.approx(0.2)
        assert config.net.width == 180
        assert config.net.height == 160
        assert config.lives.max == 3
        assert config.particles.life == 40
        assert config.particles.rise_speed == 2.0
        assert config.board.margin_left == 50
        assert config.board.margin_right == 50

    def test_species_table(self, config):
        """Species are listed in spawn-table order with their values."""
        names = [s.name for s in config.species]
        values = [s.value for s in config.species]
        probabilities = [s.probability for s in config.species]

        assert names == ["carp", "grasscarp", "catfish", "beta"]
        assert values == [1, 3, 3, 5]
        assert probabilities == pytest.approx([0.50, 0.25, 0.15, 0.10])

    def test_min_play_width(self, config):
        assert config.min_play_width == 200

    def test_get_species_rejects_bad_id(self, config):
        with pytest.raises(ValueError):
            config.get_species(99)


class TestConfigValidation:
    """Test that inconsistent configs are rejected at load time."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_round_trip_of_default(self, tmp_path, raw_config):
        """A dumped copy of the default config loads."""
        config = load_config(write_config(tmp_path, raw_config))
        assert config.num_species == 4

    def test_probabilities_must_sum_to_one(self, tmp_path, raw_config):
        raw_config["species"][0]["probability"] = 0.6
        with pytest.raises(ValueError, match="sum to 1.0"):
            load_config(write_config(tmp_path, raw_config))

    def test_unknown_species(self, tmp_path, raw_config):
        raw_config["species"][0]["name"] = "shark"
        with pytest.raises(ValueError, match="Unknown species"):
            load_config(write_config(tmp_path, raw_config))

    def test_thresholds_must_ascend(self, tmp_path, raw_config):
        raw_config["portraits"]["thresholds"] = [30, 15, 50]
        with pytest.raises(ValueError, match="ascending"):
            load_config(write_config(tmp_path, raw_config))

    def test_positive_fish_size(self, tmp_path, raw_config):
        raw_config["fish"]["size"] = 0
        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, raw_config))

    def test_at_least_one_life(self, tmp_path, raw_config):
        raw_config["lives"]["max"] = 0
        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, raw_config))

    def test_bad_color(self, tmp_path, raw_config):
        raw_config["colors"]["default"] = [255, 255]
        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, raw_config))


class TestPresentationTiers:
    """Test value colors and portrait tiers."""

    def test_color_tiers(self, config):
        assert color_for_value(5, config) == (255, 215, 0)
        assert color_for_value(3, config) == (79, 172, 254)
        assert color_for_value(1, config) == (255, 255, 255)
        assert color_for_value(7, config) == (255, 255, 255)

    def test_portrait_tiers(self, config):
        thresholds = config.portraits.thresholds
        assert portrait_tier(0, thresholds) == 0
        assert portrait_tier(14, thresholds) == 0
        assert portrait_tier(15, thresholds) == 1
        assert portrait_tier(29, thresholds) == 1
        assert portrait_tier(30, thresholds) == 2
        assert portrait_tier(50, thresholds) == 3
        assert portrait_tier(1000, thresholds) == 3
