"""Unit tests for configuration loading."""

import json

import pytest

from wator.config import WorldConfig, load_config
from wator.errors import CapacityExceededError


class TestWorldConfig:
    """Tests for WorldConfig."""

    def test_default_values(self):
        """Defaults match the reference simulation."""
        cfg = WorldConfig()
        assert (cfg.width, cfg.height) == (640, 480)
        assert (cfg.n_fish, cfg.n_sharks) == (12000, 4000)
        assert (cfg.fish_breed, cfg.shark_breed, cfg.shark_starve) == (60, 35, 30)
        assert cfg.seed is None
        assert cfg.validate() is cfg

    def test_capacity(self):
        assert WorldConfig(width=3, height=4).capacity == 12

    @pytest.mark.parametrize("field", ["width", "height", "fish_breed", "shark_breed", "shark_starve"])
    def test_rejects_non_positive(self, field):
        params = {"width": 10, "height": 10, "n_fish": 1, "n_sharks": 1, field: 0}
        cfg = WorldConfig(**params)
        with pytest.raises(ValueError):
            cfg.validate()

    def test_rejects_negative_population(self):
        with pytest.raises(ValueError):
            WorldConfig(width=10, height=10, n_fish=-1, n_sharks=0).validate()

    def test_rejects_non_integer(self):
        with pytest.raises(ValueError):
            WorldConfig(width=10.5, height=10, n_fish=1, n_sharks=1).validate()

    def test_capacity_exceeded_is_value_error(self):
        with pytest.raises(ValueError):
            WorldConfig(width=2, height=2, n_fish=4, n_sharks=1).validate()
        with pytest.raises(CapacityExceededError):
            WorldConfig(width=2, height=2, n_fish=4, n_sharks=1).validate()

    def test_from_dict_partial(self):
        cfg = WorldConfig.from_dict({"width": 20, "seed": 3})
        assert cfg.width == 20
        assert cfg.seed == 3
        assert cfg.height == 480

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError):
            WorldConfig.from_dict({"sharkz": 3})


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_path_gives_defaults(self):
        assert load_config() == WorldConfig()

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nonexistent.json") == WorldConfig()

    def test_reads_file(self, tmp_path):
        path = tmp_path / "wator.json"
        path.write_text(json.dumps({"width": 50, "height": 40, "n_fish": 100, "n_sharks": 10}))
        cfg = load_config(path)
        assert (cfg.width, cfg.height, cfg.n_fish, cfg.n_sharks) == (50, 40, 100, 10)
        assert cfg.fish_breed == 60
