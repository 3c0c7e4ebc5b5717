"""Tests for the game configuration dataclass."""

import json

import pytest

from cube_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.size == 8
        assert cfg.player_count == 1
        assert cfg.tick_interval_ms == 1500
        assert cfg.seed is None

    def test_size_too_small(self):
        with pytest.raises(ValueError, match="at least 5"):
            GameConfig(size=4)

    @pytest.mark.parametrize("players", [0, 5])
    def test_player_count_range(self, players):
        with pytest.raises(ValueError, match="between 1 and 4"):
            GameConfig(player_count=players)

    def test_tick_interval_positive(self):
        with pytest.raises(ValueError, match="positive"):
            GameConfig(tick_interval_ms=0)

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.size = 10

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(size=6, player_count=2, tick_interval_ms=500, seed=11)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()
        assert GameConfig.load(path) == cfg

    def test_to_dict_serializable(self):
        serialized = json.dumps(GameConfig(seed=3).to_dict())
        assert json.loads(serialized)["seed"] == 3
