"""Tests for the game configuration dataclass."""

import json

import pytest

from grid_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.width == 30
        assert cfg.height == 30
        assert cfg.moving_period == 0.1
        assert cfg.restart_time == 1.5
        assert cfg.seed is None
        cfg.validate()

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(width=20, seed=9, moving_period=0.2)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()

        loaded = GameConfig.load(path)
        assert loaded == cfg

    def test_to_dict_serializable(self):
        serialized = json.dumps(GameConfig().to_dict())
        assert isinstance(serialized, str)


class TestGameConfigValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 3},
            {"width": 5, "start_x": 2},
            {"start_x": 0},
            {"start_y": 29},
            {"moving_period": 0.0},
            {"restart_time": -1.0},
            {"block_size": 0},
            {"fps": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs).validate()

    def test_smallest_playable_board(self):
        GameConfig(width=6, height=4, start_x=1, start_y=1).validate()
