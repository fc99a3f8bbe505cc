import random
from pathlib import Path

import pytest
import yaml

from lifesim.core.board import LifeBoard
from lifesim.core.exceptions import ConfigurationError
from lifesim.utils import config_loader
from lifesim.utils.config_loader import (
    BoardConfig,
    LifeConfig,
    RenderConfig,
    SimulationConfig,
    _get_config_path,
    _load_yaml_file,
    _parse_life_cfg_from_dict,
    build_board,
    clear_config_cache,
    get_config,
    load_config,
    override_board,
)


@pytest.fixture(autouse=True)
def _clear_cache():
    clear_config_cache()
    yield
    clear_config_cache()


def write_yaml(path: Path, data) -> str:
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return str(path)


class TestDataclasses:
    def test_defaults(self):
        assert BoardConfig() == BoardConfig(row_size=4, rows=4, seed="default", cells=None)
        assert SimulationConfig().frequency == 10
        assert RenderConfig().separator == "\n"

    def test_immutable(self):
        cfg = BoardConfig()
        with pytest.raises(AttributeError):
            cfg.rows = 9  # type: ignore[misc]


class TestLoading:
    def test_bundled_config(self):
        cfg = load_config()

        assert isinstance(cfg, LifeConfig)
        assert cfg.board.row_size == 4
        assert cfg.board.rows == 4
        assert cfg.board.seed == "default"
        assert cfg.simulation.generations == 2

    def test_default_path_points_at_package(self):
        path = Path(_get_config_path())

        assert path.name == "config.yaml"
        assert path.parent.name == "lifesim"
        assert _get_config_path("custom.yaml") == "custom.yaml"

    def test_load_from_file(self, temp_config_yaml_file):
        cfg = load_config(str(temp_config_yaml_file))

        assert cfg.board == BoardConfig(row_size=5, rows=5, seed="blinker")
        assert cfg.simulation == SimulationConfig(generations=3, frequency=20)
        assert cfg.render == RenderConfig(alive="#", dead=".", separator="|")

    def test_empty_file_uses_defaults(self, temp_yaml_file):
        temp_yaml_file.write_text("", encoding="utf-8")

        cfg = load_config(str(temp_yaml_file))
        assert cfg.board == BoardConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_malformed_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("board: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_top_level_must_be_mapping(self, temp_yaml_file):
        temp_yaml_file.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_get_config_caches(self, temp_config_yaml_file, monkeypatch):
        calls = []
        original = config_loader.load_config

        def counting_load(path=None):
            calls.append(path)
            return original(path)

        monkeypatch.setattr(config_loader, "load_config", counting_load)

        first = get_config(str(temp_config_yaml_file))
        second = get_config(str(temp_config_yaml_file))
        assert first is second
        assert len(calls) == 1

        clear_config_cache()
        get_config(str(temp_config_yaml_file))
        assert len(calls) == 2


class TestValidation:
    @pytest.mark.parametrize(
        "raw",
        [
            {"board": {"row_size": 0}},
            {"board": {"rows": -2}},
            {"board": {"seed": "unknown"}},
            {"board": {"row_size": 2, "rows": 2, "cells": [1, 0, 1]}},
            {"board": {"row_size": 2, "rows": 1, "cells": [1, 2]}},
            {"board": {"row_size": 2, "rows": 1, "cells": [0.9, 1.5]}},
            {"board": {"row_size": 2, "rows": 1, "cells": ["1", "0"]}},
            {"board": {"row_size": 2, "rows": 1, "cells": "10"}},
            {"board": {"row_size": "wide"}},
            {"board": ["not", "a", "mapping"]},
            {"simulation": {"generations": -1}},
            {"simulation": {"frequency": 0}},
            {"render": {"alive": ""}},
        ],
    )
    def test_invalid_configs(self, raw):
        with pytest.raises(ConfigurationError):
            _parse_life_cfg_from_dict(raw)

    def test_explicit_cells(self):
        cfg = _parse_life_cfg_from_dict(
            {"board": {"row_size": 2, "rows": 2, "cells": [1, 0, 0, 1]}}
        )

        assert cfg.board.cells == (1, 0, 0, 1)

    def test_unknown_seed_lists_available(self):
        with pytest.raises(ConfigurationError) as exc_info:
            _parse_life_cfg_from_dict({"board": {"seed": "unknown"}})

        assert "random" in exc_info.value.details["available"]
        assert "glider" in exc_info.value.details["available"]


class TestOverrideAndBuild:
    def test_override_ignores_none(self):
        cfg = load_config()

        assert override_board(cfg, seed=None, rows=None) is cfg

    def test_override_replaces_and_drops_cells(self):
        cfg = _parse_life_cfg_from_dict(
            {"board": {"row_size": 2, "rows": 2, "cells": [1, 0, 0, 1]}}
        )
        updated = override_board(cfg, seed="block", rows=3)

        assert updated.board.seed == "block"
        assert updated.board.rows == 3
        assert updated.board.cells is None

    def test_override_is_validated(self):
        with pytest.raises(ConfigurationError):
            override_board(load_config(), seed="nope")

    def test_build_default(self, vertical_bar_4x4):
        board = build_board(load_config())

        assert board == LifeBoard.from_cells(vertical_bar_4x4, 4)

    def test_build_from_cells(self):
        cfg = _parse_life_cfg_from_dict(
            {"board": {"row_size": 2, "rows": 2, "cells": [1, 0, 0, 1]}}
        )

        assert build_board(cfg).as_bytes() == bytes([1, 0, 0, 1])

    def test_build_random_with_injected_rng(self):
        cfg = _parse_life_cfg_from_dict({"board": {"row_size": 6, "rows": 3, "seed": "random"}})

        a = build_board(cfg, rng=random.Random(1).random)
        b = build_board(cfg, rng=random.Random(1).random)
        assert a == b
        assert len(a) == 18

    def test_build_pattern(self, temp_config_yaml_file):
        board = build_board(load_config(str(temp_config_yaml_file)))

        assert board.row_size == 5
        assert board.population() == 3


def test_float_cells_in_yaml_are_rejected(temp_yaml_file):
    write_yaml(temp_yaml_file, {"board": {"row_size": 2, "rows": 1, "cells": [0.9, 1.5]}})

    with pytest.raises(ConfigurationError) as exc_info:
        load_config(str(temp_yaml_file))

    assert exc_info.value.config_key == "board.cells"
