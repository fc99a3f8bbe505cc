"""
Pytest configuration and shared fixtures for the lifesim test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'lifesim' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Vertical three-cell bar in column 0 of a 4x4 grid
VERTICAL_BAR_4X4 = [
    1, 0, 0, 0,
    1, 0, 0, 0,
    1, 0, 0, 0,
    0, 0, 0, 0,
]

# The vertical bar after one generation
BAR_AFTER_ONE_STEP_4X4 = [
    0, 0, 0, 0,
    1, 1, 0, 0,
    0, 0, 0, 0,
    0, 0, 0, 0,
]


class SequenceRng:
    """Deterministic random source cycling through fixed values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def sequence_rng():
    return SequenceRng


@pytest.fixture
def vertical_bar_4x4():
    return list(VERTICAL_BAR_4X4)


@pytest.fixture
def bar_after_one_step_4x4():
    return list(BAR_AFTER_ONE_STEP_4X4)


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_life_config_dict():
    """
    Fixture providing a complete valid lifesim configuration dictionary.
    """
    return {
        "board": {"row_size": 5, "rows": 5, "seed": "blinker"},
        "simulation": {"generations": 3, "frequency": 20},
        "render": {"alive": "#", "dead": ".", "separator": "|"},
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_life_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_life_config_dict, f)

    yield temp_yaml_file


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
