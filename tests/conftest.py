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


GLIDER_STATES = [
    ".X.\n..X\nXXX\n",
    "X.X\n.XX\n.X.\n",
    "..X\nX.X\n.XX\n",
    "X..\n.XX\nXX.\n",
]


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
        "display": {"padding": 3, "clear_screen": False},
        "run": {"generations": 25, "frame_rate": 4.0},
        "pattern": {"name": "blinker", "path": None},
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


@pytest.fixture
def glider_states():
    """The four exact-bounding-box renderings of one glider cycle."""
    return list(GLIDER_STATES)


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
