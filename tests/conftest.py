"""
Pytest configuration and shared fixtures for Veritree tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest

from veritree.logging_config import clear_correlation_id


# Addresses used as sample tree input
WHITELIST_ADDRESSES = [
    "0X5B38DA6A701C568545DCFCB03FCB875F56BEDDC4",
    "0X5A641E5FB72A2FD9137312E7694D42996D689D99",
    "0XDCAB482177A592E424D1C8318A464FC922E8DE40",
    "0X6E21D37E07A6F7E53C7ACE372CEC63D4AE4B6BD0",
    "0X09BAAB19FC77C19898140DADD30C4685C597620B",
    "0XCC4C29997177253376528C05D3DF91CF2D69061A",
    "0xdD870fA1b7C4700F2BD7f44238821C26f7392148",
]


def create_test_config_content(temp_dir: Path, **overrides) -> str:
    """
    Generate test configuration YAML content.

    Args:
        temp_dir: Temporary directory for the log file.
        **overrides: Values for the tree section (hash_algorithm, etc.).

    Returns:
        YAML configuration content as string.
    """
    tree = {
        "hash_algorithm": "sha3_256",
        "parallel_enabled": "true",
        "parallel_threshold": 100,
        "max_workers": 4,
    }
    tree.update(overrides)
    tree_lines = "\n".join(f"  {key}: {value}" for key, value in tree.items())

    return f"""
tree:
{tree_lines}

logging:
  level: WARNING
  file: {temp_dir}/veritree.log
  format: json
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def addresses() -> List[str]:
    """Sample list of seven address strings (odd count)."""
    return list(WHITELIST_ADDRESSES)


@pytest.fixture
def sample_config_path(temp_dir: Path) -> Path:
    """
    Create a sample configuration file for testing.

    Returns:
        Path to sample config file.
    """
    config_path = temp_dir / "config.yaml"
    config_path.write_text(create_test_config_content(temp_dir))
    return config_path


@pytest.fixture
def make_config_yaml(temp_dir: Path):
    """
    Factory fixture that writes a config file with tree overrides.

    Usage:
        def test_something(make_config_yaml):
            config_path = make_config_yaml(hash_algorithm="sha256")
    """
    def _make_config(**overrides) -> Path:
        config_path = temp_dir / "config.yaml"
        config_path.write_text(create_test_config_content(temp_dir, **overrides))
        return config_path
    return _make_config


@pytest.fixture(autouse=True)
def _reset_correlation_id():
    yield
    clear_correlation_id()


# Hypothesis settings for property-based tests
from hypothesis import settings, Verbosity

settings.register_profile("veritree", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("veritree-ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("veritree-dev", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "veritree"))
