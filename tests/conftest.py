# tests/conftest.py
"""
Pytest configuration for nanoargs tests.
Defines fixtures used across multiple test modules.
"""
from pathlib import Path
from typing import Iterator, List
import tempfile
import shutil
import logging
import yaml
import pytest


@pytest.fixture
def temp_config_dir() -> Iterator[Path]:
    """
    Create a temporary directory for test configuration files.
    
    Yields:
        Path: Path to the temporary directory.
    """
    temp_dir = Path(tempfile.mkdtemp())
    try:
        yield temp_dir
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def valid_config_file(temp_config_dir: Path) -> Iterator[Path]:
    """
    Create a temporary valid configuration file with every NanoArgsSettings field.
    
    Yields:
        Path: Path to the valid configuration file.
    """
    config_path = temp_config_dir / "config.yml"
    config_data = {
        "dialect": "short-and-long",
        "log_level": "DEBUG",
        "log_to_file": False,
        "log_file_rotation": 3,
        "log_file_max_size": 2,
    }
    with open(config_path, 'w') as f:
        yaml.dump(config_data, f)
    yield config_path


@pytest.fixture
def invalid_config_file(temp_config_dir: Path) -> Iterator[Path]:
    """
    Create a temporary configuration file with broken YAML syntax.
    
    Yields:
        Path: Path to the invalid configuration file.
    """
    config_path = temp_config_dir / "invalid_config.yml"
    with open(config_path, 'w') as f:
        f.write("""
        dialect: short-and-long
        # This line has invalid indentation and a missing colon
          log_level "DEBUG"
        """)
    yield config_path


@pytest.fixture
def malformed_config_file(temp_config_dir: Path) -> Iterator[Path]:
    """
    Create a configuration file with valid YAML but values of the wrong type.
    
    Yields:
        Path: Path to the malformed configuration file.
    """
    config_path = temp_config_dir / "malformed_config.yml"
    config_data = {
        "dialect": 42,
        "log_level": 100,
        "log_to_file": "sometimes",
        "log_file_rotation": "lots",
        "log_file_max_size": "huge",
    }
    with open(config_path, 'w') as f:
        yaml.dump(config_data, f)
    yield config_path


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Put the root logger's handlers and level back after a test reconfigures it."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def mixed_argv() -> List[str]:
    """Positional values around a flag and an option."""
    return ["prog", "file1.txt", "--verbose", "--output", "out.txt", "file2.txt"]


@pytest.fixture
def separator_argv() -> List[str]:
    """An option followed by the separator and flag-shaped positional values."""
    return ["prog", "--input", "file.txt", "--", "--not-a-flag", "-x"]
