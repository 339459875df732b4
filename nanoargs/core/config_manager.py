# nanoargs/core/config_manager.py

import logging
import yaml
from pathlib import Path
from typing import List, Optional, Dict, Any, ClassVar
from pydantic import BaseModel, ValidationError, field_validator
import sys
import os

from .exceptions import ConfigError
from nanoargs import __version__

logger = logging.getLogger(__name__)

class NanoArgsSettings(BaseModel):
    """Settings for the nanoargs inspector, validated with Pydantic"""

    # Configuration sections for organized YAML output
    CONFIG_SECTIONS: ClassVar[Dict[str, List[str]]] = {
        "# Parsing - Which token rules the inspector applies": [
            "version", "dialect"
        ],
        "# Logging settings": [
            "log_level", "log_to_file", "log_file_rotation", "log_file_max_size"
        ],
    }

    version: str = __version__
    dialect: str = "long-with-equals"

    # Logging settings
    log_level: str = "WARNING"
    log_to_file: bool = False
    log_file_rotation: int = 5  # Number of log files to keep
    log_file_max_size: int = 10  # MB

    @field_validator('dialect')
    def validate_dialect(cls, v):
        """Normalize dialect names; unknown names are rejected when resolved"""
        return v.strip().lower().replace("_", "-")

    @field_validator('log_level')
    def validate_log_level(cls, v):
        """Validate log level"""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v = v.upper()
        if v not in valid_levels:
            return 'WARNING'
        return v

    @field_validator('log_file_rotation', 'log_file_max_size')
    def validate_positive(cls, v):
        """Rotation count and file size are at least 1"""
        return max(v, 1)

    def to_dict(self) -> dict:
        return self.model_dump()

    def save_to_yaml_with_sections(self, file_handle):
        """
        Save settings to a YAML file grouped by CONFIG_SECTIONS.

        Args:
            file_handle: Open file handle to write to
        """
        config_dict = self.to_dict()

        for section_comment, field_names in self.CONFIG_SECTIONS.items():
            file_handle.write(f"\n{section_comment}\n")
            section_dict = {k: config_dict[k] for k in field_names if k in config_dict}
            yaml.dump(section_dict, file_handle, default_flow_style=False, sort_keys=False)


class ConfigManager:
    """Loads and saves inspector settings"""

    @staticmethod
    def get_appdata_dir() -> Path:
        """
        Get the platform-appropriate config directory for nanoargs.
        Returns:
            Path: The directory holding config.yml and logs
        """
        if sys.platform == "win32":
            base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
            return base / "nanoargs"
        elif sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support" / "nanoargs"
        else:
            # Linux and other POSIX
            return Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / "nanoargs"

    DEFAULT_CONFIG_PATHS = [
        get_appdata_dir.__func__() / "config.yml",
    ]

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path
        self.config = None

    def read_config(self) -> NanoArgsSettings:
        """
        Read settings from file, strictly.

        Returns:
            NanoArgsSettings: Defaults when no file exists

        Raises:
            ConfigError: If the file cannot be read or holds invalid settings
        """
        config_file = self._find_config_file()
        if not config_file.exists():
            logger.debug(f"No config file at {config_file}, using defaults")
            return NanoArgsSettings()

        try:
            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config file {config_file}: {e}") from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigError(
                f"Config file {config_file} must contain a mapping",
                invalid_value=config_data,
                expected_type="mapping"
            )

        known_fields = set(NanoArgsSettings.model_fields.keys())
        unknown = set(config_data) - known_fields
        if unknown:
            logger.warning(f"Ignoring unknown config keys in {config_file}: {sorted(map(str, unknown))}")
        config_data = {k: v for k, v in config_data.items() if k in known_fields}

        try:
            settings = NanoArgsSettings.model_validate(config_data)
        except ValidationError as e:
            first = e.errors()[0]
            key = first["loc"][0] if first.get("loc") else None
            raise ConfigError(
                f"Invalid config file {config_file}: {first['msg']}",
                config_key=key,
                invalid_value=config_data.get(key) if key else None
            ) from e

        if settings.version != __version__:
            logger.info(f"Config version {settings.version} differs from program version {__version__}")
        logger.info(f"Loaded configuration from {config_file}")
        return settings

    def load_config(self) -> NanoArgsSettings:
        """
        Load settings from file, falling back to defaults on any error.

        Returns:
            NanoArgsSettings: Validated settings
        """
        try:
            self.config = self.read_config()
        except ConfigError as e:
            logger.error(f"Error loading config: {e}")
            self.config = NanoArgsSettings()
        return self.config

    def _find_config_file(self) -> Path:
        """
        Find existing config file from possible locations.

        Returns:
            Path to configuration file
        """
        if self.config_path:
            return Path(self.config_path)
        for path in self.DEFAULT_CONFIG_PATHS:
            if path.exists():
                return path
        return self.DEFAULT_CONFIG_PATHS[0]

    def save_config(self, config: Optional[NanoArgsSettings] = None) -> Path:
        """
        Save settings to file.

        Args:
            config: Settings to save, uses self.config if None

        Returns:
            Path the settings were written to

        Raises:
            ConfigError: If there is nothing to save or the file cannot be written
        """
        if config is not None:
            self.config = config
        if self.config is None:
            raise ConfigError("No configuration to save")

        config_file = self._find_config_file()
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w') as f:
                self.config.save_to_yaml_with_sections(f)
        except OSError as e:
            raise ConfigError(f"Failed to save config to {config_file}: {e}") from e

        logger.info(f"Saved configuration to {config_file}")
        return config_file

    def update_config(self, updates: Dict[str, Any]) -> NanoArgsSettings:
        """
        Update settings with new values and save them.

        Args:
            updates: Dictionary of key-value pairs to update

        Returns:
            NanoArgsSettings: Updated settings
        """
        if self.config is None:
            self.config = NanoArgsSettings()
        config_dict = self.config.model_dump()
        config_dict.update(updates)
        try:
            self.config = NanoArgsSettings.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration update: {e.errors()[0]['msg']}") from e
        self.save_config()
        return self.config
