"""
Configuration management for the solvers and the command-line front end.
Uses OmegaConf for loading, merging and dot-key access.
"""

import logging
import os
from typing import Any

import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from simplesat.utils.exceptions import ConfigurationError

# Set up logging
logger = logging.getLogger(__name__)


class SolverConfig:
    """
    Configuration manager for SAT solvers.
    Handles loading, merging, and accessing configuration parameters.
    """

    DEFAULT_CONFIG = {
        "solver": {
            "name": "dpll",
            "heuristic": "most_frequent",
            "pure_literal_elimination": True,
            "verify_model": True,
        },
        "logging": {
            "level": "WARNING",
            "file": None,
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
        "output": {
            "stats_dir": None,
            "stats_format": "json",
        },
    }

    def __init__(self, config_path: str | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file (YAML or JSON)

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        self.config: DictConfig = OmegaConf.create(self.DEFAULT_CONFIG)

        if config_path:
            self._load_config_file(config_path)

    def _load_config_file(self, config_path: str) -> None:
        """
        Merge a configuration file over the current configuration.

        Args:
            config_path: Path to configuration file
        """
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            file_config = OmegaConf.load(config_path)
            self.config = OmegaConf.merge(self.config, file_config)
        except (OmegaConfBaseException, yaml.YAMLError, ValueError, OSError) as e:
            raise ConfigurationError(
                f"Error loading configuration file {config_path}: {e}"
            ) from e

        logger.debug(f"Loaded configuration from {config_path}")

    def update(self, config_dict: dict[str, Any]) -> None:
        """
        Update the configuration with the given dictionary.

        Args:
            config_dict: Dictionary to update the configuration with
        """
        self.config = OmegaConf.merge(self.config, config_dict)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.
        Supports dot notation for nested keys (e.g., "solver.heuristic").

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        try:
            return OmegaConf.select(self.config, key, default=default)
        except OmegaConfBaseException:
            return default

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by key.
        Supports dot notation for nested keys (e.g., "solver.name").
        """
        OmegaConf.update(self.config, key, value)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the configuration to a dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        return OmegaConf.to_container(self.config, resolve=True)

    def save(self, file_path: str) -> None:
        """
        Save the configuration to a YAML file.

        Args:
            file_path: Path to save the configuration to
        """
        os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)
        OmegaConf.save(self.config, file_path)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


# Create a global configuration instance
config = SolverConfig()


def load_config(config_path: str | None = None) -> SolverConfig:
    """
    Load configuration from a file and make it the global configuration.

    Args:
        config_path: Path to configuration file; None resets to the defaults

    Returns:
        Configuration instance
    """
    global config
    config = SolverConfig(config_path)
    return config


def get_config() -> SolverConfig:
    """
    Get the global configuration instance.

    Returns:
        Configuration instance
    """
    return config
