"""
Configuration System for declgen.

This module provides the configuration interface for rendering. Settings
are read from a single JSON or YAML file, with environment variable
overrides for the values most often changed in tests and CI.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

import yaml

from .constants import DEFAULT_INDENT_SIZE
from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class RenderConfig:
    """Text rendering configuration."""

    indent_size: int = DEFAULT_INDENT_SIZE

    @property
    def indent(self) -> str:
        """Indentation unit written once per nesting level."""
        return " " * self.indent_size


class DeclgenConfig:
    """
    Configuration manager for declgen.

    Configuration lives in one file, ``declgen_config.yaml`` or
    ``declgen_config.json`` next to this module unless an explicit path
    is given. A missing file means defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.render = self._create_render_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent
        yaml_config = config_dir / "declgen_config.yaml"
        json_config = config_dir / "declgen_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        with open(self.config_file, "r") as f:
            if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                config_data = yaml.safe_load(f)
            else:
                config_data = json.load(f)
        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data or {}

    def _create_render_config(self) -> RenderConfig:
        """Create render configuration from loaded data."""
        render_data = self._config_data.get("render", {})

        indent_size = render_data.get("indent_size", DEFAULT_INDENT_SIZE)

        # Check environment variable override
        env_indent = os.getenv("DECLGEN_INDENT_SIZE", "")
        if env_indent.isdigit():
            indent_size = int(env_indent)

        return RenderConfig(indent_size=indent_size)

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {
            "version": "1.0",
            "description": "declgen configuration",
            "render": {
                "indent_size": self.render.indent_size,
            },
        }

        with open(self.config_file, "w") as f:
            if self.config_file.suffix.lower() in [".yaml", ".yml"]:
                yaml.safe_dump(config_data, f, sort_keys=False)
            else:
                json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[DeclgenConfig] = None


def get_config() -> DeclgenConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = DeclgenConfig()
    return _global_config


def set_config(config: Optional[DeclgenConfig]) -> None:
    """Set the global configuration instance (None resets to lazy defaults)."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> DeclgenConfig:
    """Load configuration from a specific file."""
    return DeclgenConfig(config_file)
