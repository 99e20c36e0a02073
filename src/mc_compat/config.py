"""
Compatibility layer configuration management.

This module handles loading and accessing shim configuration from multiple
sources with a clear priority order:

    1. Environment variables (highest priority) - for embedding hosts
    2. Config file (config/compat.ini) - for static deployments
    3. Built-in defaults (lowest priority) - vanilla engine values

Configuration is loaded once at module import time and cached. The CompatConfig
dataclass provides typed access to all settings.

Usage:
    from mc_compat.config import config

    # Access settings
    print(config.identity.namespace)
    print(config.palette.absolute_ramp_path)

Environment Variable Mapping:
    MC_COMPAT_NAMESPACE            -> identity.namespace
    MC_COMPAT_TRANSLATION_TEMPLATE -> identity.translation_template
    MC_COMPAT_RAMP_PATH            -> palette.ramp_path
    MC_COMPAT_DEFAULT_DYE          -> palette.default_dye
    MC_COMPAT_LOG_LEVEL            -> logging.level
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Package directory (contains data/)
PACKAGE_ROOT = Path(__file__).parent

# Project root directory (contains src/, config/)
PROJECT_ROOT = PACKAGE_ROOT.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "compat.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "compat.example.ini"

# Dye ramp shipped with the package
DEFAULT_RAMP_PATH = PACKAGE_ROOT / "data" / "dye_ramp.yaml"


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class IdentitySettings:
    """Variant identifier and translation key settings."""

    namespace: str = "minecraft"
    translation_template: str = "tile.doublePlant.{key}.name"


@dataclass
class PaletteSettings:
    """Dye palette configuration."""

    ramp_path: str = ""  # empty = packaged dye_ramp.yaml
    default_dye: str = "white"

    @property
    def absolute_ramp_path(self) -> Path:
        """Get absolute path to the dye ramp file."""
        if not self.ramp_path:
            return DEFAULT_RAMP_PATH
        p = Path(self.ramp_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["simple", "detailed"] = "detailed"


@dataclass
class CompatConfig:
    """
    Complete compatibility layer configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton.
    """

    identity: IdentitySettings = field(default_factory=IdentitySettings)
    palette: PaletteSettings = field(default_factory=PaletteSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _load_from_ini(parser: configparser.ConfigParser, cfg: CompatConfig) -> None:
    """Load configuration from parsed INI file into CompatConfig."""
    # Identity section
    if parser.has_section("identity"):
        if parser.has_option("identity", "namespace"):
            cfg.identity.namespace = parser.get("identity", "namespace").strip()
        if parser.has_option("identity", "translation_template"):
            cfg.identity.translation_template = parser.get(
                "identity", "translation_template"
            ).strip()

    # Palette section
    if parser.has_section("palette"):
        if parser.has_option("palette", "ramp_path"):
            cfg.palette.ramp_path = parser.get("palette", "ramp_path").strip()
        if parser.has_option("palette", "default_dye"):
            cfg.palette.default_dye = parser.get("palette", "default_dye").strip().lower()

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in ("simple", "detailed"):
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: CompatConfig) -> None:
    """Apply environment variable overrides to configuration."""
    # Identity settings
    if env_namespace := os.getenv("MC_COMPAT_NAMESPACE"):
        cfg.identity.namespace = env_namespace
    if env_template := os.getenv("MC_COMPAT_TRANSLATION_TEMPLATE"):
        cfg.identity.translation_template = env_template

    # Palette settings
    if env_ramp := os.getenv("MC_COMPAT_RAMP_PATH"):
        cfg.palette.ramp_path = env_ramp
    if env_dye := os.getenv("MC_COMPAT_DEFAULT_DYE"):
        cfg.palette.default_dye = env_dye.lower()

    # Logging settings
    if env_log := os.getenv("MC_COMPAT_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()


def load_config() -> CompatConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/compat.ini
        3. config/compat.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        CompatConfig: Fully populated configuration object.
    """
    cfg = CompatConfig()

    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "CompatConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton and drops the cached
    default dye ramp so the next lookup reads the reloaded ``ramp_path``.

    Returns:
        CompatConfig: The newly loaded configuration.
    """
    from mc_compat.color.dye import reset_default_dye_ramp

    global config
    config = load_config()
    reset_default_dye_ramp()
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "namespace": config.identity.namespace,
        "ramp_path": str(config.palette.absolute_ramp_path),
        "default_dye": config.palette.default_dye,
    }


# =============================================================================
# TEST HELPERS
# =============================================================================


class use_dye_ramp:
    """
    Context manager for pointing the palette at a different ramp file.

    Clears the cached default ramp on entry and exit so that
    ``default_dye_ramp()`` picks up the override.

    Usage:
        from mc_compat.config import use_dye_ramp

        def test_something(tmp_path):
            ramp_path = tmp_path / "ramp.yaml"
            with use_dye_ramp(ramp_path):
                dye_from_color(Color.of_rgb(153, 25, 25))

    Args:
        ramp_path: Path to the dye ramp YAML file
    """

    def __init__(self, ramp_path: Path | str):
        self.ramp_path = Path(ramp_path)
        self.original_path: str | None = None

    def __enter__(self) -> Path:
        """Point the palette at the override ramp."""
        from mc_compat.color.dye import reset_default_dye_ramp

        self.original_path = config.palette.ramp_path
        config.palette.ramp_path = str(self.ramp_path)
        reset_default_dye_ramp()
        return self.ramp_path

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Restore original ramp path."""
        from mc_compat.color.dye import reset_default_dye_ramp

        if self.original_path is not None:
            config.palette.ramp_path = self.original_path
        reset_default_dye_ramp()
        return None
