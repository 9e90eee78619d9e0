"""Configuration loader for kinematic model numerics."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import jax
import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "KINEMATIC_SSM_CONFIG"
CONFIG_FILENAME = "kinematic_ssm.yaml"


@dataclass(frozen=True)
class NumericsConfig:
    """Floating-point settings pushed into jax.config."""

    # T**k / k! underflows quickly in float32 for high orders
    enable_x64: bool = True


@dataclass(frozen=True)
class KinematicsConfig:
    """Full library configuration."""

    numerics: NumericsConfig = NumericsConfig()


def _find_config_path() -> Path | None:
    """Locate the config file.

    The environment variable wins; otherwise walk up from this file looking
    for kinematic_ssm.yaml. Returns None when neither is present.
    """
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path

    current = Path(__file__).resolve()
    for parent in current.parents:
        config_path = parent / CONFIG_FILENAME
        if config_path.exists():
            return config_path
    return None


def parse_config(raw: dict | None) -> KinematicsConfig:
    """Build a KinematicsConfig from a parsed YAML mapping.

    Missing sections fall back to their defaults; unknown keys raise
    TypeError from the dataclass constructor.
    """
    raw = raw or {}
    numerics_raw = raw.get("numerics", {})
    numerics_config = NumericsConfig(**numerics_raw) if numerics_raw else NumericsConfig()
    return KinematicsConfig(numerics=numerics_config)


@lru_cache(maxsize=1)
def load_config() -> KinematicsConfig:
    """Load and parse the configuration.

    Returns cached config on subsequent calls.
    """
    config_path = _find_config_path()
    if config_path is None:
        logger.debug("No %s found, using default configuration", CONFIG_FILENAME)
        return KinematicsConfig()

    with config_path.open() as f:
        raw = yaml.safe_load(f)

    logger.debug("Loaded configuration from %s", config_path)
    return parse_config(raw)


def get_config() -> KinematicsConfig:
    """Get the library configuration."""
    return load_config()


def apply_config(config: KinematicsConfig | None = None) -> KinematicsConfig:
    """Push numerics settings into jax.config.

    Args:
        config: Configuration to apply, or None to use get_config()

    Returns:
        The configuration that was applied
    """
    config = config or get_config()
    jax.config.update("jax_enable_x64", config.numerics.enable_x64)
    logger.debug("jax_enable_x64=%s", config.numerics.enable_x64)
    return config
