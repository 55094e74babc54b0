"""Configuration loading, schema, and defaults."""

from prevdiff.config.loader import ConfigError, load_config
from prevdiff.config.schema import PrevDiffConfig

__all__ = [
    "ConfigError",
    "PrevDiffConfig",
    "load_config",
]
