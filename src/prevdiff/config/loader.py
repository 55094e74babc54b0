"""Load and merge configuration from .prevdiff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from prevdiff.config.schema import (
    LOG_LEVELS,
    OUTPUT_FORMATS,
    GitConfig,
    LogConfig,
    OutputConfig,
    PrevDiffConfig,
)

CONFIG_FILENAME = ".prevdiff.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: PrevDiffConfig) -> None:
    """Reject values the rest of the tool cannot act on."""
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format: {cfg.output.format!r} (expected one of {', '.join(OUTPUT_FORMATS)})"
        )
    if cfg.log.level not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level: {cfg.log.level!r} (expected one of {', '.join(LOG_LEVELS)})"
        )


def _merge_env_overrides(cfg: PrevDiffConfig) -> None:
    """Apply PREVDIFF_* environment variable overrides."""
    if val := os.environ.get("PREVDIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("PREVDIFF_GIT_BINARY"):
        cfg.git.binary = val
    if val := os.environ.get("PREVDIFF_GIT_TIMEOUT"):
        try:
            cfg.git.timeout = int(val)
        except ValueError:
            pass
    if val := os.environ.get("PREVDIFF_LOG_LEVEL"):
        if val.lower() in LOG_LEVELS:
            cfg.log.level = val.lower()  # type: ignore[assignment]


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> PrevDiffConfig:
    """Load, validate, and return a PrevDiffConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = PrevDiffConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = PrevDiffConfig(
            version=raw.get("version", "1.0"),
            git=_build_section(raw, GitConfig, "git"),
            output=_build_section(raw, OutputConfig, "output"),
            log=_build_section(raw, LogConfig, "log"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
