"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]
LogLevel = Literal["debug", "info", "warning", "error"]

OUTPUT_FORMATS = ("terminal", "json")
LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class GitConfig:
    binary: str = "git"
    timeout: int = 30  # seconds per git invocation


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_paths: bool = True  # include each side's file path in terminal output


@dataclass
class LogConfig:
    level: LogLevel = "warning"


@dataclass
class PrevDiffConfig:
    version: str = "1.0"
    git: GitConfig = field(default_factory=GitConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log: LogConfig = field(default_factory=LogConfig)
