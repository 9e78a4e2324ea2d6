# -*- coding: utf-8 -*-

"""Configuration for focus-gum.

Values are resolved in priority order:
1. Explicit overrides passed to load_config() (CLI options)
2. Environment: FOCUS_GUM_CSV, FOCUS_GUM_GOAL
3. YAML file: FOCUS_GUM_CONFIG or ~/.focus_gum.yaml
4. Built-in defaults
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from focusgum.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path("~/focus_log.csv")
DEFAULT_DAILY_GOAL = 120
DEFAULT_CONFIG_FILE = Path("~/.focus_gum.yaml")

ENV_LOG_PATH = "FOCUS_GUM_CSV"
ENV_GOAL = "FOCUS_GUM_GOAL"
ENV_CONFIG_FILE = "FOCUS_GUM_CONFIG"


@dataclass(frozen=True)
class FocusConfig:
    """Settings shared by the recorder and the aggregator."""

    log_path: Path = DEFAULT_LOG_PATH
    """CSV file holding the session log."""

    daily_goal: int = DEFAULT_DAILY_GOAL
    """Minutes a day needs to count towards the streak."""

    debug: bool = False
    """Debug logging unless overridden by --debug or FOCUS_GUM_DEBUG."""


def _parse_goal(value: Any, source: str) -> int:
    try:
        goal = int(str(value).strip())
    except (TypeError, ValueError):
        raise ConfigError(f"daily_goal from {source} must be a whole number of minutes, got {value!r}")
    if goal < 0:
        raise ConfigError(f"daily_goal from {source} must not be negative, got {goal}")
    return goal


def _load_file(path: Path) -> dict:
    if not path.is_file():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.debug("Loaded config file %s", path)
    return data


def load_config(
    env: Mapping[str, str] | None = None,
    config_file: Path | str | None = None,
    **overrides: Any,
) -> FocusConfig:
    """Build the configuration.

    Args:
        env: Environment mapping (default: os.environ)
        config_file: YAML file to read instead of the default location
        **overrides: log_path / daily_goal / debug values that win over
            everything else; None values are ignored.

    Raises:
        ConfigError: If the goal is not a non-negative integer or the
            config file is unreadable.
    """
    env = os.environ if env is None else env

    if config_file is None:
        config_file = env.get(ENV_CONFIG_FILE) or DEFAULT_CONFIG_FILE
    file_values = _load_file(Path(config_file).expanduser())

    log_path: Any = file_values.get("log_path", DEFAULT_LOG_PATH)
    goal: Any = file_values.get("daily_goal", DEFAULT_DAILY_GOAL)
    goal_source = "config file" if "daily_goal" in file_values else "defaults"
    debug = bool(file_values.get("debug", False))

    if env.get(ENV_LOG_PATH):
        log_path = env[ENV_LOG_PATH]
    if env.get(ENV_GOAL):
        goal, goal_source = env[ENV_GOAL], ENV_GOAL

    if overrides.get("log_path") is not None:
        log_path = overrides["log_path"]
    if overrides.get("daily_goal") is not None:
        goal, goal_source = overrides["daily_goal"], "command line"
    if overrides.get("debug") is not None:
        debug = bool(overrides["debug"])

    return FocusConfig(
        log_path=Path(log_path).expanduser(),
        daily_goal=_parse_goal(goal, goal_source),
        debug=debug,
    )
