# src/command_copy/config.py

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SELECTOR = "fzf"


@dataclass(frozen=True)
class CommandCopyConfig:
    """Settings for one command-copy run.

    Immutable. Passed explicitly to every component that needs it.
    """

    path: str
    strategy: str = "substitution"  # unknown values fall back to substitution
    selector: str = DEFAULT_SELECTOR
    selector_args: str = ""
    timeout: float | None = None  # selector only; None waits forever
    verbose: bool = False


class ConfigFile(BaseModel):
    """Optional per-user defaults, read from YAML."""

    strategy: str | None = None
    selector: str | None = None
    selector_args: str | None = None
    timeout: float | None = None

    model_config = ConfigDict(extra="forbid")


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "command-copy" / "config.yaml"


def load_config_file(path: str | Path | None = None) -> ConfigFile:
    """Load user defaults.

    A missing file at the default location is not an error; a missing file
    that was asked for explicitly is.
    """
    explicit = path is not None
    file_path = Path(path) if explicit else default_config_path()

    if not file_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {file_path}")
        logger.debug("No config file at %s, using defaults", file_path)
        return ConfigFile()

    logger.debug("Loading config file: %s", file_path)
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {file_path}: {e}") from e

    if data is None:
        return ConfigFile()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {file_path} must contain a mapping")

    try:
        return ConfigFile(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {file_path}: {e}") from e
