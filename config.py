"""Runtime configuration loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Optional

from dotenv import load_dotenv

from AppConfig import default_config_dir, expand_norm
from version import APP_NAME


CONFIG_DIR_ENV: Final = "MACHINESYNC_CONFIG_DIR"
SALT_ENV: Final = "MACHINESYNC_SALT"
DEBUG_ENV: Final = "MACHINESYNC_DEBUG"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class RuntimeConfig:
    """Settings for one MachineSync run."""

    config_dir: str
    salt: str = ""
    debug: bool = False
    app_name: str = APP_NAME


class ConfigError(RuntimeError):
    """Raised when a runtime setting cannot be interpreted."""


def _parse_bool(key: str, raw: Optional[str]) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}")


def load_config(*, dotenv_path: Optional[str] = None) -> RuntimeConfig:
    """Load the runtime configuration from the environment.

    Values from a local `.env` file are read first (without overriding
    variables already set). Every key is optional; unset keys fall back to
    per-user defaults.
    """

    load_dotenv(dotenv_path)

    config_dir = expand_norm(os.getenv(CONFIG_DIR_ENV, "").strip()) or default_config_dir()

    return RuntimeConfig(
        config_dir=config_dir,
        salt=os.getenv(SALT_ENV, ""),
        debug=_parse_bool(DEBUG_ENV, os.getenv(DEBUG_ENV)),
        app_name=os.getenv("APP_NAME", APP_NAME),
    )


__all__ = ["RuntimeConfig", "ConfigError", "load_config"]
