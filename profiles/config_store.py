"""
Filesystem-backed storage of per-machine configuration records.

One JSON file per system id: ``<base_dir>/<system id>.json``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from AppConfig import atomic_write_json
from identity import SystemId

logger = logging.getLogger("machinesync.profiles")

CONFIG_EXTENSION = ".json"


class ProfileError(Exception):
    """Base exception for configuration profile failures."""


class ConfigFormatError(ProfileError):
    """Raised when a stored record exists but cannot be decoded."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigStorageError(ProfileError, OSError):
    """Raised when a record cannot be read or written."""

    def __init__(self, message: str, *, path: str, operation: str) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation


@dataclass
class SyncConfig:
    sync_directory: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "SyncConfig":
        """Build a record from decoded JSON. Unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ValueError("Config must be a JSON object.")
        values = {}
        for field in fields(cls):
            if field.name not in data:
                raise ValueError(f"missing field '{field.name}'")
            value = data[field.name]
            if not isinstance(value, str):
                raise ValueError(f"field '{field.name}' must be a string")
            values[field.name] = value
        return cls(**values)


class ConfigFileRepository:
    """Maps system ids to JSON config files under a single directory."""

    def __init__(self, base_dir: str) -> None:
        self.base_dir = base_dir

    def path_for(self, system_id: SystemId) -> str:
        return os.path.join(self.base_dir, f"{system_id.id}{CONFIG_EXTENSION}")

    def exists(self, system_id: SystemId) -> bool:
        return os.path.isfile(self.path_for(system_id))

    def load(self, system_id: SystemId) -> SyncConfig:
        path = self.path_for(system_id)
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as exc:
            raise ConfigStorageError(
                f"Could not read config file {path}: {exc}", path=path, operation="read"
            ) from exc

        try:
            return SyncConfig.from_dict(json.loads(raw.decode("utf-8")))
        except ValueError as exc:
            # UnicodeDecodeError and json.JSONDecodeError are ValueErrors too
            raise ConfigFormatError(f"Malformed config file {path}: {exc}", path=path) from exc

    def create(self, system_id: SystemId, record: SyncConfig) -> str:
        """Write a new record. Never replaces an existing file."""
        path = self.path_for(system_id)
        if os.path.exists(path):
            raise ConfigStorageError(
                f"Refusing to overwrite existing config file {path}", path=path, operation="write"
            )
        try:
            os.makedirs(self.base_dir, exist_ok=True)
            atomic_write_json(path, record.to_dict())
        except OSError as exc:
            raise ConfigStorageError(
                f"Could not write config file {path}: {exc}", path=path, operation="write"
            ) from exc
        return path
