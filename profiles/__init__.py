"""Per-machine configuration profiles for MachineSync."""
from .config_store import (
    ConfigFileRepository,
    ConfigFormatError,
    ConfigStorageError,
    ProfileError,
    SyncConfig,
)
from .lifecycle import ConfigLifecycleManager, Resolution
from .prompt import CONFIRM_PROMPT, LinePrompt, PromptClosedError, StreamPrompt

__all__ = [
    "CONFIRM_PROMPT",
    "ConfigFileRepository",
    "ConfigFormatError",
    "ConfigLifecycleManager",
    "ConfigStorageError",
    "LinePrompt",
    "ProfileError",
    "PromptClosedError",
    "Resolution",
    "StreamPrompt",
    "SyncConfig",
]
