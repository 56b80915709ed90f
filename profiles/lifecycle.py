"""Load-or-create policy for the per-machine configuration."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from identity import SystemId

from .config_store import ConfigFileRepository, SyncConfig
from .prompt import CONFIRM_PROMPT, LinePrompt, StreamPrompt

logger = logging.getLogger("machinesync.profiles")


class Resolution(Enum):
    LOADED = "loaded"
    CREATED = "created"
    DECLINED = "declined"


class ConfigLifecycleManager:
    """Decide whether a machine's config is loaded, created or declined.

    ``resolve`` writes at most one file per call, and only when a new
    default record is created. Existing files are never rewritten.
    """

    def __init__(self, repository: ConfigFileRepository, prompt: Optional[LinePrompt] = None) -> None:
        self.repository = repository
        self.prompt = prompt or StreamPrompt()
        self.last_resolution: Optional[Resolution] = None

    def resolve(self, system_id: SystemId, auto_confirm: bool = False) -> Optional[SyncConfig]:
        """Return the machine's config, or None when the user declines creating one."""
        if self.repository.exists(system_id):
            config = self.repository.load(system_id)
            logger.info("loaded config file at %s", self.repository.path_for(system_id))
            self.last_resolution = Resolution.LOADED
            return config

        if not auto_confirm and not self._confirm_creation():
            logger.info("user declined creating a config for system id %s", system_id)
            self.last_resolution = Resolution.DECLINED
            return None

        return self._create_default(system_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _confirm_creation(self) -> bool:
        while True:
            answer = self.prompt.ask(CONFIRM_PROMPT).strip()
            if answer == "y":
                return True
            if answer == "n":
                return False
            logger.debug("ignoring confirmation answer %r", answer)

    def _create_default(self, system_id: SystemId) -> SyncConfig:
        config = SyncConfig()
        path = self.repository.create(system_id, config)
        logger.info("created new config file at %s", path)
        self.last_resolution = Resolution.CREATED
        return config
