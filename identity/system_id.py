"""
System identifier derivation.

Hashes a machine descriptor into a stable SHA-256 hex digest. The digest is
both the system id and the stem of the machine's config file name.
"""

from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .source import IdHashInput, StaticDescriptor

logger = logging.getLogger("machinesync.identity")

# Bump whenever the descriptor order, the number encoding (decimal text) or
# the digest changes: every previously generated id stops matching.
ID_SCHEME_VERSION = 1
ID_ALGORITHM = "sha256"

_SYSTEM_ID_RE = re.compile(r"^[0-9a-f]{64}$")


def is_valid_system_id(value: str) -> bool:
    return bool(_SYSTEM_ID_RE.match(value or ""))


class IdHasher:
    """Resettable hashing accumulator shared across derivations.

    The digest is fixed by ID_SCHEME_VERSION, so it is not configurable.
    """

    def __init__(self) -> None:
        self._digest = hashlib.new(ID_ALGORITHM)

    def reset(self) -> None:
        self._digest = hashlib.new(ID_ALGORITHM)

    def update(self, data: bytes) -> None:
        self._digest.update(data)

    def hexdigest(self) -> str:
        return self._digest.hexdigest()


@dataclass(frozen=True)
class SystemId:
    id: str

    def __post_init__(self) -> None:
        if not is_valid_system_id(self.id):
            raise ValueError(f"Not a valid system id: {self.id!r}")

    def __str__(self) -> str:
        return self.id

    @classmethod
    def new_by_hashing(cls, id_info: IdHashInput, hasher: IdHasher) -> "SystemId":
        """
        Derive the id for the descriptor produced by ``id_info``.

        The hasher is reset first so a reused accumulator never carries
        bytes from a previous derivation. Each field is fed as UTF-8 in
        descriptor order, with no separators.
        """
        hasher.reset()
        for item in id_info.get_info():
            hasher.update(item.encode("utf-8"))

        system_id = cls(hasher.hexdigest())
        logger.info("constructed system id %s", system_id)
        return system_id


def derive(descriptor: Sequence[str], hasher: Optional[IdHasher] = None) -> SystemId:
    """Hash an already-collected descriptor."""
    return SystemId.new_by_hashing(StaticDescriptor(descriptor), hasher or IdHasher())
