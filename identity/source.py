"""Machine descriptor sources.

A descriptor is the ordered list of strings hashed into a system id:

    [salt, os name, host name, total memory (bytes), physical core count]

The order is part of the id. Numbers are rendered as decimal text.
"""

from __future__ import annotations

import logging
import platform
from typing import Callable, List, Optional, Protocol, Sequence

import psutil

logger = logging.getLogger("machinesync.identity")


class IdHashInput(Protocol):
    """Anything that can describe a machine as an ordered list of strings."""

    def get_info(self) -> List[str]:
        ...


def _read_text(label: str, reader: Callable[[], Optional[str]]) -> str:
    try:
        return reader() or ""
    except OSError as exc:
        logger.debug("%s unavailable: %s", label, exc)
        return ""


def _read_count(label: str, reader: Callable[[], Optional[int]]) -> str:
    try:
        value = reader()
    except (psutil.Error, OSError, RuntimeError) as exc:
        logger.debug("%s unavailable: %s", label, exc)
        value = None
    return str(int(value or 0))


class SystemAndSalt:
    """Live machine metrics combined with a caller-provided salt."""

    def __init__(self, salt: str = "") -> None:
        self.salt = salt or ""

    def get_info(self) -> List[str]:
        # psutil reads memory and cores from the OS on every call, so the
        # values are always current.
        sys_name = _read_text("os name", platform.system)
        sys_host_name = _read_text("host name", platform.node)
        sys_total_memory = _read_count("total memory", lambda: psutil.virtual_memory().total)
        sys_core_count = _read_count("physical core count", lambda: psutil.cpu_count(logical=False))

        logger.debug(
            "descriptor salt=%r name=%r host_name=%r total_memory=%r core_count=%r",
            self.salt,
            sys_name,
            sys_host_name,
            sys_total_memory,
            sys_core_count,
        )

        return [
            self.salt,
            sys_name,
            sys_host_name,
            sys_total_memory,
            sys_core_count,
        ]


class StaticDescriptor:
    """Fixed descriptor values, e.g. synthetic machines in tests."""

    def __init__(self, values: Sequence[str]) -> None:
        self._values = [str(value) for value in values]

    def get_info(self) -> List[str]:
        return list(self._values)


def collect(salt: str = "") -> List[str]:
    """Describe the current machine, salted."""
    return SystemAndSalt(salt).get_info()
