# AppConfig.py
# Safe per-user locations for the per-machine config files, with portable mode support.

from __future__ import annotations
import json
import os
import sys
import platform
import tempfile
from typing import Any

from version import APP_NAME

CONFIGS_SUBDIR = "system-configs"
PORTABLE_ENV = "MACHINESYNC_PORTABLE"
PORTABLE_FLAG = "portable.flag"

# ----------------------------
# Portable mode detection
# ----------------------------
def _is_portable() -> bool:
    """Portable if MACHINESYNC_PORTABLE=1 or a 'portable.flag' file sits next to the executable/script."""
    if os.environ.get(PORTABLE_ENV, "").strip() == "1":
        return True
    return os.path.isfile(os.path.join(_program_base(), PORTABLE_FLAG))

def _program_base() -> str:
    """Folder where the executable or the main script resides."""
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.abspath(sys.argv[0] if sys.argv and sys.argv[0] else __file__))

# ----------------------------
# Paths & filesystem helpers
# ----------------------------
def user_data_base() -> str:
    """User-writable base for data (AppData/Library/.config) unless portable."""
    if _is_portable():
        return os.path.join(_program_base(), "data")

    system = platform.system().lower()
    if system == "windows":
        base = os.environ.get("APPDATA") or os.path.expanduser(r"~\AppData\Roaming")
        return os.path.join(base, APP_NAME)
    elif system == "darwin":  # macOS
        return os.path.join(os.path.expanduser("~/Library/Application Support"), APP_NAME)
    else:  # linux/others
        return os.path.join(os.path.expanduser("~/.config"), APP_NAME)

def default_config_dir() -> str:
    """Directory holding one <system id>.json per machine. Not created here."""
    return os.path.join(user_data_base(), CONFIGS_SUBDIR)

def expand_norm(path: str) -> str:
    if not path:
        return ""
    return os.path.normpath(os.path.expanduser(path))

def atomic_write_json(path: str, data: Any):
    tmp_dir = os.path.dirname(path) or "."
    fd, tmp = tempfile.mkstemp(prefix=".cfg_", dir=tmp_dir, text=True)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp, path)
    except BaseException:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise
