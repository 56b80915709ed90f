import logging
import os

from version import APP_NAME

# Determine log file location in the user's home directory
LOG_FILE = os.path.join(os.path.expanduser("~"), f"{APP_NAME}_debug.log")

DEBUG_FORMAT = "[%(asctime)s] %(levelname)s:%(name)s:%(message)s"
DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_logging(debug: bool = False, log_file: str | None = LOG_FILE) -> None:
    """Install root handlers. Verbose output and the log file only in debug mode."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if debug and log_file:
        try:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError:
            # Ensure logging setup never blocks a run
            pass

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=DEBUG_FORMAT if debug else DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
