"""Application name and version constants."""

APP_NAME = "MachineSync"
APP_VERSION = "0.1.0"

__all__ = ["APP_NAME", "APP_VERSION"]
