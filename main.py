"""Command line entry point: derive this machine's id and resolve its config."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from AppConfig import expand_norm
from config import ConfigError, load_config
from debug_log import configure_logging
from identity import IdHashInput, IdHasher, SystemAndSalt, SystemId
from profiles import ConfigFileRepository, ConfigLifecycleManager, LinePrompt, ProfileError, Resolution
from version import APP_NAME, APP_VERSION

logger = logging.getLogger("machinesync.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

RESOLUTION_MESSAGES = {
    Resolution.LOADED: "Loaded existing configuration.",
    Resolution.CREATED: "Created new configuration.",
    Resolution.DECLINED: "No configuration created.",
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="machinesync",
        description="Derive a stable id for this machine and load or create its configuration",
    )
    parser.add_argument(
        "-s",
        "--salt",
        help="User-provided salt added to system information pre-hash",
    )
    parser.add_argument(
        "-y",
        "--confirm-new",
        action="store_true",
        help="Auto-confirm new configuration profile",
    )
    parser.add_argument(
        "--config-dir",
        help="Directory holding per-machine config files",
    )
    parser.add_argument(
        "--print-id",
        action="store_true",
        help="Print the system id and exit without touching any config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser.parse_args(argv)


def main(
    argv=None,
    *,
    source: Optional[IdHashInput] = None,
    prompt: Optional[LinePrompt] = None,
) -> int:
    """Run one derivation and resolution; return the process exit code.

    ``source`` replaces the live machine descriptor. An injected source
    carries its own salt, so ``--salt`` and MACHINESYNC_SALT are not used.
    ``prompt`` replaces the console confirmation prompt.
    """
    args = parse_args(argv)

    try:
        settings = load_config()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(debug=args.verbose or settings.debug)

    salt = args.salt if args.salt is not None else settings.salt
    config_dir = expand_norm(args.config_dir) if args.config_dir else settings.config_dir

    system_id = SystemId.new_by_hashing(source or SystemAndSalt(salt), IdHasher())
    if args.print_id:
        print(system_id)
        return EXIT_OK

    manager = ConfigLifecycleManager(ConfigFileRepository(config_dir), prompt)
    try:
        config = manager.resolve(system_id, auto_confirm=args.confirm_new)
    except ProfileError as exc:
        logger.debug("resolution failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return EXIT_INTERRUPTED

    print(f"System id: {system_id}")
    print(RESOLUTION_MESSAGES[manager.last_resolution])
    if config is None:
        return EXIT_OK

    print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
