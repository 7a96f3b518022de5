from __future__ import annotations

import logging
import sys
from typing import List, Optional

from contentguard.core.command_registry import CommandRegistry, register_all_commands
from contentguard.core.managers.config_manager import config_manager
from contentguard.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    """Initialize logging based on configuration."""
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        config_manager.get_nested("debug.module_levels"),
        config_manager.get_nested("debug.silenced"),
    )


def _apply_overrides(argv: List[str]) -> List[str]:
    """
    Consumes leading '--set KEY=VALUE' (or '--set=KEY=VALUE') options, applies
    them to the configuration and returns the remaining arguments.

    Raises:
        ValueError: If an option has no value or is not a KEY=VALUE pair.
    """
    remaining = list(argv)
    changed: List[str] = []
    while remaining and (remaining[0] == "--set" or remaining[0].startswith("--set=")):
        option = remaining.pop(0)
        if option == "--set":
            if not remaining:
                raise ValueError("Option --set needs a KEY=VALUE argument")
            assignment = remaining.pop(0)
        else:
            assignment = option[len("--set="):]
        key_path, _ = config_manager.apply_override(assignment)
        changed.append(key_path)

    if any(key.split(".")[0] == "debug" for key in changed):
        _setup_logging()
    return remaining


def run_command(argv: List[str], stdin: Optional[str] = None) -> int:
    """
    Dispatches `[--set KEY=VALUE ...] <command> [args...]` to its registered
    handler and returns its exit code.
    """
    register_all_commands()

    try:
        argv = _apply_overrides(argv)
    except ValueError as e:
        print(f"❌ {e}")
        return 2

    if not argv:
        return CommandRegistry["help"]([], stdin) if "help" in CommandRegistry else 2

    name, args = argv[0], argv[1:]
    if name in ("-h", "--help"):
        name = "help"

    handler = CommandRegistry.get(name)
    if handler is None:
        print(f"❌ Unknown command: '{name}'. Run 'contentguard help' for the list of commands.")
        return 2

    try:
        return handler(args, stdin)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logger.error("Command '%s' failed: %s", name, e, exc_info=True)
        print(f"❌ Error: {e}")
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for running contentguard from the command line."""
    _setup_logging()
    return run_command(list(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    sys.exit(main())
