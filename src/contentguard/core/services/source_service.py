# src/contentguard/core/services/source_service.py
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, TypeVar

from tqdm import tqdm

from contentguard.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"

T = TypeVar("T")


def read_sources(paths: List[str], stdin: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    Loads the inputs of a command as (name, text) pairs.

    Args:
        paths (List[str]): File paths; '-' stands for stdin.
        stdin (Optional[str]): Text piped into the command, if already read.

    Returns:
        List[Tuple[str, str]]: One pair per input, in argument order.

    Raises:
        FileNotFoundError: When a path does not exist.
        ValueError: When there is neither a path nor stdin text.
    """
    if not paths:
        paths = ["-"]

    sources: List[Tuple[str, str]] = []
    for raw_path in paths:
        if raw_path == "-":
            if stdin is None and not sys.stdin.isatty():
                stdin = sys.stdin.read()
            if stdin is None:
                raise ValueError("No input: pass FILES or pipe text on stdin.")
            sources.append((STDIN_NAME, stdin))
            continue

        path = Path(raw_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {raw_path}")
        sources.append((raw_path, path.read_text(encoding="utf-8")))
        logger.debug("Loaded %s (%d chars)", raw_path, len(sources[-1][1]))

    return sources


def iter_with_progress(items: List[T], desc: str, unit: str = "file") -> Iterator[T]:
    """Yields the items, with a progress bar on stderr when there are enough of them."""
    min_files = config_manager.get_nested("cli.progress_min_files", 2)
    if len(items) < min_files:
        yield from items
        return
    yield from tqdm(items, desc=desc, unit=unit, leave=False, file=sys.stderr)
