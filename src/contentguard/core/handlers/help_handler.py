# src/contentguard/core/handlers/help_handler.py
from typing import List, Optional

from contentguard.core.utils.helptext import get_help_text


def handle_help(_args: List[str], _stdin: Optional[str] = None) -> int:
    print(get_help_text())
    return 0
