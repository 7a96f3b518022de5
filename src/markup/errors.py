# src/markup/errors.py
from typing import Iterable


class MarkupStructureError(ValueError):
    """
    Raised when markup is not well-formed (mismatched, unexpected or unclosed tags).

    The message always starts with PREFIX so callers can tell this expected
    failure apart from programming errors. `tags` holds the offending tag names.
    """
    PREFIX = "Pretty printer error"

    def __init__(self, message: str, tags: Iterable[str] = ()):
        self.detail = message
        self.tags = tuple(tags)
        super().__init__(f"{self.PREFIX}: {message}")
