from __future__ import annotations

import re
from typing import List

from content_parser.model import HEADING_PATTERN, BrandGuidelines

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


class ContentParseService:
    """
    Extraction of structural entities from Markdown-style content.
    Note: This is a stateless service; validation is handled by the ContentValidator.
    """

    def __init__(self, content: str, guidelines: BrandGuidelines):
        self.content = content or ""
        self.lowered = self.content.lower()
        self.guidelines = guidelines

    def extract_headings(self) -> List[str]:
        """Retrieves '# Heading' lines in document order, without the leading hashes."""
        return [m.group(1) for m in HEADING_PATTERN.finditer(self.content)]

    def extract_paragraphs(self) -> List[str]:
        """Splits on blank lines; whitespace-only blocks are dropped."""
        return [p for p in _PARAGRAPH_BREAK.split(self.content) if p.strip()]

    def extract_medical_terms(self) -> List[str]:
        """Configured medical vocabulary present in the content (case-insensitive)."""
        return [term for term in self.guidelines.medical_terms if term.lower() in self.lowered]

    def extract_key_phrases(self) -> List[str]:
        """Fixed key medical phrases present in the content."""
        return [phrase for phrase in self.guidelines.key_phrases if phrase.lower() in self.lowered]
