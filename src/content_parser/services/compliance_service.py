from __future__ import annotations

import math
import re
from typing import List, Pattern, Tuple

from content_parser.model import BrandGuidelines, ScoringWeights

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"[.!?]+")


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for positive values (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


class ComplianceService:
    """
    The individual brand-compliance checks behind the content score.

    Stateless: it only reads the immutable guidelines and weights it was built
    with, so one instance can be shared between callers.
    """

    def __init__(self, guidelines: BrandGuidelines, weights: ScoringWeights):
        self.guidelines = guidelines
        self.weights = weights
        self._placeholder_patterns: Tuple[Pattern[str], ...] = tuple(
            re.compile(p, re.IGNORECASE) for p in guidelines.placeholder_patterns
        )

    # -------- Vocabulary checks --------

    def find_forbidden_terms(self, content: str) -> List[str]:
        """Returns every configured forbidden term occurring in the content (case-insensitive)."""
        lowered = content.lower()
        return [term for term in self.guidelines.forbidden_terms if term.lower() in lowered]

    def find_placeholders(self, content: str) -> List[str]:
        """
        Returns the distinct placeholder strings found, in order of first detection.
        Distinctness is by exact matched text ('TBD' and 'tbd' are two findings).
        """
        found: List[str] = []
        for pattern in self._placeholder_patterns:
            for match in pattern.finditer(content):
                text = match.group(0)
                if text and text not in found:
                    found.append(text)
        return found

    # -------- Density scores (0-100) --------

    @staticmethod
    def _word_count(content: str) -> int:
        # Same splitting as the scoring policy was tuned on: leading/trailing
        # whitespace yields empty items that still count.
        return len(_WHITESPACE.split(content.lower()))

    def _density(self, hits: int, content: str, words_per_unit: float) -> int:
        units = max(self._word_count(content) / words_per_unit, 1)
        return round_half_up(min(100.0, (hits / units) * 100))

    def assess_tone(self, content: str) -> int:
        """Counts tone keyword hits over all voice categories, per `tone_words_per_unit` words."""
        lowered = content.lower()
        hits = 0
        for _, keywords in self.guidelines.tone_keywords.categories():
            hits += sum(1 for keyword in keywords if keyword.lower() in lowered)
        return self._density(hits, content, self.weights.tone_words_per_unit)

    def assess_medical_terminology(self, content: str) -> int:
        """Counts medical vocabulary hits per `medical_words_per_unit` words."""
        lowered = content.lower()
        hits = sum(1 for term in self.guidelines.medical_terms if term.lower() in lowered)
        return self._density(hits, content, self.weights.medical_words_per_unit)

    # -------- Readability --------

    def count_long_sentences(self, content: str) -> int:
        """Counts sentences (split on . ! ?) longer than `max_sentence_words` words."""
        count = 0
        for sentence in _SENTENCE_BREAK.split(content):
            stripped = sentence.strip()
            if stripped and len(_WHITESPACE.split(stripped)) > self.weights.max_sentence_words:
                count += 1
        return count
