# src/content_parser/model.py
import re
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Markdown-style heading line: "# Title", "## Subtitle", ...
HEADING_PATTERN = re.compile(r"^#+\s+(.+)$", re.MULTILINE)


class ToneKeywords(BaseModel):
    """Keyword sets per brand voice category."""
    model_config = ConfigDict(frozen=True)

    calm: Tuple[str, ...] = ()
    medical: Tuple[str, ...] = ()
    reassuring: Tuple[str, ...] = ()
    precise: Tuple[str, ...] = ()

    def categories(self) -> List[Tuple[str, Tuple[str, ...]]]:
        return [
            ("calm", self.calm),
            ("medical", self.medical),
            ("reassuring", self.reassuring),
            ("precise", self.precise),
        ]


class BrandGuidelines(BaseModel):
    """
    Immutable vocabulary policy used to score prose.

    A validator is constructed with one instance and reuses it for every call.
    """
    model_config = ConfigDict(frozen=True)

    voice_attributes: Tuple[str, ...] = ()
    approved_terms: Tuple[str, ...] = ()
    forbidden_terms: Tuple[str, ...] = ()
    tone_keywords: ToneKeywords = Field(default_factory=ToneKeywords)
    medical_terms: Tuple[str, ...] = ()
    key_phrases: Tuple[str, ...] = ()
    placeholder_patterns: Tuple[str, ...] = ()  # regex sources, matched case-insensitively

    def with_overrides(self, **overrides: Any) -> "BrandGuidelines":
        """Returns a validated copy with the given fields replaced."""
        if not overrides:
            return self
        return BrandGuidelines(**{**self.model_dump(), **overrides})


class ScoringWeights(BaseModel):
    """
    Tuning constants of the content score. These are policy, not algorithm:
    every penalty and threshold can be replaced without touching the checks.
    """
    model_config = ConfigDict(frozen=True)

    forbidden_term_penalty: float = 15
    placeholder_penalty: float = 20

    tone_threshold: float = 60
    tone_penalty_factor: float = 0.5
    tone_words_per_unit: float = 50

    medical_threshold: float = 40
    medical_penalty_factor: float = 0.3
    medical_words_per_unit: float = 100
    medical_min_length: int = 100  # chars; shorter content skips the medical check

    max_sentence_words: int = 25
    long_sentence_penalty: float = 2

    empty_content_penalty: float = 60

    suggestion_threshold: float = 80
    suggestion_tone_threshold: float = 70
    suggestion_medical_threshold: float = 50


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)

    @model_validator(mode="after")
    def errors_imply_invalid(self) -> "ValidationResult":
        if self.errors and self.is_valid:
            raise ValueError("A result with errors cannot be valid")
        return self


class ParsedContent(BaseModel):
    """Entities extracted from a piece of content, plus its validation."""
    headings: List[str] = Field(default_factory=list)
    paragraphs: List[str] = Field(default_factory=list)
    medical_terms: List[str] = Field(default_factory=list)
    key_phrases: List[str] = Field(default_factory=list)
    validation: ValidationResult

    def to_text(self) -> str:
        """
        Renders the canonical text form: the paragraphs joined by blank lines,
        preceded by any heading none of them carries. Medical terms and key
        phrases the rendered body does not contain are appended as one sentence
        each, so parsing the result again yields the same headings, terms and
        phrases at the same length as the parsed content.
        """
        carried = {m.group(1) for p in self.paragraphs for m in HEADING_PATTERN.finditer(p)}
        parts = [f"# {heading}" for heading in self.headings if heading not in carried]
        parts.extend(self.paragraphs)

        rendered = "\n\n".join(parts).lower()
        missing_terms = [term for term in self.medical_terms if term.lower() not in rendered]
        missing_phrases = [phrase for phrase in self.key_phrases if phrase.lower() not in rendered]
        if missing_terms:
            parts.append(f"Terminology used: {', '.join(missing_terms)}.")
        if missing_phrases:
            parts.append(f"Key concepts: {', '.join(missing_phrases)}.")
        return "\n\n".join(parts)
