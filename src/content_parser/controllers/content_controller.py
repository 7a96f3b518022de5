from __future__ import annotations

import logging
from typing import List, Optional

from content_parser.guidelines import DEFAULT_GUIDELINES, DEFAULT_WEIGHTS
from content_parser.model import BrandGuidelines, ParsedContent, ScoringWeights, ValidationResult
from content_parser.services.compliance_service import ComplianceService, round_half_up
from content_parser.services.content_parse_service import ContentParseService

logger = logging.getLogger(__name__)


class ContentValidator:
    """
    Scores copy against the brand guidelines and extracts its structured entities.

    The guidelines and weights are fixed at construction and never mutated,
    so a single validator can serve any number of callers.
    """

    def __init__(
            self,
            guidelines: Optional[BrandGuidelines] = None,
            weights: Optional[ScoringWeights] = None
    ):
        self.guidelines = guidelines or DEFAULT_GUIDELINES
        self.weights = weights or DEFAULT_WEIGHTS
        self.compliance = ComplianceService(self.guidelines, self.weights)

    def validate_content(self, content: str) -> ValidationResult:
        """
        Validates content against the brand guidelines.

        Only forbidden terms and placeholders are errors; tone, terminology,
        sentence length and empty content are warnings that lower the score.

        Args:
            content (str): The copy to check. Never raises for any string.

        Returns:
            ValidationResult: Validity, findings and a 0-100 compliance score.
        """
        content = content or ""
        w = self.weights
        errors: List[str] = []
        warnings: List[str] = []
        score = 100.0

        # --- Errors ---
        forbidden = self.compliance.find_forbidden_terms(content)
        if forbidden:
            errors.append(f"Forbidden startup hype terms found: {', '.join(forbidden)}")
            score -= len(forbidden) * w.forbidden_term_penalty

        placeholders = self.compliance.find_placeholders(content)
        if placeholders:
            errors.append(f"Placeholder content found: {', '.join(placeholders)}")
            score -= len(placeholders) * w.placeholder_penalty

        # --- Warnings ---
        if not content.strip():
            warnings.append("Content is empty. Add meaningful copy before publishing.")
            score -= w.empty_content_penalty

        tone_score = self.compliance.assess_tone(content)
        if tone_score < w.tone_threshold:
            warnings.append(
                f"Tone compliance below threshold ({tone_score}%). "
                f"Consider adding more medical, calm, reassuring, or precise language."
            )
            score -= (w.tone_threshold - tone_score) * w.tone_penalty_factor

        if len(content) > w.medical_min_length:
            medical_score = self.compliance.assess_medical_terminology(content)
            if medical_score < w.medical_threshold:
                warnings.append(
                    f"Low medical terminology usage ({medical_score}%). "
                    f"Consider adding relevant medical terms for credibility."
                )
                score -= (w.medical_threshold - medical_score) * w.medical_penalty_factor

        long_sentences = self.compliance.count_long_sentences(content)
        if long_sentences:
            warnings.append(
                f"{long_sentences} sentences exceed {w.max_sentence_words} words. "
                f"Consider breaking into shorter, clearer sentences."
            )
            score -= long_sentences * w.long_sentence_penalty

        final_score = max(0, min(100, round_half_up(score)))
        logger.debug(
            "Content scored %d (%d errors, %d warnings, %d chars).",
            final_score, len(errors), len(warnings), len(content)
        )
        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            score=final_score
        )

    def suggest_improvements(self, content: str) -> List[str]:
        """
        Returns actionable suggestions. Content scoring below the suggestion
        threshold always receives at least the three general suggestions.
        """
        content = content or ""
        w = self.weights
        suggestions: List[str] = []

        if self.validate_content(content).score < w.suggestion_threshold:
            suggestions.append("Consider adding more medical terminology to increase credibility")
            suggestions.append(
                'Use more precise, measurable language (e.g., "94% accuracy" instead of "highly accurate")'
            )
            suggestions.append("Include calm, reassuring language to reduce patient anxiety")

        if self.compliance.assess_tone(content) < w.suggestion_tone_threshold:
            voice = ", ".join(self.guidelines.voice_attributes) or "the brand voice"
            suggestions.append(f"Add more brand voice keywords: {voice}")

        if self.compliance.assess_medical_terminology(content) < w.suggestion_medical_threshold:
            examples = ", ".join(self.guidelines.medical_terms[:4])
            suggestions.append(f"Include relevant medical terms: {examples}, etc.")

        return suggestions

    def parse_content(self, content: str) -> ParsedContent:
        """
        Extracts headings, paragraphs, medical terms and key phrases, and embeds
        the full validation result.
        """
        content = content or ""
        service = ContentParseService(content, self.guidelines)
        return ParsedContent(
            headings=service.extract_headings(),
            paragraphs=service.extract_paragraphs(),
            medical_terms=service.extract_medical_terms(),
            key_phrases=service.extract_key_phrases(),
            validation=self.validate_content(content)
        )


# Shared instance with the default guidelines
content_validator = ContentValidator()
