# src/auditor/controllers/semantic_controller.py
import logging
from typing import List

from auditor.dom.builder import StructureBuilder
from auditor.dom.core import SEVERITY_ERROR, SEVERITY_RECOMMENDATION, SEVERITY_WARNING
from auditor.dom.qngine import QNGINE
from auditor.model import AuditIssue, SemanticValidationResult

logger = logging.getLogger(__name__)

# Pages longer than this should offer a skip navigation link
SKIP_LINK_MIN_LENGTH = 2000


class SemanticValidator:
    """
    Validates the semantic structure of HTML: landmarks, headings, sectioning,
    lists, forms, tables and ARIA usage.

    The HTML is profiled once by the StructureBuilder and the QNGINE applies
    every registered rule to that profile.
    """

    def __init__(self, skip_link_min_length: int = SKIP_LINK_MIN_LENGTH):
        self.builder = StructureBuilder()
        self.engine = QNGINE()
        self.skip_link_min_length = skip_link_min_length

    def validate_semantic_structure(self, html: str) -> SemanticValidationResult:
        """
        Validates the semantic structure of an HTML string.

        Args:
            html (str): A full document or a fragment.

        Returns:
            SemanticValidationResult: Only a missing <main> is an error; every
            other finding is a warning or a recommendation. Internal failures
            are reported as an invalid result with score 0.
        """
        try:
            structure = self.builder.build(html or "")
            findings = self.engine.run_audit(structure)
        except Exception as e:
            logger.error(f"Semantic validation failed: {e}", exc_info=True)
            return SemanticValidationResult(
                is_valid=False,
                errors=[f"Validation error: {str(e) or type(e).__name__}"],
                score=0
            )

        issues = [
            AuditIssue(
                code=f["code"],
                message=f["msg"],
                severity=f["sev"],
                category=f["cat"],
                penalty=f["penalty"]
            )
            for f in findings
        ]

        errors = [i.message for i in issues if i.severity == SEVERITY_ERROR]
        warnings = [i.message for i in issues if i.severity == SEVERITY_WARNING]
        recommendations = [i.message for i in issues if i.severity == SEVERITY_RECOMMENDATION]

        score = max(0, 100 - sum(i.penalty for i in issues))
        logger.debug(f"Semantic score {score} ({len(errors)} errors, {len(warnings)} warnings)")

        return SemanticValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            score=score,
            recommendations=recommendations,
            issues=issues
        )

    def generate_recommendations(self, html: str) -> List[str]:
        """
        General accessibility recommendations that cannot be verified from the
        markup alone (keyboard navigation, focus handling, contrast, responsiveness).
        """
        html = html or ""
        recommendations: List[str] = []

        if "skip" not in html and len(html) > self.skip_link_min_length:
            recommendations.append("Consider adding skip navigation links for keyboard users")

        if "modal" in html or "dialog" in html:
            recommendations.append("Ensure proper focus management for modal dialogs")

        if "color:" in html or "background" in html:
            recommendations.append("Verify color contrast ratios meet WCAG AA standards (4.5:1)")

        if "viewport" not in html and "responsive" not in html:
            recommendations.append("Ensure responsive design for mobile accessibility")

        return recommendations


# Export singleton instance
semantic_validator = SemanticValidator()
