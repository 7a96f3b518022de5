from typing import List

from pydantic import BaseModel, Field, model_validator


class AuditIssue(BaseModel):
    """
    Data model representing a single finding of the semantic structure audit.
    """
    code: str  # e.g., 'MISSING_MAIN', 'HEADING_LEVEL_SKIPPED', 'IMAGES_WITHOUT_ALT'
    message: str  # Human-readable description of the issue
    severity: str  # 'ERROR', 'WARNING', 'RECOMMENDATION'
    category: str  # e.g., 'LANDMARKS', 'HEADINGS', 'FORMS'
    penalty: int = 0


class SemanticValidationResult(BaseModel):
    """
    Outcome of validating the semantic structure of one HTML string.

    `errors`, `warnings` and `recommendations` are the plain messages in report
    order; `issues` keeps the same findings with their codes and penalties.
    """
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)
    recommendations: List[str] = Field(default_factory=list)
    issues: List[AuditIssue] = Field(default_factory=list)

    @model_validator(mode='after')
    def errors_make_invalid(self) -> 'SemanticValidationResult':
        if self.errors and self.is_valid:
            raise ValueError("A result with errors cannot be valid")
        return self
