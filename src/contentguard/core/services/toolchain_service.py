# src/contentguard/core/services/toolchain_service.py
import logging
from typing import Any, Dict, Optional

from auditor.controllers.semantic_controller import SemanticValidator
from content_parser.controllers.content_controller import ContentValidator
from content_parser.guidelines import DEFAULT_GUIDELINES
from content_parser.model import BrandGuidelines, ScoringWeights
from contentguard.core.managers.config_manager import config_manager
from markup.model import FormattingOptions
from markup.printer import PrettyPrinter

logger = logging.getLogger(__name__)


def build_guidelines() -> BrandGuidelines:
    """The default guidelines extended with the extra terms from settings.json."""
    extra_forbidden = config_manager.get_nested("content.extra_forbidden_terms", [])
    extra_medical = config_manager.get_nested("content.extra_medical_terms", [])

    overrides: Dict[str, Any] = {}
    if extra_forbidden:
        overrides["forbidden_terms"] = DEFAULT_GUIDELINES.forbidden_terms + tuple(extra_forbidden)
    if extra_medical:
        overrides["medical_terms"] = DEFAULT_GUIDELINES.medical_terms + tuple(extra_medical)
    return DEFAULT_GUIDELINES.with_overrides(**overrides)


def build_weights() -> ScoringWeights:
    """Scoring weights with the 'content.weights' overrides applied."""
    return ScoringWeights(**config_manager.get_nested("content.weights", {}))


def build_formatting_options(**cli_overrides: Optional[Any]) -> FormattingOptions:
    """
    Formatting options from the 'formatter' section of settings.json.
    Command-line values win over the configuration; None means "not given".
    """
    settings = config_manager.section("formatter")
    settings.update({k: v for k, v in cli_overrides.items() if v is not None})
    return FormattingOptions(**settings)


def get_content_validator() -> ContentValidator:
    return ContentValidator(guidelines=build_guidelines(), weights=build_weights())


def get_semantic_validator() -> SemanticValidator:
    min_length = config_manager.get_nested("semantic.skip_link_min_length", 2000)
    return SemanticValidator(skip_link_min_length=int(min_length))


def get_pretty_printer(options: Optional[FormattingOptions] = None) -> PrettyPrinter:
    return PrettyPrinter(options or build_formatting_options())
