from typing import List

from ..core import SEVERITY_WARNING, AuditResult, RuleDefinition, audit_spec
from ..models import SemanticStructure

# Pages with only a couple of buttons are not flagged
MIN_BUTTONS_FOR_ARIA = 2
LARGE_CONTENT_LENGTH = 1000


@audit_spec(codes=["BUTTONS_WITHOUT_ARIA_LABEL", "LARGE_CONTENT_WITHOUT_MAIN", "IMAGES_WITHOUT_ALT"], penalty=4)
def check_aria_usage(node: SemanticStructure) -> List[AuditResult]:
    """
    Rule: Interactive elements and images carry accessible names, and large
    pages expose a main landmark either as an element or through ARIA.
    """
    aria = node.aria_structure
    res = []

    if aria.buttons > MIN_BUTTONS_FOR_ARIA and aria.buttons > aria.buttons_with_aria_label:
        res.append((
            "BUTTONS_WITHOUT_ARIA_LABEL",
            "Consider adding aria-label attributes to buttons for better accessibility",
            SEVERITY_WARNING,
            "ARIA"
        ))

    if not node.has_main_landmark and not aria.has_main_role and node.content_length > LARGE_CONTENT_LENGTH:
        res.append((
            "LARGE_CONTENT_WITHOUT_MAIN",
            'Large content should have main landmark (either <main> or role="main")',
            SEVERITY_WARNING,
            "ARIA"
        ))

    if aria.images > aria.images_with_alt:
        res.append((
            "IMAGES_WITHOUT_ALT",
            "All images should have alt attributes for accessibility",
            SEVERITY_WARNING,
            "ARIA"
        ))

    return res


DEFINITION = RuleDefinition(
    name="aria",
    audit_rules=[check_aria_usage],
    order=70
)
