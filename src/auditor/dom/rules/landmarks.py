from typing import List

from ..core import (
    SEVERITY_ERROR,
    SEVERITY_RECOMMENDATION,
    AuditResult,
    RuleDefinition,
    audit_spec,
)
from ..models import SemanticStructure

_LANDMARK_ADVICE = {
    "header": "Use <header> element for page header content",
    "nav": "Use <nav> element for navigation content",
    "footer": "Use <footer> element for page footer content",
}


@audit_spec(codes=["MISSING_MAIN"], penalty=15)
def check_main_landmark(node: SemanticStructure) -> List[AuditResult]:
    """
    Rule: Every page needs a <main> landmark.
    This is the only hard rule: it makes the document invalid.
    """
    if node.has_main_landmark:
        return []
    return [("MISSING_MAIN", "Missing <main> landmark element", SEVERITY_ERROR, "LANDMARKS")]


@audit_spec(codes=["USE_HEADER", "USE_NAV", "USE_FOOTER"])
def check_landmark_hints(node: SemanticStructure) -> List[AuditResult]:
    """
    Rule: Content styled as a header, navigation or footer (class/id/role)
    should use the matching landmark element.
    """
    present = {
        "header": node.has_header_landmark,
        "nav": node.has_nav_landmark,
        "footer": node.has_footer_landmark,
    }
    res = []
    for landmark in ("header", "nav", "footer"):
        if landmark in node.landmark_hints and not present[landmark]:
            res.append((
                f"USE_{landmark.upper()}",
                _LANDMARK_ADVICE[landmark],
                SEVERITY_RECOMMENDATION,
                "LANDMARKS"
            ))
    return res


DEFINITION = RuleDefinition(
    name="landmarks",
    audit_rules=[check_main_landmark, check_landmark_hints],
    order=10
)
