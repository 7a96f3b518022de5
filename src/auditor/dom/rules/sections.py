from typing import List

from ..core import SEVERITY_WARNING, AuditResult, RuleDefinition, audit_spec
from ..models import SemanticStructure

# Markup shorter than this is not expected to be sectioned
SECTIONING_MIN_LENGTH = 500


@audit_spec(codes=["NO_SECTIONS"], penalty=5)
def check_sectioning(node: SemanticStructure) -> List[AuditResult]:
    """Rule: Substantial content is divided with <section> (or <article>) elements."""
    if node.sections_count + node.articles_count == 0 and node.content_length > SECTIONING_MIN_LENGTH:
        return [(
            "NO_SECTIONS",
            "Consider using <section> elements to structure content",
            SEVERITY_WARNING,
            "STRUCTURE"
        )]
    return []


DEFINITION = RuleDefinition(
    name="sections",
    audit_rules=[check_sectioning],
    order=30
)
