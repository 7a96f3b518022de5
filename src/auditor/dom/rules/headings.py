from typing import List

from ..core import SEVERITY_WARNING, AuditResult, RuleDefinition, audit_spec
from ..models import SemanticStructure


@audit_spec(codes=["NO_HEADINGS", "FIRST_HEADING_NOT_H1", "HEADING_LEVEL_SKIPPED", "MULTIPLE_H1"], penalty=5)
def check_heading_hierarchy(node: SemanticStructure) -> List[AuditResult]:
    """
    Rule: Headings start at h1, never skip a level on the way down,
    and there is a single h1 per page. Each violation is its own finding.
    """
    hierarchy = node.heading_hierarchy
    if not hierarchy:
        return [(
            "NO_HEADINGS",
            "No headings found - consider adding headings for content structure",
            SEVERITY_WARNING,
            "HEADINGS"
        )]

    res = []
    if hierarchy[0] != 1:
        res.append(("FIRST_HEADING_NOT_H1", "Page should start with an <h1> element", SEVERITY_WARNING, "HEADINGS"))

    for previous, current in zip(hierarchy, hierarchy[1:]):
        if current > previous + 1:
            res.append((
                "HEADING_LEVEL_SKIPPED",
                f"Heading level skipped: h{previous} followed by h{current}",
                SEVERITY_WARNING,
                "HEADINGS"
            ))

    h1_count = hierarchy.count(1)
    if h1_count > 1:
        res.append((
            "MULTIPLE_H1",
            f"Multiple h1 elements found ({h1_count}). Consider using only one h1 per page.",
            SEVERITY_WARNING,
            "HEADINGS"
        ))

    return res


DEFINITION = RuleDefinition(
    name="headings",
    audit_rules=[check_heading_hierarchy],
    order=20
)
