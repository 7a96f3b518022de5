from typing import List

from ..core import SEVERITY_WARNING, AuditResult, RuleDefinition, audit_spec
from ..models import SemanticStructure


@audit_spec(codes=["ORPHAN_LIST_ITEM", "EMPTY_LIST"], penalty=3)
def check_list_structure(node: SemanticStructure) -> List[AuditResult]:
    lists = node.list_structure
    res = []
    if lists.orphan_list_items > 0:
        res.append((
            "ORPHAN_LIST_ITEM",
            "List items found without parent <ul> or <ol> elements",
            SEVERITY_WARNING,
            "LISTS"
        ))
    if lists.empty_lists > 0:
        res.append(("EMPTY_LIST", "Empty list elements found", SEVERITY_WARNING, "LISTS"))
    return res


DEFINITION = RuleDefinition(
    name="lists",
    audit_rules=[check_list_structure],
    order=40
)
