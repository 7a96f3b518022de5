from typing import List

from ..core import SEVERITY_WARNING, AuditResult, RuleDefinition, audit_spec
from ..models import SemanticStructure


@audit_spec(codes=["TABLE_WITHOUT_CAPTION", "TABLE_WITHOUT_HEADERS", "HEADERS_WITHOUT_SCOPE"], penalty=6)
def check_table_accessibility(node: SemanticStructure) -> List[AuditResult]:
    table = node.table_structure
    if table.tables_count == 0:
        return []

    res = []
    if table.captions == 0:
        res.append((
            "TABLE_WITHOUT_CAPTION",
            "Tables should have <caption> elements for accessibility",
            SEVERITY_WARNING,
            "TABLES"
        ))
    if table.headers == 0:
        res.append((
            "TABLE_WITHOUT_HEADERS",
            "Tables should use <th> elements for header cells",
            SEVERITY_WARNING,
            "TABLES"
        ))
    elif table.headers_with_scope == 0:
        res.append((
            "HEADERS_WITHOUT_SCOPE",
            "Table headers should have scope attributes (row/col)",
            SEVERITY_WARNING,
            "TABLES"
        ))
    return res


DEFINITION = RuleDefinition(
    name="tables",
    audit_rules=[check_table_accessibility],
    order=60
)
