from typing import Callable, List, Optional, Set, Tuple

# Type alias for audit findings: (Code, Message, Severity, Category)
AuditResult = Tuple[str, str, str, str]

# Severities: only ERROR findings make a document invalid
SEVERITY_ERROR = "ERROR"
SEVERITY_WARNING = "WARNING"
SEVERITY_RECOMMENDATION = "RECOMMENDATION"


def audit_spec(codes: List[str], penalty: int = 0):
    """
    Decorator to declare which issue codes a specific audit rule function returns,
    and how many score points each finding of that rule costs.
    Facilitates auto-discovery by the RuleRegistry.
    """
    def decorator(func):
        func.defined_codes = codes
        func.penalty = penalty
        return func
    return decorator


class RuleDefinition:
    """
    Configuration object grouping the audit rules of one structural concern
    (landmarks, headings, lists, ...). `order` fixes where its findings appear
    in the report.
    """

    def __init__(
            self,
            name: str,
            audit_rules: Optional[List[Callable[..., List[AuditResult]]]] = None,
            order: int = 100,
            possible_codes: Optional[List[str]] = None
    ):
        self.name = name
        self.audit_rules = audit_rules or []
        self.order = order

        # --- Auto-Discovery of Issue Codes ---
        final_codes: Set[str] = set(possible_codes or [])

        for rule in self.audit_rules:
            if hasattr(rule, 'defined_codes'):
                final_codes.update(rule.defined_codes)

        self.codes = sorted(list(final_codes))
