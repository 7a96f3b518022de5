# src/auditor/dom/qngine.py
from typing import List, Dict, Any

from .core import SEVERITY_RECOMMENDATION
from .models import SemanticStructure
from .registry import RuleRegistry


class QNGINE:
    """
    Quality Engine (QNGINE) for auditing semantic HTML structure.

    It applies every registered audit rule to the SemanticStructure built by
    the StructureBuilder and attaches each rule's score penalty to its findings.
    """

    def __init__(self):
        """Initializes the engine by discovering and loading all available audit rules."""
        RuleRegistry.discover()
        self.rules = RuleRegistry.get_all_rules()

    def run_audit(self, structure: SemanticStructure) -> List[Dict[str, Any]]:
        """
        Runs the full audit suite on a structural profile.

        Args:
            structure (SemanticStructure): The profile produced by the StructureBuilder.

        Returns:
            List[Dict[str, Any]]: Findings in rule registration order.
        """
        findings = []

        for rule in self.rules:
            # Rule is expected to return a List of tuples: [(Code, Msg, Sev, Cat)]
            results = rule(structure)
            if not results:
                continue

            penalty = getattr(rule, "penalty", 0)
            for (code, msg, sev, cat) in results:
                findings.append({
                    "code": code,
                    "msg": msg,
                    "sev": sev,
                    "cat": cat,
                    "penalty": 0 if sev == SEVERITY_RECOMMENDATION else penalty
                })

        return findings
