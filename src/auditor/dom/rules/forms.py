from typing import List

from ..core import SEVERITY_WARNING, AuditResult, RuleDefinition, audit_spec
from ..models import SemanticStructure

# Forms with more inputs than this should group them
COMPLEX_FORM_INPUTS = 3


@audit_spec(codes=["INPUT_WITHOUT_LABEL", "MISSING_FIELDSET", "FORM_WITHOUT_ACTION"], penalty=8)
def check_form_accessibility(node: SemanticStructure) -> List[AuditResult]:
    """
    Rule: Inputs are labelled, complex forms are grouped with <fieldset>,
    and every form declares its action.
    """
    form = node.form_structure
    res = []

    if form.inputs > 0:
        if form.labels == 0:
            res.append((
                "INPUT_WITHOUT_LABEL",
                "Form inputs found without corresponding <label> elements",
                SEVERITY_WARNING,
                "FORMS"
            ))
        if form.inputs > COMPLEX_FORM_INPUTS and form.fieldsets == 0:
            res.append((
                "MISSING_FIELDSET",
                "Complex forms should use <fieldset> and <legend> for grouping",
                SEVERITY_WARNING,
                "FORMS"
            ))

    if form.forms_count > 0 and form.forms_with_action < form.forms_count:
        res.append((
            "FORM_WITHOUT_ACTION",
            "Forms should have explicit action attributes",
            SEVERITY_WARNING,
            "FORMS"
        ))

    return res


DEFINITION = RuleDefinition(
    name="forms",
    audit_rules=[check_form_accessibility],
    order=50
)
