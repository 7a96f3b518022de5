# src/contentguard/core/handlers/structure_handler.py
import argparse
import json
import logging
from typing import List, Optional

from auditor.dom.core import SEVERITY_ERROR, SEVERITY_RECOMMENDATION
from contentguard.core.services.source_service import iter_with_progress, read_sources
from contentguard.core.services.toolchain_service import get_semantic_validator

logger = logging.getLogger(__name__)

structure_help_text = """
  structure [FILES...] [--recommend] [--json]
      Audits the semantic structure of HTML (landmarks, headings, sections,
      lists, forms, tables, ARIA). Exits with 1 when any input has errors.
      --recommend adds general accessibility recommendations.
""".strip()


def handle_structure(args: List[str], _stdin: Optional[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="structure", description="Audit the semantic structure of HTML.")
    parser.add_argument("files", metavar="FILE", nargs="*", help="HTML files ('-' for stdin).")
    parser.add_argument("--recommend", action="store_true", help="Add general accessibility recommendations.")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit as e:
        return 0 if e.code == 0 else 2

    try:
        sources = read_sources(pargs.files, _stdin)
    except (OSError, ValueError) as e:
        print(f"❌ Error: {e}")
        return 1

    validator = get_semantic_validator()
    reports = []
    any_invalid = False

    for name, html in iter_with_progress(sources, desc="Auditing"):
        result = validator.validate_semantic_structure(html)
        if pargs.recommend:
            extra = [r for r in validator.generate_recommendations(html) if r not in result.recommendations]
            result = result.model_copy(update={"recommendations": result.recommendations + extra})

        any_invalid = any_invalid or not result.is_valid
        reports.append({"source": name, **result.model_dump()})

        if pargs.json:
            continue

        icon = "✅" if result.is_valid else "❌"
        print(f"{icon} {name}: score {result.score}/100")
        for issue in result.issues:
            if issue.severity != SEVERITY_RECOMMENDATION:
                marker = "❌" if issue.severity == SEVERITY_ERROR else "⚠️"
                print(f"   {marker} [{issue.code}] {issue.message}")
        for recommendation in result.recommendations:
            print(f"   💡 {recommendation}")

    if pargs.json:
        print(json.dumps(reports, indent=2, ensure_ascii=False))

    return 1 if any_invalid else 0
