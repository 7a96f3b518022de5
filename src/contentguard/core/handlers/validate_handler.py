# src/contentguard/core/handlers/validate_handler.py
import argparse
import json
import logging
from typing import Any, Dict, List, Optional

from content_parser.model import ValidationResult
from contentguard.core.services.source_service import iter_with_progress, read_sources
from contentguard.core.services.toolchain_service import get_content_validator

logger = logging.getLogger(__name__)

validate_help_text = """
  validate [FILES...] [--suggest] [--parse] [--json]
      Scores copy against the brand guidelines (forbidden terms, placeholders,
      tone, medical terminology, sentence length). Exits with 1 when any input
      has errors.
""".strip()


def _print_report(name: str, result: ValidationResult, entry: Dict[str, Any]) -> None:
    icon = "✅" if result.is_valid else "❌"
    print(f"{icon} {name}: score {result.score}/100")
    for error in result.errors:
        print(f"   ❌ {error}")
    for warning in result.warnings:
        print(f"   ⚠️ {warning}")
    for suggestion in entry.get("suggestions", []):
        print(f"   💡 {suggestion}")

    parsed = entry.get("parsed")
    if parsed:
        print(f"   Headings: {', '.join(parsed['headings']) or '-'}")
        print(f"   Paragraphs: {len(parsed['paragraphs'])}")
        print(f"   Medical terms: {', '.join(parsed['medical_terms']) or '-'}")
        print(f"   Key phrases: {', '.join(parsed['key_phrases']) or '-'}")


def handle_validate(args: List[str], _stdin: Optional[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="validate", description="Validate copy against the brand guidelines.")
    parser.add_argument("files", metavar="FILE", nargs="*", help="Text or Markdown files ('-' for stdin).")
    parser.add_argument("--suggest", action="store_true", help="Add improvement suggestions.")
    parser.add_argument("--parse", action="store_true", help="Show the extracted headings, terms and phrases.")
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

    validator = get_content_validator()
    reports = []
    any_invalid = False

    for name, text in iter_with_progress(sources, desc="Validating"):
        result = validator.validate_content(text)
        entry: Dict[str, Any] = {"source": name, **result.model_dump()}
        if pargs.suggest:
            entry["suggestions"] = validator.suggest_improvements(text)
        if pargs.parse:
            entry["parsed"] = validator.parse_content(text).model_dump(exclude={"validation"})

        any_invalid = any_invalid or not result.is_valid
        reports.append(entry)
        if not pargs.json:
            _print_report(name, result, entry)

    if pargs.json:
        print(json.dumps(reports, indent=2, ensure_ascii=False))

    return 1 if any_invalid else 0
