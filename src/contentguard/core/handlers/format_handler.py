# src/contentguard/core/handlers/format_handler.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from contentguard.core.services.source_service import STDIN_NAME, iter_with_progress, read_sources
from contentguard.core.services.toolchain_service import build_formatting_options, get_pretty_printer
from markup.errors import MarkupStructureError

logger = logging.getLogger(__name__)

format_help_text = """
  format [FILES...] [--indent N] [--width N] [--jsx | --minify | --validate-only] [--check | --in-place]
      Pretty-prints HTML with consistent indentation (JSX with --jsx).
      --minify collapses whitespace, --validate-only only checks well-formedness.
      --check exits with 1 when a file would be reformatted; --in-place rewrites files.
""".strip()


def handle_format(args: List[str], _stdin: Optional[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="format", description="Format, minify or check HTML markup.")
    parser.add_argument("files", metavar="FILE", nargs="*", help="HTML files ('-' for stdin).")
    parser.add_argument("--indent", type=int, default=None, help="Spaces per indentation level.")
    parser.add_argument("--width", type=int, default=None, help="Maximum line length before wrapping.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--jsx", action="store_true", help="Treat input as JSX (className= becomes class=).")
    mode.add_argument("--minify", action="store_true", help="Collapse redundant whitespace.")
    mode.add_argument("--validate-only", action="store_true", help="Only check that the markup is well-formed.")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--check", action="store_true", help="Report files that are not formatted.")
    output.add_argument("-i", "--in-place", action="store_true", help="Rewrite the files.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit as e:
        return 0 if e.code == 0 else 2

    try:
        options = build_formatting_options(indent_size=pargs.indent, max_line_length=pargs.width)
    except ValidationError as e:
        print(f"❌ Invalid formatting options: {e.errors()[0]['msg']}")
        return 2

    try:
        sources = read_sources(pargs.files, _stdin)
    except (OSError, ValueError) as e:
        print(f"❌ Error: {e}")
        return 1

    if pargs.in_place and any(name == STDIN_NAME for name, _ in sources):
        print("❌ Error: --in-place needs FILES, not stdin.")
        return 2

    printer = get_pretty_printer(options)
    failures = 0

    for name, text in iter_with_progress(sources, desc="Formatting"):
        if pargs.validate_only:
            if printer.is_valid_html5(text):
                print(f"✅ {name}: well-formed")
            else:
                print(f"❌ {name}: not well-formed")
                failures += 1
            continue

        try:
            if pargs.minify:
                formatted = printer.minify_html(text)
            elif pargs.jsx:
                formatted = printer.format_jsx(text)
            else:
                formatted = printer.format_html(text)
        except MarkupStructureError as e:
            logger.debug("Could not format %s: %s", name, e.detail)
            print(f"❌ {name}: {e}")
            failures += 1
            continue

        if pargs.check:
            if text in (formatted, formatted + "\n"):
                print(f"✅ {name}: already formatted")
            else:
                print(f"❌ {name}: would be reformatted")
                failures += 1
        elif pargs.in_place:
            if text not in (formatted, formatted + "\n"):
                Path(name).write_text(formatted + "\n", encoding="utf-8")
                print(f"✅ Formatted {name}")
        else:
            print(formatted)

    return 1 if failures else 0
