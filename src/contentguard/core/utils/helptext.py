# src/contentguard/core/utils/helptext.py
from contentguard.core.command_registry import COMMAND_HELP_TEXTS

# The static header part of the help text
HEADER_HELP_TEXT = """
contentguard - Help

Checks copy against the brand guidelines, audits the semantic structure of
HTML and formats markup.

Usage: contentguard [--set KEY=VALUE ...] <command> [options] [FILES...]
Without FILES (or with '-') a command reads from stdin.
--set overrides one settings.json value for this run, e.g.
  --set formatter.indent_size=4 --set content.extra_forbidden_terms='["hypergrowth"]'

---
COMMANDS
---
  help                Show this help text.
""".strip()


def get_help_text() -> str:
    """
    Dynamically assembles the full help text from the header and all
    discovered help text fragments from the command handlers.
    """
    full_help_parts = [HEADER_HELP_TEXT]

    # Sort the command help texts alphabetically for a consistent order
    for command_name in sorted(COMMAND_HELP_TEXTS.keys()):
        full_help_parts.append(COMMAND_HELP_TEXTS[command_name])

    return "\n\n".join(full_help_parts)
