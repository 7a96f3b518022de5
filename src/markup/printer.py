# src/markup/printer.py
import logging
import re
from typing import Any, List, Optional

from .errors import MarkupStructureError
from .model import DEFAULT_OPTIONS, FormattingOptions, Token, TokenType
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_SPACE_BEFORE_GT = re.compile(r"\s+>$")
# A quoted attribute value (kept verbatim) or a run of whitespace outside one
_ATTR_VALUE_OR_SPACE = re.compile(r"""(=\s*)("[^"]*"|'[^']*')|\s+""")
_JSX_CLASS_NAME = re.compile(r"\bclassName=")
_HTML5_DOCTYPE = re.compile(r"^<!doctype\s+html\s*>$", re.IGNORECASE)
_REQUIRED_DOCUMENT_TAGS = frozenset({"html", "head", "body"})


def collapse_whitespace(text: str) -> str:
    """Replaces every run of whitespace with a single space."""
    return _WHITESPACE.sub(" ", text)


def _collapse_outside_quotes(tag: str) -> str:
    def _replace(match: re.Match) -> str:
        if match.group(2) is not None:
            return collapse_whitespace(match.group(1)) + match.group(2)
        return " "
    return _ATTR_VALUE_OR_SPACE.sub(_replace, tag)


class _LineBuilder:
    """
    Collects output lines for the layout walk.

    The current line is held as a list of parts plus its running length, so
    appending never rescans what is already on the line.
    """

    def __init__(self, options: FormattingOptions):
        self.options = options
        self.depth = 0
        self.lines: List[str] = []
        self._parts: List[str] = []
        self._length = 0
        self._pending_space = False

    def flush(self) -> None:
        if self._parts:
            self.lines.append("".join(self._parts))
        self._parts = []
        self._length = 0
        self._pending_space = False

    def own_line(self, text: str, depth: Optional[int] = None) -> None:
        """Puts `text` on a line of its own."""
        self.flush()
        self.lines.append(self.options.indent(self.depth if depth is None else depth) + text)

    def append(self, piece: str) -> None:
        """Appends to the current line if it stays within max_line_length, else wraps."""
        sep = " " if self._pending_space and self._parts else ""
        head = piece.split("\n", 1)[0]
        if self._parts and self._length + len(sep) + len(head) > self.options.max_line_length:
            self.flush()
            sep = ""

        if not self._parts:
            indent = self.options.indent(self.depth)
            self._parts.append(indent)
            self._length = len(indent)

        self._parts.append(sep + piece)
        if "\n" in piece:
            self._length = len(piece) - piece.rfind("\n") - 1
        else:
            self._length += len(sep) + len(piece)
        self._pending_space = False

    def add_text(self, text: str) -> None:
        """Flows normalized text word by word; whitespace-only text between tags is dropped."""
        normalized = collapse_whitespace(text)
        words = normalized.split()
        if not words:
            return

        if normalized.startswith(" "):
            self._pending_space = True
        for word in words:
            self.append(word)
            self._pending_space = True
        self._pending_space = normalized.endswith(" ")

    def render(self) -> str:
        self.flush()
        return "\n".join(self.lines)


class PrettyPrinter:
    """
    Formats, minifies and checks HTML (and JSX-like) markup.

    Formatting is deterministic and idempotent: formatting already formatted
    output returns it unchanged. Malformed markup raises MarkupStructureError.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or DEFAULT_OPTIONS

    # --- Public API ---

    def format_html(self, markup: str, options: Optional[FormattingOptions] = None) -> str:
        """
        Formats markup with one block element per line and consistent indentation.

        Args:
            markup (str): The raw HTML.
            options (Optional[FormattingOptions]): Per-call override of the printer options.

        Returns:
            str: The formatted markup.

        Raises:
            MarkupStructureError: If tags are mismatched, unexpected or left unclosed.
        """
        opts = options or self.options
        formatted = self._layout(tokenize(markup, opts), opts)
        self.validate_html(formatted, opts)
        logger.debug("Formatted %d chars of markup into %d lines.", len(markup), formatted.count("\n") + 1)
        return formatted

    def format_jsx(self, jsx: str, options: Optional[FormattingOptions] = None) -> str:
        """
        Formats JSX-like markup. `className=` attributes become `class=`.
        Tag balance is not enforced, since fragments and components are common in JSX.
        """
        opts = options or self.options
        cleaned = _JSX_CLASS_NAME.sub("class=", jsx)
        return self._layout(tokenize(cleaned, opts), opts)

    def minify_html(self, markup: str, options: Optional[FormattingOptions] = None) -> str:
        """Collapses all redundant whitespace. Whitespace-preserving content is kept verbatim."""
        opts = options or self.options
        parts: List[str] = []
        for token in tokenize(markup, opts):
            if token.raw or token.type is TokenType.COMMENT:
                parts.append(token.content)
            elif token.type is TokenType.TEXT:
                text = collapse_whitespace(token.content)
                if text.strip():
                    parts.append(text)
            else:
                parts.append(self.format_attributes(token.content))
        return "".join(parts).strip()

    def is_valid_html5(self, markup: str, options: Optional[FormattingOptions] = None) -> bool:
        """
        Checks tag balance. A document declaring a doctype must also use the
        HTML5 doctype and contain <html>, <head> and <body>.
        """
        try:
            tokens = self.validate_html(markup, options)
        except MarkupStructureError as e:
            logger.debug("Markup is not well-formed: %s", e.detail)
            return False

        doctypes = [
            t for t in tokens
            if t.type is TokenType.DOCTYPE and t.content.lower().startswith("<!doctype")
        ]
        if not doctypes:
            # Fragment: balance alone suffices
            return True

        opened = {t.name for t in tokens if t.type is TokenType.OPENING_TAG}
        has_html5_doctype = bool(_HTML5_DOCTYPE.match(collapse_whitespace(doctypes[0].content)))
        return has_html5_doctype and _REQUIRED_DOCUMENT_TAGS.issubset(opened)

    def validate_html(self, markup: str, options: Optional[FormattingOptions] = None) -> List[Token]:
        """
        Replays the tokenizer with a stack of open tag names.

        Returns:
            List[Token]: The tokens of the (valid) markup.

        Raises:
            MarkupStructureError: On the first mismatched or unexpected closing tag,
                or for tags still open at the end of input.
        """
        opts = options or self.options
        tokens = tokenize(markup, opts)
        open_tags: List[str] = []

        for token in tokens:
            if token.type is TokenType.OPENING_TAG:
                open_tags.append(token.name)
            elif token.type is TokenType.CLOSING_TAG:
                name = token.name
                if name in opts.self_closing_tags:
                    raise MarkupStructureError(f"Unexpected closing tag </{name}> for void element", [name])
                if not open_tags:
                    raise MarkupStructureError(f"Unexpected closing tag </{name}>: no open element", [name])
                expected = open_tags.pop()
                if expected != name:
                    raise MarkupStructureError(
                        f"Mismatched tags: expected </{expected}>, found </{name}>", [expected, name]
                    )

        if open_tags:
            raise MarkupStructureError(f"Unclosed tags: {', '.join(open_tags)}", open_tags)
        return tokens

    @staticmethod
    def format_attributes(tag: str) -> str:
        """
        Normalizes whitespace inside a single tag: `<div\\n  class="a" >` -> `<div class="a">`.
        Quoted attribute values are left exactly as written.
        """
        return _SPACE_BEFORE_GT.sub(">", _collapse_outside_quotes(tag).strip())

    # --- Layout ---

    def _layout(self, tokens: List[Token], opts: FormattingOptions) -> str:
        """
        Walks the token stream keeping an indentation depth and the name of the
        whitespace-preserving element currently open (if any).
        """
        out = _LineBuilder(opts)
        preserve_tag: Optional[str] = None
        unit: List[str] = []

        def _emit_unit() -> None:
            # A whitespace-preserving element is placed as one atomic piece
            text = "".join(unit)
            if preserve_tag in opts.block_elements:
                out.own_line(text)
            else:
                out.append(text)

        for token in tokens:
            if preserve_tag is not None:
                if token.type is TokenType.CLOSING_TAG and token.name == preserve_tag:
                    unit.append(self.format_attributes(token.content))
                    _emit_unit()
                    preserve_tag, unit = None, []
                else:
                    unit.append(token.content)
                continue

            kind = token.type
            if kind is TokenType.DOCTYPE:
                out.own_line(collapse_whitespace(token.content).strip(), depth=0)
            elif kind is TokenType.COMMENT:
                out.own_line(token.content)
            elif kind is TokenType.TEXT:
                out.add_text(token.content)
            else:
                tag = self.format_attributes(token.content)
                name = token.name
                if kind is TokenType.OPENING_TAG and name in opts.preserve_whitespace:
                    preserve_tag, unit = name, [tag]
                elif name in opts.block_elements:
                    if kind is TokenType.CLOSING_TAG:
                        out.depth = max(0, out.depth - 1)
                        out.own_line(tag)
                    else:
                        out.own_line(tag)
                        if kind is TokenType.OPENING_TAG:
                            out.depth += 1
                else:
                    out.append(tag)

        if preserve_tag is not None:
            _emit_unit()

        return out.render()


# Shared default instance
pretty_printer = PrettyPrinter()


def format_html(markup: str, options: Optional[FormattingOptions] = None, **overrides: Any) -> str:
    """Formats markup with the default options, optionally overridden field by field."""
    opts = (options or DEFAULT_OPTIONS).with_overrides(**overrides)
    return PrettyPrinter(opts).format_html(markup)


def format_jsx(jsx: str, options: Optional[FormattingOptions] = None, **overrides: Any) -> str:
    opts = (options or DEFAULT_OPTIONS).with_overrides(**overrides)
    return PrettyPrinter(opts).format_jsx(jsx)


def minify_html(markup: str) -> str:
    return pretty_printer.minify_html(markup)
