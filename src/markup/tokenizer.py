# src/markup/tokenizer.py
from __future__ import annotations

import re
from typing import Dict, List, Optional, Set, Tuple

from .model import DEFAULT_OPTIONS, FormattingOptions, Token, TokenType

# Tag name right after '<' or '</' (custom elements and namespaced names included)
_TAG_NAME_PATTERN = re.compile(r"^</?([A-Za-z][A-Za-z0-9:._-]*)")


def extract_tag_name(tag: str) -> str:
    """Returns the lower-cased element name of a tag string, or '' if there is none."""
    match = _TAG_NAME_PATTERN.match(tag)
    return match.group(1).lower() if match else ""


class _TagScanner:
    """
    Finds where tags end in one piece of markup.

    The scan state right after a closing quote depends only on that position,
    so positions reached by a failed scan are remembered and later scans stop
    there instead of rescanning the rest of the input.
    """

    def __init__(self, markup: str):
        self.markup = markup
        self.last_gt = markup.rfind(">")
        # Quote char -> (open, close) span whose closing quote lies past the last '>'
        self.dead_quotes: Dict[str, Tuple[int, int]] = {}
        # Positions right after a closing quote, reached only by failed scans
        self.doomed: Set[int] = set()

    def _quote_is_dead(self, quote: str, pos: int) -> bool:
        span = self.dead_quotes.get(quote)
        return span is not None and span[0] <= pos < span[1]

    def scan_tag_end(self, start: int) -> int:
        """
        Finds the end (exclusive) of the tag starting at `start`.

        Quoted attribute values may contain '>'. Returns -1 when the tag is never
        terminated, in which case the '<' is literal text.
        """
        markup = self.markup
        visited: List[int] = []
        previous = ""
        j = start + 1
        while j <= self.last_gt:
            c = markup[j]
            if c in "\"'" and previous == "=":
                if self._quote_is_dead(c, j):
                    break
                close = markup.find(c, j + 1)
                if close == -1 or close > self.last_gt:
                    self.dead_quotes[c] = (j, len(markup) if close == -1 else close)
                    break
                j = close + 1
                if j in self.doomed:
                    break
                visited.append(j)
                previous = c
                continue
            if c == ">":
                return j + 1
            if not c.isspace():
                previous = c
            j += 1
        self.doomed.update(visited)
        return -1


def _find_raw_close(markup: str, name: str, start: int) -> int:
    """Position of the '</name' that closes a whitespace-preserving element, or end of input."""
    pattern = re.compile(rf"</{re.escape(name)}(?=[\s/>]|\Z)", re.IGNORECASE | re.ASCII)
    match = pattern.search(markup, start)
    return match.start() if match else len(markup)


def _scan_markup(markup: str, start: int, scanner: _TagScanner) -> Tuple[int, Optional[TokenType]]:
    """
    Classifies the '<' at `start`.

    Returns (end, kind) where kind is COMMENT, DOCTYPE or OPENING_TAG (any tag,
    refined later), or (start + 1, None) if the '<' does not begin markup.
    """
    if markup.startswith("<!--", start):
        end = markup.find("-->", start + 4)
        return (len(markup) if end == -1 else end + 3), TokenType.COMMENT

    nxt = markup[start + 1:start + 2]
    if nxt in ("!", "?"):
        end = markup.find(">", start)
        if end == -1:
            return start + 1, None
        return end + 1, TokenType.DOCTYPE

    if nxt == "/":
        nxt = markup[start + 2:start + 3]
    if not nxt.isalpha():
        return start + 1, None

    end = scanner.scan_tag_end(start)
    if end == -1:
        return start + 1, None
    return end, TokenType.OPENING_TAG


def classify_tag(tag: str, options: FormattingOptions = DEFAULT_OPTIONS) -> Token:
    """Builds the token for a complete '<...>' tag string."""
    name = extract_tag_name(tag)
    if tag.startswith("</"):
        kind = TokenType.CLOSING_TAG
    elif tag.endswith("/>") or name in options.self_closing_tags:
        kind = TokenType.SELF_CLOSING_TAG
    else:
        kind = TokenType.OPENING_TAG
    return Token(type=kind, content=tag, name=name)


def tokenize(markup: str, options: FormattingOptions = DEFAULT_OPTIONS) -> List[Token]:
    """
    Splits markup into a flat token stream in one left-to-right scan.

    Every '<...>' span is classified as comment, doctype (any '<!' or '<?'
    declaration), closing tag, self-closing tag (void element name or '/>')
    or opening tag. Everything between them is text. The inner content of an
    element listed in `options.preserve_whitespace` is emitted untouched as a
    single raw text token, so a '<' inside a <script> or <pre> never starts a tag.

    Args:
        markup (str): The raw markup.
        options (FormattingOptions): Supplies the void and whitespace-preserving tag names.

    Returns:
        List[Token]: Tokens whose contents concatenate back to `markup`.
    """
    tokens: List[Token] = []
    scanner = _TagScanner(markup)
    text_start = 0
    i = 0

    def _flush_text(upto: int) -> None:
        if upto > text_start:
            tokens.append(Token(type=TokenType.TEXT, content=markup[text_start:upto]))

    while True:
        lt = markup.find("<", i)
        if lt == -1:
            break

        end, kind = _scan_markup(markup, lt, scanner)
        if kind is None:
            # Literal '<', keep it in the pending text
            i = end
            continue

        _flush_text(lt)
        span = markup[lt:end]
        if kind is TokenType.OPENING_TAG:
            token = classify_tag(span, options)
        else:
            token = Token(type=kind, content=span)
        tokens.append(token)
        i = text_start = end

        if token.type is TokenType.OPENING_TAG and token.name in options.preserve_whitespace:
            close = _find_raw_close(markup, token.name, end)
            if close > end:
                tokens.append(Token(type=TokenType.TEXT, content=markup[end:close], raw=True))
            i = text_start = close

    _flush_text(len(markup))
    return tokens
