# src/markup/model.py
from enum import Enum
from typing import Any, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenType(str, Enum):
    """Kinds of spans produced by the markup tokenizer."""
    OPENING_TAG = "opening-tag"
    CLOSING_TAG = "closing-tag"
    SELF_CLOSING_TAG = "self-closing-tag"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


class Token(BaseModel):
    """
    A single span of markup.

    Concatenating the `content` of every token returned by the tokenizer
    reproduces the input string exactly.
    """
    model_config = ConfigDict(frozen=True)

    type: TokenType
    content: str
    name: str = ""  # lower-cased tag name for tag tokens
    raw: bool = False  # inner text of a whitespace-preserving element

    @property
    def is_tag(self) -> bool:
        return self.type in (TokenType.OPENING_TAG, TokenType.CLOSING_TAG, TokenType.SELF_CLOSING_TAG)


PRESERVE_WHITESPACE_TAGS = frozenset({"pre", "code", "textarea", "script", "style"})

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr"
})

BLOCK_ELEMENTS = frozenset({
    "html", "head", "body",
    "div", "p", "h1", "h2", "h3", "h4", "h5", "h6", "section", "article",
    "header", "footer", "nav", "main", "aside", "ul", "ol", "li", "dl",
    "dt", "dd", "table", "thead", "tbody", "tfoot", "tr", "td", "th",
    "form", "fieldset", "legend", "blockquote", "pre", "address"
})

INLINE_ELEMENTS = frozenset({
    "a", "span", "strong", "em", "b", "i", "u", "small", "sub", "sup",
    "code", "kbd", "samp", "var", "time", "mark", "del", "ins", "q",
    "cite", "abbr", "dfn", "data"
})


class FormattingOptions(BaseModel):
    """
    Layout configuration for the pretty printer.

    Instances are immutable; use `with_overrides()` to derive a variant.
    `max_line_length` is the single threshold for every append-or-wrap decision.
    """
    model_config = ConfigDict(frozen=True)

    indent_size: int = Field(default=2, ge=0)
    indent_char: str = Field(default=" ", min_length=1, max_length=1)
    max_line_length: int = Field(default=120, gt=0)
    preserve_whitespace: FrozenSet[str] = PRESERVE_WHITESPACE_TAGS
    self_closing_tags: FrozenSet[str] = VOID_ELEMENTS
    block_elements: FrozenSet[str] = BLOCK_ELEMENTS
    inline_elements: FrozenSet[str] = INLINE_ELEMENTS

    @field_validator(
        "preserve_whitespace", "self_closing_tags", "block_elements", "inline_elements",
        mode="before"
    )
    @classmethod
    def lower_tag_names(cls, v: Any) -> Any:
        """Tag names are compared lower-cased; accepts any iterable of names."""
        if isinstance(v, str):
            v = [v]
        return frozenset(str(name).strip().lower() for name in v)

    def with_overrides(self, **overrides: Any) -> "FormattingOptions":
        """Returns a validated copy with the given fields replaced."""
        if not overrides:
            return self
        return FormattingOptions(**{**self.model_dump(), **overrides})

    def indent(self, depth: int) -> str:
        return self.indent_char * (max(depth, 0) * self.indent_size)


DEFAULT_OPTIONS = FormattingOptions()
