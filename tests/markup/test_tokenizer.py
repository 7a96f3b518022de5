# tests/markup/test_tokenizer.py
import pytest

from markup.model import FormattingOptions, TokenType
from markup.tokenizer import classify_tag, extract_tag_name, tokenize

INPUTS = [
    "<div class=\"a\"><p>Hello</p></div>",
    "<!DOCTYPE html><html><body><!-- c --></body></html>",
    "a < b and <b>bold</b>",
    "<a title=\"x > y\">link</a>",
    "<pre>  <b>not a tag</b> </pre>",
    "<!-- never closed",
    "<div",
    "<pre>İİ a</pre><p>y</p>",
    "<PRE> x </Pre ><p>y</p>",
]


@pytest.mark.parametrize("markup", INPUTS)
def test_tokens_concatenate_to_input(markup):
    assert "".join(t.content for t in tokenize(markup)) == markup


def test_token_types():
    tokens = tokenize("<!DOCTYPE html><div><!-- c --><br/>text</div>")
    assert [t.type for t in tokens] == [
        TokenType.DOCTYPE,
        TokenType.OPENING_TAG,
        TokenType.COMMENT,
        TokenType.SELF_CLOSING_TAG,
        TokenType.TEXT,
        TokenType.CLOSING_TAG,
    ]


def test_void_element_without_slash_is_self_closing():
    assert classify_tag("<img src=\"a.png\">").type is TokenType.SELF_CLOSING_TAG
    assert classify_tag("<my-widget/>").type is TokenType.SELF_CLOSING_TAG
    assert classify_tag("<div>").type is TokenType.OPENING_TAG


def test_quoted_gt_does_not_end_tag():
    tokens = tokenize("<a title=\"x > y\">link</a>")
    assert tokens[0].content == "<a title=\"x > y\">"
    assert tokens[1].content == "link"


def test_literal_lt_stays_in_text():
    tokens = tokenize("a < b")
    assert len(tokens) == 1
    assert tokens[0].type is TokenType.TEXT


def test_preserved_content_is_one_raw_token():
    tokens = tokenize("<pre>  <b>x</b> </pre>")
    assert tokens[1].raw
    assert tokens[1].content == "  <b>x</b> "
    assert tokens[2].type is TokenType.CLOSING_TAG


def test_preserve_set_is_configurable():
    options = FormattingOptions(preserve_whitespace=["PRE"])
    tokens = tokenize("<code><b>x</b></code>", options)
    assert not any(t.raw for t in tokens)


@pytest.mark.parametrize("tag, name", [
    ("<DIV class=\"x\">", "div"),
    ("</Section>", "section"),
    ("<my-element>", "my-element"),
    ("<!-- x -->", ""),
])
def test_extract_tag_name(tag, name):
    assert extract_tag_name(tag) == name


def test_raw_close_found_after_case_changing_characters():
    # "İ".lower() is two characters long
    tokens = tokenize("<pre>İİ a</pre><p>y</p>")
    assert [(t.type, t.content) for t in tokens] == [
        (TokenType.OPENING_TAG, "<pre>"),
        (TokenType.TEXT, "İİ a"),
        (TokenType.CLOSING_TAG, "</pre>"),
        (TokenType.OPENING_TAG, "<p>"),
        (TokenType.TEXT, "y"),
        (TokenType.CLOSING_TAG, "</p>"),
    ]


def test_raw_close_matches_only_ascii_case_folds():
    # Long s folds to "s" under unicode case-insensitive matching
    tokens = tokenize("<script>a</ſcript>b</SCRIPT>")
    assert tokens[1].content == "a</ſcript>b"
    assert tokens[2].content == "</SCRIPT>"


def test_many_unterminated_quotes_stay_text():
    markup = "<p>" + "<a x=\"1\" y=\"" * 20001 + "</p>"
    tokens = tokenize(markup)
    assert "".join(t.content for t in tokens) == markup
    assert tokens[0].content == "<p>"
    assert tokens[-1].type is TokenType.CLOSING_TAG
    assert all(t.type is TokenType.TEXT for t in tokens[1:-1])
