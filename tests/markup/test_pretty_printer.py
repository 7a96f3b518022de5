# tests/markup/test_pretty_printer.py
import pytest

from markup.errors import MarkupStructureError
from markup.model import FormattingOptions, TokenType
from markup.printer import PrettyPrinter, format_html, format_jsx, minify_html
from markup.tokenizer import tokenize

DOCUMENT = (
    "<!DOCTYPE html><html><head><title>T</title></head>"
    "<body><main><h1>Hi</h1></main></body></html>"
)

SAMPLES = [
    "<div><p>Hello <strong>world</strong></p></div>",
    DOCUMENT,
    "<section>\n\n   <h2>Title</h2>\n<p>Some   text with <a href=\"/x\">a link</a>.</p></section>",
    "<ul><li>One</li><li>Two <em>items</em></li></ul>",
    "<div><pre>  keep\n    this</pre><p>after</p></div>",
    "<div><!-- a   comment --><img src=\"a.png\" alt=\"A\"><br/></div>",
    "<script>if (a < b && c > d) { run(); }</script>",
    "<table><tr><th scope=\"col\">H</th></tr><tr><td>1</td></tr></table>",
    "Plain text only",
    "",
]


@pytest.fixture
def printer():
    return PrettyPrinter()


def test_format_nested_blocks(printer):
    """Block elements get their own line, inline elements stay in the text flow."""
    out = printer.format_html("<div><p>Hello <strong>world</strong></p></div>")
    assert out == "<div>\n  <p>\n    Hello <strong>world</strong>\n  </p>\n</div>"


def test_format_document(printer):
    out = printer.format_html(DOCUMENT)
    assert out == (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <head>\n"
        "    <title>T</title>\n"
        "  </head>\n"
        "  <body>\n"
        "    <main>\n"
        "      <h1>\n"
        "        Hi\n"
        "      </h1>\n"
        "    </main>\n"
        "  </body>\n"
        "</html>"
    )


@pytest.mark.parametrize("markup", SAMPLES)
def test_format_is_idempotent(printer, markup):
    once = printer.format_html(markup)
    assert printer.format_html(once) == once


@pytest.mark.parametrize("markup", SAMPLES)
def test_format_is_deterministic(printer, markup):
    assert printer.format_html(markup) == printer.format_html(markup)


@pytest.mark.parametrize("markup", SAMPLES)
def test_output_is_balanced(printer, markup):
    tokens = tokenize(printer.format_html(markup))
    opened = sum(1 for t in tokens if t.type is TokenType.OPENING_TAG)
    closed = sum(1 for t in tokens if t.type is TokenType.CLOSING_TAG)
    assert opened == closed


def test_indentation_is_multiple_of_indent_size(printer):
    out = printer.format_html(
        "<main><section><h2>A</h2><ul><li>x</li><li>y</li></ul></section></main>"
    )
    for line in out.split("\n"):
        indent = len(line) - len(line.lstrip(" "))
        assert indent % 2 == 0


def test_custom_indent_and_char():
    options = FormattingOptions(indent_size=1, indent_char="\t")
    out = PrettyPrinter(options).format_html("<div><p>x</p></div>")
    assert out == "<div>\n\t<p>\n\t\tx\n\t</p>\n</div>"


def test_long_text_wraps_at_max_line_length():
    options = FormattingOptions(max_line_length=20)
    out = PrettyPrinter(options).format_html("<p>one two three four five six seven</p>")
    assert out == "<p>\n  one two three four\n  five six seven\n</p>"
    assert all(len(line) <= 20 for line in out.split("\n"))


def test_void_elements_are_not_closed(printer):
    out = printer.format_html("<div><img src=\"a.png\" alt=\"A\"><br><hr/></div>")
    assert "</img>" not in out
    assert "</br>" not in out
    assert "<img src=\"a.png\" alt=\"A\">" in out


@pytest.mark.parametrize("element", [
    "<pre>  keep\n    this</pre>",
    "<textarea name=\"note\">  line one\n\n   <b>line</b> two</textarea>",
    "<style>\n  p  >  a { color: red; }\n</style>",
    "<PRE>  keep\n    <i>this</i></PRE>",
    "<pre>İİ a  </pre>",
])
def test_preserve_whitespace_content_is_untouched(printer, element):
    out = printer.format_html(f"<div>{element}<p>after</p></div>")
    assert element in out
    assert printer.format_html(out) == out


def test_script_content_is_not_tokenized(printer):
    script = "<script>if (a < b && c > d) { run(); }</script>"
    assert printer.format_html(script) == script


def test_comment_gets_own_line(printer):
    out = printer.format_html("<div><!-- a   comment --><p>x</p></div>")
    assert "\n  <!-- a   comment -->\n" in out


def test_attributes_are_normalized(printer):
    out = printer.format_html("<div\n   class=\"a\"\n   id=\"b\"  ><p>x</p></div>")
    assert out.startswith("<div class=\"a\" id=\"b\">\n")


def test_format_attributes():
    assert PrettyPrinter.format_attributes("<a \n href=\"/\"   >") == "<a href=\"/\">"


@pytest.mark.parametrize("markup, message", [
    ("<div><p>text</div>", "Mismatched tags: expected </p>, found </div>"),
    ("<section><p>x</p>", "Unclosed tags: section"),
    ("</div>", "Unexpected closing tag </div>: no open element"),
    ("<p>a<br></br></p>", "Unexpected closing tag </br> for void element"),
])
def test_malformed_markup_raises(printer, markup, message):
    with pytest.raises(MarkupStructureError) as exc_info:
        printer.format_html(markup)
    assert str(exc_info.value) == f"Pretty printer error: {message}"
    assert isinstance(exc_info.value, ValueError)


def test_error_carries_tag_names(printer):
    with pytest.raises(MarkupStructureError) as exc_info:
        printer.format_html("<div><span>x</div>")
    assert exc_info.value.tags == ("span", "div")


def test_minify_collapses_whitespace(printer):
    markup = "<div>\n  <p>  Hello   world </p>\n</div>"
    assert printer.minify_html(markup) == "<div><p> Hello world </p></div>"


def test_minify_keeps_preformatted_content(printer):
    assert printer.minify_html("<div>\n <pre>  a\n b</pre>\n</div>") == "<div><pre>  a\n b</pre></div>"


@pytest.mark.parametrize("markup, expected", [
    ("<div><p>x</p></div>", True),
    ("<div><p>x</div>", False),
    ("<p>a<br>b</p>", True),
    ("<!DOCTYPE html><html><head><title>T</title></head><body></body></html>", True),
    ("<!doctype HTML><html><head></head><body></body></html>", True),
    ("<!DOCTYPE html><div></div>", False),
    ("<!DOCTYPE html PUBLIC \"-//W3C//DTD XHTML 1.0//EN\"><html><head></head><body></body></html>", False),
])
def test_is_valid_html5(printer, markup, expected):
    assert printer.is_valid_html5(markup) is expected


def test_format_jsx_renames_class_name():
    out = format_jsx("<div className=\"box\"><span>Hi</span></div>")
    assert out == "<div class=\"box\">\n  <span>Hi</span>\n</div>"


def test_format_jsx_does_not_require_balance():
    # Component fragments are fine in JSX
    assert format_jsx("<div><Card title=\"x\">") == "<div>\n  <Card title=\"x\">"


def test_module_helpers_accept_overrides():
    assert format_html("<div><p>x</p></div>", indent_size=4) == "<div>\n    <p>\n        x\n    </p>\n</div>"
    assert minify_html("<p>\n a </p>") == "<p> a </p>"


def test_format_attributes_keeps_quoted_values():
    tag = "<a  title=\"a  b\"\n   data-x='  c\n d '  href=\"/\" >"
    assert PrettyPrinter.format_attributes(tag) == "<a title=\"a  b\" data-x='  c\n d ' href=\"/\">"
