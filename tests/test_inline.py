from RenderMark.inline_parser import parse_inline
from RenderMark.model import (
    InlineBold,
    InlineCode,
    InlineImage,
    InlineItalic,
    InlineLink,
    InlineText,
)


def test_bold_and_italic():
    assert parse_inline("**bold** and *italic*") == [
        InlineBold("bold"),
        InlineText(" and "),
        InlineItalic("italic"),
    ]


def test_plain_text_is_one_node():
    assert parse_inline("just words here") == [InlineText("just words here")]


def test_code_span_content_is_opaque():
    assert parse_inline("run `**x**` now") == [
        InlineText("run "),
        InlineCode("**x**"),
        InlineText(" now"),
    ]


def test_link_and_image():
    nodes = parse_inline("see [docs](https://example.com) ![logo](img/logo.png)")
    assert nodes == [
        InlineText("see "),
        InlineLink(text="docs", url="https://example.com"),
        InlineText(" "),
        InlineImage(alt="logo", url="img/logo.png"),
    ]


def test_link_text_with_one_nested_bracket_pair():
    assert parse_inline("[a [b] c](#x)") == [InlineLink(text="a [b] c", url="#x")]


def test_image_with_empty_alt():
    assert parse_inline("![](pic.png)") == [InlineImage(alt="", url="pic.png")]


def test_malformed_link_is_literal():
    assert parse_inline("[text](") == [InlineText("[text](")]
    assert parse_inline("[text] (url)") == [InlineText("[text] (url)")]
    assert parse_inline("![alt](") == [InlineText("![alt](")]


def test_unterminated_delimiters_fall_back_to_text():
    assert parse_inline("**open") == [InlineText("**open")]
    assert parse_inline("`tick") == [InlineText("`tick")]
    assert parse_inline("a * b") == [InlineText("a * b")]


def test_spans_after_failed_delimiter_still_parse():
    assert parse_inline("`open and **bold**") == [
        InlineText("`open and "),
        InlineBold("bold"),
    ]


def test_span_contents_are_not_rescanned():
    assert parse_inline("**a *b* c**") == [InlineBold("a *b* c")]
    assert parse_inline("[**x**](#y)") == [InlineLink(text="**x**", url="#y")]


def test_italic_rejects_star_next_to_star():
    assert parse_inline("***") == [InlineText("***")]
