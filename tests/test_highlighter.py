import re
from html import escape

import pytest

from RenderMark.highlighter import highlight

_SPAN_RE = re.compile(r'<span class="syntax-[a-z]+">|</span>')


def _strip(html: str) -> str:
    return _SPAN_RE.sub("", html)


def test_python_categories():
    code = escape('def f(x):\n    return "if" + 42  # if not\n')
    result = highlight(code, "python")
    assert '<span class="syntax-keyword">def</span>' in result
    assert '<span class="syntax-keyword">return</span>' in result
    assert '<span class="syntax-string">&quot;if&quot;</span>' in result
    assert '<span class="syntax-number">42</span>' in result
    assert '<span class="syntax-comment"># if not</span>' in result
    assert _strip(result) == code


def test_keywords_inside_strings_and_comments_are_not_wrapped():
    code = escape("// return x\nconst s = 'let me';")
    result = highlight(code, "js")
    assert result.count("syntax-keyword") == 1
    assert '<span class="syntax-string">&#x27;let me&#x27;</span>' in result
    assert _strip(result) == code


def test_entities_are_never_split():
    code = escape("echo \"a\" # it's 27 & <done>")
    result = highlight(code, "bash")
    assert "&#x27;" in result
    assert "&amp;" in result
    assert _strip(result) == code


def test_apostrophe_outside_string_is_left_alone():
    code = escape("x = 1 if don't else 2")
    result = highlight(code, "python")
    assert '<span class="syntax-number">1</span>' in result
    assert _strip(result) == code


def test_booleans():
    result = highlight(escape('{"ok": true, "n": null, "v": -1.5}'), "json")
    assert '<span class="syntax-boolean">true</span>' in result
    assert '<span class="syntax-boolean">null</span>' in result
    assert '<span class="syntax-number">-1.5</span>' in result


def test_unknown_language_uses_default_rules():
    result = highlight("function go() { return 1; }", "cobol")
    assert '<span class="syntax-keyword">function</span>' in result
    assert '<span class="syntax-keyword">return</span>' in result


def test_language_tag_is_case_insensitive():
    assert highlight("let", "JavaScript") == '<span class="syntax-keyword">let</span>'


@pytest.mark.parametrize("language", ["python", "js", "sh", "json", ""])
def test_text_content_is_preserved(language):
    code = escape('a = "unterminated\n/* block\ncomment */ 0x1F # x\n\'q\'')
    assert _strip(highlight(code, language)) == code
