from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Tuple

COMMENT = "comment"
STRING = "string"
KEYWORD = "keyword"
BOOLEAN = "boolean"
NUMBER = "number"

# Escaped markup such as &quot; or &#x27; must never be split by a rule.
_ENTITY = r"&(?:#x?[0-9a-fA-F]+|[a-zA-Z]+);"

_DOUBLE_QUOTED = r"&quot;(?:(?!&quot;).)*?&quot;"
_SINGLE_QUOTED = r"&#x27;(?:(?!&#x27;).)*?&#x27;"
_BACKTICK_QUOTED = r"`[^`]*`"
_NUMBER = r"\b(?:0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)\b"


def _words(*words: str) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


Rule = Tuple[str, str]

_PYTHON: Tuple[Rule, ...] = (
    (r"#[^\n]*", COMMENT),
    (r"(?:&quot;){3}[\s\S]*?(?:&quot;){3}", STRING),
    (r"(?:&#x27;){3}[\s\S]*?(?:&#x27;){3}", STRING),
    (_DOUBLE_QUOTED, STRING),
    (_SINGLE_QUOTED, STRING),
    (
        _words(
            "and", "as", "assert", "async", "await", "break", "class", "continue", "def", "del",
            "elif", "else", "except", "finally", "for", "from", "global", "if", "import", "in",
            "is", "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try", "while",
            "with", "yield",
        ),
        KEYWORD,
    ),
    (_words("True", "False", "None"), BOOLEAN),
    (_NUMBER, NUMBER),
)

_JAVASCRIPT: Tuple[Rule, ...] = (
    (r"//[^\n]*", COMMENT),
    (r"/\*[\s\S]*?\*/", COMMENT),
    (_DOUBLE_QUOTED, STRING),
    (_SINGLE_QUOTED, STRING),
    (_BACKTICK_QUOTED, STRING),
    (
        _words(
            "async", "await", "break", "case", "catch", "class", "const", "continue", "default",
            "delete", "do", "else", "enum", "export", "extends", "finally", "for", "function",
            "if", "implements", "import", "in", "instanceof", "interface", "let", "new", "of",
            "return", "static", "super", "switch", "this", "throw", "try", "type", "typeof",
            "var", "void", "while", "yield",
        ),
        KEYWORD,
    ),
    (_words("true", "false", "null", "undefined"), BOOLEAN),
    (_NUMBER, NUMBER),
)

_SHELL: Tuple[Rule, ...] = (
    (r"(?<![\w$])#[^\n]*", COMMENT),
    (_DOUBLE_QUOTED, STRING),
    (_SINGLE_QUOTED, STRING),
    (
        _words(
            "if", "then", "else", "elif", "fi", "for", "while", "until", "do", "done", "case",
            "esac", "in", "function", "return", "export", "local", "readonly", "echo", "exit",
        ),
        KEYWORD,
    ),
    (_words("true", "false"), BOOLEAN),
    (_NUMBER, NUMBER),
)

_JSON: Tuple[Rule, ...] = (
    (_DOUBLE_QUOTED, STRING),
    (_words("true", "false", "null"), BOOLEAN),
    (r"-?" + _NUMBER, NUMBER),
)

_DEFAULT: Tuple[Rule, ...] = (
    (r"//[^\n]*", COMMENT),
    (r"/\*[\s\S]*?\*/", COMMENT),
    (r"(?<![\w$])#[^\n]*", COMMENT),
    (_DOUBLE_QUOTED, STRING),
    (_SINGLE_QUOTED, STRING),
    (
        _words(
            "const", "let", "var", "function", "def", "if", "else", "for", "while", "return",
            "class", "interface", "import", "export", "from",
        ),
        KEYWORD,
    ),
    (_words("true", "false", "null", "True", "False", "None"), BOOLEAN),
    (_NUMBER, NUMBER),
)

LANGUAGE_RULES: Dict[str, Tuple[Rule, ...]] = {
    "python": _PYTHON,
    "py": _PYTHON,
    "javascript": _JAVASCRIPT,
    "js": _JAVASCRIPT,
    "jsx": _JAVASCRIPT,
    "typescript": _JAVASCRIPT,
    "ts": _JAVASCRIPT,
    "tsx": _JAVASCRIPT,
    "bash": _SHELL,
    "sh": _SHELL,
    "shell": _SHELL,
    "zsh": _SHELL,
    "json": _JSON,
}


def highlight(escaped_code: str, language: str) -> str:
    """Wrap comments, strings, keywords and numbers of escaped code in spans.

    The input must already be HTML-escaped. Only ``<span>`` tags are added, so
    stripping them gives back the input unchanged.
    """
    pattern, categories = _compiled_rules(language.strip().lower())

    def _wrap(match: re.Match) -> str:
        category = categories[match.lastindex - 1]
        if category is None:
            return match.group(0)
        return f'<span class="syntax-{category}">{match.group(0)}</span>'

    return pattern.sub(_wrap, escaped_code)


@lru_cache(maxsize=None)
def _compiled_rules(language: str) -> Tuple[re.Pattern, Tuple[str | None, ...]]:
    rules = list(LANGUAGE_RULES.get(language, _DEFAULT))
    # entities go after comments and strings so a quoted span wins over the
    # entity that opens it, but before keywords and numbers
    split = sum(1 for _, category in rules if category in (COMMENT, STRING))
    ordered = rules[:split] + [(_ENTITY, None)] + rules[split:]
    pattern = re.compile("|".join(f"({regex})" for regex, _ in ordered))
    return pattern, tuple(category for _, category in ordered)
