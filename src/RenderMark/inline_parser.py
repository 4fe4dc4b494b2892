from __future__ import annotations

from typing import List, Optional, Tuple

from .model import (
    InlineBold,
    InlineCode,
    InlineElement,
    InlineImage,
    InlineItalic,
    InlineLink,
    InlineText,
)

_Match = Optional[Tuple[InlineElement, int]]


def parse_inline(text: str) -> List[InlineElement]:
    """Split a block's text into inline nodes.

    One left-to-right pass. Span contents are captured as-is and never
    re-scanned, and a delimiter without a partner is kept as literal text.
    """
    result: List[InlineElement] = []
    buffer: List[str] = []
    i = 0
    while i < len(text):
        match = _match_span(text, i)
        if match is None:
            buffer.append(text[i])
            i += 1
            continue
        node, end = match
        if buffer:
            result.append(InlineText("".join(buffer)))
            buffer = []
        result.append(node)
        i = end
    if buffer:
        result.append(InlineText("".join(buffer)))
    return result


def _match_span(text: str, i: int) -> _Match:
    char = text[i]
    if char == "!":
        return _match_image(text, i)
    if char == "[":
        return _match_link(text, i)
    if char == "`":
        return _match_code(text, i)
    if char == "*":
        return _match_bold(text, i) or _match_italic(text, i)
    return None


def _match_image(text: str, i: int) -> _Match:
    if not text.startswith("![", i):
        return None
    close = text.find("]", i + 2)
    if close == -1:
        return None
    url, end = _link_target(text, close + 1)
    if url is None:
        return None
    return InlineImage(alt=text[i + 2 : close], url=url), end


def _match_link(text: str, i: int) -> _Match:
    close = _closing_bracket(text, i + 1)
    if close is None or close == i + 1:
        return None
    url, end = _link_target(text, close + 1)
    if url is None:
        return None
    return InlineLink(text=text[i + 1 : close], url=url), end


def _closing_bracket(text: str, start: int) -> Optional[int]:
    """Find the `]` closing a link text, allowing one nested bracket pair."""
    depth = 0
    for j in range(start, len(text)):
        char = text[j]
        if char == "[":
            depth += 1
            if depth > 1:
                return None
        elif char == "]":
            if depth == 0:
                return j
            depth -= 1
    return None


def _link_target(text: str, i: int) -> Tuple[Optional[str], int]:
    if not text.startswith("(", i):
        return None, i
    close = text.find(")", i + 1)
    if close == -1:
        return None, i
    url = text[i + 1 : close].strip()
    if not url or "\n" in url:
        return None, i
    return url, close + 1


def _match_code(text: str, i: int) -> _Match:
    close = text.find("`", i + 1)
    if close <= i + 1:
        return None
    return InlineCode(text[i + 1 : close]), close + 1


def _match_bold(text: str, i: int) -> _Match:
    if not text.startswith("**", i):
        return None
    close = text.find("**", i + 2)
    if close <= i + 2:
        return None
    return InlineBold(text[i + 2 : close]), close + 2


def _match_italic(text: str, i: int) -> _Match:
    # a `*` touching another `*` belongs to a bold delimiter
    if text.startswith("**", i) or (i > 0 and text[i - 1] == "*"):
        return None
    close = text.find("*", i + 1)
    if close <= i + 1:
        return None
    return InlineItalic(text[i + 1 : close]), close + 1
