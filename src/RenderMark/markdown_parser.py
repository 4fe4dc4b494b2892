from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from .inline_parser import parse_inline
from .model import (
    Block,
    Blockquote,
    CodeBlock,
    Collapsible,
    Document,
    Heading,
    HorizontalRule,
    ListBlock,
    ListItem,
    Paragraph,
)

logger = logging.getLogger(__name__)

FENCE = "```"
MAX_HEADING_LEVEL = 6
MAX_COLLAPSIBLE_DEPTH = 64
TAB_WIDTH = 4
MAX_ORDERED_DIGITS = 9

_COLLAPSE_START_RE = re.compile(r"<!--\s*collapse\s*-->\Z", re.IGNORECASE)
_COLLAPSE_END_RE = re.compile(r"<!--\s*/\s*collapse\s*-->\Z", re.IGNORECASE)
_HEADING_RE = re.compile(r"(#+)[ \t]+(.*)\Z")
_RULE_RE = re.compile(r"([-*_])(?:[ \t]*\1){2,}\Z")
_UNORDERED_RE = re.compile(r"([-*+])[ \t]+(.*)\Z")
_ORDERED_RE = re.compile(r"(\d{1,%d})\.[ \t]+(.*)\Z" % MAX_ORDERED_DIGITS)

# Line kinds, in the order they are tried.
_FENCE = "fence"
_COLLAPSE_START = "collapse_start"
_COLLAPSE_END = "collapse_end"
_HEADING = "heading"
_RULE = "rule"
_QUOTE = "quote"
_LIST = "list"


def parse_markdown(text: str) -> Document:
    """Scan markdown text into a Document tree."""
    scanner = _Scanner(text.replace("\r\n", "\n").replace("\r", "\n"))
    blocks = scanner.scan_blocks()
    logger.debug("Parsed %d top-level blocks, %d headings", len(blocks), len(scanner.headings))
    return Document(blocks=tuple(blocks), headings=tuple(scanner.headings))


class _Scanner:
    """Forward-only cursor over one input text.

    Created per parse call; the cursor only moves forward and every branch of
    the block loop consumes at least one line.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.depth = 0
        self.headings: List[Heading] = []

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek_line(self) -> str:
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        return self.text[self.pos : end]

    def advance_line(self) -> str:
        line = self.peek_line()
        self.pos += len(line) + 1
        return line

    def scan_blocks(self) -> List[Block]:
        blocks: List[Block] = []
        while not self.at_end():
            stripped = self.peek_line().strip()
            if not stripped:
                self.advance_line()
                continue
            kind = _classify(stripped)
            if kind == _FENCE:
                blocks.append(self._scan_fence())
            elif kind == _COLLAPSE_END:
                self.advance_line()
                if self.depth > 0:
                    return blocks
                logger.debug("Dropping unmatched collapsible end marker at offset %d", self.pos)
            elif kind == _COLLAPSE_START:
                self.advance_line()
                if self.depth >= MAX_COLLAPSIBLE_DEPTH:
                    logger.debug("Collapsible nesting limit reached, ignoring start marker")
                    continue
                blocks.append(self._scan_collapsible())
            elif kind == _HEADING:
                blocks.append(self._scan_heading(stripped))
            elif kind == _RULE:
                self.advance_line()
                blocks.append(HorizontalRule())
            elif kind == _QUOTE:
                blocks.append(self._scan_blockquote())
            elif kind == _LIST:
                blocks.append(self._scan_list())
            else:
                blocks.append(self._scan_paragraph())
        return blocks

    def _scan_fence(self) -> CodeBlock:
        opening = self.advance_line().strip()
        language = opening[len(FENCE) :].strip()
        start = self.pos
        while not self.at_end():
            line_start = self.pos
            if self.advance_line().strip() == FENCE:
                return CodeBlock(language=language, code=_trim_newline(self.text[start:line_start]))
        logger.debug("Unterminated code fence, consuming to end of input")
        return CodeBlock(language=language, code=_trim_newline(self.text[start:]))

    def _scan_collapsible(self) -> Collapsible:
        self.depth += 1
        children = self.scan_blocks()
        self.depth -= 1
        return Collapsible(children=tuple(children))

    def _scan_heading(self, stripped: str) -> Heading:
        self.advance_line()
        match = _HEADING_RE.match(stripped)
        level = min(len(match.group(1)), MAX_HEADING_LEVEL)
        text = match.group(2).strip()
        heading = Heading(level=level, text=text, inline=tuple(parse_inline(text)))
        self.headings.append(heading)
        return heading

    def _scan_blockquote(self) -> Blockquote:
        lines: List[str] = []
        while not self.at_end():
            stripped = self.peek_line().strip()
            if not stripped.startswith(">"):
                break
            self.advance_line()
            content = stripped[1:]
            if content.startswith(" "):
                content = content[1:]
            lines.append(content)
        return Blockquote(inline=tuple(parse_inline("\n".join(lines))))

    def _scan_list(self) -> ListBlock:
        first = self.peek_line()
        indent = _indent(first)
        ordered, number, _ = _list_marker(first.strip())
        items: List[List[str]] = []
        while not self.at_end():
            line = self.peek_line()
            stripped = line.strip()
            if not stripped:
                break
            kind = _classify(stripped)
            line_indent = _indent(line)
            if kind == _LIST:
                item_ordered, _, content = _list_marker(stripped)
                if line_indent != indent or item_ordered != ordered:
                    break
                self.advance_line()
                items.append([content])
            elif items and line_indent > indent and kind not in (_FENCE, _COLLAPSE_START, _COLLAPSE_END):
                self.advance_line()
                items[-1].append(stripped)
            else:
                break
        list_items = tuple(ListItem(inline=tuple(parse_inline("\n".join(parts)))) for parts in items)
        return ListBlock(items=list_items, ordered=ordered, start=number if ordered else 1)

    def _scan_paragraph(self) -> Paragraph:
        lines: List[str] = []
        while not self.at_end():
            stripped = self.peek_line().strip()
            if not stripped or (lines and _classify(stripped) is not None):
                break
            self.advance_line()
            lines.append(stripped)
        return Paragraph(inline=tuple(parse_inline(" ".join(lines))))


def _classify(stripped: str) -> Optional[str]:
    if stripped.startswith(FENCE):
        return _FENCE
    if _COLLAPSE_START_RE.match(stripped):
        return _COLLAPSE_START
    if _COLLAPSE_END_RE.match(stripped):
        return _COLLAPSE_END
    if _HEADING_RE.match(stripped):
        return _HEADING
    if _RULE_RE.match(stripped):
        return _RULE
    if stripped.startswith(">"):
        return _QUOTE
    if _list_marker(stripped) is not None:
        return _LIST
    return None


def _list_marker(stripped: str) -> Optional[Tuple[bool, int, str]]:
    match = _ORDERED_RE.match(stripped)
    if match:
        return True, int(match.group(1)), match.group(2)
    match = _UNORDERED_RE.match(stripped)
    if match:
        return False, 1, match.group(2)
    return None


def _indent(line: str) -> int:
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += TAB_WIDTH - width % TAB_WIDTH
        else:
            break
    return width


def _trim_newline(code: str) -> str:
    if code.endswith("\n"):
        return code[:-1]
    return code
