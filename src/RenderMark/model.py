from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Tuple


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class InlineText(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineBold(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineItalic(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineCode(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineLink(InlineElement):
    text: str
    url: str


@dataclass(frozen=True)
class InlineImage(InlineElement):
    alt: str
    url: str


@dataclass(frozen=True)
class Heading(Block):
    level: int
    text: str
    inline: Tuple[InlineElement, ...] = ()


@dataclass(frozen=True)
class Paragraph(Block):
    inline: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class Blockquote(Block):
    inline: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class ListItem:
    inline: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class ListBlock(Block):
    items: Tuple[ListItem, ...]
    ordered: bool
    start: int = 1


@dataclass(frozen=True)
class CodeBlock(Block):
    language: str
    code: str


@dataclass(frozen=True)
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""


@dataclass(frozen=True)
class Collapsible(Block):
    children: Tuple[Block, ...]


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...]
    headings: Tuple[Heading, ...] = field(default=())


@dataclass(frozen=True)
class TocEntry:
    id: str
    text: str
    level: int


class RenderResult(NamedTuple):
    html: str
    toc: Tuple[TocEntry, ...]
