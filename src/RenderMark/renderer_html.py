from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html import escape
from typing import Iterable, List, Optional, Sequence, Set

from markdown_it.common.normalize_url import normalizeLink, validateLink

from .config import DEFAULT_OPTIONS, RenderOptions
from .highlighter import highlight
from .model import (
    Block,
    Blockquote,
    CodeBlock,
    Collapsible,
    Document,
    Heading,
    HorizontalRule,
    InlineBold,
    InlineCode,
    InlineElement,
    InlineImage,
    InlineItalic,
    InlineLink,
    InlineText,
    ListBlock,
    Paragraph,
    RenderResult,
    TocEntry,
)
from .slug import slugify

logger = logging.getLogger(__name__)

_EXTERNAL_PREFIXES = ("http://", "https://", "//")


@dataclass
class RenderState:
    options: RenderOptions
    toc: List[TocEntry] = field(default_factory=list)
    used_ids: Set[str] = field(default_factory=set)
    code_blocks: int = 0
    collapsibles: int = 0


def render_document(doc: Document, options: RenderOptions = DEFAULT_OPTIONS) -> RenderResult:
    """Render a parsed Document into an HTML fragment and its outline."""
    state = RenderState(options=options)
    html = _render_blocks(doc.blocks, state)
    logger.debug("Rendered %d blocks, %d toc entries", len(doc.blocks), len(state.toc))
    return RenderResult(html=html, toc=tuple(state.toc))


def render_toc(toc: Sequence[TocEntry]) -> str:
    """Render outline entries as a linked list for navigation."""
    if not toc:
        return "<p>No headings</p>"
    lines = ["<ul>"]
    for entry in toc:
        lines.append(
            f'<li class="toc-level-{entry.level}">'
            f'<a href="#{escape(entry.id)}" class="toc-link">{escape(entry.text)}</a></li>'
        )
    lines.append("</ul>")
    return "\n".join(lines)


def _render_blocks(blocks: Iterable[Block], state: RenderState) -> str:
    return "\n".join(_dispatch_block(block, state) for block in blocks)


def _dispatch_block(block: Block, state: RenderState) -> str:
    if isinstance(block, Heading):
        return _render_heading(block, state)
    if isinstance(block, Paragraph):
        return f"<p>{_render_inline(block.inline, state)}</p>"
    if isinstance(block, Blockquote):
        return f"<blockquote>{_render_inline(block.inline, state)}</blockquote>"
    if isinstance(block, ListBlock):
        return _render_list(block, state)
    if isinstance(block, CodeBlock):
        return _render_code_block(block, state)
    if isinstance(block, HorizontalRule):
        return "<hr />"
    if isinstance(block, Collapsible):
        return _render_collapsible(block, state)
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _render_heading(heading: Heading, state: RenderState) -> str:
    heading_id = _heading_id(heading, state)
    state.toc.append(TocEntry(id=heading_id, text=heading.text, level=heading.level))
    tag = f"h{heading.level}"
    return f'<{tag} id="{escape(heading_id)}">{_render_inline(heading.inline, state)}</{tag}>'


def _heading_id(heading: Heading, state: RenderState) -> str:
    base = slugify(heading.text) or f"heading-{len(state.toc)}"
    base = state.options.heading_id_prefix + base
    if not state.options.unique_heading_ids:
        return base
    candidate = base
    suffix = 0
    while candidate in state.used_ids:
        suffix += 1
        candidate = f"{base}-{suffix}"
    state.used_ids.add(candidate)
    return candidate


def _render_list(block: ListBlock, state: RenderState) -> str:
    tag = "ol" if block.ordered else "ul"
    start = f' start="{block.start}"' if block.ordered and block.start != 1 else ""
    lines = [f"<{tag}{start}>"]
    for item in block.items:
        lines.append(f"<li>{_render_inline(item.inline, state)}</li>")
    lines.append(f"</{tag}>")
    return "\n".join(lines)


def _render_code_block(block: CodeBlock, state: RenderState) -> str:
    state.code_blocks += 1
    block_id = f"code-block-{state.code_blocks}"
    language = block.language.split()[0] if block.language.strip() else ""
    escaped = escape(block.code)
    try:
        body = highlight(escaped, language)
    except re.error as exc:
        logger.warning("Highlighting failed for %r: %s", language, exc)
        body = escaped
    lang_attr = escape(language)
    code_class = f' class="language-{lang_attr}"' if language else ""
    label = escape(state.options.copy_button_label)
    return "\n".join(
        [
            f'<div class="code-block" id="{block_id}">',
            f'<button type="button" class="copy-code-button" data-target="{block_id}">{label}</button>',
            f'<pre><code{code_class} data-lang="{lang_attr}">{body}</code></pre>',
            "</div>",
        ]
    )


def _render_collapsible(block: Collapsible, state: RenderState) -> str:
    state.collapsibles += 1
    block_id = f"collapsible-{state.collapsibles}"
    label = escape(state.options.toggle_label)
    lines = [
        f'<div class="collapsible" id="{block_id}">',
        f'<button type="button" class="collapse-toggle" aria-controls="{block_id}-content">{label}</button>',
        f'<div class="collapse-content" id="{block_id}-content">',
    ]
    children = _render_blocks(block.children, state)
    if children:
        lines.append(children)
    lines.extend(["</div>", "</div>"])
    return "\n".join(lines)


def _render_inline(elements: Iterable[InlineElement], state: RenderState) -> str:
    return "".join(_render_inline_element(element, state) for element in elements)


def _render_inline_element(element: InlineElement, state: RenderState) -> str:
    if isinstance(element, InlineText):
        return escape(element.text)
    if isinstance(element, InlineBold):
        return f"<strong>{escape(element.text)}</strong>"
    if isinstance(element, InlineItalic):
        return f"<em>{escape(element.text)}</em>"
    if isinstance(element, InlineCode):
        return f"<code>{escape(element.text)}</code>"
    if isinstance(element, InlineLink):
        return _render_link(element, state)
    if isinstance(element, InlineImage):
        return _render_image(element, state)
    raise TypeError(f"Unsupported inline type: {type(element).__name__}")


def _render_link(link: InlineLink, state: RenderState) -> str:
    href = _safe_url(link.url)
    if href is None:
        return escape(link.text)
    attrs = f' href="{escape(href)}"'
    if _is_external(link.url):
        attrs += f' target="_blank" rel="{escape(_external_rel(state.options.external_link_rel))}"'
    return f"<a{attrs}>{escape(link.text)}</a>"


def _render_image(image: InlineImage, state: RenderState) -> str:
    src = _safe_url(image.url)
    if src is None:
        return escape(image.alt)
    return f'<img src="{escape(src)}" alt="{escape(image.alt)}" class="{escape(state.options.image_class)}" />'


def _safe_url(url: str) -> Optional[str]:
    href = normalizeLink(url)
    if not validateLink(href):
        logger.debug("Rejected link target %r", url)
        return None
    return href


def _external_rel(configured: str) -> str:
    # target="_blank" is only emitted together with noopener
    tokens = configured.split()
    if "noopener" not in tokens:
        tokens.insert(0, "noopener")
    return " ".join(tokens)


def _is_external(url: str) -> bool:
    return url.lower().startswith(_EXTERNAL_PREFIXES)
