"""Markdown rendering for chat display.

Parses message text into a small tree over a closed set of element kinds and
maps each kind to a pure rendering function producing Tailwind-classed HTML.
Code blocks are kept apart so the page can render them with a copy button.

Supports: headings (1-3), paragraphs, bold, italic, block quotes, ordered and
unordered lists, horizontal rules, inline code, fenced code blocks.
"""

import html
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class Kind(str, Enum):
    """Markdown element kinds understood by the renderer."""

    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    PARAGRAPH = "paragraph"
    STRONG = "emphasis-strong"
    ITALIC = "emphasis-italic"
    QUOTE = "quote"
    LIST_ORDERED = "list-ordered"
    LIST_UNORDERED = "list-unordered"
    LIST_ITEM = "list-item"
    RULE = "rule"
    CODE_INLINE = "code-inline"
    CODE_BLOCK = "code-block"
    TEXT = "text"


@dataclass(frozen=True)
class Node:
    """One element of the parsed tree.

    Leaf kinds (TEXT, CODE_INLINE, CODE_BLOCK, RULE) carry ``text``;
    container kinds carry ``children``.
    """

    kind: Kind
    text: str = ""
    children: tuple["Node", ...] = ()
    language: str = ""


@dataclass(frozen=True)
class RenderedBlock:
    """A top-level rendered block.

    ``kind`` is "html" for markup or "code" for a code block, in which case
    ``content`` is the raw source and ``language`` its fence tag.
    """

    kind: str
    content: str
    language: str = ""


_FENCE = re.compile(r"^\s*```\s*([\w+-]*)\s*$")
_HEADING = re.compile(r"^(#{1,3})\s+(.*?)(?:\s+#+)?\s*$")
_RULE = re.compile(r"^\s*(?:(?:\*\s*){3,}|(?:-\s*){3,}|(?:_\s*){3,})$")
_QUOTE = re.compile(r"^\s*>\s?(.*)$")
_UNORDERED = re.compile(r"^\s*[-*+]\s+(.*)$")
_ORDERED = re.compile(r"^\s*\d+[.)]\s+(.*)$")

_INLINE = re.compile(
    r"`(?P<code>[^`]+)`"
    r"|\*\*(?P<strong>.+?)\*\*"
    r"|(?<!\w)__(?P<strong2>.+?)__(?!\w)"
    r"|\*(?P<em>[^*\s](?:[^*]*[^*\s])?)\*"
    r"|(?<!\w)_(?P<em2>[^_\s](?:[^_]*[^_\s])?)_(?!\w)"
)


# === Parsing ===


def parse_inline(text: str) -> tuple[Node, ...]:
    """Split a run of text into TEXT, CODE_INLINE, STRONG and ITALIC nodes."""
    nodes: list[Node] = []
    pos = 0
    for match in _INLINE.finditer(text):
        if match.start() > pos:
            nodes.append(Node(Kind.TEXT, text=text[pos : match.start()]))
        if match.group("code") is not None:
            nodes.append(Node(Kind.CODE_INLINE, text=match.group("code")))
        elif (inner := match.group("strong") or match.group("strong2")) is not None:
            nodes.append(Node(Kind.STRONG, children=parse_inline(inner)))
        else:
            inner = match.group("em") or match.group("em2") or ""
            nodes.append(Node(Kind.ITALIC, children=parse_inline(inner)))
        pos = match.end()
    if pos < len(text):
        nodes.append(Node(Kind.TEXT, text=text[pos:]))
    return tuple(nodes)


def _starts_block(line: str) -> bool:
    return bool(
        _FENCE.match(line)
        or _HEADING.match(line)
        or _RULE.match(line)
        or _QUOTE.match(line)
        or _UNORDERED.match(line)
        or _ORDERED.match(line)
    )


def parse(text: str) -> tuple[Node, ...]:
    """Parse Markdown text into top-level block nodes."""
    lines = text.replace("\r\n", "\n").split("\n")
    blocks: list[Node] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if not line.strip():
            i += 1
            continue

        # Fenced code block; an unclosed fence runs to the end (mid-reveal)
        if fence := _FENCE.match(line):
            body: list[str] = []
            i += 1
            while i < len(lines) and not _FENCE.match(lines[i]):
                body.append(lines[i])
                i += 1
            i += 1
            blocks.append(
                Node(Kind.CODE_BLOCK, text="\n".join(body), language=fence.group(1))
            )
            continue

        if heading := _HEADING.match(line):
            kind = (Kind.HEADING_1, Kind.HEADING_2, Kind.HEADING_3)[len(heading.group(1)) - 1]
            blocks.append(Node(kind, children=parse_inline(heading.group(2))))
            i += 1
            continue

        # Rules before lists: "* * *" and "- - -" are rules
        if _RULE.match(line):
            blocks.append(Node(Kind.RULE))
            i += 1
            continue

        if _QUOTE.match(line):
            quoted: list[str] = []
            while i < len(lines) and (quote := _QUOTE.match(lines[i])):
                quoted.append(quote.group(1))
                i += 1
            blocks.append(Node(Kind.QUOTE, children=parse("\n".join(quoted))))
            continue

        list_pattern = _UNORDERED if _UNORDERED.match(line) else _ORDERED if _ORDERED.match(line) else None
        if list_pattern is not None:
            items: list[Node] = []
            while i < len(lines) and (item := list_pattern.match(lines[i])):
                items.append(Node(Kind.LIST_ITEM, children=parse_inline(item.group(1))))
                i += 1
            kind = Kind.LIST_UNORDERED if list_pattern is _UNORDERED else Kind.LIST_ORDERED
            blocks.append(Node(kind, children=tuple(items)))
            continue

        paragraph = [line]
        i += 1
        while i < len(lines) and lines[i].strip() and not _starts_block(lines[i]):
            paragraph.append(lines[i])
            i += 1
        blocks.append(Node(Kind.PARAGRAPH, children=parse_inline("\n".join(paragraph))))

    return tuple(blocks)


# === Rendering ===


def _children(node: Node) -> str:
    return "".join(render_node(child) for child in node.children)


def _wrap(tag: str, classes: str) -> Callable[[Node], str]:
    def render(node: Node) -> str:
        return f'<{tag} class="{classes}">{_children(node)}</{tag}>'

    return render


def _render_text(node: Node) -> str:
    return html.escape(node.text, quote=False).replace("\n", "<br>")


def _render_rule(node: Node) -> str:
    return '<hr class="my-3 border-gray-600">'


def _render_code_inline(node: Node) -> str:
    code = html.escape(node.text, quote=False)
    return f'<code class="bg-gray-700 px-1 py-0.5 rounded text-sm">{code}</code>'


def _render_code_block(node: Node) -> str:
    code = html.escape(node.text, quote=False)
    lang = f' data-language="{html.escape(node.language)}"' if node.language else ""
    return (
        f'<pre class="bg-gray-800 text-gray-100 rounded-lg p-3 my-3 overflow-x-auto text-xs"{lang}>'
        f"<code>{code}</code></pre>"
    )


_RENDERERS: dict[Kind, Callable[[Node], str]] = {
    Kind.HEADING_1: _wrap("h1", "text-2xl font-bold mt-3 mb-2"),
    Kind.HEADING_2: _wrap("h2", "text-xl font-semibold mt-3 mb-2"),
    Kind.HEADING_3: _wrap("h3", "text-lg font-semibold mt-2 mb-1"),
    Kind.PARAGRAPH: _wrap("p", "my-2 leading-relaxed"),
    Kind.STRONG: _wrap("strong", "font-bold text-white"),
    Kind.ITALIC: _wrap("em", "italic text-gray-300"),
    Kind.QUOTE: _wrap("blockquote", "border-l-4 border-gray-500 pl-4 italic text-gray-400 my-2"),
    Kind.LIST_ORDERED: _wrap("ol", "list-decimal ml-6 space-y-1"),
    Kind.LIST_UNORDERED: _wrap("ul", "list-disc ml-6 space-y-1"),
    Kind.LIST_ITEM: _wrap("li", ""),
    Kind.RULE: _render_rule,
    Kind.CODE_INLINE: _render_code_inline,
    Kind.CODE_BLOCK: _render_code_block,
    Kind.TEXT: _render_text,
}


def render_node(node: Node) -> str:
    """Render one node and its children to HTML."""
    return _RENDERERS[node.kind](node)


def render(text: str) -> tuple[RenderedBlock, ...]:
    """Render Markdown text into display blocks.

    Consecutive non-code blocks are merged into one HTML block; each code
    block stays separate with its raw source for copying.
    """
    rendered: list[RenderedBlock] = []
    pending: list[str] = []

    for block in parse(text):
        if block.kind is Kind.CODE_BLOCK:
            if pending:
                rendered.append(RenderedBlock("html", "".join(pending)))
                pending = []
            rendered.append(RenderedBlock("code", block.text, block.language))
        else:
            pending.append(render_node(block))

    if pending:
        rendered.append(RenderedBlock("html", "".join(pending)))
    return tuple(rendered)


def markdown_to_html(text: str) -> str:
    """Convert markdown to a single HTML string, code blocks included."""
    return "".join(render_node(block) for block in parse(text))
