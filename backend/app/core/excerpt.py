"""Excerpts — stored excerpt, or an automatic one trimmed from rendered content.

Invariants:
    - Only text-like blocks feed an automatic excerpt; wrapper blocks contribute
      their allowed inner blocks, never their own markup
    - A non-wrapper block with a disallowed or nested inner block is skipped whole
"""

import re

from app.core.parse_blocks import ParsedBlock
from app.core.repository_protocols import BlockRendererLike

DEFAULT_EXCERPT_LENGTH = 55
EXCERPT_MORE = " [&hellip;]"

# None is the freeform (classic) block
EXCERPT_INNER_BLOCKS = frozenset({
    None, "core/freeform", "core/heading", "core/html", "core/list",
    "core/media-text", "core/paragraph", "core/preformatted", "core/pullquote",
    "core/quote", "core/table", "core/verse",
})
EXCERPT_WRAPPER_BLOCKS = frozenset({"core/columns", "core/column", "core/group"})
EXCERPT_BLOCKS = EXCERPT_INNER_BLOCKS | EXCERPT_WRAPPER_BLOCKS

_TAGS = re.compile(r"<(script|style)[^>]*?>.*?</\1>|<[^>]*>", re.DOTALL | re.IGNORECASE)
_WHITESPACE = re.compile(r"[\n\r\t ]+")


def render_excerpt_source(blocks: list[ParsedBlock], renderer: BlockRendererLike) -> str:
    """Render only the blocks an automatic excerpt may draw from."""
    output = []
    for block in blocks:
        if block.name not in EXCERPT_BLOCKS:
            continue
        if block.inner_blocks:
            if block.name in EXCERPT_WRAPPER_BLOCKS:
                output.append(_render_wrapper_contents(block, renderer))
                continue
            if any(
                inner.name not in EXCERPT_INNER_BLOCKS or inner.inner_blocks
                for inner in block.inner_blocks
            ):
                continue
        output.append(renderer.render(block))
    return "".join(output)


def _render_wrapper_contents(block: ParsedBlock, renderer: BlockRendererLike) -> str:
    output = []
    for inner in block.inner_blocks:
        if inner.name not in EXCERPT_BLOCKS:
            continue
        if inner.inner_blocks:
            output.append(_render_wrapper_contents(inner, renderer))
        else:
            output.append(renderer.render(inner))
    return "".join(output)


def strip_tags(html: str) -> str:
    return _TAGS.sub("", html)


def trim_words(text: str, num_words: int = DEFAULT_EXCERPT_LENGTH, more: str = EXCERPT_MORE) -> str:
    """Keep the first num_words words; append `more` only when words were dropped."""
    words = [w for w in _WHITESPACE.split(strip_tags(text)) if w]
    if len(words) > num_words:
        return " ".join(words[:num_words]) + more
    return " ".join(words)


def get_excerpt(
    stored_excerpt: str | None,
    rendered_content: str,
    length: int = DEFAULT_EXCERPT_LENGTH,
) -> str:
    if stored_excerpt:
        return stored_excerpt
    return trim_words(rendered_content, length)
