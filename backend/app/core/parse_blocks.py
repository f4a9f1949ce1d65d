"""Block Grammar — parses serialized block markup into a tree of ParsedBlock.

Invariants:
    - In well-formed documents, all HTML outside block delimiters lands in exactly one block
    - A closer with no open block ends parsing: the rest of the document is one freeform block
    - Blocks still open at the end are popped innermost first straight into the top-level
      output, each taking the HTML after its last consumed delimiter
    - innerContent holds HTML strings and None placeholders, one None per inner block, in order
    - innerHTML is innerContent's strings concatenated (inner blocks excluded)
    - Names without a namespace are prefixed with "core/"
    - Pure function: no IO, never raises on malformed input

Design Decisions:
    - Single regex tokenizer + explicit stack, same shape as the host parser, so
      output matches what the host stores and renders
    - Whitespace-only freeform runs are kept as freeform blocks
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any

DEFAULT_NAMESPACE = "core/"

_TOKEN = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<namespace>[a-z][a-z0-9_-]*/)?(?P<name>[a-z][a-z0-9_-]*)"
    r"\s+(?P<attrs>\{.*?\}\s+)?(?P<void>/)?-->",
    re.DOTALL,
)


@dataclass
class ParsedBlock:
    """One block in the parsed tree. name is None for freeform HTML."""
    name: str | None
    attrs: dict[str, Any] = field(default_factory=dict)
    inner_blocks: list["ParsedBlock"] = field(default_factory=list)
    inner_html: str = ""
    inner_content: list[str | None] = field(default_factory=list)

    def append_html(self, html: str) -> None:
        if not html:
            return
        self.inner_html += html
        self.inner_content.append(html)

    def append_block(self, block: "ParsedBlock") -> None:
        self.inner_blocks.append(block)
        self.inner_content.append(None)


def freeform(html: str) -> ParsedBlock:
    return ParsedBlock(name=None, inner_html=html, inner_content=[html])


def _decode_attrs(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        attrs = json.loads(raw)
    except ValueError:
        return {}
    return attrs if isinstance(attrs, dict) else {}


@dataclass
class _Frame:
    """An open block plus the offsets needed to close it."""
    block: ParsedBlock
    token_start: int
    token_length: int
    prev_offset: int
    leading_html_start: int | None = None


class _BlockParser:
    """Single pass over the document's block delimiters."""

    def __init__(self, document: str):
        self.document = document
        self.offset = 0
        self.output: list[ParsedBlock] = []
        self.stack: list[_Frame] = []

    def parse(self) -> list[ParsedBlock]:
        for match in _TOKEN.finditer(self.document):
            if not self._proceed(match):
                return self.output

        if not self.stack:
            self._add_freeform()
        while self.stack:
            self._add_block_from_stack()
        return self.output

    def _proceed(self, match: re.Match) -> bool:
        start, end = match.start(), match.end()
        leading_html_start = self.offset if start > self.offset else None

        if match.group("closer"):
            if not self.stack:
                # Closer with no opener: the rest of the document is freeform
                self._add_freeform()
                return False
            if len(self.stack) == 1:
                self._add_block_from_stack(start)
            else:
                frame = self.stack.pop()
                frame.block.append_html(self.document[frame.prev_offset:start])
                self._add_inner_block(frame.block, frame.token_start, frame.token_length, end)
            self.offset = end
            return True

        name = (match.group("namespace") or DEFAULT_NAMESPACE) + match.group("name")
        block = ParsedBlock(name=name, attrs=_decode_attrs(match.group("attrs")))
        if match.group("void"):
            if not self.stack:
                if leading_html_start is not None:
                    self.output.append(freeform(self.document[leading_html_start:start]))
                self.output.append(block)
            else:
                self._add_inner_block(block, start, end - start)
        else:
            self.stack.append(_Frame(block, start, end - start, end, leading_html_start))
        self.offset = end
        return True

    def _add_freeform(self) -> None:
        if self.offset < len(self.document):
            self.output.append(freeform(self.document[self.offset:]))

    def _add_inner_block(
        self, block: ParsedBlock, token_start: int, token_length: int,
        last_offset: int | None = None,
    ) -> None:
        parent = self.stack[-1]
        parent.block.append_html(self.document[parent.prev_offset:token_start])
        parent.block.append_block(block)
        parent.prev_offset = last_offset if last_offset else token_start + token_length

    def _add_block_from_stack(self, end_offset: int | None = None) -> None:
        """Pop the innermost open block straight into the top-level output."""
        frame = self.stack.pop()
        frame.block.append_html(self.document[frame.prev_offset:end_offset])
        if frame.leading_html_start is not None:
            self.output.append(
                freeform(self.document[frame.leading_html_start:frame.token_start]),
            )
        self.output.append(frame.block)


def parse_blocks(document: str | None) -> list[ParsedBlock]:
    """Parse a serialized document into top-level blocks."""
    if not document:
        return []
    return _BlockParser(document).parse()
