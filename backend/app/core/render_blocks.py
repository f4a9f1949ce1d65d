"""Block Renderer — turns a ParsedBlock back into markup.

Invariants:
    - Static blocks render as innerContent with each None replaced by the rendered inner block
    - A registered callback for a block name replaces the static markup
    - Freeform blocks render their HTML unchanged (callers decide whether to use it)

Design Decisions:
    - Registry is per renderer instance, filled at startup and read-only afterwards
    - Callbacks receive the already-rendered inner content, same contract as host dynamic blocks
"""

from typing import Any, Callable

from app.core.parse_blocks import ParsedBlock

RenderCallback = Callable[[dict[str, Any], str, ParsedBlock], str]


class BlockRenderer:
    """Renders parsed blocks, with optional dynamic callbacks per block name."""

    def __init__(self) -> None:
        self._callbacks: dict[str, RenderCallback] = {}

    def register(self, name: str, callback: RenderCallback) -> None:
        self._callbacks[name] = callback

    def is_dynamic(self, name: str | None) -> bool:
        return name in self._callbacks

    def render(self, block: ParsedBlock) -> str:
        inner = iter(block.inner_blocks)
        parts: list[str] = []
        for chunk in block.inner_content:
            if chunk is None:
                parts.append(self.render(next(inner)))
            else:
                parts.append(chunk)
        content = "".join(parts)

        callback = self._callbacks.get(block.name) if block.name else None
        if callback is not None:
            return callback(block.attrs, content, block)
        return content
