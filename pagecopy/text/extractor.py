"""TextExtractor — linearises a snapshot into raw text with paragraph breaks."""

from __future__ import annotations

from pagecopy.core.errors import MalformedTreeError
from pagecopy.core.types import AXNode, Decision
from pagecopy.text.node_index import NodeIndex
from pagecopy.text.visibility import VisibilityFilter

_PARAGRAPH_BREAK = "\n\n"


class TextExtractor:
    """
    Depth-first, pre-order walk over a NodeIndex.

    Runs on an explicit work stack, so tree depth is bounded by memory rather
    than the interpreter's recursion limit. Every position is scheduled at
    most once; a dangling or repeated child id raises MalformedTreeError and
    nothing extracted so far is returned.
    """

    def __init__(self, visibility: VisibilityFilter | None = None) -> None:
        self._filter = visibility or VisibilityFilter()

    def extract(self, index: NodeIndex) -> str:
        chunks: list[str] = []
        visited = {index.root}
        # (position, closing) — closing frames add the break after a block's children
        stack: list[tuple[int, bool]] = [(index.root, False)]

        while stack:
            pos, closing = stack.pop()
            if closing:
                _paragraph_break(chunks)
                continue

            node = index.node(pos)
            decision = self._filter.decide(node)
            if decision is Decision.EXCLUDE:
                continue

            if decision is Decision.EXTRACT:
                if node.is_block:
                    _paragraph_break(chunks)
                if node.name:
                    chunks.append(node.name + " ")
                if node.is_block:
                    stack.append((pos, True))

            children = self._resolve_children(node, index, visited)
            stack.extend((child, False) for child in reversed(children))

        return "".join(chunks)

    @staticmethod
    def _resolve_children(node: AXNode, index: NodeIndex, visited: set[int]) -> list[int]:
        children: list[int] = []
        for child_id in node.child_ids:
            child = index.position(child_id)
            if child is None:
                raise MalformedTreeError(child_id, MalformedTreeError.UNRESOLVED)
            if child in visited:
                raise MalformedTreeError(child_id, MalformedTreeError.REVISITED)
            visited.add(child)
            children.append(child)
        return children


def _paragraph_break(chunks: list[str]) -> None:
    # Chunks are never empty, so the last chunk's last char is the buffer's.
    if chunks and not chunks[-1].endswith("\n"):
        chunks.append(_PARAGRAPH_BREAK)
