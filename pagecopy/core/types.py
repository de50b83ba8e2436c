"""Shared types and dataclasses for pagecopy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Roles whose own name is never emitted; their children are still walked
PASS_THROUGH_ROLES = frozenset({"none", "generic", "script", "style"})

# Roles that get a paragraph break before and after their content
BLOCK_ROLES = frozenset({
    "paragraph", "heading", "listitem", "blockquote", "article", "section",
})


class Decision(str, Enum):
    EXCLUDE = "exclude"  # skip the node and its whole subtree
    PASS_THROUGH = "pass_through"  # skip the node, visit children
    EXTRACT = "extract"  # emit the name, then visit children


@dataclass(frozen=True)
class AXNode:
    """A single node of an accessibility tree snapshot."""

    id: str  # opaque, unique within one snapshot
    role: str  # normalised role (paragraph, heading, generic, ...)
    name: str = ""  # accessible name
    is_invisible: bool = False
    child_ids: tuple[str, ...] = ()  # traversal order

    @property
    def is_block(self) -> bool:
        return self.role in BLOCK_ROLES


@dataclass(frozen=True)
class Snapshot:
    """Flat, point-in-time view of a page's accessibility tree."""

    root_id: str
    nodes: tuple[AXNode, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass
class CopyResult:
    """What PageCopier returns after a successful copy()."""

    url: str
    title: str
    text: str  # the formatted document handed to the clipboard
    token_count: int  # tokens in text
    node_count: int  # nodes in the snapshot the text came from
    latency_ms: float  # wall-clock ms for the full copy() call
