"""NodeIndex — id → arena position lookup over a flat snapshot."""

from __future__ import annotations

from pagecopy.core.errors import MissingRootError
from pagecopy.core.types import AXNode, Snapshot


class NodeIndex:
    """
    Arena of snapshot nodes addressed by integer position.

    Built once per extraction in a single pass over the node list. When an
    id occurs twice the later node wins.
    """

    def __init__(self, snapshot: Snapshot) -> None:
        self._nodes: list[AXNode] = list(snapshot.nodes)
        self._positions: dict[str, int] = {
            node.id: pos for pos, node in enumerate(self._nodes)
        }
        if snapshot.root_id not in self._positions:
            raise MissingRootError(snapshot.root_id)
        self._root = self._positions[snapshot.root_id]

    @property
    def root(self) -> int:
        return self._root

    def position(self, node_id: str) -> int | None:
        return self._positions.get(node_id)

    def node(self, pos: int) -> AXNode:
        return self._nodes[pos]

