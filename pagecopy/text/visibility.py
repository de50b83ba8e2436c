"""Visibility filter — decides what the extractor does with each node."""

from __future__ import annotations

from pagecopy.core.types import PASS_THROUGH_ROLES, AXNode, Decision


class VisibilityFilter:
    """
    Per-node decision from the invisible flag and the role.

    Exclusion covers the whole subtree only because the extractor never
    descends into an excluded node; children are not re-checked.
    """

    def decide(self, node: AXNode) -> Decision:
        if node.is_invisible:
            return Decision.EXCLUDE
        if node.role in PASS_THROUGH_ROLES:
            return Decision.PASS_THROUGH
        return Decision.EXTRACT
