"""
CDP-based accessibility snapshot for Playwright.

Uses Accessibility.getFullAXTree (Chrome DevTools Protocol) to pull the flat
node list of the page and converts it to a Snapshot without reshaping the
tree: every node keeps its CDP id and child id order.
"""

from __future__ import annotations

from typing import Any

from playwright.async_api import Page

from pagecopy.core.types import AXNode, Snapshot
from pagecopy.extractors.base import BaseSnapshotProvider

# Internal Chrome role names → normalised role strings
_INTERNAL_ROLE_MAP: dict[str, str] = {
    "RootWebArea": "document",
    "StaticText": "text",
    "LineBreak": "text",
    "InlineTextBox": "text",
    "GenericContainer": "generic",
    "Paragraph": "paragraph",
    "ListItem": "listitem",
    "Section": "section",
    "presentation": "none",
}

# ignoredReasons that mean the node is not rendered to the user
_INVISIBLE_REASONS = frozenset({
    "notRendered", "notVisible", "ariaHiddenElement", "ariaHiddenSubtree",
})


def _ax_value(v: dict | None) -> Any:
    """Pull the concrete value out of a CDP AXValue envelope."""
    if v is None:
        return None
    return v.get("value")


def _get_props(raw_node: dict) -> dict[str, Any]:
    """Flatten the CDP properties array into a {name: value} dict."""
    return {
        p["name"]: _ax_value(p.get("value"))
        for p in raw_node.get("properties", [])
    }


class CDPSnapshotProvider(BaseSnapshotProvider):
    """Snapshot provider backed by a short-lived CDP session."""

    async def capture(self, page: Page) -> Snapshot:
        cdp = await page.context.new_cdp_session(page)
        try:
            result = await cdp.send("Accessibility.getFullAXTree")
        finally:
            await cdp.detach()

        return build_snapshot(result.get("nodes", []))


def build_snapshot(nodes: list[dict]) -> Snapshot:
    """Convert raw CDP AXNodes to a Snapshot. An empty list gives a rootless snapshot."""
    if not nodes:
        return Snapshot(root_id="")
    # Root = the single node with no parentId (or empty string parentId)
    root_raw = next(
        (n for n in nodes if not n.get("parentId")),
        nodes[0],
    )
    # getFullAXTree can list child ids it does not return; those are dropped
    known = {str(n["nodeId"]) for n in nodes}
    return Snapshot(
        root_id=str(root_raw["nodeId"]),
        nodes=tuple(_convert_node(n, known) for n in nodes),
    )


def _convert_node(raw: dict, known: set[str]) -> AXNode:
    role_raw = raw.get("role", {})
    raw_role = role_raw.get("value", "generic") or "generic"
    role = _INTERNAL_ROLE_MAP.get(raw_role, raw_role)

    name = str(_ax_value(raw.get("name")) or "")

    invisible = _is_invisible(raw)
    # Ignored but rendered nodes (presentational wrappers and the like) are walked through
    if raw.get("ignored") and not invisible:
        role = "none"

    return AXNode(
        id=str(raw["nodeId"]),
        role=role,
        name=name,
        is_invisible=invisible,
        child_ids=tuple(
            str(c) for c in raw.get("childIds", []) if str(c) in known
        ),
    )


def _is_invisible(raw: dict) -> bool:
    hidden = _get_props(raw).get("hidden")
    if hidden is True or hidden == "true":
        return True
    if not raw.get("ignored"):
        return False
    reasons = {r.get("name") for r in raw.get("ignoredReasons", [])}
    return bool(reasons & _INVISIBLE_REASONS)
