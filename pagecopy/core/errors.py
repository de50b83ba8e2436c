"""Errors raised by the extraction pipeline."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class: the snapshot could not be turned into a document."""


class MissingRootError(ExtractionError):
    def __init__(self, root_id: str) -> None:
        super().__init__(f"Root node {root_id!r} not found in snapshot")
        self.root_id = root_id


class MalformedTreeError(ExtractionError):
    """A child id is dangling or reached twice (cycle or shared subtree)."""

    UNRESOLVED = "unresolved"
    REVISITED = "revisited"

    def __init__(self, node_id: str, reason: str) -> None:
        super().__init__(f"Child node {node_id!r} {reason} during traversal")
        self.node_id = node_id
        self.reason = reason


class EmptyResultError(ExtractionError):
    """Traversal finished cleanly but produced no visible text."""

    def __init__(self) -> None:
        super().__init__("No text extracted from snapshot")
