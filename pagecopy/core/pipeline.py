"""Snapshot → document pipeline. Synchronous, pure, no state between calls."""

from __future__ import annotations

from pagecopy.core.errors import EmptyResultError
from pagecopy.core.types import Snapshot
from pagecopy.formatter.formatter import format_document
from pagecopy.formatter.normalizer import collapse_spaces
from pagecopy.text.extractor import TextExtractor
from pagecopy.text.node_index import NodeIndex


def extract_text(snapshot: Snapshot, extractor: TextExtractor | None = None) -> str:
    """
    Index the snapshot, walk it and collapse repeated spaces.

    Raises MissingRootError before any traversal, MalformedTreeError on a
    dangling or repeated child id.
    """
    index = NodeIndex(snapshot)
    raw = (extractor or TextExtractor()).extract(index)
    return collapse_spaces(raw)


def build_document(
    snapshot: Snapshot,
    title: str,
    url: str,
    extractor: TextExtractor | None = None,
) -> str:
    """Return the full WEB PAGE document, or raise EmptyResultError if there is no text."""
    content = extract_text(snapshot, extractor)
    if not content.strip():
        raise EmptyResultError()
    return format_document(content, title, url)
