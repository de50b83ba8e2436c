from pagecopy.core.copier import PageCopier
from pagecopy.core.errors import (
    EmptyResultError,
    ExtractionError,
    MalformedTreeError,
    MissingRootError,
)
from pagecopy.core.pipeline import build_document, extract_text
from pagecopy.core.types import (
    AXNode,
    CopyResult,
    Decision,
    Snapshot,
)
from pagecopy.extractors.cdp import CDPSnapshotProvider

__all__ = [
    "PageCopier",
    "AXNode",
    "CopyResult",
    "Decision",
    "Snapshot",
    "build_document",
    "extract_text",
    "CDPSnapshotProvider",
    # Errors
    "EmptyResultError",
    "ExtractionError",
    "MalformedTreeError",
    "MissingRootError",
]
