from pagecopy.extractors.base import BaseSnapshotProvider
from pagecopy.extractors.cdp import CDPSnapshotProvider, build_snapshot

__all__ = ["BaseSnapshotProvider", "CDPSnapshotProvider", "build_snapshot"]
