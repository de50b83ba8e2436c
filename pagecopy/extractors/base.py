"""Abstract snapshot provider."""

from __future__ import annotations

from abc import ABC, abstractmethod

from playwright.async_api import Page

from pagecopy.core.types import Snapshot


class BaseSnapshotProvider(ABC):
    """Captures one accessibility snapshot of a page. Timeouts are applied by the caller."""

    @abstractmethod
    async def capture(self, page: Page) -> Snapshot: ...
