"""PageCopier — main orchestrator for the copy-page-content action."""

from __future__ import annotations

import asyncio
import inspect
import time
from typing import Any, Callable

import structlog
from playwright.async_api import Page

from pagecopy.core.errors import EmptyResultError, ExtractionError
from pagecopy.core.pipeline import build_document
from pagecopy.core.types import CopyResult
from pagecopy.extractors.base import BaseSnapshotProvider
from pagecopy.extractors.cdp import CDPSnapshotProvider
from pagecopy.formatter.token_budget import TokenBudget
from pagecopy.text.extractor import TextExtractor

logger = structlog.get_logger(__name__)

# Seconds to wait for the accessibility snapshot before giving up
DEFAULT_SNAPSHOT_TIMEOUT = 5.0


class PageCopier:
    """
    Sits between the browser (Playwright) and a clipboard.

    Usage:
        copier = PageCopier(clipboard=write_text)
        result = await copier.copy(page)
        # result is None when nothing was copied
        # result.text        → the document written to the clipboard
        # result.token_count → its size for prompt construction

    Snapshot and extraction failures never escape copy(): a timed-out or
    failed snapshot, a broken tree or an empty page all end in a log line and
    a None result. Errors from the clipboard and notifier callables propagate.
    Calls share no state, so overlapping copies are independent.
    """

    def __init__(
        self,
        *,
        provider: BaseSnapshotProvider | None = None,
        clipboard: Callable[[str], Any] | None = None,
        on_copied: Callable[[CopyResult], Any] | None = None,
        snapshot_timeout: float = DEFAULT_SNAPSHOT_TIMEOUT,
        token_budget: TokenBudget | None = None,
    ) -> None:
        self.snapshot_timeout = snapshot_timeout

        self._provider = provider or CDPSnapshotProvider()
        self._clipboard = clipboard
        self._on_copied = on_copied
        self._budget = token_budget or TokenBudget()
        self._extractor = TextExtractor()

    async def copy(self, page: Page | None) -> CopyResult | None:
        """
        Snapshot the page, build the WEB PAGE document and hand it to the clipboard.

        Returns the CopyResult, or None if nothing was copied.
        """
        t0 = time.monotonic()

        if page is None:
            logger.debug("copy.no_page")
            return None

        try:
            # Title and url are taken before the snapshot is requested
            title = await page.title()
            url = page.url
            snapshot = await asyncio.wait_for(
                self._provider.capture(page), timeout=self.snapshot_timeout
            )
        except asyncio.TimeoutError:
            logger.warning("copy.snapshot_timeout", timeout=self.snapshot_timeout)
            return None
        except Exception as exc:
            logger.warning("copy.snapshot_failed", error=str(exc), exc_info=True)
            return None

        try:
            text = build_document(snapshot, title, url, self._extractor)
        except EmptyResultError:
            logger.debug("copy.empty", url=url, nodes=len(snapshot))
            return None
        except ExtractionError as exc:
            logger.error("copy.malformed", url=url, error=str(exc))
            return None

        if self._clipboard is not None:
            await _maybe_await(self._clipboard(text))

        result = CopyResult(
            url=url,
            title=title,
            text=text,
            token_count=self._budget.count(text),
            node_count=len(snapshot),
            latency_ms=(time.monotonic() - t0) * 1000,
        )
        logger.info(
            "copy.done",
            url=url,
            nodes=result.node_count,
            tokens=result.token_count,
            latency_ms=round(result.latency_ms, 1),
        )

        if self._on_copied is not None:
            await _maybe_await(self._on_copied(result))

        return result


async def _maybe_await(value: Any) -> None:
    if inspect.isawaitable(value):
        await value
