"""
Integration tests for PageCopier (without a live browser).

The snapshot provider and token budget are injected as mocks, validating the
flow from copy() call to clipboard write and CopyResult.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError

from pagecopy.core.copier import PageCopier
from pagecopy.core.types import AXNode, CopyResult, Snapshot

EXPECTED_DOC = (
    "----------- WEB PAGE -----------\n\n"
    "TITLE: Example\n\n"
    "URL: https://example.test/\n\n"
    "CONTENT:\n\n"
    "Hello world \n\n\n\n"
    "----------- END PAGE -----------\n\n"
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_node(node_id, role, name="", children=(), invisible=False):
    return AXNode(id=node_id, role=role, name=name, is_invisible=invisible, child_ids=tuple(children))


def hello_snapshot():
    return Snapshot(root_id="root", nodes=(
        make_node("root", "generic", children=["p1"]),
        make_node("p1", "paragraph", "Hello world"),
    ))


def make_page(title="Example", url="https://example.test/"):
    page = MagicMock()
    page.title = AsyncMock(return_value=title)
    page.url = url
    return page


def make_provider(snapshot=None, **kwargs):
    provider = MagicMock()
    provider.capture = AsyncMock(return_value=snapshot, **kwargs)
    return provider


def make_budget(tokens=42):
    budget = MagicMock()
    budget.count.return_value = tokens
    return budget


def make_copier(snapshot=None, provider=None, **kwargs):
    return PageCopier(
        provider=provider or make_provider(snapshot),
        token_budget=make_budget(),
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestPageCopierCopy:
    @pytest.mark.asyncio
    async def test_copy_writes_document_to_clipboard(self):
        clipboard = MagicMock()
        copier = make_copier(hello_snapshot(), clipboard=clipboard)

        result = await copier.copy(make_page())

        clipboard.assert_called_once_with(EXPECTED_DOC)
        assert isinstance(result, CopyResult)
        assert result.text == EXPECTED_DOC
        assert result.title == "Example"
        assert result.url == "https://example.test/"
        assert result.token_count == 42
        assert result.node_count == 2
        assert result.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_async_clipboard_and_notifier_awaited(self):
        clipboard = AsyncMock()
        on_copied = AsyncMock()
        copier = make_copier(hello_snapshot(), clipboard=clipboard, on_copied=on_copied)

        result = await copier.copy(make_page())

        clipboard.assert_awaited_once_with(EXPECTED_DOC)
        on_copied.assert_awaited_once_with(result)

    @pytest.mark.asyncio
    async def test_no_clipboard_still_returns_result(self):
        copier = make_copier(hello_snapshot())
        result = await copier.copy(make_page())
        assert result is not None
        assert result.text == EXPECTED_DOC

    @pytest.mark.asyncio
    async def test_no_page_is_noop(self):
        provider = make_provider(hello_snapshot())
        clipboard = MagicMock()
        copier = make_copier(provider=provider, clipboard=clipboard)

        assert await copier.copy(None) is None
        provider.capture.assert_not_awaited()
        clipboard.assert_not_called()

    @pytest.mark.asyncio
    async def test_title_read_before_snapshot(self):
        calls: list[str] = []
        page = make_page()
        page.title = AsyncMock(side_effect=lambda: calls.append("title") or "Example")
        provider = make_provider(hello_snapshot())
        provider.capture = AsyncMock(side_effect=lambda p: calls.append("capture") or hello_snapshot())

        await make_copier(provider=provider).copy(page)
        assert calls == ["title", "capture"]

    @pytest.mark.asyncio
    async def test_snapshot_timeout_is_noop(self):
        async def never_delivers(page):
            await asyncio.sleep(10)

        provider = MagicMock()
        provider.capture = never_delivers
        clipboard = MagicMock()
        copier = make_copier(provider=provider, clipboard=clipboard, snapshot_timeout=0.01)

        assert await copier.copy(make_page()) is None
        clipboard.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure_is_noop(self):
        provider = make_provider(side_effect=PlaywrightError("Target closed"))
        on_copied = MagicMock()
        copier = make_copier(provider=provider, on_copied=on_copied)

        assert await copier.copy(make_page()) is None
        on_copied.assert_not_called()

    @pytest.mark.asyncio
    async def test_unexpected_provider_error_is_noop(self):
        provider = make_provider(side_effect=ConnectionResetError("boom"))
        clipboard = MagicMock()
        copier = make_copier(provider=provider, clipboard=clipboard)

        assert await copier.copy(make_page()) is None
        clipboard.assert_not_called()

    @pytest.mark.asyncio
    async def test_title_failure_is_noop(self):
        page = make_page()
        page.title = AsyncMock(side_effect=KeyError("title"))
        provider = make_provider(hello_snapshot())

        assert await make_copier(provider=provider).copy(page) is None
        provider.capture.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_page_is_noop(self):
        snap = Snapshot(root_id="root", nodes=(
            make_node("root", "generic", children=["i1"]),
            make_node("i1", "paragraph", "hidden", children=["c1"], invisible=True),
            make_node("c1", "paragraph", "visible child"),
        ))
        clipboard = MagicMock()
        on_copied = MagicMock()
        copier = make_copier(snap, clipboard=clipboard, on_copied=on_copied)

        assert await copier.copy(make_page()) is None
        clipboard.assert_not_called()
        on_copied.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_root_is_noop(self):
        snap = Snapshot(root_id="root", nodes=(make_node("p1", "paragraph", "orphan"),))
        clipboard = MagicMock()
        copier = make_copier(snap, clipboard=clipboard)

        assert await copier.copy(make_page()) is None
        clipboard.assert_not_called()

    @pytest.mark.asyncio
    async def test_cyclic_tree_is_noop(self):
        snap = Snapshot(root_id="root", nodes=(
            make_node("root", "paragraph", "Before", children=["a"]),
            make_node("a", "paragraph", "After", children=["root"]),
        ))
        clipboard = MagicMock()
        copier = make_copier(snap, clipboard=clipboard)

        assert await copier.copy(make_page()) is None
        clipboard.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_copies_are_independent(self):
        other = Snapshot(root_id="r", nodes=(make_node("r", "heading", "Other"),))
        provider = make_provider()
        provider.capture = AsyncMock(side_effect=[hello_snapshot(), other])
        copier = make_copier(provider=provider)

        first, second = await asyncio.gather(
            copier.copy(make_page(title="One")),
            copier.copy(make_page(title="Two")),
        )
        assert "TITLE: One" in first.text
        assert "Hello world" in first.text
        assert "TITLE: Two" in second.text
        assert "Other" in second.text
        assert "Hello world" not in second.text


class TestPageCopierConfig:
    def test_default_timeout(self):
        copier = PageCopier(token_budget=make_budget())
        assert copier.snapshot_timeout == 5.0

    def test_custom_timeout(self):
        copier = PageCopier(snapshot_timeout=1.5, token_budget=make_budget())
        assert copier.snapshot_timeout == 1.5
