"""Token budget — count tokens in exported documents."""

from __future__ import annotations

import tiktoken

_ENCODING = "cl100k_base"


class TokenBudget:
    """
    Counts cl100k tokens in a document so callers building prompts can check
    the copied page against a context limit. The encoding is loaded on first use.
    """

    def __init__(self, encoding: str = _ENCODING) -> None:
        self._encoding_name = encoding
        self._enc: tiktoken.Encoding | None = None

    def count(self, text: str) -> int:
        if self._enc is None:
            self._enc = tiktoken.get_encoding(self._encoding_name)
        return len(self._enc.encode(text))
