"""Whitespace normaliser for extracted page text."""

from __future__ import annotations

_DOUBLE_SPACE = "  "


def collapse_spaces(text: str) -> str:
    """
    Collapse every run of two or more ASCII spaces to a single space.

    Reaches the same fixed point as repeatedly replacing the first "  " with
    " " and searching again from that offset, without rebuilding the string
    once per removed space. Tabs and newlines are left alone.
    """
    parts: list[str] = []
    start = 0
    pos = text.find(_DOUBLE_SPACE)
    while pos != -1:
        end = pos + 2
        while end < len(text) and text[end] == " ":
            end += 1
        parts.append(text[start:pos + 1])
        start = end
        pos = text.find(_DOUBLE_SPACE, start)
    parts.append(text[start:])
    return "".join(parts)
