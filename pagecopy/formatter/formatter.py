"""Document formatter — wraps extracted text in the WEB PAGE banner."""

from __future__ import annotations

_HEADER = "----------- WEB PAGE -----------"
_FOOTER = "----------- END PAGE -----------"


def format_document(content: str, title: str, url: str) -> str:
    """
    Build the exported document. Title and url go in verbatim, no escaping.

        ----------- WEB PAGE -----------

        TITLE: <title>

        URL: <url>

        CONTENT:

        <content>

        ----------- END PAGE -----------

    """
    return (
        f"{_HEADER}\n\n"
        f"TITLE: {title}\n\n"
        f"URL: {url}\n\n"
        f"CONTENT:\n\n{content}"
        f"\n\n{_FOOTER}\n\n"
    )

