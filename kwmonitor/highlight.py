"""Keyword parsing and HTML highlighting of recognised text."""

from __future__ import annotations

import re

_SEPARATOR = re.compile("[ \t\n\r\f\v\u3000]+")

_HIGHLIGHT_STYLE = (
    "style='display:inline-block; background:#FFEB3B; color:#F44336; padding:2px;'"
)

_KEYWORD_SEPARATOR = "<font color='#FF5252'> • </font>"


def _html_escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def split_keywords(text: str) -> list[str]:
    """Split on whitespace (including ideographic space), dropping empties and repeats."""
    return list(dict.fromkeys(part for part in _SEPARATOR.split(text) if part))


def format_keywords_display(keywords: list[str]) -> str:
    """Return the label text that lists the keywords."""
    if not keywords:
        return "No Keywords"
    return "Keywords: " + _KEYWORD_SEPARATOR.join(keywords)


def highlight_text(origin: str, keywords: list[str]) -> str:
    """Return ``origin`` as HTML with every keyword occurrence wrapped in a span."""
    if not keywords:
        return origin

    highlighted = _html_escape(origin).replace("\n", "<br>")
    for keyword in sorted(keywords, key=len, reverse=True):
        pattern = re.compile(
            "(" + re.escape(_html_escape(keyword)) + ")", re.IGNORECASE
        )
        highlighted = pattern.sub(
            lambda match: f"<span {_HIGHLIGHT_STYLE}>{match.group(1)}</span>",
            highlighted,
        )
    return highlighted