"""Whitespace and link normalisation applied to converted Markdown."""

import re

_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

# [label]() or [label](   ) – a link with no target keeps only its label
_EMPTY_LINK_RE = re.compile(r"\[([^\]]+)\]\(\s*\)")

_WHITESPACE_LINE_RE = re.compile(r"^\s+$", re.MULTILINE)


def clean_markdown(text: str) -> str:
    """Normalise *text*: collapse blank-line runs, unwrap empty links, blank
    out whitespace-only lines, and trim the document."""
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
    text = _EMPTY_LINK_RE.sub(r"\1", text)
    text = _WHITESPACE_LINE_RE.sub("", text)
    return text.strip()
