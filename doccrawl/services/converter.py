"""HTML fragment to Markdown conversion.

Built on markdownify with three overrides: fenced, language-tagged code
blocks; suppressed script/style/noscript; and GitHub-style pipe tables.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

from doccrawl.config import MIN_MARKDOWN_LENGTH
from doccrawl.services.cleaner import clean_markdown

_LANGUAGE_RE = re.compile(r"language-(\w+)")


def _code_language(code_el) -> str:
    if code_el is None:
        return ""
    classes = code_el.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    match = _LANGUAGE_RE.search(" ".join(classes))
    return match.group(1) if match else ""


def _table_cell(cell) -> str:
    return cell.get_text().strip().replace("|", "\\|")


class DocsMarkdownConverter(MarkdownConverter):
    """markdownify converter tuned for documentation pages."""

    def __init__(self, **options):
        options.setdefault("heading_style", ATX)
        options.setdefault("bullets", "-")
        super().__init__(**options)

    def convert_pre(self, el, text, parent_tags):
        code_el = el.find("code")
        code = (code_el if code_el is not None else el).get_text()
        # Indentation on the first and last lines is significant; only
        # surrounding newlines are dropped.
        code = code.strip("\n")
        return f"\n\n```{_code_language(code_el)}\n{code}\n```\n\n"

    def convert_table(self, el, text, parent_tags):
        table = BeautifulSoup(str(el), "lxml")
        rows = []
        for index, row in enumerate(table.find_all("tr")):
            cells = [_table_cell(cell) for cell in row.find_all(["th", "td"])]
            rows.append(f"| {' | '.join(cells)} |")
            if index == 0:
                rows.append(f"| {' | '.join('---' for _ in cells)} |")
        if not rows:
            return ""
        return "\n\n" + "\n".join(rows) + "\n\n"

    def convert_script(self, el, text, parent_tags):
        return ""

    convert_style = convert_script
    convert_noscript = convert_script


def to_markdown(html: str) -> str:
    """Convert *html* to cleaned Markdown without any length check."""
    return clean_markdown(DocsMarkdownConverter().convert(html))


def convert(html: Optional[str]) -> Optional[str]:
    """Convert an extracted HTML fragment to Markdown.

    Returns ``None`` for an empty fragment or when the Markdown is shorter
    than MIN_MARKDOWN_LENGTH, which usually means extraction picked the
    wrong region.
    """
    if not html:
        return None
    markdown = to_markdown(html)
    if len(markdown) < MIN_MARKDOWN_LENGTH:
        return None
    return markdown
