"""Main-content extraction for documentation pages.

The page is stripped of navigation chrome first, then an ordered chain of
CSS selectors is tried until one yields a non-empty content region.  Pages
that match none of them fall back to the whole ``<body>``.
"""

import logging
from typing import NamedTuple, Optional, Sequence

from bs4 import BeautifulSoup

from doccrawl.config import DESCRIPTION_MAX_LENGTH
from doccrawl.models.page import ExtractedContent

logger = logging.getLogger(__name__)


class ContentSelector(NamedTuple):
    name: str
    css: str


# Tried in order; the first selector whose match has non-empty inner HTML wins.
# Extend this list to support additional documentation site layouts.
CONTENT_SELECTORS = (
    ContentSelector("article", "article"),
    ContentSelector("doc-content", ".doc-content"),
    ContentSelector("content-body", ".content-body"),
    ContentSelector("aria-main", '[role="main"]'),
    ContentSelector("main-content-class", ".main-content"),
    ContentSelector("main-content-id", "#main-content"),
    ContentSelector("main", "main"),
)

# Removed before the content region is selected
_NOISE_SELECTORS = (
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    ".sidebar",
    ".nav",
    ".navigation",
    ".feedback",
    ".breadcrumb",
    # Class-name substring matches catch site-specific variants (e.g. "site-navbar")
    '[class*="nav"]',
    '[class*="sidebar"]',
    '[class*="footer"]',
    '[class*="header"]',
)

# Additionally removed when falling back to the full <body>
_BODY_CHROME_SELECTORS = ("header", "nav", "footer", "aside", ".sidebar")

UNTITLED = "Untitled"


def _remove(soup: BeautifulSoup, selectors: Sequence[str]) -> None:
    for selector in selectors:
        for tag in soup.select(selector):
            # A parent matched earlier may already have taken this tag with it
            if not tag.decomposed:
                tag.decompose()


def _select_content(soup: BeautifulSoup, selectors: Sequence[ContentSelector]) -> Optional[str]:
    for selector in selectors:
        node = soup.select_one(selector.css)
        if node is None:
            continue
        inner_html = node.decode_contents()
        if inner_html.strip():
            logger.debug("Content region matched by selector %r", selector.name)
            return inner_html
    return None


def _extract_title(soup: BeautifulSoup) -> str:
    h1 = soup.find("h1")
    if h1:
        text = h1.get_text().strip()
        if text:
            return text
    title_tag = soup.find("title")
    if title_tag:
        text = title_tag.get_text().split("|")[0].strip()
        if text:
            return text
    return UNTITLED


def _extract_description(soup: BeautifulSoup) -> str:
    meta = soup.find("meta", attrs={"name": "description"})
    if meta and meta.get("content"):
        return str(meta["content"])
    og_desc = soup.find("meta", attrs={"property": "og:description"})
    if og_desc and og_desc.get("content"):
        return str(og_desc["content"])
    paragraph = soup.find("p")
    if paragraph:
        return paragraph.get_text().strip()[:DESCRIPTION_MAX_LENGTH]
    return ""


def extract(
    html: str,
    selectors: Sequence[ContentSelector] = CONTENT_SELECTORS,
) -> Optional[ExtractedContent]:
    """Locate the main content of *html* and derive its title and description.

    Returns ``None`` when neither a content region nor a non-empty ``<body>``
    can be found.
    """
    soup = BeautifulSoup(html, "lxml")
    _remove(soup, _NOISE_SELECTORS)

    content_html = _select_content(soup, selectors)
    if content_html is None:
        _remove(soup, _BODY_CHROME_SELECTORS)
        body = soup.find("body")
        if body is not None:
            content_html = body.decode_contents()

    if not content_html or not content_html.strip():
        return None

    return ExtractedContent(
        title=_extract_title(soup),
        description=_extract_description(soup),
        html=content_html,
    )
