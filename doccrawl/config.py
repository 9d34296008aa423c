"""Crawler settings: request limits, pacing, and where the manifest and output live."""

import os
from pathlib import Path

TIMEOUT = 30  # seconds
MAX_CONTENT_SIZE = 10 * 1024 * 1024  # 10 MB
ALLOWED_SCHEMES = {"http", "https"}

REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Pause between consecutive pages, applied after every page
REQUEST_DELAY = 1.0  # seconds

# Converted pages shorter than this are treated as a broken extraction
MIN_MARKDOWN_LENGTH = 100

DESCRIPTION_MAX_LENGTH = 160
FRONTMATTER_DESCRIPTION_MAX_LENGTH = 200


def manifest_path() -> Path:
    """Location of the URL manifest (``DOCCRAWL_MANIFEST``, default ``./urls.json``)."""
    return Path(os.environ.get("DOCCRAWL_MANIFEST", "urls.json"))


def output_root() -> Path:
    """Directory that area output paths are resolved against (``DOCCRAWL_ROOT``)."""
    return Path(os.environ.get("DOCCRAWL_ROOT", "."))
