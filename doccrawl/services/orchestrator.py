"""Sequential crawl of every page listed in the manifest."""

import logging
from pathlib import Path
from typing import Optional, Union

from doccrawl.models.manifest import Area, Manifest, PageEntry
from doccrawl.models.report import CrawlReport, PageOutcome
from doccrawl.services.converter import convert
from doccrawl.services.extractor import extract
from doccrawl.services.fetcher import fetch_page
from doccrawl.services.manifest import resolve_url
from doccrawl.services.rate_limiter import RateLimiter
from doccrawl.services.writer import write_page

logger = logging.getLogger(__name__)


async def process_page(
    page: PageEntry,
    area_name: str,
    area: Area,
    base_url: str,
    root_dir: Path,
) -> PageOutcome:
    """Fetch, extract, convert and write a single page.

    Fetch, extraction and conversion failures are reported as a skipped
    outcome; errors while writing the file propagate.
    """
    url = resolve_url(page.url, base_url)

    def skipped(reason, label):
        logger.info("Skipped (%s): %s", label, page.url)
        return PageOutcome(area=area_name, url=url, success=False, reason=reason)

    # ── 1. Fetch ──────────────────────────────────────────────────────────────
    html = await fetch_page(url)
    if not html:
        return skipped("fetch_failed", "no content")

    # ── 2. Extract ────────────────────────────────────────────────────────────
    content = extract(html)
    if content is None:
        return skipped("extraction_failed", "extraction failed")

    # ── 3. Convert ────────────────────────────────────────────────────────────
    markdown = convert(content.html)
    if markdown is None:
        return skipped("content_too_short", "content too short")

    # ── 4. Write ──────────────────────────────────────────────────────────────
    title = page.title or content.title
    description = content.description or f"Documentation for {title}"
    output_path = root_dir / area.output_dir / page.output_file
    write_page(output_path, title, description, markdown)
    logger.info("Created: %s", output_path)

    return PageOutcome(area=area_name, url=url, success=True, output_path=str(output_path))


async def crawl_documentation(
    manifest: Manifest,
    root_dir: Union[str, Path],
    limiter: Optional[RateLimiter] = None,
) -> CrawlReport:
    """Process every page of every area, one at a time, in manifest order.

    *limiter* is awaited after each page regardless of its outcome.

    Returns:
        A :class:`CrawlReport` holding one outcome per page.
    """
    root_dir = Path(root_dir)
    limiter = limiter or RateLimiter()
    report = CrawlReport()

    logger.info("Starting documentation crawl")
    for area_name, area in manifest.documentation_areas.items():
        logger.info("Processing: %s", area_name)
        for page in area.pages:
            outcome = await process_page(page, area_name, area, manifest.base_url, root_dir)
            report.outcomes.append(outcome)
            await limiter.wait()

    logger.info(
        "Crawl complete: %d succeeded, %d failed", report.succeeded, report.failed
    )
    return report
