from typing import List, Literal, Optional

from pydantic import BaseModel

SkipReason = Literal["fetch_failed", "extraction_failed", "content_too_short"]


class PageOutcome(BaseModel):
    area: str
    url: str
    success: bool
    reason: Optional[SkipReason] = None
    output_path: Optional[str] = None


class CrawlReport(BaseModel):
    """Per-page outcomes of one crawl run, in manifest order."""

    outcomes: List[PageOutcome] = []

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.success)
