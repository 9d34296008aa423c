from pydantic import BaseModel


class ExtractedContent(BaseModel):
    """Main content of one fetched page, before Markdown conversion."""

    title: str
    description: str
    html: str  # inner HTML of the main content region
