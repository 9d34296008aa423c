from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PageEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    output_file: str = Field(alias="outputFile")
    title: Optional[str] = None  # overrides the title found on the page


class Area(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    output_dir: str = Field(alias="outputDir")
    pages: List[PageEntry] = Field(default_factory=list)


class Manifest(BaseModel):
    """The crawl plan: documentation areas in the order they are processed."""

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(alias="baseUrl")
    documentation_areas: Dict[str, Area] = Field(alias="documentationAreas")
