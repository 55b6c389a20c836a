"""Processing report schemas.

Reports are produced for observability only; nothing is persisted between
runs and the filesystem itself is the copy cache.
"""

from typing import Literal

from pydantic import BaseModel


class PageReport(BaseModel):
    """Outcome of running the asset transform over one page.

    Attributes:
        input_path: Template source path
        output_path: Rendered page path
        mode: Transform mode that produced the report
        found: Reference-bearing elements (parse) or listed files (directory)
        processed: Assets that passed the filters and were materialized
        copied: Destination files actually written
        skipped: Destination files left alone because they were unchanged
    """

    input_path: str
    output_path: str | None = None
    mode: Literal["parse", "directory"]
    found: int = 0
    processed: int = 0
    copied: int = 0
    skipped: int = 0


class SiteReport(BaseModel):
    """Aggregate outcome of processing every page of a site.

    Attributes:
        input_dir: Root directory holding the templates
        output_dir: Root directory holding the rendered pages
        pages: Reports of pages that completed
        errors: One message per page that failed
    """

    input_dir: str
    output_dir: str
    pages: list[PageReport] = []
    errors: list[str] = []

    @property
    def copied(self) -> int:
        return sum(page.copied for page in self.pages)
