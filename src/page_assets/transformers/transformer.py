"""Base class for page transformers.

A page transformer is invoked once per rendered page with the page's markup
and returns the (possibly rewritten) markup. Two strategies exist:

- ParseTransformer: discovers references in the markup and rewrites them
- DirectoryTransformer: copies files found beside the template, leaving
  the markup alone
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from schemas.config import PageAssetsConfig
from schemas.page import Page
from schemas.report import PageReport

from ..assets.copier import FileCopier
from ..assets.matching import glob_match

Matcher = Callable[[str, str], bool]


class PageTransformer(ABC):
    """Abstract base class for per-page asset transforms.

    Attributes:
        config: Immutable configuration shared by every page
        copier: Change-aware copier used for every asset
        matcher: Glob matcher for page and asset patterns
        last_report: Report of the most recently processed page
    """

    mode: str = ""

    def __init__(
        self,
        config: PageAssetsConfig,
        copier: FileCopier | None = None,
        matcher: Matcher = glob_match,
    ):
        self.config = config
        self.copier = copier or FileCopier(force=config.force_copy, silent=config.silent)
        self.matcher = matcher
        self.last_report: PageReport | None = None

    def applies_to(self, page: Page) -> bool:
        """Check whether a page is a rendered post eligible for processing."""
        if page.output_path is None:
            return False
        if page.output_path.suffix.lower() not in self.config.markup_extensions:
            return False
        return self.matcher(page.input_path.as_posix(), self.config.posts_matching)

    def new_report(self, page: Page) -> PageReport:
        return PageReport(
            input_path=str(page.input_path),
            output_path=str(page.output_path) if page.output_path else None,
            mode=self.mode,
        )

    @abstractmethod
    def transform(self, content: str, page: Page) -> str:
        """Materialize a page's assets.

        Args:
            content: Rendered markup of the page
            page: Template and output paths of the page

        Returns:
            The markup to write for the page
        """
        pass
