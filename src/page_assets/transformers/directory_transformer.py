"""Directory transformer: copy assets found beside a page's template.

The markup is never inspected or rewritten; the page is expected to already
reference its assets at their mirrored locations.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from schemas.config import PageAssetsConfig
from schemas.page import Page

from ..assets.copier import FileCopier
from ..assets.filesystem import list_directory, walk
from ..assets.matching import glob_match
from ..assets.paths import mirrored_paths
from ..exceptions import AssetProcessingError
from .transformer import Matcher, PageTransformer

logger = logging.getLogger(__name__)

Lister = Callable[[Path], Iterable[Path]]


class DirectoryTransformer(PageTransformer):
    """Copy every asset file in a template's directory to the page's output.

    Files are matched by their path relative to the template directory and
    copied one after another, keeping their subdirectory.

    Attributes:
        walker: Recursive file enumerator used when ``recursive`` is set
        lister: Flat file enumerator used otherwise
    """

    mode = "directory"

    def __init__(
        self,
        config: PageAssetsConfig,
        copier: FileCopier | None = None,
        matcher: Matcher = glob_match,
        walker: Lister = walk,
        lister: Lister = list_directory,
    ):
        super().__init__(config, copier=copier, matcher=matcher)
        self.walker = walker
        self.lister = lister

    def find_assets(self, template_dir: Path) -> list[Path]:
        """List files below template_dir that match the asset pattern."""
        enumerate_files = self.walker if self.config.recursive else self.lister
        candidates = list(enumerate_files(template_dir))
        return [
            path
            for path in candidates
            if self.matcher(
                path.relative_to(template_dir).as_posix(),
                self.config.assets_matching,
            )
        ]

    def transform(self, content: str, page: Page) -> str:
        """Copy a page's directory assets; the markup is returned unchanged.

        Raises:
            AssetProcessingError: If listing or copying fails
        """
        if not self.applies_to(page):
            return content

        template_dir = page.template_dir
        report = self.new_report(page)

        try:
            assets = self.find_assets(template_dir)
            report.found = len(assets)
            for asset in assets:
                reference_path = asset.relative_to(template_dir).as_posix()
                paths = mirrored_paths(template_dir, page.output_dir, reference_path)
                paths.dest_dir.mkdir(parents=True, exist_ok=True)
                if self.copier.copy_if_needed(asset, paths.dest_path):
                    report.copied += 1
                else:
                    report.skipped += 1
                report.processed += 1
        except OSError as e:
            raise AssetProcessingError(
                f'Failed to copy assets of "{page.output_path}" from template '
                f'"{page.input_path}": {e}',
                reference=str(template_dir),
            ) from e

        self.last_report = report
        if not self.config.silent:
            logger.info(
                f'Copied {report.copied} of {report.found} assets for '
                f'"{page.output_path}" from template "{page.input_path}"'
            )
        return content
