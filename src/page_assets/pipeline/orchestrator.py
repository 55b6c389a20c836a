"""Pipeline orchestrator for per-page asset materialization.

Binds exactly one transform (parse or directory) from the configuration
and runs it over single pages or over every rendered post of a site.
"""

import logging
from pathlib import Path
from typing import Any

from schemas.config import PageAssetsConfig
from schemas.page import Page
from schemas.report import PageReport, SiteReport

from ..assets.copier import FileCopier
from ..assets.filesystem import walk
from ..assets.matching import glob_match
from ..config import build_config
from ..exceptions import PageAssetsError
from ..transformers.directory_transformer import DirectoryTransformer
from ..transformers.parse_transformer import ParseTransformer
from ..transformers.transformer import PageTransformer

logger = logging.getLogger(__name__)

PREFIX = "page-assets"

TRANSFORMERS: dict[str, type[PageTransformer]] = {
    "parse": ParseTransformer,
    "directory": DirectoryTransformer,
}


def rendered_path(template: Path, input_dir: Path, output_dir: Path, extension: str = ".html") -> Path:
    """Map a template to the page it renders to.

    ``a/b/index.md`` renders to ``<output>/a/b/index.html`` and ``a/b.md``
    to ``<output>/a/b/index.html``.
    """
    relative = template.relative_to(input_dir)
    if relative.stem == "index":
        return output_dir / relative.parent / f"index{extension}"
    return output_dir / relative.parent / relative.stem / f"index{extension}"


class Orchestrator:
    """Entry point binding the configured transform to the host.

    Attributes:
        config: Immutable configuration
        copier: Copier shared by every page
        transformer: The transform selected by ``config.mode``
    """

    def __init__(
        self,
        config: PageAssetsConfig | dict[str, Any] | None = None,
        copier: FileCopier | None = None,
    ):
        if not isinstance(config, PageAssetsConfig):
            config = build_config(config)
        self.config = config

        # unknown modes are rejected by build_config
        transformer_class = TRANSFORMERS[config.mode]
        self.copier = copier or FileCopier(force=config.force_copy, silent=config.silent)
        self.transformer = transformer_class(config, copier=self.copier)

    @property
    def transform_name(self) -> str:
        """Name under which the transform registers with the host."""
        if self.config.mode == "parse":
            return f"{PREFIX}-transform-parser"
        return f"{PREFIX}-transform-traverse"

    def transform(self, content: str, output_path: Path | str | None, input_path: Path | str) -> str:
        """Host hook: process one rendered page.

        Args:
            content: Rendered markup
            output_path: Where the host writes the page
            input_path: Template the page was rendered from

        Returns:
            The markup the host should write

        Raises:
            PageAssetsError: If the page's assets cannot be materialized
        """
        page = Page(
            input_path=Path(input_path),
            output_path=Path(output_path) if output_path is not None else None,
        )
        return self.transformer.transform(content, page)

    def process_page(self, input_path: Path, output_path: Path) -> PageReport | None:
        """Process a page already written to disk, rewriting it in place.

        Args:
            input_path: Template the page was rendered from
            output_path: Rendered page file

        Returns:
            The page's report, or None if the page was not eligible

        Raises:
            PageAssetsError: If the page's assets cannot be materialized
            OSError: If the page cannot be read or written
        """
        self.transformer.last_report = None
        content = output_path.read_text(encoding="utf-8")
        result = self.transform(content, output_path, input_path)
        if result != content:
            output_path.write_text(result, encoding="utf-8")
            logger.debug(f"Rewrote {output_path}")
        return self.transformer.last_report

    def process_site(self, input_dir: Path, output_dir: Path) -> SiteReport:
        """Process every rendered post of a site.

        Templates under input_dir matching ``posts_matching`` are mapped to
        their rendered pages; templates without a rendered page are skipped.
        A failing page is recorded and does not stop the others.

        Args:
            input_dir: Root directory of the templates
            output_dir: Root directory of the rendered site

        Returns:
            SiteReport with one entry per processed page and per failure
        """
        report = SiteReport(input_dir=str(input_dir), output_dir=str(output_dir))
        templates = [
            path
            for path in walk(input_dir)
            if glob_match(path.relative_to(input_dir).as_posix(), self.config.posts_matching)
        ]
        logger.info(f"Processing {len(templates)} templates from {input_dir}")

        for template in templates:
            page_path = rendered_path(
                template, input_dir, output_dir, self.config.markup_extensions[0]
            )
            if not page_path.exists():
                logger.debug(f"No rendered page for {template}, skipping")
                continue
            try:
                page_report = self.process_page(template, page_path)
            except (PageAssetsError, OSError) as e:
                logger.error(f"Failed to process {page_path}: {e}")
                report.errors.append(f"{page_path}: {e}")
                continue
            if page_report is not None:
                report.pages.append(page_report)

        logger.info(
            f"Processed {len(report.pages)} pages, copied {report.copied} assets"
        )
        return report
