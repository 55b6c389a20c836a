"""Parse transformer: discover, hash, rewrite and copy page assets.

Each reference-bearing element whose reference is relative and matches the
asset pattern is resolved against the template directory (then the
configured search paths), optionally content-addressed, rewritten to point
at its destination relative to the page, and copied if needed. All assets
of one page are processed concurrently; the markup is serialized only after
every asset task has finished.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from schemas.asset import AssetPaths
from schemas.config import PageAssetsConfig
from schemas.page import Page

from ..assets.copier import FileCopier
from ..assets.filesystem import resolve_file
from ..assets.hashing import filename_digest, hash_file
from ..assets.matching import glob_match, is_relative
from ..assets.paths import flattened_paths, mirrored_paths, normalize_reference, split_reference
from ..exceptions import AssetProcessingError, UnresolvedAssetError
from .markup import MarkupDocument, MarkupReference
from .transformer import Matcher, PageTransformer

logger = logging.getLogger(__name__)

Resolver = Callable[[str, list[Path]], Path | None]
Hasher = Callable[[Path, str, str], str]


@dataclass(frozen=True)
class MaterializedAsset:
    """Result of materializing one distinct asset of a page.

    Attributes:
        paths: Destination addressing used for the asset
        source: File the bytes were copied from
        integrity: ``<alg>-<digest>`` when hashing is enabled
        copied: Whether the destination was written
    """

    paths: AssetPaths
    source: Path
    integrity: str | None
    copied: bool


class ParseTransformer(PageTransformer):
    """Rewrite asset references found in a page's markup.

    The ParseTransformer:
    1. Checks the page is a rendered post
    2. Parses the markup and collects elements matching the selectors
    3. Keeps references that are relative and match the asset pattern
    4. Materializes each distinct asset concurrently (resolve, hash, copy)
    5. Rewrites reference and integrity attributes
    6. Serializes the markup

    Attributes:
        resolver: Finds a reference path below an ordered list of roots
        hasher: Computes the content digest of a file
    """

    mode = "parse"

    def __init__(
        self,
        config: PageAssetsConfig,
        copier: FileCopier | None = None,
        matcher: Matcher = glob_match,
        resolver: Resolver = resolve_file,
        hasher: Hasher = hash_file,
    ):
        super().__init__(config, copier=copier, matcher=matcher)
        self.resolver = resolver
        self.hasher = hasher

    def is_asset_reference(self, reference: str) -> bool:
        return is_relative(reference) and self.matcher(
            reference, self.config.assets_matching
        )

    def transform(self, content: str, page: Page) -> str:
        """Materialize the assets referenced by a page and rewrite its markup.

        Args:
            content: Rendered markup of the page
            page: Template and output paths of the page

        Returns:
            The rewritten markup, or content unchanged if the page is not
            eligible or no attribute changed

        Raises:
            UnresolvedAssetError: If a referenced asset does not exist
            AssetProcessingError: If hashing or copying an asset fails
        """
        if not self.applies_to(page) or not content.strip():
            return content

        report = self.new_report(page)
        document = MarkupDocument(content)
        references = document.find_references(self.config.selectors)
        report.found = len(references)
        if not self.config.silent:
            logger.info(
                f"Found {len(references)} assets in {page.output_path} "
                f"from template {page.input_path}"
            )

        # references to the same file share one task
        groups: dict[str, list[MarkupReference]] = {}
        for reference in references:
            if not self.is_asset_reference(reference.value):
                continue
            reference_path, _ = split_reference(reference.value)
            groups.setdefault(normalize_reference(reference_path), []).append(reference)

        results = self._materialize_all(groups, page)

        for reference_path, group in groups.items():
            asset = results[reference_path]
            for reference in group:
                self._rewrite(document, reference, asset)
            report.processed += len(group)
            if asset.copied:
                report.copied += 1
            else:
                report.skipped += 1

        self.last_report = report
        if not self.config.silent:
            logger.info(
                f'Processed {report.processed} assets in "{page.output_path}" '
                f'from template "{page.input_path}"'
            )

        if not document.modified:
            return content
        return document.serialize()

    def _materialize_all(
        self, groups: dict[str, list[MarkupReference]], page: Page
    ) -> dict[str, MaterializedAsset]:
        """Run one task per distinct asset and wait for all of them.

        Raises:
            PageAssetsError: The first failure, in reference order, once every
                task has finished
        """
        if not groups:
            return {}

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {
                path: executor.submit(self._materialize, path, group[0].value, page)
                for path, group in groups.items()
            }

        results = {}
        for path, future in futures.items():
            # raises the task's exception, if any
            results[path] = future.result()
        return results

    def _materialize(
        self, reference_path: str, reference: str, page: Page
    ) -> MaterializedAsset:
        """Resolve, optionally hash, and copy one asset.

        Args:
            reference_path: Normalized reference path without query or fragment
            reference: Reference as written in the markup, for error messages
            page: Page the reference was found on

        Returns:
            MaterializedAsset describing the destination
        """
        template_dir = page.template_dir
        output_dir = page.output_dir
        paths = mirrored_paths(template_dir, output_dir, reference_path)

        # the output directory last, so already rewritten pages resolve
        roots = [template_dir, *self.config.search_paths, output_dir]
        source = self.resolver(reference_path, roots)
        if source is None:
            raise UnresolvedAssetError(reference, page.output_path, page.input_path)

        integrity = None
        try:
            if self.config.hash_assets:
                digest = self.hasher(
                    source, self.config.hashing_alg, self.config.hashing_digest
                )
                integrity = f"{self.config.hashing_alg}-{digest}"
                paths = flattened_paths(
                    template_dir, output_dir, reference_path, filename_digest(digest)
                )

            paths.dest_dir.mkdir(parents=True, exist_ok=True)
            copied = self.copier.copy_if_needed(source, paths.dest_path)
        except OSError as e:
            raise AssetProcessingError(
                f'Failed to materialize asset "{reference_path}" in '
                f'"{page.output_path}": {e}',
                reference=reference_path,
            ) from e

        logger.debug(f"Materialized {source} as {paths.dest_path}")
        return MaterializedAsset(
            paths=paths, source=source, integrity=integrity, copied=copied
        )

    def _rewrite(
        self,
        document: MarkupDocument,
        reference: MarkupReference,
        asset: MaterializedAsset,
    ) -> None:
        """Point one element at its materialized asset."""
        _, suffix = split_reference(reference.value)
        document.set_attribute(
            reference.element,
            reference.attribute,
            asset.paths.page_reference + suffix,
        )
        if asset.integrity and self.config.add_integrity_attribute:
            document.set_attribute(reference.element, "integrity", asset.integrity)
