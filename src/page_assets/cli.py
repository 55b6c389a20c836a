"""Command-line interface for page-assets."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from page_assets.config import load_config
from page_assets.exceptions import ConfigurationError, PageAssetsError
from page_assets.pipeline.orchestrator import Orchestrator


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the option flags that were actually given on the command line."""
    overrides: dict[str, Any] = {}
    if args.mode is not None:
        overrides["mode"] = args.mode
    if args.posts_matching is not None:
        overrides["posts_matching"] = args.posts_matching
    if args.assets_matching is not None:
        overrides["assets_matching"] = args.assets_matching
    if args.recursive:
        overrides["recursive"] = True
    if args.no_hash:
        overrides["hash_assets"] = False
    if args.force_copy:
        overrides["force_copy"] = True
    if args.no_integrity:
        overrides["add_integrity_attribute"] = False
    if args.silent:
        overrides["silent"] = True
    if args.search_path:
        overrides["search_paths"] = args.search_path
    return overrides


def build_orchestrator(args: argparse.Namespace) -> Orchestrator:
    """Create an Orchestrator from the config file and option flags.

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    config = load_config(args.config, config_overrides(args))
    return Orchestrator(config)


def process_page(args: argparse.Namespace) -> int:
    """Execute the process-page command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    output_path = args.output.resolve()
    if not output_path.exists():
        logger.error(f"Rendered page not found: {output_path}")
        return 1

    try:
        orchestrator = build_orchestrator(args)
    except ConfigurationError as e:
        logger.error(e.message)
        return 1

    try:
        report = orchestrator.process_page(args.input, output_path)
    except (PageAssetsError, OSError) as e:
        logger.error(f"Failed to process page: {e}")
        return 1

    if report is None:
        logger.info(f"Page {output_path} is not eligible for asset processing")
        return 0

    logger.info(f"Processed page: {output_path}")
    logger.info(f"  Assets found: {report.found}")
    logger.info(f"  Copied: {report.copied}")
    logger.info(f"  Unchanged: {report.skipped}")
    return 0


def process_site(args: argparse.Namespace) -> int:
    """Execute the process-site command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    input_dir = args.input_dir.resolve()
    if not input_dir.is_dir():
        logger.error(f"Input directory not found: {input_dir}")
        return 1

    output_dir = args.output_dir.resolve()
    if not output_dir.is_dir():
        logger.error(f"Output directory not found: {output_dir}")
        return 1

    try:
        orchestrator = build_orchestrator(args)
    except ConfigurationError as e:
        logger.error(e.message)
        return 1

    report = orchestrator.process_site(input_dir, output_dir)

    logger.info(f"Processed site: {output_dir}")
    logger.info(f"  Pages: {len(report.pages)}")
    logger.info(f"  Copied: {report.copied}")

    if report.errors:
        logger.warning(f"  Errors: {len(report.errors)}")
        for error in report.errors:
            logger.warning(f"    - {error}")
        return 1

    return 0


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the configuration flags shared by every command."""
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with configuration options",
    )
    parser.add_argument(
        "--mode",
        choices=["parse", "directory"],
        default=None,
        help="Asset discovery mode (default: parse)",
    )
    parser.add_argument(
        "--posts-matching",
        type=str,
        default=None,
        help="Glob selecting eligible templates (default: *.md)",
    )
    parser.add_argument(
        "--assets-matching",
        type=str,
        default=None,
        help="Glob selecting assets, alternatives separated by | (default: *.png|*.jpg|*.gif)",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Directory mode: include assets in subdirectories",
    )
    parser.add_argument(
        "--no-hash",
        action="store_true",
        help="Parse mode: keep asset names and subdirectories instead of hashing",
    )
    parser.add_argument(
        "--force-copy",
        action="store_true",
        help="Copy assets even when modification time and size match",
    )
    parser.add_argument(
        "--no-integrity",
        action="store_true",
        help="Do not add integrity attributes to rewritten elements",
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Suppress progress messages",
    )
    parser.add_argument(
        "--search-path",
        type=Path,
        action="append",
        default=None,
        help="Fallback directory for resolving assets (repeatable, searched in order)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="page-assets",
        description="Copy, hash and rewrite page-local assets of rendered pages",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    page_parser = subparsers.add_parser(
        "process-page",
        help="Process the assets of one rendered page",
        description="Materialize the assets of a single rendered page and rewrite it in place.",
    )
    page_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Template the page was rendered from",
    )
    page_parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Rendered page to process",
    )
    add_config_arguments(page_parser)
    page_parser.set_defaults(func=process_page)

    site_parser = subparsers.add_parser(
        "process-site",
        help="Process the assets of every rendered post of a site",
        description="Map each matching template under the input directory to its rendered page and materialize its assets.",
    )
    site_parser.add_argument(
        "--input-dir",
        type=Path,
        required=True,
        help="Root directory of the templates",
    )
    site_parser.add_argument(
        "--output-dir",
        type=Path,
        required=True,
        help="Root directory of the rendered site",
    )
    add_config_arguments(site_parser)
    site_parser.set_defaults(func=process_site)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
