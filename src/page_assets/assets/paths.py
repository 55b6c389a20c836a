"""Path arithmetic for asset references.

Two addressing modes are supported:

- mirrored: the destination keeps the reference's subdirectory, relative to
  the page's output directory
- flattened: the destination is ``<digest><ext>`` directly in the page's
  output directory

Filesystem paths use the native separator; page references always use
forward slashes and start with ``./`` and are percent-encoded.
"""

import os
import posixpath
from pathlib import Path
from urllib.parse import quote, unquote, urlsplit

from schemas.asset import AssetPaths


def split_reference(reference: str) -> tuple[str, str]:
    """Split a reference into its file path and its query/fragment suffix.

    Examples:
        >>> split_reference("img/photo%20one.jpg?v=2#top")
        ('img/photo one.jpg', '?v=2#top')
    """
    parts = urlsplit(reference)
    suffix = ""
    if parts.query:
        suffix += f"?{parts.query}"
    if parts.fragment:
        suffix += f"#{parts.fragment}"
    return unquote(parts.path), suffix


def normalize_reference(reference_path: str) -> str:
    """Normalize a forward-slash reference path (``./img//a.png`` -> ``img/a.png``)."""
    return posixpath.normpath(reference_path.replace("\\", "/"))


def asset_location(template_dir: Path, reference_path: str) -> tuple[Path, str]:
    """Return the normalized asset path and its subdirectory below the template.

    The subdirectory is a forward-slash path and is ``.`` when the asset sits
    next to the template.
    """
    asset_path = Path(os.path.normpath(template_dir / normalize_reference(reference_path)))
    subdir = os.path.relpath(asset_path.parent, os.path.normpath(template_dir))
    return asset_path, Path(subdir).as_posix()


def mirrored_paths(template_dir: Path, output_dir: Path, reference_path: str) -> AssetPaths:
    """Resolve a reference with the destination mirroring the source layout.

    Args:
        template_dir: Directory holding the page's template
        output_dir: Directory holding the page's rendered output
        reference_path: Reference path without query or fragment

    Returns:
        AssetPaths for the mirrored destination
    """
    asset_path, subdir = asset_location(template_dir, reference_path)
    dest_dir = Path(os.path.normpath(output_dir / subdir))
    relative = posixpath.normpath(posixpath.join(subdir, asset_path.name))
    page_reference = "./" + quote(relative)
    return AssetPaths(
        asset_path=asset_path,
        dest_dir=dest_dir,
        dest_path=dest_dir / asset_path.name,
        page_reference=page_reference,
    )


def flattened_paths(
    template_dir: Path,
    output_dir: Path,
    reference_path: str,
    digest: str,
) -> AssetPaths:
    """Resolve a reference to a content-addressed file in the output directory.

    Args:
        template_dir: Directory holding the page's template
        output_dir: Directory holding the page's rendered output
        reference_path: Reference path without query or fragment
        digest: Filename-safe content digest of the asset

    Returns:
        AssetPaths for the flattened destination
    """
    asset_path, _ = asset_location(template_dir, reference_path)
    filename = digest + asset_path.suffix
    return AssetPaths(
        asset_path=asset_path,
        dest_dir=output_dir,
        dest_path=output_dir / filename,
        page_reference=f"./{quote(filename)}",
    )
