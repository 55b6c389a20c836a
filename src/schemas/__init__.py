"""Schema definitions for page asset processing."""

from .asset import AssetPaths, ReferenceSelector
from .config import DEFAULT_SELECTORS, PageAssetsConfig
from .page import Page
from .report import PageReport, SiteReport

__all__ = [
    "AssetPaths",
    "DEFAULT_SELECTORS",
    "Page",
    "PageAssetsConfig",
    "PageReport",
    "ReferenceSelector",
    "SiteReport",
]
