"""Materialize page-local assets of rendered pages."""

from .config import build_config, load_config
from .exceptions import (
    AssetProcessingError,
    ConfigurationError,
    PageAssetsError,
    UnresolvedAssetError,
)
from .pipeline.orchestrator import Orchestrator

__all__ = [
    "AssetProcessingError",
    "ConfigurationError",
    "Orchestrator",
    "PageAssetsError",
    "UnresolvedAssetError",
    "build_config",
    "load_config",
]
