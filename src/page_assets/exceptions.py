"""Custom exceptions for page asset processing."""

from pathlib import Path


class PageAssetsError(Exception):
    """Base exception for all page asset errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(PageAssetsError):
    """Raised at setup when the configuration is invalid."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class UnresolvedAssetError(PageAssetsError):
    """Raised when a referenced asset cannot be found on disk.

    Fails the whole page, not just the one reference.
    """

    def __init__(
        self,
        reference: str,
        output_path: Path | None,
        input_path: Path,
    ):
        self.reference = reference
        self.output_path = output_path
        self.input_path = input_path
        super().__init__(
            f'Cannot resolve asset "{reference}" in "{output_path}" '
            f'from template "{input_path}"!'
        )


class AssetProcessingError(PageAssetsError):
    """Raised when hashing or copying an asset fails with an I/O error."""

    def __init__(self, message: str, reference: str, *args, **kwargs):
        self.reference = reference
        super().__init__(message, *args, **kwargs)
