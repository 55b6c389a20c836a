"""Per-page transforms that materialize page assets."""

from .directory_transformer import DirectoryTransformer
from .markup import MarkupDocument, MarkupReference
from .parse_transformer import ParseTransformer
from .transformer import PageTransformer

__all__ = [
    "PageTransformer",
    "ParseTransformer",
    "DirectoryTransformer",
    "MarkupDocument",
    "MarkupReference",
]
