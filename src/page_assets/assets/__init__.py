"""Asset primitives: path resolution, hashing, copying and matching."""

from .copier import FileCopier
from .filesystem import list_directory, resolve_file, walk
from .hashing import encode_digest, filename_digest, hash_file
from .matching import glob_match, is_relative
from .paths import flattened_paths, mirrored_paths, split_reference

__all__ = [
    "FileCopier",
    "encode_digest",
    "filename_digest",
    "flattened_paths",
    "glob_match",
    "hash_file",
    "is_relative",
    "list_directory",
    "mirrored_paths",
    "resolve_file",
    "split_reference",
    "walk",
]
