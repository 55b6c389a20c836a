"""Content digests for cache-busting filenames and integrity metadata."""

import base64
import hashlib
from pathlib import Path

CHUNK_SIZE = 8192

DIGEST_ENCODINGS = ("hex", "base64", "base64url")


def encode_digest(raw: bytes, encoding: str = "hex") -> str:
    """Encode raw digest bytes as text.

    ``base64url`` output carries no padding.

    Raises:
        ValueError: If the encoding is not supported
    """
    if encoding == "hex":
        return raw.hex()
    if encoding == "base64":
        return base64.b64encode(raw).decode("ascii")
    if encoding == "base64url":
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
    raise ValueError(f"unsupported digest encoding: {encoding}")


def hash_file(file_path: Path, algorithm: str = "sha1", encoding: str = "hex") -> str:
    """Compute the digest of a file, reading it in chunks.

    Args:
        file_path: Path to the file
        algorithm: Any algorithm name accepted by ``hashlib.new``
        encoding: One of ``hex``, ``base64``, ``base64url``

    Returns:
        The encoded digest

    Raises:
        OSError: If the file cannot be read
    """
    digest = hashlib.new(algorithm)
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return encode_digest(digest.digest(), encoding)


def filename_digest(digest: str) -> str:
    """Make an encoded digest safe to use as a single path component.

    Examples:
        >>> filename_digest("ab+c/d==")
        'ab-c_d'
    """
    return digest.replace("+", "-").replace("/", "_").rstrip("=")
