"""Tests for content hashing."""

import base64
import hashlib

import pytest

from page_assets.assets.hashing import CHUNK_SIZE, encode_digest, filename_digest, hash_file


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8 photo bytes")
    return path


class TestHashFile:
    """Tests for hash_file."""

    def test_default_is_sha1_hex(self, sample_file):
        """Defaults to a hex-encoded SHA-1 digest."""
        expected = hashlib.sha1(b"\xff\xd8 photo bytes").hexdigest()
        assert hash_file(sample_file) == expected

    def test_base64_encoding(self, sample_file):
        """Supports standard base64 output."""
        raw = hashlib.sha256(b"\xff\xd8 photo bytes").digest()
        assert hash_file(sample_file, "sha256", "base64") == base64.b64encode(raw).decode()

    def test_base64url_encoding_has_no_padding(self, sample_file):
        """base64url output is URL-safe and unpadded."""
        digest = hash_file(sample_file, "sha1", "base64url")
        assert "=" not in digest
        assert "+" not in digest and "/" not in digest

    def test_large_file_is_streamed(self, tmp_path):
        """Files larger than one chunk hash to the full-content digest."""
        data = b"x" * (CHUNK_SIZE * 3 + 17)
        path = tmp_path / "big.bin"
        path.write_bytes(data)

        assert hash_file(path, "md5") == hashlib.md5(data).hexdigest()

    def test_missing_file_raises(self, tmp_path):
        """A missing file raises instead of returning a digest."""
        with pytest.raises(OSError):
            hash_file(tmp_path / "missing.jpg")


class TestEncodeDigest:
    """Tests for encode_digest."""

    def test_unknown_encoding_raises(self):
        """Unknown encodings are rejected."""
        with pytest.raises(ValueError):
            encode_digest(b"\x00", "latin1")


class TestFilenameDigest:
    """Tests for filename_digest."""

    def test_hex_is_unchanged(self):
        """Hex digests are already filename-safe."""
        assert filename_digest("0a1b2c") == "0a1b2c"

    def test_base64_is_made_path_safe(self):
        """Slashes, pluses and padding are replaced or dropped."""
        assert filename_digest("ab+c/d==") == "ab-c_d"
