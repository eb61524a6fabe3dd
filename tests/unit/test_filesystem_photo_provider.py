"""
Unit tests for FilesystemPersonPhotoProvider
"""
import pytest
from greenlight.domain.models.person import Person
from greenlight.infrastructure.photos.filesystem_photo_provider import (
    FilesystemPersonPhotoProvider,
    safe_file_stem,
)


class TestSafeFileStem:
    """Tests for safe_file_stem"""

    def test_keeps_safe_characters(self):
        assert safe_file_stem("per-1_A") == "per-1_A"

    def test_replaces_path_characters(self):
        assert safe_file_stem("../etc/passwd") == "___etc_passwd"


class TestFilesystemPersonPhotoProvider:
    """Tests for photo lookup"""

    @pytest.mark.asyncio
    async def test_reads_photo(self, tmp_path):
        (tmp_path / "per-1.png").write_bytes(b"png-bytes")
        provider = FilesystemPersonPhotoProvider(tmp_path)
        assert await provider.get_photo_data(Person(id="per-1")) == b"png-bytes"

    @pytest.mark.asyncio
    async def test_extension_order(self, tmp_path):
        (tmp_path / "per-1.png").write_bytes(b"png")
        (tmp_path / "per-1.jpg").write_bytes(b"jpg")
        provider = FilesystemPersonPhotoProvider(tmp_path)
        assert await provider.get_photo_data(Person(id="per-1")) == b"jpg"

    @pytest.mark.asyncio
    async def test_missing_photo(self, tmp_path):
        provider = FilesystemPersonPhotoProvider(tmp_path / "does-not-exist")
        assert await provider.get_photo_data(Person(id="per-1")) is None

    @pytest.mark.asyncio
    async def test_path_traversal_is_contained(self, tmp_path):
        photos = tmp_path / "photos"
        photos.mkdir()
        (tmp_path / "secret.png").write_bytes(b"secret")
        provider = FilesystemPersonPhotoProvider(photos)
        assert await provider.get_photo_data(Person(id="../secret")) is None
