"""
Unit tests for greenlight.core.config
"""
import os
from pathlib import Path
from unittest.mock import patch

from greenlight.core.config import ASSETS_DIR, Settings, get_settings, reset_settings


class TestSettings:
    """Tests for Settings"""

    def test_reads_environment(self, mock_env):
        settings = Settings()
        assert settings.app_secret == "topsecret"
        assert settings.storage_backend == "memory"
        assert settings.mongo_database_name == "test_greenlight"
        assert settings.vizhash_image_size == 128
        assert settings.log_level == "WARNING"

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.app_secret == ""
        assert settings.storage_backend == "mongo"
        assert settings.permit_validity_hours == 12
        assert settings.vizhash_image_size == 512
        assert settings.vizhash_jpeg_quality == 90
        assert Path(settings.vizhash_font_path) == ASSETS_DIR / "lato_regular.ttf"

    def test_storage_backend_lowercased(self):
        with patch.dict(os.environ, {"STORAGE_BACKEND": "Memory"}):
            assert Settings().storage_backend == "memory"

    def test_vizhash_config(self, mock_env):
        config = Settings().vizhash_config()
        assert config.secret == "topsecret"
        assert config.image_size == 128
        assert config.font_path.is_file()
        assert config.missing_photo_path.is_file()
        assert config.example_photo_path.is_file()


class TestGetSettings:
    """Tests for the settings singleton"""

    def test_cached_until_reset(self, mock_env):
        reset_settings()
        try:
            first = get_settings()
            assert get_settings() is first
            reset_settings()
            assert get_settings() is not first
        finally:
            reset_settings()
