# Standard library imports
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional


ASSETS_DIR: Final[Path] = Path(__file__).resolve().parent.parent / "assets"


@dataclass(frozen=True)
class VizHashConfig:
    """
    Immutable configuration handed to the VizHash service at construction.

    Built once from Settings so the image pipeline never reads the
    environment on its own.
    """
    secret: str
    font_path: Path
    missing_photo_path: Path
    example_photo_path: Path
    image_size: int = 512
    jpeg_quality: int = 90


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Server secret used to derive the rolling VizHash input
        self.app_secret: Final[str] = os.getenv("APP_SECRET", "")
        
        # Storage Configuration
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").lower()
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "greenlight")
        
        # Permit Configuration
        self.permit_validity_hours: Final[int] = int(os.getenv("PERMIT_VALIDITY_HOURS", "12"))
        self.person_photo_dir: Final[str] = os.getenv("PERSON_PHOTO_DIR", "photos")
        
        # VizHash Configuration
        self.vizhash_font_path: Final[str] = os.getenv(
            "VIZHASH_FONT_PATH", str(ASSETS_DIR / "lato_regular.ttf")
        )
        self.vizhash_missing_photo_path: Final[str] = os.getenv(
            "VIZHASH_MISSING_PHOTO_PATH", str(ASSETS_DIR / "missing_photo.png")
        )
        self.vizhash_example_photo_path: Final[str] = os.getenv(
            "VIZHASH_EXAMPLE_PHOTO_PATH", str(ASSETS_DIR / "example_photo.png")
        )
        self.vizhash_image_size: Final[int] = int(os.getenv("VIZHASH_IMAGE_SIZE", "512"))
        self.vizhash_jpeg_quality: Final[int] = int(os.getenv("VIZHASH_JPEG_QUALITY", "90"))
        
        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
    
    def vizhash_config(self) -> VizHashConfig:
        """
        Freeze the VizHash related settings into an immutable config
        
        Returns:
            VizHashConfig for the VizHash service
        """
        return VizHashConfig(
            secret=self.app_secret,
            font_path=Path(self.vizhash_font_path),
            missing_photo_path=Path(self.vizhash_missing_photo_path),
            example_photo_path=Path(self.vizhash_example_photo_path),
            image_size=self.vizhash_image_size,
            jpeg_quality=self.vizhash_jpeg_quality,
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
