"""
Read-only assets for the VizHash pipeline: the caption font and the two
stand-in photos. Loaded once at process start and shared between threads.
"""

# Standard library imports
import io
import logging
from dataclasses import dataclass
from pathlib import Path

# External package imports
from PIL import ImageFont

# Local application imports
from ..core.config import VizHashConfig
from .exceptions import ConfigError, FontLoadError

logger = logging.getLogger(__name__)

# Size used to validate the font when it is loaded
_PROBE_FONT_SIZE = 12


@dataclass(frozen=True)
class FontAsset:
    """Raw TrueType/OpenType font bytes; sized font objects are built per call."""
    path: str
    data: bytes

    @classmethod
    def load(cls, path: Path) -> "FontAsset":
        """
        Read and validate a font file

        Args:
            path: Path to a .ttf/.otf file

        Returns:
            FontAsset holding the file contents

        Raises:
            FontLoadError: If the file is missing or not a usable font
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise FontLoadError(f"Font file could not be read: {path}: {e}") from e

        asset = cls(path=str(path), data=data)
        # Parse once with a real size to reject corrupt files
        asset.sized(_PROBE_FONT_SIZE)
        return asset

    def sized(self, size: int) -> ImageFont.FreeTypeFont:
        """Build a Pillow font object of the given pixel size."""
        try:
            return ImageFont.truetype(io.BytesIO(self.data), max(1, int(size)))
        except (OSError, ValueError) as e:
            raise FontLoadError(f"Font {self.path} could not be parsed: {e}") from e


def _read_photo(path: Path, label: str) -> bytes:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ConfigError(f"{label} asset could not be read: {path}: {e}") from e
    if not data:
        raise ConfigError(f"{label} asset is empty: {path}")
    return data


@dataclass(frozen=True)
class VizHashAssets:
    """Font and stand-in photos shared by every VizHash call."""
    font: FontAsset
    missing_photo: bytes
    example_photo: bytes

    @classmethod
    def load(cls, config: VizHashConfig) -> "VizHashAssets":
        """
        Load all assets named in the config

        Raises:
            FontLoadError: If the font is missing or corrupt
            ConfigError: If a stand-in photo cannot be read
        """
        font = FontAsset.load(config.font_path)
        missing_photo = _read_photo(config.missing_photo_path, "Missing-photo")
        example_photo = _read_photo(config.example_photo_path, "Example-photo")
        logger.info(
            f"Loaded VizHash assets (font={config.font_path}, "
            f"missing_photo={config.missing_photo_path}, example_photo={config.example_photo_path})"
        )
        return cls(font=font, missing_photo=missing_photo, example_photo=example_photo)
