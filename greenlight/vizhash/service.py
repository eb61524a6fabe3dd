"""
VizHash service: the single entry point the rest of the backend uses to
produce permit images.
"""

# Standard library imports
import logging
from datetime import datetime
from typing import Optional

# Local application imports
from ..core.config import VizHashConfig
from .assets import VizHashAssets
from .compositor import compose
from .encoder import derive_parameters
from .renderer import render
from .rolling_input import current_input

logger = logging.getLogger(__name__)

SHAPE_COUNT = 80
PHOTO_FRACTION = 0.8
REFERENCE_CAPTION = "REFERENCE TICKET"


class VizHashService:
    """
    Builds JPEG images that combine a visual hash of an input string with a
    centered photo.

    Holds only immutable state (config and loaded assets), so one instance
    can be shared by any number of concurrent callers.
    """
    
    def __init__(self, config: VizHashConfig, assets: Optional[VizHashAssets] = None) -> None:
        self.config = config
        self.assets = assets if assets is not None else VizHashAssets.load(config)
    
    def _create(self, input: str, photo_data: bytes, size: int, caption: Optional[str]) -> bytes:
        parameters = derive_parameters(input, SHAPE_COUNT)
        background = render(parameters, size)
        return compose(
            background,
            photo_data,
            caption,
            self.assets.font,
            PHOTO_FRACTION,
            self.config.jpeg_quality,
        )
    
    def create_image_with_photo(self, input: str, photo_data: bytes, size: int) -> bytes:
        """
        Create a JPEG image with a centered photo
        
        Raises:
            DecodeError: If photo_data is not a supported image
        """
        return self._create(input, photo_data, size, None)
    
    def create_image_missing_photo(self, input: str, size: int) -> bytes:
        """Create a JPEG image with a centered placeholder indicating a missing photo"""
        return self._create(input, self.assets.missing_photo, size, None)
    
    def create_reference_image(self, input: str, size: int) -> bytes:
        """Create a JPEG image with the example photo and a watermark caption"""
        return self._create(input, self.assets.example_photo, size, REFERENCE_CAPTION)
    
    def get_current_input(self, now: Optional[datetime] = None) -> str:
        """
        Rolling input for the configured server secret; changes at minute 0
        and minute 20 of every hour.
        
        Raises:
            ConfigError: If no secret is configured
        """
        return current_input(self.config.secret, now)
