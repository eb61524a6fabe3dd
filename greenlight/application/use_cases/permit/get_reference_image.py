# Standard library imports
import asyncio
from typing import Optional

# Local application imports
from ....vizhash.service import VizHashService


class GetReferenceImageUseCase:
    """Use case for rendering the watermarked reference ticket for verifiers"""
    
    def __init__(self, vizhash_service: VizHashService, image_size: int) -> None:
        self.vizhash_service = vizhash_service
        self.image_size = image_size
    
    async def execute(self, size: Optional[int] = None) -> bytes:
        """
        Render the reference image for the current rolling input
        
        Args:
            size: Edge length in pixels; defaults to the configured image size
            
        Returns:
            JPEG bytes
            
        Raises:
            ConfigError: If no server secret is configured
        """
        rolling_input = self.vizhash_service.get_current_input()
        return await asyncio.to_thread(
            self.vizhash_service.create_reference_image,
            rolling_input,
            size or self.image_size,
        )
